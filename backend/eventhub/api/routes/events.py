import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from eventhub.api.deps import get_store
from eventhub.core.config import settings
from eventhub.db.store import Store
from eventhub.schemas.event import EventCreated, EventOut
from eventhub.services.uploads import save_upload

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/createEvent", response_model=EventCreated, status_code=status.HTTP_201_CREATED)
def create_event(
    owner: Optional[int] = Form(None),
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    organized_by: Optional[str] = Form(None, alias="organizedBy"),
    event_date: Optional[str] = Form(None, alias="eventDate"),
    event_time: Optional[str] = Form(None, alias="eventTime"),
    location: Optional[str] = Form(None),
    ticket_price: Optional[float] = Form(None, alias="ticketPrice"),
    likes: Optional[int] = Form(None),
    image: Optional[UploadFile] = File(None),
    store: Store = Depends(get_store),
):
    """Create an event from a multipart form with at most one `image` file.

    The image is written before the row; a failed insert leaves the file behind.
    """
    image_path = None
    if image is not None and image.filename:
        image_path = save_upload(image, settings.upload_dir)
    event = store.create_event(
        owner=owner,
        title=title,
        description=description,
        organized_by=organized_by,
        event_date=event_date,
        event_time=event_time,
        location=location,
        ticket_price=ticket_price,
        likes=likes,
        image=image_path,
    )
    logger.info("Created event %s", event.id)
    return {"id": event.id, "title": event.title, "eventDate": event.event_date}

@router.get("/events", response_model=List[EventOut])
def list_events(store: Store = Depends(get_store)):
    return store.list_events()

# The booking flow reads the same event at three steps; one handler serves all of them.
@router.get("/event/{event_id}", response_model=EventOut)
@router.get("/event/{event_id}/ordersummary", response_model=EventOut)
@router.get("/event/{event_id}/ordersummary/paymentsummary", response_model=EventOut)
def get_event(event_id: int, store: Store = Depends(get_store)):
    event = store.get_event(event_id)
    if not event:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event
