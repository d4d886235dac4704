from typing import Optional
from pydantic import BaseModel, ConfigDict


class EventOut(BaseModel):
    """An event row exactly as stored."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    owner: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    organized_by: Optional[str] = None
    event_date: Optional[str] = None
    event_time: Optional[str] = None
    location: Optional[str] = None
    ticket_price: Optional[float] = None
    likes: Optional[int] = None
    image: Optional[str] = None


class EventCreated(BaseModel):
    id: int
    title: Optional[str] = None
    eventDate: Optional[str] = None
