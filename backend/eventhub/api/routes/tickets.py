import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status

from eventhub.api.deps import get_store
from eventhub.db.store import Store
from eventhub.schemas.ticket import TicketCreate, TicketCreated, TicketOut

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("", response_model=TicketCreated, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=TicketCreated, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_ticket(payload: TicketCreate, store: Store = Depends(get_store)):
    """Store a ticket for (userid, eventid) from the submitted ticketDetails snapshot."""
    details = payload.ticketDetails
    if details is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing ticket details")
    ticket = store.create_ticket(payload.userid, payload.eventid, details)
    logger.info("Created ticket %s for user %s, event %s", ticket.id, ticket.user_id, ticket.event_id)
    return {"id": ticket.id, "name": ticket.name, "eventname": ticket.event_name}

@router.get("", response_model=List[TicketOut])
@router.get("/", response_model=List[TicketOut], include_in_schema=False)
def list_tickets(store: Store = Depends(get_store)):
    return store.list_tickets()

@router.get("/user/{user_id}", response_model=List[TicketOut])
def user_tickets(user_id: int, store: Store = Depends(get_store)):
    return store.list_user_tickets(user_id)

@router.delete("/{ticket_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_ticket(ticket_id: int, store: Store = Depends(get_store)):
    """Hard delete without an ownership or existence check.

    An unknown id still answers 204, so repeating a delete is harmless.
    """
    removed = store.delete_ticket(ticket_id)
    if not removed:
        logger.info("Delete of unknown ticket %s", ticket_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
