from typing import Optional
from pydantic import BaseModel, ConfigDict


class TicketDetails(BaseModel):
    """Purchaser and event values copied onto the ticket at purchase time.

    This is a value snapshot: later changes to the user or the event do not
    reach tickets already issued, and ticket reads never consult events.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    email: Optional[str] = None
    eventname: Optional[str] = None
    eventdate: Optional[str] = None
    eventtime: Optional[str] = None
    ticketprice: Optional[float] = None
    qr: Optional[str] = None


class TicketCreate(BaseModel):
    userid: Optional[int] = None
    eventid: Optional[int] = None
    ticketDetails: Optional[TicketDetails] = None


class TicketCreated(BaseModel):
    id: int
    name: Optional[str] = None
    eventname: Optional[str] = None


class TicketOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: Optional[int] = None
    event_id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    event_name: Optional[str] = None
    event_date: Optional[str] = None
    event_time: Optional[str] = None
    ticket_price: Optional[float] = None
    qr: Optional[str] = None
