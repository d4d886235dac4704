from contextlib import contextmanager
from typing import Any, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from eventhub.core.errors import ConstraintViolation, StoreError
from eventhub.models.event import Event
from eventhub.models.ticket import Ticket
from eventhub.models.user import User
from eventhub.schemas.ticket import TicketDetails


class Store:
    """Data access for users, events and tickets over one session.

    Handlers receive a Store through dependency injection (see api.deps.get_store).
    Every method either returns its result or raises StoreError; each write
    commits on its own.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _translate(self, action: str):
        try:
            yield
        except IntegrityError as exc:
            self.db.rollback()
            raise ConstraintViolation(action) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(action) from exc

    def _insert(self, row: Any, action: str):
        with self._translate(action):
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        return row

    # users

    def create_user(self, name: str, email: str, hashed_password: str) -> User:
        return self._insert(User(name=name, email=email, password=hashed_password), "inserting user")

    def list_users(self) -> list[User]:
        with self._translate("fetching users"):
            return list(self.db.scalars(select(User).order_by(User.id)))

    def get_user(self, user_id: int) -> Optional[User]:
        with self._translate("fetching user"):
            return self.db.get(User, user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        with self._translate("fetching user"):
            return self.db.scalars(select(User).where(User.email == email)).first()

    # events

    def create_event(self, **fields: Any) -> Event:
        return self._insert(Event(**fields), "inserting event")

    def list_events(self) -> list[Event]:
        with self._translate("fetching events"):
            return list(self.db.scalars(select(Event).order_by(Event.id)))

    def get_event(self, event_id: int) -> Optional[Event]:
        with self._translate("fetching event"):
            return self.db.get(Event, event_id)

    # tickets

    def create_ticket(self, user_id: Optional[int], event_id: Optional[int], details: TicketDetails) -> Ticket:
        ticket = Ticket(
            user_id=user_id,
            event_id=event_id,
            name=details.name,
            email=details.email,
            event_name=details.eventname,
            event_date=details.eventdate,
            event_time=details.eventtime,
            ticket_price=details.ticketprice,
            qr=details.qr,
        )
        return self._insert(ticket, "inserting ticket")

    def list_tickets(self) -> list[Ticket]:
        with self._translate("fetching tickets"):
            return list(self.db.scalars(select(Ticket).order_by(Ticket.id)))

    def list_user_tickets(self, user_id: int) -> list[Ticket]:
        with self._translate("fetching user tickets"):
            return list(self.db.scalars(select(Ticket).where(Ticket.user_id == user_id).order_by(Ticket.id)))

    def delete_ticket(self, ticket_id: int) -> int:
        """Hard delete; returns the number of rows removed (0 when the id is unknown)."""
        with self._translate("deleting ticket"):
            result = self.db.execute(delete(Ticket).where(Ticket.id == ticket_id))
            self.db.commit()
            return result.rowcount
