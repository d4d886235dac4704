from sqlalchemy import String, Integer, ForeignKey, Float, Text
from sqlalchemy.orm import Mapped, mapped_column

from eventhub.models.base import Base

class Ticket(Base):
    """A purchase record.

    name/email and the event_* columns are a snapshot taken when the ticket
    is bought. They are never joined back to users or events.
    """

    __tablename__ = "tickets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int | None] = mapped_column(ForeignKey("users.id"), nullable=True, index=True)
    event_id: Mapped[int | None] = mapped_column(ForeignKey("events.id"), nullable=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    event_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    event_date: Mapped[str | None] = mapped_column(String(32), nullable=True)
    event_time: Mapped[str | None] = mapped_column(String(32), nullable=True)
    ticket_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    qr: Mapped[str | None] = mapped_column(Text, nullable=True)  # data URI
