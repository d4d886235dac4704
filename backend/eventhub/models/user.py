from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from eventhub.models.base import Base

class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # Exact-match lookups; uniqueness lives in the store, not in the handlers
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password: Mapped[str] = mapped_column(String(255))  # hash, never serialized
