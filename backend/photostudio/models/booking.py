"""
PhotoStudio Backend — Booking SQLAlchemy Model
================================================

What:  ORM model for the `bookings` table (session booking requests).

Lifecycle:
    Created by POST /api/booking, listed by GET /api/bookings, removed by
    DELETE /api/bookings/{id}. Never edited in place.

Field notes:
    - Contact fields (name, email, phone) identify the client
    - event_type / event_date / location describe the shoot
    - message is free text from the booking form
"""

from datetime import date
from typing import Optional

from sqlalchemy import Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from photostudio.database import Base
from photostudio.models.mixins import CreatedAtMixin, IdMixin


class Booking(IdMixin, CreatedAtMixin, Base):
    __tablename__ = "bookings"

    # ── Contact fields ────────────────────────────────────────────────────
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    # ── Booking details ───────────────────────────────────────────────────
    event_type: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Kind of shoot requested (wedding, portrait, event, ...)",
    )
    event_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        comment="Requested date of the shoot",
    )
    location: Mapped[Optional[str]] = mapped_column(String(300), nullable=True)
    message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<Booking(id={self.id}, event_type='{self.event_type}', "
            f"event_date='{self.event_date}')>"
        )
