"""
PhotoStudio Backend — Contact SQLAlchemy Model
================================================

What:  ORM model for the `contacts` table (contact form submissions).

Lifecycle:
    Append-only. Rows are created by POST /api/contact and listed by
    GET /api/contacts; they are never updated or deleted.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from photostudio.database import Base
from photostudio.models.mixins import CreatedAtMixin, IdMixin


class Contact(IdMixin, CreatedAtMixin, Base):
    __tablename__ = "contacts"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    subject: Mapped[str] = mapped_column(String(300), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Contact(id={self.id}, email='{self.email}')>"
