"""
PhotoStudio Backend — Message SQLAlchemy Model
================================================

What:  ORM model for the `messages` table (site inbox).
Lifecycle: created, listed, deleted. Never edited.
"""

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from photostudio.database import Base
from photostudio.models.mixins import CreatedAtMixin, IdMixin


class Message(IdMixin, CreatedAtMixin, Base):
    __tablename__ = "messages"

    sender: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(320), nullable=True)
    subject: Mapped[Optional[str]] = mapped_column(String(300), nullable=True)
    body: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Message(id={self.id}, sender='{self.sender}')>"
