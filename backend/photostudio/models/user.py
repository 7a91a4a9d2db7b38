"""
PhotoStudio Backend — User SQLAlchemy Model
=============================================

What:  ORM model for the `users` table.
Who:   Reachable through `Storage.users` only; no route exposes it. It is
       kept so a future admin login has a table to build on.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from photostudio.database import Base
from photostudio.models.mixins import IdMixin


class User(IdMixin, Base):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
        comment="Unique login name",
    )

    password: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Credential as supplied by the caller",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
