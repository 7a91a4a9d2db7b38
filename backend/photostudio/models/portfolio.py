"""
PhotoStudio Backend — PortfolioItem SQLAlchemy Model
======================================================

What:  ORM model for the `portfolio_items` table (gallery entries).
How:   `image_url` holds the durable URL returned by the image host after
       POST /api/upload-image; the image bytes never touch this database.

Lifecycle:
    The only entity with full CRUD: create, list, partial update, delete.
"""

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from photostudio.database import Base
from photostudio.models.mixins import CreatedAtMixin, IdMixin


class PortfolioItem(IdMixin, CreatedAtMixin, Base):
    __tablename__ = "portfolio_items"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image_url: Mapped[str] = mapped_column(
        String(1024),
        nullable=False,
        comment="Durable URL on the image host",
    )
    category: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
        comment="Gallery section (weddings, portraits, ...)",
    )

    def __repr__(self) -> str:
        return f"<PortfolioItem(id={self.id}, title='{self.title}')>"
