"""
PhotoStudio Backend — Shared Column Definitions
=================================================

Every entity table has an integer primary key assigned by the store. Every
table except `users` also carries a `created_at` stamped at insert time.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, text
from sqlalchemy.orm import Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class IdMixin:
    # Auto-incrementing key; never taken from client input
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-assigned identifier, immutable after insert",
    )


class CreatedAtMixin:
    # Python-side default fills the attribute on flush, so the row handed
    # back by `create` already carries it; the server default covers raw SQL.
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this row was created (UTC)",
    )
