"""
PhotoStudio Backend — Storage Handle
======================================

What:  The one object that owns the relational store for the process: the
       async engine (a single connection pool), the session factory, and one
       `EntityRepository` per entity.
How:   Built once at startup (`Storage.from_settings`) and kept on
       `app.state.storage`; route handlers receive it through
       `Depends(get_storage)`. Tests build their own instance against SQLite
       and hand it to `create_app(storage=...)`.

Entity registry:
    users            → User           (insert only; looked up by id / username)
    contacts         → Contact        (insert, list)
    bookings         → Booking        (insert, list, delete)
    portfolio_items  → PortfolioItem  (insert, list, update, delete)
    messages         → Message        (insert, list, delete)
"""

import logging
from typing import Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from photostudio.config import Settings
from photostudio.database import Base, build_engine, build_session_factory
from photostudio.models import Booking, Contact, Message, PortfolioItem, User
from photostudio.schemas.entities import (
    BookingCreate,
    ContactCreate,
    MessageCreate,
    PortfolioItemCreate,
    PortfolioItemUpdate,
    UserCreate,
)
from photostudio.storage.repository import EntityMeta, EntityRepository

logger = logging.getLogger(__name__)


USERS = EntityMeta(name="user", model=User, insert_schema=UserCreate)
CONTACTS = EntityMeta(name="contact", model=Contact, insert_schema=ContactCreate)
BOOKINGS = EntityMeta(name="booking", model=Booking, insert_schema=BookingCreate)
PORTFOLIO_ITEMS = EntityMeta(
    name="portfolio item",
    model=PortfolioItem,
    insert_schema=PortfolioItemCreate,
    patch_schema=PortfolioItemUpdate,
)
MESSAGES = EntityMeta(name="message", model=Message, insert_schema=MessageCreate)


class Storage:
    """
    Store handle shared by every in-flight request.

    The engine's pool is the only shared mutable state; each repository call
    checks a connection out for the duration of one statement.

    Args:
        engine:  Async engine to own (disposed by `dispose()`)
        timeout: Optional per-operation bound in seconds (None = unbounded)
    """

    def __init__(self, engine: AsyncEngine, timeout: Optional[float] = None):
        self.engine = engine
        sessions = build_session_factory(engine)

        self.users: EntityRepository[User] = EntityRepository(USERS, sessions, timeout)
        self.contacts: EntityRepository[Contact] = EntityRepository(CONTACTS, sessions, timeout)
        self.bookings: EntityRepository[Booking] = EntityRepository(BOOKINGS, sessions, timeout)
        self.portfolio_items: EntityRepository[PortfolioItem] = EntityRepository(
            PORTFOLIO_ITEMS, sessions, timeout
        )
        self.messages: EntityRepository[Message] = EntityRepository(MESSAGES, sessions, timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Storage":
        """Build the process-wide handle from configuration."""
        engine = build_engine(settings)
        logger.info(
            "Storage initialized (driver=%s, timeout=%s)",
            engine.url.drivername,
            settings.storage_timeout_seconds or "none",
        )
        return cls(engine, timeout=settings.storage_timeout_seconds or None)

    @property
    def repositories(self) -> Dict[str, EntityRepository]:
        return {
            "users": self.users,
            "contacts": self.contacts,
            "bookings": self.bookings,
            "portfolio_items": self.portfolio_items,
            "messages": self.messages,
        }

    async def create_all(self) -> None:
        """
        Create every table that does not exist yet.

        Used by tests and local SQLite runs; deployed databases are managed
        by Alembic migrations.
        """
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        """True when a trivial query round-trips; never raises."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Storage ping failed: %s", str(e))
            return False

    async def dispose(self) -> None:
        """Close every pooled connection. Called on application shutdown."""
        await self.engine.dispose()
