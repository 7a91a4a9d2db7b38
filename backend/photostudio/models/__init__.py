"""
PhotoStudio Backend — ORM Models
==================================

Importing this package registers every table with `Base.metadata`, which
`Storage.create_all()` and Alembic autogenerate both rely on.
"""

from photostudio.models.booking import Booking
from photostudio.models.contact import Contact
from photostudio.models.message import Message
from photostudio.models.portfolio import PortfolioItem
from photostudio.models.user import User

__all__ = ["Booking", "Contact", "Message", "PortfolioItem", "User"]
