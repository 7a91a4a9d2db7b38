"""
PhotoStudio Backend — Storage Access Layer
============================================

A single generic repository (`EntityRepository`) instantiated once per entity
and owned by one store handle (`Storage`).
"""

from photostudio.storage.repository import EntityMeta, EntityRepository
from photostudio.storage.store import Storage

__all__ = ["EntityMeta", "EntityRepository", "Storage"]
