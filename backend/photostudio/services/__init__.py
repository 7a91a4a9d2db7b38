"""
PhotoStudio Backend — Integrations Layer
==========================================

Service Inventory:
    - ImageHostService: upload validation + Cloudinary passthrough
    - EmailNotifier:    contact notifications through an SMTP relay

Both are constructed once in `create_app()` from settings and injected into
route handlers; neither touches the database.
"""

from photostudio.services.email_service import EmailNotifier
from photostudio.services.image_host import ImageHostService

__all__ = ["EmailNotifier", "ImageHostService"]
