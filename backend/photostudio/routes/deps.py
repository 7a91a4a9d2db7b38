"""
PhotoStudio Backend — Dependency Providers
============================================

What:  FastAPI dependencies that hand route handlers the objects built once in
       `create_app()` / the lifespan: the store handle and the integrations.
How:   Each reads from `request.app.state`; tests swap in substitutes by
       passing them to `create_app()` or via `app.dependency_overrides`.
"""

from fastapi import Request

from photostudio.services.email_service import EmailNotifier
from photostudio.services.image_host import ImageHostService
from photostudio.storage import Storage


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_image_host(request: Request) -> ImageHostService:
    return request.app.state.image_host


def get_email_notifier(request: Request) -> EmailNotifier:
    return request.app.state.email_notifier
