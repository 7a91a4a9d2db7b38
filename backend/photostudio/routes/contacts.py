"""
PhotoStudio Backend — Contact Route Handlers
==============================================

What:  POST /api/contact (contact form intake) and GET /api/contacts (admin list).
How:   After the contact row is stored, the owner notification is queued as a
       background task; its outcome never changes the response.
"""

from typing import Any, List

from fastapi import APIRouter, BackgroundTasks, Body, Depends

from photostudio.routes.deps import get_email_notifier, get_storage
from photostudio.schemas.common import ContactEmail, ErrorResponse
from photostudio.schemas.entities import ContactCreate, ContactResponse
from photostudio.schemas.validation import Invalid, validate_payload
from photostudio.services.email_service import EmailNotifier
from photostudio.storage import Storage

router = APIRouter(prefix="/api", tags=["Contacts"])


@router.post(
    "/contact",
    status_code=201,
    response_model=ContactResponse,
    responses={
        400: {"description": "Invalid input data", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Submit the contact form",
)
async def create_contact(
    background_tasks: BackgroundTasks,
    payload: Any = Body(None),
    storage: Storage = Depends(get_storage),
    notifier: EmailNotifier = Depends(get_email_notifier),
):
    outcome = validate_payload(ContactCreate, payload)
    if isinstance(outcome, Invalid):
        raise outcome.to_error()

    contact = await storage.contacts.create(outcome.value)
    background_tasks.add_task(
        notifier.notify_quietly,
        ContactEmail.model_validate(outcome.value.model_dump()),
    )
    return contact


@router.get(
    "/contacts",
    response_model=List[ContactResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List contact form submissions",
)
async def list_contacts(storage: Storage = Depends(get_storage)):
    return await storage.contacts.list()
