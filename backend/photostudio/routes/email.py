"""
PhotoStudio Backend — Email Relay Route Handler
=================================================

What:  POST /api/send-email — relays a contact payload (name, email, subject,
       message) to the site owner's inbox without storing it.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from photostudio.routes.deps import get_email_notifier
from photostudio.schemas.common import AckResponse, ContactEmail, ErrorResponse
from photostudio.schemas.validation import Invalid, validate_payload
from photostudio.services.email_service import EmailNotifier

router = APIRouter(prefix="/api", tags=["Email"])


@router.post(
    "/send-email",
    response_model=AckResponse,
    responses={
        400: {"description": "Invalid input data", "model": ErrorResponse},
        500: {"description": "Email relay failed", "model": ErrorResponse},
    },
    summary="Send a contact message by email",
)
async def send_email(
    payload: Any = Body(None),
    notifier: EmailNotifier = Depends(get_email_notifier),
) -> AckResponse:
    outcome = validate_payload(ContactEmail, payload)
    if isinstance(outcome, Invalid):
        raise outcome.to_error()

    await notifier.send(outcome.value)
    return AckResponse(message="Email sent successfully!")
