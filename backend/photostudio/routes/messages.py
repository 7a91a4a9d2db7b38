"""
PhotoStudio Backend — Message Route Handlers
==============================================

What:  GET/POST /api/messages and DELETE /api/messages/{id}.
How:   Deletion is idempotent, like bookings.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends

from photostudio.routes.deps import get_storage
from photostudio.schemas.common import AckResponse, ErrorResponse
from photostudio.schemas.entities import MessageCreate, MessageResponse
from photostudio.schemas.validation import Invalid, validate_payload
from photostudio.storage import Storage

router = APIRouter(prefix="/api", tags=["Messages"])


@router.get(
    "/messages",
    response_model=List[MessageResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List inbox messages",
)
async def list_messages(storage: Storage = Depends(get_storage)):
    return await storage.messages.list()


@router.post(
    "/messages",
    status_code=201,
    response_model=MessageResponse,
    responses={
        400: {"description": "Invalid input data", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Post a message",
)
async def create_message(
    payload: Any = Body(None),
    storage: Storage = Depends(get_storage),
):
    outcome = validate_payload(MessageCreate, payload)
    if isinstance(outcome, Invalid):
        raise outcome.to_error()
    return await storage.messages.create(outcome.value)


@router.delete(
    "/messages/{message_id}",
    response_model=AckResponse,
    responses={
        400: {"description": "Invalid message ID", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a message",
)
async def delete_message(message_id: int, storage: Storage = Depends(get_storage)):
    await storage.messages.delete(message_id)
    return AckResponse(message="Message deleted successfully")
