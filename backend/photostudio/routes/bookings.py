"""
PhotoStudio Backend — Booking Route Handlers
==============================================

What:  POST /api/booking, GET /api/bookings, DELETE /api/bookings/{id}.
How:   Deletion is idempotent: it reports success whether or not the row
       still existed.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends

from photostudio.routes.deps import get_storage
from photostudio.schemas.common import AckResponse, ErrorResponse
from photostudio.schemas.entities import BookingCreate, BookingResponse
from photostudio.schemas.validation import Invalid, validate_payload
from photostudio.storage import Storage

router = APIRouter(prefix="/api", tags=["Bookings"])


@router.post(
    "/booking",
    status_code=201,
    response_model=BookingResponse,
    responses={
        400: {"description": "Invalid input data", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Submit a booking request",
)
async def create_booking(
    payload: Any = Body(None),
    storage: Storage = Depends(get_storage),
):
    outcome = validate_payload(BookingCreate, payload)
    if isinstance(outcome, Invalid):
        raise outcome.to_error()
    return await storage.bookings.create(outcome.value)


@router.get(
    "/bookings",
    response_model=List[BookingResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List booking requests",
)
async def list_bookings(storage: Storage = Depends(get_storage)):
    return await storage.bookings.list()


@router.delete(
    "/bookings/{booking_id}",
    response_model=AckResponse,
    responses={
        400: {"description": "Invalid booking ID", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a booking request",
)
async def delete_booking(booking_id: int, storage: Storage = Depends(get_storage)):
    await storage.bookings.delete(booking_id)
    return AckResponse(message="Booking deleted successfully")
