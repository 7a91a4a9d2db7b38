"""
PhotoStudio Backend — Portfolio Route Handlers
================================================

What:  Full CRUD over portfolio items.

    GET    /api/portfolio        list
    POST   /api/portfolio        create (201)
    PUT    /api/portfolio/{id}   partial update; 404 when no row matched
    DELETE /api/portfolio/{id}   delete; 404 when no row was removed

Unlike bookings and messages, a portfolio delete of an unknown id is reported
to the caller as not found.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends

from photostudio.exceptions import NotFoundError
from photostudio.routes.deps import get_storage
from photostudio.schemas.common import AckResponse, ErrorResponse
from photostudio.schemas.entities import (
    PortfolioItemCreate,
    PortfolioItemResponse,
    PortfolioItemUpdate,
)
from photostudio.schemas.validation import Invalid, validate_payload
from photostudio.storage import Storage

router = APIRouter(prefix="/api", tags=["Portfolio"])


@router.get(
    "/portfolio",
    response_model=List[PortfolioItemResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List portfolio items",
)
async def list_portfolio_items(storage: Storage = Depends(get_storage)):
    return await storage.portfolio_items.list()


@router.post(
    "/portfolio",
    status_code=201,
    response_model=PortfolioItemResponse,
    responses={
        400: {"description": "Invalid input data", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Add a portfolio item",
    description=(
        "Creates a portfolio entry. `image_url` is normally the URL returned "
        "by POST /api/upload-image."
    ),
)
async def create_portfolio_item(
    payload: Any = Body(None),
    storage: Storage = Depends(get_storage),
):
    outcome = validate_payload(PortfolioItemCreate, payload)
    if isinstance(outcome, Invalid):
        raise outcome.to_error()
    return await storage.portfolio_items.create(outcome.value)


@router.put(
    "/portfolio/{item_id}",
    response_model=PortfolioItemResponse,
    responses={
        400: {"description": "Invalid input data", "model": ErrorResponse},
        404: {"description": "Portfolio item not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Update a portfolio item",
    description="Only the fields present in the body are changed.",
)
async def update_portfolio_item(
    item_id: int,
    payload: Any = Body(None),
    storage: Storage = Depends(get_storage),
):
    outcome = validate_payload(PortfolioItemUpdate, payload)
    if isinstance(outcome, Invalid):
        raise outcome.to_error()

    item = await storage.portfolio_items.update(item_id, outcome.value)
    if item is None:
        raise NotFoundError(resource="Portfolio item", resource_id=item_id)
    return item


@router.delete(
    "/portfolio/{item_id}",
    response_model=AckResponse,
    responses={
        404: {"description": "Portfolio item not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a portfolio item",
)
async def delete_portfolio_item(item_id: int, storage: Storage = Depends(get_storage)):
    removed = await storage.portfolio_items.delete(item_id)
    if not removed:
        raise NotFoundError(resource="Portfolio item", resource_id=item_id)
    return AckResponse(message="Portfolio item deleted successfully")
