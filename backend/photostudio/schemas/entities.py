"""
PhotoStudio Backend — Entity Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract for every entity.
How:   `<Entity>Create` is the insert shape (no id, no created_at);
       `<Entity>Response` is the full row as returned to clients;
       `PortfolioItemUpdate` is the only patch shape.
Who:   Route handlers validate raw bodies against the Create/Update models
       (see schemas/validation.py) and serialize rows through the Response
       models.

Conventions:
    - String values are stored exactly as sent; required strings must be
      non-empty.
    - Unknown keys are ignored, so a client-supplied `id` or `created_at`
      never reaches the store.
"""

from datetime import date, datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator


class InsertModel(BaseModel):
    """Base for insert and patch shapes."""

    model_config = ConfigDict(extra="ignore")

    def to_values(self) -> Dict[str, Any]:
        """Column values for the store; only fields the client actually sent
        are included in a patch."""
        return self.model_dump(exclude_unset=True)


class RowModel(BaseModel):
    """Base for response shapes built from ORM rows."""

    model_config = ConfigDict(from_attributes=True)


# ══════════════════════════════════════════════════════════════════════════
# User
# ══════════════════════════════════════════════════════════════════════════

class UserCreate(InsertModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1)

    def to_values(self) -> Dict[str, Any]:
        return self.model_dump()


class UserResponse(RowModel):
    # password is deliberately absent from the public shape
    id: int
    username: str


# ══════════════════════════════════════════════════════════════════════════
# Contact
# ══════════════════════════════════════════════════════════════════════════

class ContactCreate(InsertModel):
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    subject: str = Field(min_length=1, max_length=300)
    message: str = Field(min_length=1)

    def to_values(self) -> Dict[str, Any]:
        return self.model_dump()


class ContactResponse(RowModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime


# ══════════════════════════════════════════════════════════════════════════
# Booking
# ══════════════════════════════════════════════════════════════════════════

class BookingCreate(InsertModel):
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    phone: Optional[str] = Field(default=None, max_length=50)
    event_type: str = Field(min_length=1, max_length=100)
    event_date: date
    location: Optional[str] = Field(default=None, max_length=300)
    message: Optional[str] = None

    def to_values(self) -> Dict[str, Any]:
        return self.model_dump()


class BookingResponse(RowModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    event_type: str
    event_date: date
    location: Optional[str] = None
    message: Optional[str] = None
    created_at: datetime


# ══════════════════════════════════════════════════════════════════════════
# Portfolio
# ══════════════════════════════════════════════════════════════════════════

class PortfolioItemCreate(InsertModel):
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    image_url: str = Field(min_length=1, max_length=1024)
    category: str = Field(min_length=1, max_length=100)

    def to_values(self) -> Dict[str, Any]:
        return self.model_dump()


class PortfolioItemUpdate(InsertModel):
    """
    Partial patch for a portfolio item.

    Only keys present in the request body are applied. `description` may be
    cleared with null; the other columns are NOT NULL in the table, so an
    explicit null for them is rejected here rather than at the store.
    """

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    image_url: Optional[str] = Field(default=None, min_length=1, max_length=1024)
    category: Optional[str] = Field(default=None, min_length=1, max_length=100)

    @model_validator(mode="after")
    def reject_null_required_columns(self) -> "PortfolioItemUpdate":
        for name in ("title", "image_url", "category"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"'{name}' cannot be null")
        return self


class PortfolioItemResponse(RowModel):
    id: int
    title: str
    description: Optional[str] = None
    image_url: str
    category: str
    created_at: datetime


# ══════════════════════════════════════════════════════════════════════════
# Message
# ══════════════════════════════════════════════════════════════════════════

class MessageCreate(InsertModel):
    sender: str = Field(min_length=1, max_length=200)
    email: Optional[EmailStr] = None
    subject: Optional[str] = Field(default=None, max_length=300)
    body: str = Field(min_length=1)

    def to_values(self) -> Dict[str, Any]:
        return self.model_dump()


class MessageResponse(RowModel):
    id: int
    sender: str
    email: Optional[str] = None
    subject: Optional[str] = None
    body: str
    created_at: datetime
