"""
PhotoStudio Backend — Typed Validation Outcome
================================================

What:  Validates a raw request body against a Pydantic schema and returns an
       explicit outcome instead of raising.
How:   `validate_payload()` returns `Valid(value)` or `Invalid(errors)`.
       Route handlers branch on the outcome type; only the `Invalid` branch
       produces a 400 response, and it does so before any storage call.

Example:
    outcome = validate_payload(ContactCreate, payload)
    if isinstance(outcome, Invalid):
        raise outcome.to_error()
    contact = await storage.contacts.create(outcome.value)
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Tuple, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from photostudio.exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def as_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class Valid(Generic[ModelT]):
    value: ModelT


@dataclass(frozen=True)
class Invalid:
    errors: Tuple[FieldError, ...]

    def to_error(self, message: str = "Invalid input data") -> ValidationError:
        """The 400-class exception carrying the field errors for the client."""
        return ValidationError(
            message=message,
            context={"errors": [e.as_dict() for e in self.errors]},
        )


ValidationOutcome = Union[Valid[ModelT], Invalid]


def field_errors(errors: List[Dict[str, Any]]) -> Tuple[FieldError, ...]:
    """
    Flatten Pydantic/FastAPI error dicts into FieldError values.

    The location path is joined with dots; request-section prefixes
    ("body", "path", "query") are dropped.
    """
    result = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "path", "query")]
        result.append(FieldError(field=".".join(loc) or "__root__", message=err.get("msg", "Invalid value")))
    return tuple(result)


def validate_payload(schema: Type[ModelT], payload: Any) -> ValidationOutcome:
    """
    Validate `payload` against `schema`.

    Args:
        schema:  A Pydantic model class (insert or patch shape).
        payload: The decoded JSON body (any type; non-objects are invalid).

    Returns:
        Valid with the parsed model, or Invalid with one FieldError per problem.
    """
    if not isinstance(payload, dict):
        return Invalid(errors=(FieldError(field="__root__", message="Request body must be a JSON object"),))
    try:
        return Valid(value=schema.model_validate(payload))
    except PydanticValidationError as exc:
        return Invalid(errors=field_errors(exc.errors()))
