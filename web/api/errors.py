"""API errors and request parsing."""

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.errors import ValidationError

RequestT = TypeVar("RequestT", bound=BaseModel)


def parse_request(model: type[RequestT], payload: Any) -> RequestT:
    """Validate a raw payload, raising the app's ValidationError on bad input."""
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "request"
        raise ValidationError(f"Invalid {location}: {first['msg']} ({e.error_count()} errors)") from e
