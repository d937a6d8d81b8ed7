# contentgen/core/validators.py
"""
Input validation for incoming request payloads.

Schemas are declared as pydantic models; this module turns pydantic's
error list into a single ValidationError naming every failing field.
"""

from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ValidationError
from core.logger import get_logger

logger = get_logger("validators")

ModelT = TypeVar("ModelT", bound=BaseModel)


def format_errors(exc: PydanticValidationError) -> List[Dict[str, str]]:
    """
    Flatten pydantic errors into {field, message, type} entries.

    Args:
        exc: Pydantic validation error

    Returns:
        One entry per failing field. Errors on the payload itself
        (e.g. a JSON array instead of an object) are reported as "body".

    Example:
        >>> format_errors(exc)
        [{"field": "topic", "message": "String should have at least 3 characters", "type": "string_too_short"}]
    """
    errors = []

    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ())) or "body"
        errors.append({
            "field": field,
            "message": err.get("msg", "Invalid value"),
            "type": err.get("type", "value_error"),
        })

    return errors


def validate_payload(model: Type[ModelT], payload: Any) -> ModelT:
    """
    Validate a raw JSON payload against a schema.

    Args:
        model: Pydantic model describing the schema
        payload: Decoded JSON body

    Returns:
        Validated model instance with defaults applied

    Raises:
        ValidationError: If the payload does not conform to the schema
    """
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        errors = format_errors(e)
        message = "; ".join(f"{err['field']}: {err['message']}" for err in errors)

        logger.warning(
            f"{model.__name__} validation failed: {message}",
            extra={'error_code': "VALIDATION_ERROR"}
        )

        raise ValidationError(
            message,
            field=errors[0]["field"] if errors else None,
            errors=errors
        ) from e
