"""Base class for value objects and shared value checks."""

from pydantic import BaseModel, ConfigDict, HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

# http and https only, with a valid host
_http_url = TypeAdapter(HttpUrl)


class ValueObject(BaseModel):
    """Immutable value compared field by field.

    Used for query inputs such as list filters, where two requests with the
    same parameters must be interchangeable.
    """

    model_config = ConfigDict(frozen=True)


def is_http_url(value: str) -> bool:
    """Whether ``value`` is an absolute http(s) URL with a valid host."""
    try:
        _http_url.validate_python(value)
    except PydanticValidationError:
        return False
    return True
