"""Payload shape detection and record validation for companion-app imports.

The companion app posts either ``{"<namedList>": [...]}`` or a bare ``[...]``
depending on the endpoint and app version. The shape is decided once here,
before any record is validated.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from franchise_hub.utils.api_response import ApiError, ErrorCode, validation_error

RecordT = TypeVar("RecordT", bound=BaseModel)


class PayloadShape(str, Enum):
    WRAPPED = "wrapped"
    BARE = "bare"


def classify_payload(payload: Any, list_key: str) -> Optional[PayloadShape]:
    """Return the payload's shape, or None when it carries no record list."""
    if isinstance(payload, list):
        return PayloadShape.BARE
    if isinstance(payload, dict) and isinstance(payload.get(list_key), list):
        return PayloadShape.WRAPPED
    return None


def extract_records(payload: Any, list_key: str, *, allow_bare: bool = True) -> list[Any]:
    """Pull the raw record list out of a request body or raise a 400."""
    shape = classify_payload(payload, list_key)
    if shape is None or (shape is PayloadShape.BARE and not allow_bare):
        raise ApiError(
            400,
            ErrorCode.INVALID_PAYLOAD,
            f"Invalid payload format - expected a '{list_key}' array",
        )
    if shape is PayloadShape.BARE:
        return payload
    return payload[list_key]


@lru_cache(maxsize=None)
def _list_adapter(model: type[BaseModel]) -> TypeAdapter[Any]:
    return TypeAdapter(list[model])  # type: ignore[valid-type]


def validate_records(model: type[RecordT], records: list[Any]) -> list[RecordT]:
    """Validate every record; a single bad record rejects the whole batch."""
    try:
        return _list_adapter(model).validate_python(records)
    except ValidationError as exc:
        raise validation_error(exc, "Invalid import data") from exc


def parse_records(
    payload: Any,
    list_key: str,
    model: type[RecordT],
    *,
    allow_bare: bool = True,
) -> list[RecordT]:
    return validate_records(model, extract_records(payload, list_key, allow_bare=allow_bare))
