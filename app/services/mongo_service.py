"""
MongoDB Service helpers shared by the account, CV and post services.

- JSON serialization of stored documents (ObjectId, datetime)
- Input parsing for ids and dates
- The storage error boundary: driver errors never leave a service raw
"""

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Optional, Type, TypeVar

from bson import ObjectId
from bson.errors import InvalidId
from dateutil import parser as date_parser
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pymongo.errors import PyMongoError

from app.core.errors import ServerError, ValidationError, flatten_validation_errors

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


# ============================================================
# HELPER: Convert ObjectId/datetime for JSON serialization
# ============================================================

def format_datetime(value: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2024-05-01T09:30:00.000Z"""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"


def _serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, dict):
        return {k: _serialize_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_serialize_value(v) for v in value]
    return value


def serialize_doc(doc: Optional[dict]) -> Optional[dict]:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    return _serialize_value(doc)


def serialize_docs(docs) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


# ============================================================
# HELPER: Input parsing
# ============================================================

def utcnow() -> datetime:
    """Current time as naive UTC (the form pymongo hands back)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Return an ObjectId for a 24-char hex string, else None."""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str):
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def _parse_date_string(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return date_parser.parse(value)


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse a date string or epoch milliseconds into naive UTC.

    Strings are tried as ISO-8601 first, then in the free-form layouts a
    browser or form may send (2024/05/01, May 1, 2024, RFC 1123 ...).
    Ambiguous numeric dates read month first.

    Anything unparseable is treated as "no date" rather than an error.
    """
    if value is None or value == "" or isinstance(value, bool):
        return None

    try:
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, (int, float)):
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        elif isinstance(value, str):
            parsed = _parse_date_string(value.strip())
        else:
            return None
    except (ValueError, OverflowError, OSError):
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def validate_document(model: Type[ModelT], data: dict) -> ModelT:
    """Run a document model over data, flattening failures into one message."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(flatten_validation_errors(e.errors())) from e


# ============================================================
# STORAGE ERROR BOUNDARY
# ============================================================

@contextmanager
def storage_errors(message: str):
    """
    Map driver failures to ServerError(message).
    Usage:
        with storage_errors("Failed to fetch posts"):
            docs = list(collection.find(...))
    """
    try:
        yield
    except PyMongoError as e:
        logger.error(f"{message}: {e!r}")
        raise ServerError(message) from e
