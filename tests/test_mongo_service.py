from datetime import datetime, timezone

import pytest
from bson import ObjectId
from pymongo.errors import AutoReconnect

from app.core.errors import ServerError, ValidationError
from app.models import PostContent
from app.services.mongo_service import (
    format_datetime,
    parse_date,
    parse_object_id,
    serialize_doc,
    storage_errors,
    validate_document,
)


@pytest.mark.parametrize("raw, expected", [
    ("2025-06-01", datetime(2025, 6, 1)),
    ("2025-06-01T10:15:30", datetime(2025, 6, 1, 10, 15, 30)),
    ("2025-06-01T10:15:30Z", datetime(2025, 6, 1, 10, 15, 30)),
    ("2025-06-01T10:15:30-03:00", datetime(2025, 6, 1, 13, 15, 30)),
    (" 2025-06-01 ", datetime(2025, 6, 1)),
    (0, datetime(1970, 1, 1)),
    (1735689600000, datetime(2025, 1, 1)),
    (datetime(2025, 6, 1, 12, tzinfo=timezone.utc), datetime(2025, 6, 1, 12)),
    ("2024/05/01", datetime(2024, 5, 1)),
    ("May 1, 2024", datetime(2024, 5, 1)),
    ("05/01/2024", datetime(2024, 5, 1)),
    ("Wed, 01 May 2024 00:00:00 GMT", datetime(2024, 5, 1)),
    ("Wed, 01 May 2024 10:00:00 +0200", datetime(2024, 5, 1, 8)),
])
def test_parse_date(raw, expected):
    assert parse_date(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "not a date", "2025-13-40", True, [2025, 6, 1], {"y": 2025}, 1e20])
def test_parse_date_treats_garbage_as_absent(raw):
    assert parse_date(raw) is None


def test_parse_object_id():
    oid = ObjectId()
    assert parse_object_id(str(oid)) == oid
    assert parse_object_id(oid) is oid
    assert parse_object_id("123") is None
    assert parse_object_id("z" * 24) is None
    assert parse_object_id(None) is None
    assert parse_object_id(12345) is None


def test_serialize_doc_converts_ids_and_dates():
    oid, org = ObjectId(), ObjectId()
    doc = {
        "_id": oid,
        "orgId": org,
        "createdAt": datetime(2025, 6, 1, 9, 30, 0, 123456),
        "deadline": None,
        "tags": [org],
        "title": "Intern",
    }
    assert serialize_doc(doc) == {
        "_id": str(oid),
        "orgId": str(org),
        "createdAt": "2025-06-01T09:30:00.123Z",
        "deadline": None,
        "tags": [str(org)],
        "title": "Intern",
    }
    assert serialize_doc(None) is None


def test_format_datetime_converts_aware_values_to_utc():
    value = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc).astimezone()
    assert format_datetime(value) == "2025-06-01T12:00:00.000Z"


def test_storage_errors_maps_driver_failures():
    with pytest.raises(ServerError) as exc:
        with storage_errors("Failed to fetch posts"):
            raise AutoReconnect("connection reset")
    assert exc.value.message == "Failed to fetch posts"
    assert exc.value.status_code == 500


def test_storage_errors_lets_app_errors_through():
    with pytest.raises(ValidationError):
        with storage_errors("Failed to create post"):
            raise ValidationError("bad input")


def test_validate_document_flattens_messages():
    with pytest.raises(ValidationError) as exc:
        validate_document(PostContent, {"title": "", "type": "Gig", "description": "short"})
    fields = [part.split(":")[0] for part in exc.value.message.split("; ")]
    assert fields == ["title", "type", "description"]
    assert exc.value.status_code == 400


def test_validate_document_applies_defaults():
    content = validate_document(PostContent, {
        "title": " Intern ",
        "type": "Volunteering",
        "description": "x" * 20,
    })
    assert content.title == "Intern"
    assert content.type == "Volunteering"
    assert content.location == "Remote"
    assert content.applicationLink == ""
    assert content.deadline is None
