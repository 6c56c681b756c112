"""
Post Service - opportunity postings published by organizations.

Lifecycle:
- status is draft or active, chosen at creation; update never changes it
- update is a full replace: omitted fields go back to their defaults
- delete is explicit, by id

Listing has two modes: one organization's posts (any status), or the public
feed of active posts. Both are newest first.
"""

import logging
from typing import List, Optional

from pymongo import DESCENDING, ReturnDocument
from pymongo.database import Database

from app.core.errors import NotFoundError, ValidationError
from app.db.mongodb import COLLECTIONS
from app.models import PostContent, PostDocument, PostStatus
from app.schemas.schemas import PostCreateRequest, PostUpdateRequest
from app.services.mongo_service import (
    parse_date,
    parse_object_id,
    serialize_doc,
    serialize_docs,
    storage_errors,
    utcnow,
    validate_document,
)

logger = logging.getLogger(__name__)

# Revision counter bumped on every update; not part of the public feed
VERSION_FIELD = "__v"

NEWEST_FIRST = [("createdAt", DESCENDING), ("_id", DESCENDING)]

POST_NOT_FOUND = "Post not found"
INVALID_ORG_ID = "Invalid orgId format"


def build_content(request: PostUpdateRequest) -> dict:
    """
    Turn request fields into the full replaceable field set.

    Dates that fail to parse are dropped silently; start must not be after end.
    """
    start = parse_date(request.durationStart)
    end = parse_date(request.durationEnd)
    deadline = parse_date(request.deadline)

    if start and end and start > end:
        raise ValidationError("Start date cannot be after end date.")

    return {
        "title": request.title,
        "type": request.type,
        "description": request.description,
        "location": request.location or "Remote",
        "durationStart": start,
        "durationEnd": end,
        "deadline": deadline,
        "applicationLink": request.applicationLink or "",
    }


class PostService:

    def __init__(self, db: Database):
        self.collection = db[COLLECTIONS["posts"]]

    def create(self, request: PostCreateRequest) -> dict:
        if not all([request.orgId, request.orgName, request.title, request.type, request.description]):
            raise ValidationError("orgId, orgName, title, type, and description are required.")

        if request.status not in (PostStatus.draft.value, PostStatus.active.value):
            raise ValidationError('Status must be "draft" or "active".')

        org_id = parse_object_id(request.orgId)
        if org_id is None:
            raise ValidationError(INVALID_ORG_ID)

        post = validate_document(PostDocument, {
            "orgId": org_id,
            "orgName": request.orgName,
            "status": request.status,
            **build_content(request),
        })

        now = utcnow()
        doc = post.model_dump()
        doc.update({"createdAt": now, "updatedAt": now, VERSION_FIELD: 0})

        with storage_errors("Failed to create post"):
            doc["_id"] = self.collection.insert_one(doc).inserted_id

        logger.info(f"Created post {doc['_id']} for org {org_id} ({doc['status']})")
        return serialize_doc(doc)

    def update(self, post_id: str, request: PostUpdateRequest) -> dict:
        if not all([request.title, request.type, request.description]):
            raise ValidationError("Title, type, and description are required.")

        content = validate_document(PostContent, build_content(request)).model_dump()

        oid = parse_object_id(post_id)
        if oid is None:
            raise NotFoundError(POST_NOT_FOUND)

        with storage_errors("Failed to update post"):
            doc = self.collection.find_one_and_update(
                {"_id": oid},
                {
                    "$set": {**content, "updatedAt": utcnow()},
                    "$inc": {VERSION_FIELD: 1}
                },
                return_document=ReturnDocument.AFTER
            )

        if doc is None:
            raise NotFoundError(POST_NOT_FOUND)

        logger.info(f"Updated post {post_id}")
        return serialize_doc(doc)

    def delete(self, post_id: str) -> None:
        oid = parse_object_id(post_id)
        if oid is None:
            raise NotFoundError(POST_NOT_FOUND)

        with storage_errors("Failed to delete post"):
            result = self.collection.delete_one({"_id": oid})

        if result.deleted_count == 0:
            raise NotFoundError(POST_NOT_FOUND)
        logger.info(f"Deleted post {post_id}")

    def get(self, post_id: str) -> dict:
        oid = parse_object_id(post_id)
        if oid is None:
            raise ValidationError("Invalid post ID")

        with storage_errors("Failed to fetch post"):
            doc = self.collection.find_one({"_id": oid})

        if doc is None:
            raise NotFoundError(POST_NOT_FOUND)
        return serialize_doc(doc)

    def list_posts(self, org_id: Optional[str] = None) -> List[dict]:
        """
        With org_id: every post of that organization.
        Without: the public feed, active posts only and without the revision counter.
        """
        if org_id:
            oid = parse_object_id(org_id)
            if oid is None:
                raise ValidationError(INVALID_ORG_ID)
            query, projection = {"orgId": oid}, None
        else:
            query, projection = {"status": PostStatus.active.value}, {VERSION_FIELD: 0}

        with storage_errors("Failed to fetch posts"):
            docs = list(self.collection.find(query, projection).sort(NEWEST_FIRST))

        return serialize_docs(docs)
