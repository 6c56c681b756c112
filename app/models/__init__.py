"""
Models module - Pydantic models for stored documents.

Difference from schemas:
- Models: what is written to MongoDB (validated before every write)
- Schemas: API contract (what client sends/receives)
"""

from app.models.documents import (
    OrganizationDocument,
    PostContent,
    PostDocument,
    PostStatus,
    PostType,
    Role,
    StudentDocument,
)

__all__ = [
    "OrganizationDocument",
    "PostContent",
    "PostDocument",
    "PostStatus",
    "PostType",
    "Role",
    "StudentDocument",
]
