"""
Document models - the shape of what is written to each collection.

Every write goes through one of these models first, so the collection
constraints (required fields, lengths, enums, trimming) live in one place.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    student = "student"
    organization = "organization"


class PostType(str, Enum):
    internship = "Internship"
    volunteering = "Volunteering"
    mentorship = "Mentorship"
    event = "Event"


class PostStatus(str, Enum):
    draft = "draft"
    active = "active"


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


class StudentDocument(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    education: Optional[str] = None
    skills: Optional[str] = None
    experience: Optional[str] = None
    projects: Optional[str] = None
    certifications: Optional[str] = None

    @field_validator(
        "email", "firstName", "lastName", "phone", "address", "education",
        "skills", "experience", "projects", "certifications",
        mode="before"
    )
    @classmethod
    def trim(cls, value):
        return _strip(value)


class OrganizationDocument(BaseModel):
    orgName: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    phone: str = ""
    password: str = Field(..., min_length=1)

    @field_validator("orgName", "email", mode="before")
    @classmethod
    def trim(cls, value):
        return _strip(value)


class PostContent(BaseModel):
    """Fields an organization may set on create and replace on update."""
    model_config = ConfigDict(use_enum_values=True)

    title: str = Field(..., min_length=1, max_length=100)
    type: PostType
    description: str = Field(..., min_length=20, max_length=2000)
    location: str = "Remote"
    durationStart: Optional[datetime] = None
    durationEnd: Optional[datetime] = None
    deadline: Optional[datetime] = None
    applicationLink: str = ""

    @field_validator("title", "applicationLink", mode="before")
    @classmethod
    def trim(cls, value):
        return _strip(value)


class PostDocument(PostContent):
    model_config = ConfigDict(use_enum_values=True, arbitrary_types_allowed=True)

    orgId: ObjectId
    orgName: str = Field(..., min_length=1)
    status: PostStatus = PostStatus.draft
