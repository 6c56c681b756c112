"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.

Request fields are deliberately Optional: presence checks happen in the
services so each endpoint can answer with its own error message.
"""

from pydantic import BaseModel, field_validator
from typing import Optional, Any


def normalize_email(value):
    """Emails are stored trimmed, so every lookup must use the trimmed form too."""
    return value.strip() if isinstance(value, str) else value


class EmailRequest(BaseModel):
    email: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def trim_email(cls, value):
        return normalize_email(value)


# ============================================================
# AUTH SCHEMAS
# ============================================================

class RegisterRequest(EmailRequest):
    role: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None
    # student
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    # organization
    orgName: Optional[str] = None
    orgTerms: Any = None

class RegisterResponse(BaseModel):
    message: str
    role: str

class LoginRequest(EmailRequest):
    password: Optional[str] = None

class LoginResponse(BaseModel):
    message: str = "Login successful"
    role: str
    email: str
    id: str
    orgId: Optional[str] = None


# ============================================================
# CV SCHEMAS
# ============================================================

class CVSaveRequest(EmailRequest):
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    education: Optional[str] = None
    skills: Optional[str] = None
    experience: Optional[str] = None
    projects: Optional[str] = None
    certifications: Optional[str] = None


# ============================================================
# POST SCHEMAS
# ============================================================

class PostUpdateRequest(BaseModel):
    title: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    # dates arrive as ISO strings or epoch milliseconds
    durationStart: Any = None
    durationEnd: Any = None
    deadline: Any = None
    applicationLink: Optional[str] = None

class PostCreateRequest(PostUpdateRequest):
    orgId: Optional[str] = None
    orgName: Optional[str] = None
    status: Optional[str] = "draft"


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str

class ErrorResponse(BaseModel):
    error: str
