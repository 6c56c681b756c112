"""
Schemas module - Request/Response schemas for API endpoints.
"""

from app.schemas.schemas import (
    CVSaveRequest,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    PostCreateRequest,
    PostUpdateRequest,
    RegisterRequest,
    RegisterResponse,
)

__all__ = [
    "CVSaveRequest",
    "ErrorResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "PostCreateRequest",
    "PostUpdateRequest",
    "RegisterRequest",
    "RegisterResponse",
]
