"""
Account Service - registration and login for students and organizations.

Students and organizations live in separate collections but share one email
namespace. AccountService.find_by_email is the single lookup for both: it
checks students first, then organizations, and returns the match tagged with
its role.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from app.core.auth import hash_password, verify_password
from app.core.errors import AuthError, ConflictError, ValidationError
from app.db.mongodb import COLLECTIONS
from app.models import OrganizationDocument, Role, StudentDocument
from app.schemas.schemas import RegisterRequest
from app.services.mongo_service import storage_errors, utcnow, validate_document

logger = logging.getLogger(__name__)

# Lookup order for emails
LOOKUP_ORDER = (Role.student, Role.organization)

DUPLICATE_EMAIL = "An account with this email already exists."
INVALID_CREDENTIALS = "Invalid credentials."


@dataclass(frozen=True)
class Account:
    """A stored account tagged with the collection it came from."""
    role: Role
    document: dict

    @property
    def id(self) -> str:
        return str(self.document["_id"])


class AccountService:
    """
    Handles both account collections.
    """

    def __init__(self, db: Database):
        self.collections: Dict[Role, Collection] = {
            Role.student: db[COLLECTIONS["students"]],
            Role.organization: db[COLLECTIONS["organizations"]],
        }

    def find_by_email(self, email: str) -> Optional[Account]:
        """Return the first account with this email, students first."""
        for role in LOOKUP_ORDER:
            doc = self.collections[role].find_one({"email": email})
            if doc:
                return Account(role=role, document=doc)
        return None

    def register(self, request: RegisterRequest) -> Role:
        """
        Create a student or organization account.

        Raises ValidationError for a bad role or missing fields and
        ConflictError when the email is taken under either role.
        """
        if request.role not in (Role.student.value, Role.organization.value):
            raise ValidationError('Invalid role. Must be "student" or "organization".')
        role = Role(request.role)

        if role == Role.student:
            if not all([request.firstName, request.lastName, request.email, request.phone, request.password]):
                raise ValidationError("All student fields are required.")
        elif not all([request.orgName, request.email, request.password]) or request.orgTerms in (None, False, 0, ""):
            raise ValidationError("All organization fields and terms acceptance are required.")

        with storage_errors("Server error during registration."):
            if self.find_by_email(request.email) is not None:
                raise ConflictError(DUPLICATE_EMAIL)

            hashed = hash_password(request.password)
            if role == Role.student:
                document = validate_document(StudentDocument, {
                    "firstName": request.firstName,
                    "lastName": request.lastName,
                    "email": request.email,
                    "phone": request.phone,
                    "password": hashed,
                }).model_dump(exclude_none=True)
            else:
                document = validate_document(OrganizationDocument, {
                    "orgName": request.orgName,
                    "email": request.email,
                    "phone": request.phone or "",
                    "password": hashed,
                }).model_dump()

            now = utcnow()
            document.update({"createdAt": now, "updatedAt": now})
            try:
                self.collections[role].insert_one(document)
            except DuplicateKeyError:
                # lost a race with a concurrent registration of the same email
                raise ConflictError(DUPLICATE_EMAIL)

        logger.info(f"Registered {role.value} account {request.email}")
        return role

    def login(self, email: Optional[str], password: Optional[str]) -> dict:
        """
        Verify credentials against whichever collection holds the email.

        Organizations get their id repeated as orgId for scoping post queries.
        """
        if not email or not password:
            raise ValidationError("Email and password are required.")

        with storage_errors("Server error during login."):
            account = self.find_by_email(email)

        if account is None or not verify_password(password, account.document.get("password", "")):
            raise AuthError(INVALID_CREDENTIALS)

        return {
            "message": "Login successful",
            "role": account.role.value,
            "email": account.document["email"],
            "id": account.id,
            "orgId": account.id if account.role == Role.organization else None,
        }
