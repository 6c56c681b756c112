"""
CV Service - a student's profile fields, stored on the student document.

Saving never creates a student; it overwrites every profile field of an
existing one. Optional fields left out of a save are cleared to "".
"""

import logging

from pymongo.database import Database

from app.core.errors import NotFoundError, ValidationError
from app.db.mongodb import COLLECTIONS
from app.models import StudentDocument
from app.schemas.schemas import CVSaveRequest, normalize_email
from app.services.mongo_service import serialize_doc, storage_errors, utcnow, validate_document

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("firstName", "lastName", "phone")
OPTIONAL_FIELDS = ("address", "education", "skills", "experience", "projects", "certifications")
CV_FIELDS = ("firstName", "lastName", "email", "phone") + OPTIONAL_FIELDS

STUDENT_NOT_FOUND = "Student not found."


class CVService:

    def __init__(self, db: Database):
        self.collection = db[COLLECTIONS["students"]]

    def save(self, request: CVSaveRequest) -> dict:
        if not all([request.email, request.firstName, request.lastName, request.phone]):
            raise ValidationError("Email, First Name, Last Name, and Phone are required.")

        with storage_errors("Server error during CV save."):
            student = self.collection.find_one({"email": request.email})
            if not student:
                raise NotFoundError(STUDENT_NOT_FOUND, status_code=400)

            profile = {field: getattr(request, field) for field in REQUIRED_FIELDS}
            profile.update({field: getattr(request, field) or "" for field in OPTIONAL_FIELDS})

            # re-validate the whole student so the profile gets the same trimming as registration
            updated = validate_document(StudentDocument, {**student, **profile})
            changes = updated.model_dump(include=set(profile))

            self.collection.update_one(
                {"_id": student["_id"]},
                {"$set": {**changes, "updatedAt": utcnow()}}
            )

        logger.info(f"Saved CV for {student['email']}")
        saved = {**changes, "email": student["email"]}
        return {field: saved[field] for field in CV_FIELDS}

    def get(self, email: str) -> dict:
        email = normalize_email(email)
        if not email:
            raise ValidationError("Email is required.")

        with storage_errors("Failed to fetch CV"):
            student = self.collection.find_one(
                {"email": email},
                {field: 1 for field in CV_FIELDS}
            )

        if not student:
            raise NotFoundError(STUDENT_NOT_FOUND, status_code=400)
        return serialize_doc(student)
