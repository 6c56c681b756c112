"""
CV Routes

POST /cv - Save a student's CV fields (student must already exist)
GET /cv?email= - Fetch a student's CV fields
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from pymongo.database import Database

from app.db.mongodb import get_db
from app.services.cv_service import CVService
from app.schemas.schemas import CVSaveRequest

router = APIRouter(prefix="/cv", tags=["CV"])


def get_cv_service(db: Database = Depends(get_db)) -> CVService:
    return CVService(db)


@router.post("")
def save_cv(request: CVSaveRequest, cvs: CVService = Depends(get_cv_service)):
    """Overwrite all CV fields. Omitted optional fields are cleared."""
    return {"message": "CV saved successfully!", "cv": cvs.save(request)}


@router.get("")
def get_cv(email: Optional[str] = Query(None), cvs: CVService = Depends(get_cv_service)):
    """Get CV fields by email. The password is never included."""
    return {"cv": cvs.get(email)}
