"""
Placeholder Routes

Endpoints the frontend already calls but the backend does not serve yet.
Each answers 501 instead of falling through to a 404.

GET /applications/recent
GET /events/upcoming
GET /applications
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

router = APIRouter(tags=["Not implemented"])


def not_implemented() -> JSONResponse:
    return JSONResponse(status_code=501, content={"error": "Not implemented"})


@router.get("/applications/recent")
def recent_applications():
    return not_implemented()


@router.get("/events/upcoming")
def upcoming_events():
    return not_implemented()


@router.get("/applications")
def list_applications():
    return not_implemented()
