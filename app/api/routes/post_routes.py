"""
Post Routes

GET /posts - Public feed of active posts, or ?orgId= for one organization's posts
GET /posts/{post_id} - Get a post
POST /posts - Create a post
PUT /posts/{post_id} - Replace a post's content (omitted fields reset to defaults)
DELETE /posts/{post_id} - Delete a post
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from pymongo.database import Database

from app.db.mongodb import get_db
from app.services.post_service import PostService
from app.schemas.schemas import PostCreateRequest, PostUpdateRequest, MessageResponse

router = APIRouter(prefix="/posts", tags=["Posts"])


def get_post_service(db: Database = Depends(get_db)) -> PostService:
    return PostService(db)


@router.get("")
def list_posts(
    orgId: Optional[str] = Query(None, description="Limit to one organization, any status"),
    posts: PostService = Depends(get_post_service)
):
    """List posts newest first. Without orgId only active posts are returned."""
    return posts.list_posts(orgId)


@router.get("/{post_id}")
def get_post(post_id: str, posts: PostService = Depends(get_post_service)):
    """Get details of a specific post."""
    return posts.get(post_id)


@router.post("", status_code=201)
def create_post(request: PostCreateRequest, posts: PostService = Depends(get_post_service)):
    """Create a post. Status defaults to draft, location to Remote."""
    return posts.create(request)


@router.put("/{post_id}")
def update_post(post_id: str, request: PostUpdateRequest, posts: PostService = Depends(get_post_service)):
    """
    Replace a post's content.

    This is not a partial patch: location, dates and applicationLink fall back
    to their defaults when omitted. Status, orgId and orgName are kept.
    """
    return posts.update(post_id, request)


@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(post_id: str, posts: PostService = Depends(get_post_service)):
    """Delete a post."""
    posts.delete(post_id)
    return MessageResponse(message="Post deleted successfully")
