"""Sample posts listing."""

from dataclasses import asdict

from fastapi import APIRouter

from api.models import PostResponse
from domain.model.post import SAMPLE_POSTS

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=list[PostResponse])
async def list_posts():
    """Return the fixed sample posts."""
    return [PostResponse(**asdict(post)) for post in SAMPLE_POSTS]
