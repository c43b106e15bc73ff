"""User lookup route.

POST /api/user takes an email in the body and returns the public profile
fields the session token does not carry (names, avatar, createdAt).
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.dependencies import get_user_repo
from api.models import MessageResponse, UserLookupRequest, UserRecordResponse
from domain.model.errors import NotFoundError
from domain.model.user import User
from port.user_repository import UserRepository
from services import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/user", tags=["user"])


def _format_timestamp(user: User) -> str:
    created_at = user.created_at
    if created_at.tzinfo is None:
        return created_at.isoformat() + 'Z'
    return created_at.isoformat().replace('+00:00', 'Z')


def to_record_response(user: User) -> UserRecordResponse:
    """Convert domain User to the public record (no password hash)."""
    return UserRecordResponse(
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        avatar=user.avatar,
        created_at=_format_timestamp(user),
    )


@router.post(
    "",
    response_model=UserRecordResponse,
    responses={404: {"model": MessageResponse}},
)
async def get_user(request: UserLookupRequest, repo: UserRepository = Depends(get_user_repo)):
    """Return the profile record for the given email."""
    try:
        user = user_service.get_user_record(repo, request.email)
    except NotFoundError as e:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": str(e)})

    return to_record_response(user)
