"""Authentication routes (sign in, session).

The session endpoint is what the client's session provider polls: it turns
a bearer token into the partial identity ``{name, email, image}``.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.dependencies import get_user_repo
from api.models import (
    MessageResponse,
    SessionResponse,
    SessionUserResponse,
    SignInRequest,
    SignInResponse,
)
from api.security import AuthenticatedUser, create_access_token, get_current_user_required
from domain.model.errors import ValidationError
from domain.model.user import User
from port.user_repository import UserRepository
from services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def to_session_user(user: User) -> SessionUserResponse:
    """Project a user onto the identity fields a session carries."""
    return SessionUserResponse(
        name=user.full_name or None,
        email=user.email,
        image=user.avatar or None,
    )


@router.post("/signin", response_model=SignInResponse, responses={401: {"model": MessageResponse}})
async def signin(request: SignInRequest, repo: UserRepository = Depends(get_user_repo)):
    """Exchange email and password for a bearer token."""
    try:
        user = auth_service.authenticate(repo, request.email, request.password)
    except ValidationError as e:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": str(e)},
        )

    token = create_access_token(user.id)
    logger.info("User signed in", extra={"userId": user.id, "email": request.email})
    return SignInResponse(token=token, user=to_session_user(user))


@router.get("/session", response_model=SessionResponse)
async def get_session(current: AuthenticatedUser = Depends(get_current_user_required)):
    """Return the session identity for the bearer token.

    Raises:
        HTTPException: 401 if not authenticated
    """
    return SessionResponse(user=to_session_user(current.user), expires=current.expires)
