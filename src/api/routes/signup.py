"""Signup route.

Every response body carries a ``message`` the client shows verbatim; the
status code alone decides success or error styling.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.dependencies import get_user_repo
from api.models import MessageResponse, SignUpRequest
from domain.model.errors import DomainError, DuplicateError, ValidationError
from port.user_repository import UserRepository
from services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/signup", tags=["auth"])

ACCOUNT_CREATED = "Account created"


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": MessageResponse}, 409: {"model": MessageResponse}},
)
async def signup(request: SignUpRequest, repo: UserRepository = Depends(get_user_repo)):
    """Register a new account."""
    try:
        user = auth_service.register(
            repo,
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            password=request.password,
            confirm_password=request.confirm_password,
        )
    except ValidationError as e:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": str(e)})
    except DuplicateError as e:
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"message": str(e)})
    except DomainError as e:
        logger.error("Signup failed", extra={"email": request.email, "error": str(e)})
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Something went wrong, please try again"},
        )

    logger.info("User registered", extra={"userId": user.id, "email": request.email})
    return MessageResponse(message=ACCOUNT_CREATED)
