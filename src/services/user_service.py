"""User lookup used by the /api/user route."""

import logging

from domain.model.errors import NotFoundError
from domain.model.user import User
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)


def get_user_record(repo: UserRepository, email: str) -> User:
    """Return the user registered under ``email``.

    Raises:
        NotFoundError: no user with that email
    """
    user = repo.get_by_email(email)
    if not user:
        logger.info("User lookup missed", extra={"email": email})
        raise NotFoundError("User not found")
    return user
