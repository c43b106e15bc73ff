"""Auth service - registration and authentication business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import bcrypt

from domain.model.errors import DomainError, DuplicateError, ValidationError
from domain.model.user import User, password_problem
from port.user_repository import UserRepository

BCRYPT_ROUNDS = 12


def _hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))


def _validate_registration(
    first_name: str, last_name: str, password: str, confirm_password: str,
) -> None:
    if not first_name.strip():
        raise ValidationError("First name is required")
    if not last_name.strip():
        raise ValidationError("Last name is required")
    problem = password_problem(password)
    if problem:
        raise ValidationError(problem)
    if password != confirm_password:
        raise ValidationError("Passwords must match")


def register(
    repo: UserRepository,
    first_name: str,
    last_name: str,
    email: str,
    password: str,
    confirm_password: str,
) -> User:
    """Register a new user.

    Returns the created User domain object.

    Raises:
        DuplicateError: email already registered
        ValidationError: missing names, weak password or mismatched confirmation
    """
    _validate_registration(first_name, last_name, password, confirm_password)

    if repo.get_by_email(email):
        raise DuplicateError("Email already registered")

    password_hash = _hash_password(password)

    user = repo.create(
        first_name=first_name.strip(),
        last_name=last_name.strip(),
        email=email,
        password_hash=password_hash,
    )
    if not user:
        # A concurrent signup can still win the unique index race
        if repo.get_by_email(email):
            raise DuplicateError("Email already registered")
        raise DomainError("Failed to create user")
    return user


def authenticate(repo: UserRepository, email: str, password: str) -> User:
    """Authenticate a user by email and password.

    Doesn't reveal whether the email exists.

    Raises:
        ValidationError: invalid credentials (deliberately vague)
    """
    user = repo.get_by_email(email)
    if not user or not user.password_hash or not _verify_password(password, user.password_hash):
        raise ValidationError("Invalid email or password")
    return user
