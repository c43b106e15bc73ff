"""Client-side validation of the signup form."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError

from domain.model.user import password_problem

SIGNUP_FIELDS = ("firstName", "lastName", "email", "password", "confirmPassword")

_EMAIL_MESSAGE = "Please enter a valid email address"
_VALUE_ERROR_PREFIX = "Value error, "


class SignUpForm(BaseModel):
    """Signup form values, keyed on the wire by their camelCase names."""
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: EmailStr
    password: str
    confirm_password: str = Field(..., alias="confirmPassword")

    @field_validator("first_name")
    @classmethod
    def first_name_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("First name is required")
        return v

    @field_validator("last_name")
    @classmethod
    def last_name_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Last name is required")
        return v

    @field_validator("password")
    @classmethod
    def password_strength(cls, v: str) -> str:
        problem = password_problem(v)
        if problem:
            raise ValueError(problem)
        return v

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, v: str, info: ValidationInfo) -> str:
        if not v:
            raise ValueError("Please confirm your password")
        # password is absent from info.data when it failed its own checks
        password = info.data.get("password")
        if password is not None and v != password:
            raise ValueError("Passwords must match")
        return v

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


def empty_values() -> dict[str, str]:
    return {name: "" for name in SIGNUP_FIELDS}


def validate_signup(values: dict) -> tuple[SignUpForm | None, dict[str, str]]:
    """Validate raw form values.

    Returns the parsed form and no errors, or None and one message per
    failing field (first failure wins).
    """
    try:
        return SignUpForm.model_validate(values), {}
    except PydanticValidationError as e:
        errors: dict[str, str] = {}
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "form"
            if field == "email":
                message = _EMAIL_MESSAGE
            else:
                message = error["msg"].removeprefix(_VALUE_ERROR_PREFIX)
            errors.setdefault(field, message)
        return None, errors
