from datetime import datetime
from typing import Annotated, Optional
from pydantic import AfterValidator, Field, field_validator

from literacy.constants.constants import MIN_PASSWORD_LENGTH, Message
from literacy.schemas.baseSchema import CamelModel
from literacy.utils.validators import is_valid_email


def _check_email(value: str) -> str:
    if not is_valid_email(value):
        raise ValueError(Message.invalid_email.value)
    return value


EmailAddress = Annotated[str, AfterValidator(_check_email)]


class RegisterRequest(CamelModel):
    email: EmailAddress
    password: str
    first_name: str
    last_name: str

    @field_validator("password")
    @classmethod
    def password_length(cls, value: str) -> str:
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(Message.password_too_short.value)
        return value

    @field_validator("first_name")
    @classmethod
    def first_name_present(cls, value: str) -> str:
        if not value.strip():
            raise ValueError(Message.first_name_required.value)
        return value

    @field_validator("last_name")
    @classmethod
    def last_name_present(cls, value: str) -> str:
        if not value.strip():
            raise ValueError(Message.last_name_required.value)
        return value


class LoginRequest(CamelModel):
    email: EmailAddress
    password: str

    @field_validator("password")
    @classmethod
    def password_present(cls, value: str) -> str:
        if not value:
            raise ValueError(Message.password_required.value)
        return value


class VerifyEmailRequest(CamelModel):
    token: str = Field(..., min_length=1)


class ForgotPasswordRequest(CamelModel):
    email: EmailAddress


class ResetPasswordRequest(CamelModel):
    token: str = Field(..., min_length=1)
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)


class UserSummary(CamelModel):
    id: str = Field(validation_alias="user_id")
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None


class UserResponse(UserSummary):
    """The current user without password hash or tokens."""
    email_verified: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RegisterResponse(CamelModel):
    message: str
    user_id: str


class LoginResponse(CamelModel):
    message: str
    user: UserSummary


class MessageResponse(CamelModel):
    message: str
