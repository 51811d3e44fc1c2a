# custom_auth/pydantic_models.py
from typing import Literal, Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from pydantic import Field, field_validator

from shared.pydantic_models import CamelModel, LocationPayload


class RegisterPayload(CamelModel):
    name: str = Field(..., min_length=1, max_length=150)
    email: str = Field(..., max_length=254)
    password: str = Field(..., min_length=6, max_length=128)
    phone: str = Field(default="", max_length=20)
    location: Optional[LocationPayload] = None
    # admin accounts are never self-assigned
    role: Literal["user", "chef"] = "user"
    bio: str = Field(default="", max_length=500)
    specialties: list[str] = Field(default_factory=list)

    @field_validator("email")
    @classmethod
    def _valid_email(cls, value: str) -> str:
        value = value.strip().lower()
        try:
            validate_email(value)
        except DjangoValidationError:
            raise ValueError("Please add a valid email")
        return value

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Please add a name")
        return value


class LoginPayload(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


class LogoutPayload(CamelModel):
    refresh: Optional[str] = None
