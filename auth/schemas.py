"""
Request / response schemas for the auth routes.
"""

from __future__ import annotations

import uuid
from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, Field

from utils.schemas import CamelModel


def _check_email(value: str) -> str:
    # Validate only; the address is stored and matched exactly as sent.
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(str(exc)) from exc
    return value


EmailAddress = Annotated[str, AfterValidator(_check_email)]


class SignupRequest(CamelModel):
    email: EmailAddress = Field(..., max_length=255)
    full_name: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class SigninRequest(CamelModel):
    email: EmailAddress
    password: str = Field(..., min_length=1)


class AuthData(CamelModel):
    id: uuid.UUID
    email: str
    full_name: str
    token: str
