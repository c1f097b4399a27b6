"""Validation rules for user payloads.

Create and update bodies are strict: unknown keys (``id``, ``createdAt``, typos)
are rejected, numbers must be JSON integers and booleans must be JSON booleans.
Updates are partial: only the keys present in the body are applied.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_PAYLOAD_CONFIG = ConfigDict(extra="forbid", str_strip_whitespace=True)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _checked_email(value: Optional[str]) -> Optional[str]:
    """Reject malformed addresses but keep the value exactly as sent (no normalization)."""
    if value is None:
        return value
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from exc
    return value


class UserCreate(BaseModel):
    model_config = _PAYLOAD_CONFIG

    name: str = Field(..., min_length=1, max_length=255)
    email: str
    age: Optional[int] = Field(None, ge=1, le=120, strict=True)
    is_active: bool = Field(True, alias="isActive", strict=True)

    @field_validator("age", mode="before")
    @classmethod
    def blank_age_is_none(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("email")
    @classmethod
    def email_format(cls, value: Optional[str]) -> Optional[str]:
        return _checked_email(value)

    def to_values(self) -> dict[str, Any]:
        return self.model_dump()


class UserUpdate(BaseModel):
    model_config = _PAYLOAD_CONFIG

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[str] = None
    age: Optional[int] = Field(None, ge=1, le=120, strict=True)
    is_active: Optional[bool] = Field(None, alias="isActive", strict=True)

    @field_validator("age", mode="before")
    @classmethod
    def blank_age_is_none(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("email")
    @classmethod
    def email_format(cls, value: Optional[str]) -> Optional[str]:
        return _checked_email(value)

    @model_validator(mode="after")
    def reject_nulls(self) -> "UserUpdate":
        # age is the only nullable column
        for field in ("name", "email", "is_active"):
            if field in self.model_fields_set and getattr(self, field) is None:
                alias = type(self).model_fields[field].alias or field
                raise ValueError(f"{alias} nao pode ser nulo")
        return self

    def changes(self) -> dict[str, Any]:
        """Only the fields present in the request body."""
        return self.model_dump(exclude_unset=True)


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    age: Optional[int] = None
    is_active: bool = Field(serialization_alias="isActive")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")
