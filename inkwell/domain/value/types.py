"""Domain value objects for Inkwell.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

T = TypeVar("T")

SLUG_MAX_LENGTH = 100


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around a single primitive.

    ``model_dump()`` returns the primitive itself, so wrapped values serialize
    transparently in API responses and database rows.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)


class Slug(RootValueObject[str]):
    """URL-safe slug for posts.

    Must be lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'hello-world', 'notes-on-async-python'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if len(v) < 1 or len(v) > SLUG_MAX_LENGTH:
            raise ValueError(f"Slug must be 1-{SLUG_MAX_LENGTH} characters")
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        return v


class Username(RootValueObject[str]):
    """Public, unique user name (3-30 chars of letters, digits, '_', '.', '-')."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        if not re.match(r"^[A-Za-z0-9_.-]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters of letters, digits, '_', '.' or '-'"
            )
        return v


class LikeResult(BaseModel):
    """Outcome of a like toggle."""

    model_config = ConfigDict(frozen=True)

    liked: bool
    like_count: int = Field(ge=0)
