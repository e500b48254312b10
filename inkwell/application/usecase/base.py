"""Base use case and shared request helpers."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from inkwell.config import PaginationSettings
from inkwell.domain.error import NotFoundError, ValidationError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class PageRequest(BaseModel):
    """Pagination parameters shared by list requests.

    ``limit`` is None when the caller didn't send one; the configured default
    applies then.
    """

    page: int = 1
    limit: int | None = None

    def resolve_limit(self, settings: PaginationSettings) -> int:
        """Apply the default and the configured maximum page size.

        Raises:
            ValidationError: If the limit exceeds the configured maximum
        """
        limit = settings.default_limit if self.limit is None else self.limit
        if limit > settings.max_limit:
            raise ValidationError(f"Limit must be at most {settings.max_limit}.")
        return limit


def parse_id(value: str, resource: str) -> UUID:
    """Parse an identifier taken from a path or body.

    A malformed identifier can't name an existing record, so it is reported
    as not found.

    Raises:
        NotFoundError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise NotFoundError(resource, value) from None
