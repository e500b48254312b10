"""Base service class for domain services."""

from inkwell.domain.error import ValidationError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    @staticmethod
    def page_offset(page: int, limit: int) -> int:
        """Translate a 1-based page number into a row offset.

        Raises:
            ValidationError: If page or limit is not positive
        """
        if page < 1 or limit < 1:
            raise ValidationError("Page and limit must be positive numbers.")
        return (page - 1) * limit
