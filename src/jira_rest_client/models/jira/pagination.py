"""
Pagination window for Jira list endpoints.

List responses carry ``total``, ``startAt`` and ``maxResults``; the window
derives the page count, the current page and the list of page indices.
"""

from pydantic import Field

from ...exceptions import JiraInvalidArgumentError
from ..base import ApiModel


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


class JiraPagination(ApiModel):
    """
    Model representing the page layout of a list response.
    """

    total: int = 0
    start_at: int = 0
    max_results: int = 0
    page: int = 0
    page_count: int = 0
    pages: list[int] = Field(default_factory=list)

    @classmethod
    def compute(
        cls, total: int, start_at: int, max_results: int
    ) -> "JiraPagination":
        """
        Derive the pagination window for a list response.

        Args:
            total: Total number of items on the server
            start_at: 0-based index of the first returned item
            max_results: Page size

        Returns:
            A JiraPagination instance

        Raises:
            JiraInvalidArgumentError: If max_results is not positive or
                total/start_at are negative
        """
        if max_results <= 0:
            raise JiraInvalidArgumentError(
                f"max_results must be greater than 0, got {max_results}"
            )
        if total < 0:
            raise JiraInvalidArgumentError(f"total must not be negative, got {total}")
        if start_at < 0:
            raise JiraInvalidArgumentError(
                f"start_at must not be negative, got {start_at}"
            )

        page_count = _ceil_div(total, max_results)
        return cls(
            total=total,
            start_at=start_at,
            max_results=max_results,
            page=_ceil_div(start_at, max_results),
            page_count=page_count,
            pages=list(range(page_count)),
        )

    @classmethod
    def from_response(
        cls, total: int, start_at: int, max_results: int
    ) -> "JiraPagination | None":
        """Window for a decoded list response, or None if it carried no page size."""
        if max_results <= 0 or total < 0 or start_at < 0:
            return None
        return cls.compute(total, start_at, max_results)


def compute_pagination(total: int, start_at: int, max_results: int) -> JiraPagination:
    """Shortcut for :meth:`JiraPagination.compute`."""
    return JiraPagination.compute(total, start_at, max_results)
