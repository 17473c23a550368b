"""
Jira search result models.

This module provides Pydantic models for Jira search (JQL) results.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel, as_int
from ..constants import EMPTY_STRING
from .issue import JiraIssue
from .pagination import JiraPagination

logger = logging.getLogger(__name__)


class JiraSearchResult(ApiModel):
    """
    Model representing a Jira search (JQL) result.

    Counters the response did not report are -1, in which case no
    pagination window is attached.
    """

    expand: str = EMPTY_STRING
    total: int = 0
    start_at: int = 0
    max_results: int = 0
    issues: list[JiraIssue] = Field(default_factory=list)
    pagination: JiraPagination | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSearchResult":
        """
        Create a JiraSearchResult from a Jira API response.

        Args:
            data: The search result data from the Jira API
            **kwargs: Passed through to JiraIssue.from_api_response

        Returns:
            A JiraSearchResult instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        issues = []
        issues_data = data.get("issues", [])
        if isinstance(issues_data, list):
            for issue_data in issues_data:
                if issue_data:
                    issues.append(JiraIssue.from_api_response(issue_data, **kwargs))

        total = as_int(data.get("total"), default=-1)
        start_at = as_int(data.get("startAt"), default=-1)
        max_results = as_int(data.get("maxResults"), default=-1)

        return cls(
            expand=str(data.get("expand", EMPTY_STRING)),
            total=total,
            start_at=start_at,
            max_results=max_results,
            issues=issues,
            pagination=JiraPagination.from_response(total, start_at, max_results),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {
            "total": self.total,
            "start_at": self.start_at,
            "max_results": self.max_results,
            "issues": [issue.to_simplified_dict() for issue in self.issues],
        }
        if self.pagination:
            result["page"] = self.pagination.page
            result["page_count"] = self.pagination.page_count
        return result
