"""
Jira agile models.

This module provides Pydantic models for the greenhopper (agile) endpoints:
sprint listings per rapid board and sprint reports.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel, as_int
from ..constants import EMPTY_STRING, UNKNOWN

logger = logging.getLogger(__name__)


class JiraSprint(ApiModel):
    """
    Model representing a Jira sprint.
    """

    id: int = 0
    name: str = UNKNOWN
    state: str = UNKNOWN
    state_key: str = EMPTY_STRING
    board_name: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraSprint":
        """
        Create a JiraSprint from a Jira API response.

        Args:
            data: The sprint data from the Jira API

        Returns:
            A JiraSprint instance
        """
        if not data:
            return cls()

        # Handle non-dictionary data by returning a default instance
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        return cls(
            id=as_int(data.get("id")),
            name=str(data.get("name", UNKNOWN)),
            state=str(data.get("state", UNKNOWN)),
            state_key=str(data.get("stateKey", EMPTY_STRING)),
            board_name=str(data.get("boardName", EMPTY_STRING)),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "state": self.state,
        }
        if self.board_name:
            result["board_name"] = self.board_name
        return result


class JiraSprintList(ApiModel):
    """
    Sprints of a rapid board, as returned by ``/sprintquery/{rapidViewId}``.
    """

    sprints: list[JiraSprint] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSprintList":
        """Create a JiraSprintList from a Jira API response."""
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            sprints=[
                JiraSprint.from_api_response(sprint)
                for sprint in data.get("sprints") or []
                if sprint
            ]
        )

    def by_state(self, state: str) -> list[JiraSprint]:
        """Sprints whose state matches ``state`` (case-insensitive)."""
        return [s for s in self.sprints if s.state.lower() == state.lower()]


class JiraTextValue(ApiModel):
    """
    A numeric value and its rendered text, as used by sprint report sums.
    """

    value: float = 0.0
    text: str = EMPTY_STRING

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraTextValue":
        """Create a JiraTextValue from a Jira API response."""
        if not data or not isinstance(data, dict):
            return cls()

        value = data.get("value", 0.0)
        try:
            value = float(value) if value is not None else 0.0
        except (ValueError, TypeError):
            value = 0.0

        return cls(value=value, text=str(data.get("text", EMPTY_STRING)))


class JiraSprintReport(ApiModel):
    """
    Model representing a sprint report (``/rapid/charts/sprintreport``).
    """

    completed_issues_estimate_sum: JiraTextValue = Field(
        default_factory=JiraTextValue
    )
    all_issues_estimate_sum: JiraTextValue = Field(default_factory=JiraTextValue)
    sprint: JiraSprint = Field(default_factory=JiraSprint)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSprintReport":
        """Create a JiraSprintReport from a Jira API response."""
        if not data or not isinstance(data, dict):
            return cls()

        contents = data.get("contents") or {}
        if not isinstance(contents, dict):
            contents = {}

        return cls(
            completed_issues_estimate_sum=JiraTextValue.from_api_response(
                contents.get("completedIssuesEstimateSum")
            ),
            all_issues_estimate_sum=JiraTextValue.from_api_response(
                contents.get("allIssuesEstimateSum")
            ),
            sprint=JiraSprint.from_api_response(data.get("sprint")),
        )

    @property
    def completion_ratio(self) -> float:
        """Completed estimate over total estimate, 0.0 for an empty sprint."""
        total = self.all_issues_estimate_sum.value
        if total <= 0:
            return 0.0
        return self.completed_issues_estimate_sum.value / total
