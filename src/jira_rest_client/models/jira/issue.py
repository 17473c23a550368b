"""
Jira issue models.

This module provides Pydantic models for Jira issues, their field set,
changelog, and the response returned when an issue is created.
"""

import logging
from datetime import datetime
from typing import Any

from pydantic import Field, JsonValue

from ...utils.date import JiraTime
from ..base import ApiModel, as_int, codec_from
from ..constants import (
    CUSTOM_FIELD_PREFIX,
    EMPTY_STRING,
    JIRA_DEFAULT_ID,
    STORY_POINTS_FIELD,
)
from .common import (
    JiraIssueType,
    JiraPriority,
    JiraProject,
    JiraStatus,
    JiraTimetracking,
    JiraUser,
)
from .pagination import JiraPagination
from .worklog import JiraWorklogList

logger = logging.getLogger(__name__)


class JiraIssueFields(ApiModel):
    """
    Model representing the ``fields`` object of a Jira issue.

    Deployment-specific fields are kept verbatim in ``custom``, keyed by their
    full field id (``customfield_10010``).
    """

    issue_type: JiraIssueType | None = None
    parent: "JiraIssue | None" = None
    summary: str = EMPTY_STRING
    description: str | None = None
    reporter: JiraUser | None = None
    assignee: JiraUser | None = None
    project: JiraProject | None = None
    priority: JiraPriority | None = None
    status: JiraStatus | None = None
    created: JiraTime = Field(default_factory=JiraTime)
    updated: JiraTime = Field(default_factory=JiraTime)
    time_spent: int = 0
    time_estimate: int = 0
    time_tracking: JiraTimetracking | None = None
    story_points: float | None = None
    labels: list[str] = Field(default_factory=list)
    worklog: JiraWorklogList | None = None
    custom: dict[str, JsonValue] = Field(default_factory=dict)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueFields":
        """
        Create a JiraIssueFields from the ``fields`` object of an issue.

        Args:
            data: The fields data from the Jira API
            **kwargs: ``time_codec`` used for timestamp fields

        Returns:
            A JiraIssueFields instance

        Raises:
            JiraDecodeError: If ``created`` or ``updated`` is malformed
        """
        if not data or not isinstance(data, dict):
            return cls()

        codec = codec_from(kwargs)

        def _model(key: str, model: type[ApiModel]) -> Any:
            value = data.get(key)
            return model.from_api_response(value, **kwargs) if value else None

        story_points = data.get(STORY_POINTS_FIELD)
        try:
            story_points = float(story_points) if story_points is not None else None
        except (ValueError, TypeError):
            logger.debug(f"Ignoring non-numeric story points: {story_points!r}")
            story_points = None

        labels = data.get("labels") or []
        custom = {
            key: value
            for key, value in data.items()
            if key.startswith(CUSTOM_FIELD_PREFIX)
        }

        return cls(
            issue_type=_model("issuetype", JiraIssueType),
            parent=_model("parent", JiraIssue),
            summary=str(data.get("summary") or EMPTY_STRING),
            description=data.get("description"),
            reporter=_model("reporter", JiraUser),
            assignee=_model("assignee", JiraUser),
            project=_model("project", JiraProject),
            priority=_model("priority", JiraPriority),
            status=_model("status", JiraStatus),
            created=codec.decode_optional(data.get("created")),
            updated=codec.decode_optional(data.get("updated")),
            time_spent=as_int(data.get("timespent")),
            time_estimate=as_int(data.get("aggregatetimeoriginalestimate")),
            time_tracking=_model("timetracking", JiraTimetracking),
            story_points=story_points,
            labels=[str(label) for label in labels if label is not None],
            worklog=_model("worklog", JiraWorklogList),
            custom=custom,
        )


class JiraChangelogHistory(ApiModel):
    """
    One entry of an issue changelog.
    """

    id: str = JIRA_DEFAULT_ID
    author: JiraUser | None = None
    created: JiraTime = Field(default_factory=JiraTime)
    items: list[dict[str, Any]] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraChangelogHistory":
        """Create a JiraChangelogHistory from a Jira API response."""
        if not data or not isinstance(data, dict):
            return cls()

        author = data.get("author")
        items = data.get("items") or []
        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            author=JiraUser.from_api_response(author) if author else None,
            created=codec_from(kwargs).decode_optional(data.get("created")),
            items=[item for item in items if isinstance(item, dict)],
        )


class JiraChangelog(ApiModel):
    """
    Model representing the paged changelog of an issue (``expand=changelog``).
    """

    start_at: int = 0
    max_results: int = 0
    total: int = 0
    histories: list[JiraChangelogHistory] = Field(default_factory=list)
    pagination: JiraPagination | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraChangelog":
        """Create a JiraChangelog from a Jira API response."""
        if not data or not isinstance(data, dict):
            return cls()

        total = as_int(data.get("total"))
        start_at = as_int(data.get("startAt"))
        max_results = as_int(data.get("maxResults"))
        return cls(
            start_at=start_at,
            max_results=max_results,
            total=total,
            histories=[
                JiraChangelogHistory.from_api_response(history, **kwargs)
                for history in data.get("histories") or []
                if history
            ],
            pagination=JiraPagination.from_response(total, start_at, max_results),
        )


class JiraIssue(ApiModel):
    """
    Model representing a Jira issue.
    """

    id: str = JIRA_DEFAULT_ID
    key: str = EMPTY_STRING
    self_url: str = EMPTY_STRING
    expand: str = EMPTY_STRING
    fields: JiraIssueFields | None = None
    changelog: JiraChangelog | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        Args:
            data: The issue data from the Jira API
            **kwargs: ``time_codec`` used for timestamp fields

        Returns:
            A JiraIssue instance
        """
        if not data:
            return cls()

        # Handle non-dictionary data by returning a default instance
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        fields = data.get("fields")
        changelog = data.get("changelog")

        # Ensure ID is a string
        issue_id = data.get("id", JIRA_DEFAULT_ID)
        if issue_id is not None:
            issue_id = str(issue_id)

        return cls(
            id=issue_id,
            key=str(data.get("key", EMPTY_STRING)),
            self_url=str(data.get("self", EMPTY_STRING)),
            expand=str(data.get("expand", EMPTY_STRING)),
            fields=(
                JiraIssueFields.from_api_response(fields, **kwargs)
                if fields
                else None
            ),
            changelog=(
                JiraChangelog.from_api_response(changelog, **kwargs)
                if changelog
                else None
            ),
        )

    @property
    def created_at(self) -> datetime | None:
        """Creation instant, or None when the issue carried no ``created`` field."""
        if self.fields and self.fields.created.is_set():
            return self.fields.created.value
        return None

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {"id": self.id, "key": self.key}
        if not self.fields:
            return result

        result["summary"] = self.fields.summary
        if self.fields.issue_type:
            result["issue_type"] = self.fields.issue_type.name
        if self.fields.status:
            result["status"] = self.fields.status.name
        if self.fields.assignee:
            result["assignee"] = self.fields.assignee.to_simplified_dict()
        if self.fields.created.is_set():
            result["created"] = self.fields.created.encode()
        if self.fields.labels:
            result["labels"] = self.fields.labels
        return result


JiraIssueFields.model_rebuild()
JiraIssue.model_rebuild()


class JiraIssueCreateResponse(ApiModel):
    """
    Model representing the response of ``POST /issue``.

    On validation failures Jira answers with ``errorMessages`` and a per-field
    ``errors`` map instead of the issue reference.
    """

    id: str = EMPTY_STRING
    key: str = EMPTY_STRING
    self_url: str = EMPTY_STRING
    error_messages: list[str] = Field(default_factory=list)
    errors: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueCreateResponse":
        """Create a JiraIssueCreateResponse from a Jira API response."""
        if not data or not isinstance(data, dict):
            return cls()

        errors = data.get("errors")
        return cls(
            id=str(data.get("id", EMPTY_STRING)),
            key=str(data.get("key", EMPTY_STRING)),
            self_url=str(data.get("self", EMPTY_STRING)),
            error_messages=[str(m) for m in data.get("errorMessages") or []],
            errors=(
                {str(k): str(v) for k, v in errors.items()}
                if isinstance(errors, dict)
                else {}
            ),
        )

    @property
    def ok(self) -> bool:
        """True when Jira returned an issue key and no errors."""
        return bool(self.key) and not self.error_messages and not self.errors
