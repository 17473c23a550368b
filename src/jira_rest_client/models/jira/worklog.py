"""
Jira worklog models.

Covers issue worklogs from ``/issue/{key}/worklog``, the payload used to log
work, and the raw timesheet report served by the timesheet gadget plugin.
"""

import logging
from datetime import datetime
from typing import Any

from pydantic import Field

from ...utils.date import JiraTime, JiraTimeCodec, parse_date
from ..base import ApiModel, as_int, codec_from
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID
from .common import JiraUser
from .pagination import JiraPagination

logger = logging.getLogger(__name__)


class JiraWorklog(ApiModel):
    """
    Model representing a Jira worklog entry.

    This model contains information about time spent on an issue,
    including the author, time spent, and when the work started.
    """

    id: str = JIRA_DEFAULT_ID
    self_url: str = EMPTY_STRING
    author: JiraUser | None = None
    update_author: JiraUser | None = None
    comment: str | None = None
    created: JiraTime = Field(default_factory=JiraTime)
    updated: JiraTime = Field(default_factory=JiraTime)
    started: JiraTime = Field(default_factory=JiraTime)
    time_spent: str = EMPTY_STRING
    time_spent_seconds: int = 0

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraWorklog":
        """
        Create a JiraWorklog from a Jira API response.

        Args:
            data: The worklog data from the Jira API
            **kwargs: ``time_codec`` used for the timestamp fields

        Returns:
            A JiraWorklog instance

        Raises:
            JiraDecodeError: If a timestamp does not match the codec layout
        """
        if not data:
            return cls()

        # Handle non-dictionary data by returning a default instance
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        codec = codec_from(kwargs)

        author = None
        if author_data := data.get("author"):
            author = JiraUser.from_api_response(author_data)

        update_author = None
        if update_author_data := data.get("updateAuthor"):
            update_author = JiraUser.from_api_response(update_author_data)

        # Ensure ID is a string
        worklog_id = data.get("id", JIRA_DEFAULT_ID)
        if worklog_id is not None:
            worklog_id = str(worklog_id)

        return cls(
            id=worklog_id,
            self_url=str(data.get("self", EMPTY_STRING)),
            author=author,
            update_author=update_author,
            comment=data.get("comment"),
            created=codec.decode_optional(data.get("created")),
            updated=codec.decode_optional(data.get("updated")),
            started=codec.decode_optional(data.get("started")),
            time_spent=str(data.get("timeSpent", EMPTY_STRING)),
            time_spent_seconds=as_int(data.get("timeSpentSeconds")),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {
            "time_spent": self.time_spent,
            "time_spent_seconds": self.time_spent_seconds,
        }

        if self.author:
            result["author"] = self.author.to_simplified_dict()

        if self.comment:
            result["comment"] = self.comment

        for name in ("started", "created", "updated"):
            value: JiraTime = getattr(self, name)
            if value.is_set():
                result[name] = value.encode()

        return result


class JiraWorklogList(ApiModel):
    """
    Model representing the paged worklogs of one issue.
    """

    start_at: int = 0
    max_results: int = 0
    total: int = 0
    worklogs: list[JiraWorklog] = Field(default_factory=list)
    pagination: JiraPagination | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraWorklogList":
        """Create a JiraWorklogList from a Jira API response."""
        if not data or not isinstance(data, dict):
            return cls()

        worklogs = [
            JiraWorklog.from_api_response(item, **kwargs)
            for item in data.get("worklogs") or []
            if item
        ]
        total = as_int(data.get("total"))
        start_at = as_int(data.get("startAt"))
        max_results = as_int(data.get("maxResults"))

        return cls(
            start_at=start_at,
            max_results=max_results,
            total=total,
            worklogs=worklogs,
            pagination=JiraPagination.from_response(total, start_at, max_results),
        )


class JiraWorklogInput(ApiModel):
    """
    Payload for logging work against an issue.
    """

    time_spent: str
    comment: str | None = None
    started: JiraTime | datetime | None = None

    def to_api_payload(self, time_codec: JiraTimeCodec | None = None) -> dict[str, Any]:
        """Serialize for ``POST /issue/{key}/worklog``."""
        codec = time_codec or JiraTimeCodec()
        payload: dict[str, Any] = {"timeSpent": self.time_spent}
        if self.comment:
            payload["comment"] = self.comment
        if self.started is not None:
            payload["started"] = codec.encode(self.started)
        return payload


class JiraTimesheetEntry(ApiModel):
    """
    A single entry of the raw timesheet report.

    Timestamps are epoch milliseconds, as the timesheet plugin sends them.
    """

    id: int = 0
    comment: str = EMPTY_STRING
    time_spent: int = 0
    author: str = EMPTY_STRING
    author_name: str = EMPTY_STRING
    created: int = 0
    start_date: int = 0
    update_author: str = EMPTY_STRING
    update_author_name: str = EMPTY_STRING
    updated: int = 0

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraTimesheetEntry":
        """Create a JiraTimesheetEntry from a timesheet report entry."""
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            id=as_int(data.get("id")),
            comment=str(data.get("comment") or EMPTY_STRING),
            time_spent=as_int(data.get("timeSpent")),
            author=str(data.get("author") or EMPTY_STRING),
            author_name=str(data.get("authorFullName") or EMPTY_STRING),
            created=as_int(data.get("created")),
            start_date=as_int(data.get("startDate")),
            update_author=str(data.get("updateAuthor") or EMPTY_STRING),
            update_author_name=str(data.get("updateAuthorFullName") or EMPTY_STRING),
            updated=as_int(data.get("updated")),
        )

    @property
    def started_at(self) -> datetime | None:
        return parse_date(self.start_date)


class JiraTimesheetIssue(ApiModel):
    """
    Worklog entries of one issue inside a timesheet report.
    """

    issue_key: str = EMPTY_STRING
    issue_summary: str = EMPTY_STRING
    entries: list[JiraTimesheetEntry] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraTimesheetIssue":
        """Create a JiraTimesheetIssue from a timesheet report item."""
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            issue_key=str(data.get("key", EMPTY_STRING)),
            issue_summary=str(data.get("summary", EMPTY_STRING)),
            entries=[
                JiraTimesheetEntry.from_api_response(entry)
                for entry in data.get("entries") or []
            ],
        )

    @property
    def total_time_spent(self) -> int:
        """Sum of logged seconds across entries."""
        return sum(entry.time_spent for entry in self.entries)


class JiraTimesheet(ApiModel):
    """
    Model representing the raw timesheet report of a user.
    """

    worklog: list[JiraTimesheetIssue] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraTimesheet":
        """Create a JiraTimesheet from a timesheet report response."""
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            worklog=[
                JiraTimesheetIssue.from_api_response(item)
                for item in data.get("worklog") or []
            ]
        )
