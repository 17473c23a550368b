"""
Pydantic models for Jira API responses.

This package provides typed records decoded from Jira's REST API and
activity stream, plus the payload models used for write calls.
"""

# Re-export models for easier imports
from .base import ApiModel
from .constants import (  # noqa: F401 - Keep constants available
    CUSTOM_FIELD_PREFIX,
    EMPTY_STRING,
    JIRA_DEFAULT_ID,
)
from .jira import (
    JiraActivityFeed,
    JiraIssue,
    JiraIssueCreateResponse,
    JiraIssueFieldsPayload,
    JiraPagination,
    JiraSearchResult,
    JiraSprint,
    JiraSprintList,
    JiraSprintReport,
    JiraTimesheet,
    JiraUser,
    JiraWorklog,
    JiraWorklogInput,
    JiraWorklogList,
)

__all__ = [
    "ApiModel",
    "JiraActivityFeed",
    "JiraIssue",
    "JiraIssueCreateResponse",
    "JiraIssueFieldsPayload",
    "JiraPagination",
    "JiraSearchResult",
    "JiraSprint",
    "JiraSprintList",
    "JiraSprintReport",
    "JiraTimesheet",
    "JiraUser",
    "JiraWorklog",
    "JiraWorklogInput",
    "JiraWorklogList",
]
