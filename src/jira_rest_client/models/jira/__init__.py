"""
Jira data models for the Jira REST client.

This package provides Pydantic models for Jira API data structures,
organized by entity type.
"""

from .activity import (
    AtomCategory,
    AtomEntry,
    AtomLink,
    AtomPerson,
    AtomText,
    JiraActivityFeed,
)
from .agile import JiraSprint, JiraSprintList, JiraSprintReport, JiraTextValue
from .common import (
    JiraEntityRef,
    JiraIssueType,
    JiraPriority,
    JiraProject,
    JiraStatus,
    JiraTimetracking,
    JiraUser,
)
from .issue import (
    JiraChangelog,
    JiraChangelogHistory,
    JiraIssue,
    JiraIssueCreateResponse,
    JiraIssueFields,
)
from .pagination import JiraPagination, compute_pagination
from .payload import JiraIssueFieldsPayload
from .search import JiraSearchResult
from .worklog import (
    JiraTimesheet,
    JiraTimesheetEntry,
    JiraTimesheetIssue,
    JiraWorklog,
    JiraWorklogInput,
    JiraWorklogList,
)

__all__ = [
    # Common models
    "JiraUser",
    "JiraEntityRef",
    "JiraStatus",
    "JiraIssueType",
    "JiraPriority",
    "JiraProject",
    "JiraTimetracking",
    # Issues
    "JiraIssue",
    "JiraIssueFields",
    "JiraIssueFieldsPayload",
    "JiraIssueCreateResponse",
    "JiraChangelog",
    "JiraChangelogHistory",
    "JiraSearchResult",
    "JiraPagination",
    "compute_pagination",
    # Worklogs
    "JiraWorklog",
    "JiraWorklogInput",
    "JiraWorklogList",
    "JiraTimesheet",
    "JiraTimesheetIssue",
    "JiraTimesheetEntry",
    # Agile
    "JiraSprint",
    "JiraSprintList",
    "JiraSprintReport",
    "JiraTextValue",
    # Activity stream
    "JiraActivityFeed",
    "AtomEntry",
    "AtomLink",
    "AtomPerson",
    "AtomText",
    "AtomCategory",
]
