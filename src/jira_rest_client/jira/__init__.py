"""Jira API module for jira_rest_client.

This module provides the Jira client and its resource operations.
"""

from .activity import ActivityMixin
from .client import JiraClient
from .config import JiraConfig
from .decoding import decode_json, decode_xml
from .fields import merge_fields
from .issues import IssuesMixin
from .search import SearchMixin
from .sprints import SprintsMixin
from .users import UsersMixin
from .worklog import WorklogMixin


class JiraFetcher(
    IssuesMixin,
    SearchMixin,
    UsersMixin,
    SprintsMixin,
    WorklogMixin,
    ActivityMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from mixins that provide specific functionality:
    - IssuesMixin: Issue lookup, creation and worklogs
    - SearchMixin: JQL search
    - UsersMixin: User lookup and search
    - SprintsMixin: Sprint listings and reports
    - WorklogMixin: Timesheet reports
    - ActivityMixin: Atom activity stream
    """

    pass


__all__ = [
    "JiraFetcher",
    "JiraConfig",
    "JiraClient",
    "decode_json",
    "decode_xml",
    "merge_fields",
]
