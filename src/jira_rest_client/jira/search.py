"""Module for Jira search operations."""

import logging

from ..models.jira import JiraSearchResult
from ..utils.urls import with_query
from .client import JiraClient

logger = logging.getLogger("jira-rest")


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(
        self,
        jql: str,
        start_at: int = 0,
        max_results: int = 0,
        validate_query: bool = True,
        fields: list[str] | tuple[str, ...] | str | None = None,
        expand: str | None = None,
    ) -> JiraSearchResult:
        """
        Search for issues using JQL (Jira Query Language).

        Args:
            jql: JQL query string
            start_at: Index of the first issue to return (0-based)
            max_results: Maximum issues to return; 0 leaves the server default (50)
            validate_query: Whether Jira should validate the JQL query
            fields: Fields to return; by default all navigable fields
            expand: Optional items to expand (comma-separated)

        Returns:
            JiraSearchResult with issues, counters and pagination window

        Raises:
            JiraClientError: If the request or decoding fails
        """
        fields_param: str | None
        if isinstance(fields, list | tuple):
            fields_param = ",".join(fields)
        else:
            fields_param = fields or None

        params = {
            "jql": jql,
            "startAt": start_at if start_at > 0 else None,
            "maxResults": max_results if max_results > 0 else None,
            "validateQuery": None if validate_query else False,
            "fields": fields_param,
            "expand": expand or None,
        }
        url = with_query(self.api_url("search"), params)

        result = self.request_json("GET", url, JiraSearchResult)
        logger.debug(
            f"JQL {jql!r} returned {len(result.issues)} of {result.total} issues"
        )
        return result

    def issues_assigned_to(
        self, user: str, max_results: int = 50, start_at: int = 0
    ) -> JiraSearchResult:
        """
        Search issues assigned to a user.

        Args:
            user: Username of the assignee
            max_results: Maximum issues to return
            start_at: Index of the first issue to return (0-based)

        Returns:
            JiraSearchResult with pagination window
        """
        escaped = user.replace("\\", "\\\\").replace('"', '\\"')
        return self.search_issues(
            f'assignee="{escaped}"', start_at=start_at, max_results=max_results
        )

    def issues_by_raw_jql(self, jql: str) -> JiraSearchResult:
        """Run a JQL query with server-side paging defaults."""
        return self.search_issues(jql)
