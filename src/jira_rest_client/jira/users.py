"""Module for Jira user operations."""

import logging

from ..models.jira.common import JiraUser
from ..utils.urls import with_query
from .client import JiraClient

logger = logging.getLogger("jira-rest")

# Jira truncates user searches above this page size
MAX_USER_RESULTS = 1000


class UsersMixin(JiraClient):
    """Mixin for Jira user operations."""

    def get_user(self, username: str) -> JiraUser:
        """
        Get a user by username. This resource cannot be accessed anonymously.

        Args:
            username: The username

        Returns:
            The user
        """
        url = with_query(self.api_url("user"), {"username": username})
        return self.request_json("GET", url, JiraUser)

    def search_users(
        self,
        username: str,
        start_at: int = 0,
        max_results: int = 50,
        include_active: bool = True,
        include_inactive: bool = False,
    ) -> list[JiraUser]:
        """
        Search users whose username, name or e-mail address match a query.

        Args:
            username: Query string
            start_at: Index of the first user to return (0-based)
            max_results: Maximum users to return; values above 1000 are capped
            include_active: Include active users
            include_inactive: Include inactive users

        Returns:
            Matching users
        """
        if max_results > MAX_USER_RESULTS:
            logger.warning(
                f"max_results {max_results} exceeds {MAX_USER_RESULTS}, results will be truncated"
            )
            max_results = MAX_USER_RESULTS

        url = with_query(
            self.api_url("user", "search"),
            {
                "username": username,
                "startAt": start_at,
                "maxResults": max_results,
                "includeActive": include_active,
                "includeInactive": include_inactive,
            },
        )
        return self.request_json("GET", url, JiraUser, many=True)
