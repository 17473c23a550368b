"""Module for Jira activity stream operations."""

import logging

from ..models.jira import JiraActivityFeed
from ..utils.urls import join_url, with_query
from .client import JiraClient

logger = logging.getLogger("jira-rest")


class ActivityMixin(JiraClient):
    """Mixin for the Atom activity stream."""

    def activity(self, url: str) -> JiraActivityFeed:
        """
        Fetch and decode any activity stream URL.

        Args:
            url: Absolute feed URL

        Returns:
            The decoded feed

        Raises:
            JiraDecodeError: If the body is not an Atom feed
        """
        return self.decode_xml(self.execute("GET", url))

    def user_activity(self, username: str) -> JiraActivityFeed:
        """
        Get the activity stream of a user.

        Args:
            username: The user to stream

        Returns:
            The decoded feed
        """
        url = with_query(
            join_url(self.config.url, self.config.activity_path),
            {"streams": f"user IS {username}"},
        )
        return self.activity(url)
