"""
Common Jira entity models.

This module provides Pydantic models for entities shared across resources:
users, statuses, issue types, priorities, projects and time tracking.
"""

import logging
from typing import Any, TypeVar

from pydantic import Field

from ..base import ApiModel
from ..constants import (
    EMPTY_STRING,
    JIRA_DEFAULT_ID,
    UNASSIGNED,
    UNKNOWN,
)

logger = logging.getLogger(__name__)

_R = TypeVar("_R", bound="JiraEntityRef")


class JiraUser(ApiModel):
    """
    Model representing a Jira user, as returned by ``/user`` or embedded as
    an issue author, assignee or reporter.
    """

    self_url: str = EMPTY_STRING
    name: str = EMPTY_STRING
    key: str = EMPTY_STRING
    account_id: str | None = None
    display_name: str = UNASSIGNED
    email: str | None = None
    active: bool = True
    time_zone: str | None = None
    avatar_urls: dict[str, str] = Field(default_factory=dict)
    expand: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraUser":
        """
        Create a JiraUser from a Jira API response.

        Args:
            data: The user data from the Jira API

        Returns:
            A JiraUser instance
        """
        if not data:
            return cls()

        # Handle non-dictionary data by returning a default instance
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        avatar_urls: dict[str, str] = {}
        if avatars := data.get("avatarUrls"):
            if isinstance(avatars, dict):
                avatar_urls = {str(size): str(url) for size, url in avatars.items()}
            else:
                logger.debug(f"Unexpected avatar data format: {type(avatars)}")

        return cls(
            self_url=str(data.get("self", EMPTY_STRING)),
            name=str(data.get("name", EMPTY_STRING)),
            key=str(data.get("key", EMPTY_STRING)),
            account_id=data.get("accountId"),
            display_name=str(data.get("displayName", UNASSIGNED)),
            email=data.get("emailAddress"),
            active=bool(data.get("active", True)),
            time_zone=data.get("timeZone"),
            avatar_urls=avatar_urls,
            expand=str(data.get("expand", EMPTY_STRING)),
        )

    @property
    def avatar_url(self) -> str | None:
        """The largest available avatar (48x48)."""
        return self.avatar_urls.get("48x48")

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "name": self.name,
            "display_name": self.display_name,
            "email": self.email,
            "avatar_url": self.avatar_url,
        }


class JiraEntityRef(ApiModel):
    """
    An id/self/name reference, the shape Jira uses for statuses, issue types,
    priorities and projects embedded in an issue.
    """

    id: str = JIRA_DEFAULT_ID
    self_url: str = EMPTY_STRING
    name: str = UNKNOWN

    @classmethod
    def _ref_values(cls, data: dict[str, Any]) -> dict[str, Any]:
        # Jira sometimes sends numeric ids
        ref_id = data.get("id")
        return {
            "id": JIRA_DEFAULT_ID if ref_id is None else str(ref_id),
            "self_url": str(data.get("self") or EMPTY_STRING),
            "name": str(data.get("name") or UNKNOWN),
        }

    @classmethod
    def _extra_values(cls, data: dict[str, Any]) -> dict[str, Any]:
        return {}

    @classmethod
    def from_api_response(cls: type[_R], data: dict[str, Any], **kwargs: Any) -> _R:
        """Create the reference from its embedded JSON object."""
        if not data or not isinstance(data, dict):
            return cls()
        return cls(**cls._ref_values(data), **cls._extra_values(data))


class JiraStatus(JiraEntityRef):
    """An issue status."""

    description: str | None = None
    icon_url: str | None = None

    @classmethod
    def _extra_values(cls, data: dict[str, Any]) -> dict[str, Any]:
        return {"description": data.get("description"), "icon_url": data.get("iconUrl")}


class JiraIssueType(JiraEntityRef):
    """An issue type; sub-task types carry ``subtask=True``."""

    description: str | None = None
    icon_url: str | None = None
    subtask: bool = False

    @classmethod
    def _extra_values(cls, data: dict[str, Any]) -> dict[str, Any]:
        return {
            "description": data.get("description"),
            "icon_url": data.get("iconUrl"),
            "subtask": bool(data.get("subtask")),
        }


class JiraPriority(JiraEntityRef):
    """An issue priority."""


class JiraProject(JiraEntityRef):
    """A project reference, identified by ``key`` in write payloads."""

    key: str = EMPTY_STRING
    avatar_urls: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def _extra_values(cls, data: dict[str, Any]) -> dict[str, Any]:
        avatars = data.get("avatarUrls")
        return {
            "key": str(data.get("key") or EMPTY_STRING),
            "avatar_urls": avatars if isinstance(avatars, dict) else {},
        }


class JiraTimetracking(ApiModel):
    """
    Model representing Jira time tracking estimates.

    Used both when decoding an issue and when creating one.
    """

    original_estimate: str | None = None
    remaining_estimate: str | None = None
    time_spent: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraTimetracking":
        """Create a JiraTimetracking from a Jira API response."""
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            original_estimate=data.get("originalEstimate"),
            remaining_estimate=data.get("remainingEstimate"),
            time_spent=data.get("timeSpent"),
        )

    def to_api_payload(self) -> dict[str, str]:
        """Return the populated estimates under their wire names."""
        payload = {}
        if self.original_estimate:
            payload["originalEstimate"] = self.original_estimate
        if self.remaining_estimate:
            payload["remainingEstimate"] = self.remaining_estimate
        return payload
