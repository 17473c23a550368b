"""
Jira issue creation payload.

Holds the fixed fields Jira requires or commonly accepts on issue creation,
plus an open map of deployment-specific custom fields.
"""

from pydantic import Field, JsonValue

from ..base import ApiModel
from ..constants import EMPTY_STRING
from .common import JiraTimetracking, JiraUser


class JiraIssueFieldsPayload(ApiModel):
    """
    Fields for ``POST /issue``.

    ``custom`` maps a custom field id (``10010`` or ``customfield_10010``)
    to any JSON value; it is passed to Jira unchanged.

    Request-only: Jira never returns this shape, so it keeps the base
    ``from_api_response``, which raises NotImplementedError.
    """

    project_key: str = EMPTY_STRING
    issue_type: str = EMPTY_STRING
    summary: str = EMPTY_STRING
    description: str = EMPTY_STRING
    parent_key: str | None = None
    assignee: str | None = None
    priority: str | None = None
    labels: list[str] = Field(default_factory=list)
    time_tracking: JiraTimetracking | None = None
    custom: dict[str, JsonValue] = Field(default_factory=dict)

    def assign_to(self, user: JiraUser) -> None:
        """Assign the issue to a user looked up with ``get_user``."""
        self.assignee = user.name or user.account_id
