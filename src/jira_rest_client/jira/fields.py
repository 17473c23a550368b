"""Building issue creation payloads from fixed and custom fields."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import JsonValue

from ..exceptions import JiraValidationError
from ..models.constants import CUSTOM_FIELD_PREFIX
from ..models.jira.payload import JiraIssueFieldsPayload

logger = logging.getLogger("jira-rest")


def _custom_key(field_id: str, prefix: str) -> str:
    field_id = str(field_id)
    return field_id if field_id.startswith(prefix) else f"{prefix}{field_id}"


def merge_fields(
    payload: JiraIssueFieldsPayload,
    custom: Mapping[str, JsonValue] | None = None,
    *,
    prefix: str = CUSTOM_FIELD_PREFIX,
) -> dict[str, Any]:
    """
    Merge the fixed issue fields and custom fields into one ``fields`` mapping.

    Required fields are checked before anything is built, so an invalid
    payload never produces a partial mapping.

    Custom ids are namespaced as Jira names them, ``customfield_<id>``.
    Deployments or proxies that expect another namespace (``custom_<id>``,
    say) pass it as ``prefix``.

    Args:
        payload: Fixed fields plus ``payload.custom``
        custom: Extra custom fields; these override ``payload.custom`` on the same id
        prefix: Namespace prepended to custom field ids

    Returns:
        The mapping to send as ``{"fields": ...}``

    Raises:
        JiraValidationError: If issue type, project key or summary is empty,
            or a custom id collides with a fixed field
    """
    if not payload.issue_type:
        raise JiraValidationError("Issue type name is required", field_name="issuetype")
    if not payload.project_key:
        raise JiraValidationError("Project key is required", field_name="project")
    if not payload.summary:
        raise JiraValidationError("Summary is required", field_name="summary")

    fields: dict[str, Any] = {
        "project": {"key": payload.project_key},
        "issuetype": {"name": payload.issue_type},
        "summary": payload.summary,
    }

    if payload.description:
        fields["description"] = payload.description
    if payload.parent_key:
        fields["parent"] = {"key": payload.parent_key}
    if payload.assignee:
        fields["assignee"] = {"name": payload.assignee}
    if payload.priority:
        fields["priority"] = {"name": payload.priority}
    if payload.labels:
        fields["labels"] = list(payload.labels)
    if payload.time_tracking and (estimates := payload.time_tracking.to_api_payload()):
        fields["timetracking"] = estimates

    merged_custom = {**payload.custom, **(custom or {})}
    for field_id in sorted(merged_custom, key=str):
        key = _custom_key(field_id, prefix)
        if key in fields:
            raise JiraValidationError(
                f"Custom field {field_id!r} collides with field {key!r}",
                field_name=key,
            )
        fields[key] = merged_custom[field_id]

    logger.debug(
        f"Built create payload for {payload.project_key} with {len(merged_custom)} custom fields"
    )
    return fields
