"""Module for Jira issue operations."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import JsonValue

from ..exceptions import JiraClientError, JiraValidationError
from ..models.jira import (
    JiraIssue,
    JiraIssueCreateResponse,
    JiraIssueFieldsPayload,
    JiraWorklog,
    JiraWorklogInput,
    JiraWorklogList,
)
from ..utils.urls import quote_segment, with_query
from .client import JiraClient
from .fields import merge_fields

logger = logging.getLogger("jira-rest")

ADJUST_ESTIMATE_OPTIONS = ("new", "leave", "manual", "auto")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def get_issue(self, issue_key: str, expand: str | None = None) -> JiraIssue:
        """
        Get a Jira issue by key or id.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123') or numeric id
            expand: Optional items to expand (e.g. 'changelog')

        Returns:
            JiraIssue model with issue data

        Raises:
            JiraClientError: If the request or decoding fails
        """
        url = with_query(
            self.api_url("issue", quote_segment(issue_key)), {"expand": expand}
        )
        issue = self.request_json("GET", url, JiraIssue)
        if self.config.debug:
            logger.debug(f"Fetched issue {issue.key}: {issue.to_simplified_dict()}")
        return issue

    def create_issue(
        self,
        payload: JiraIssueFieldsPayload,
        custom: Mapping[str, JsonValue] | None = None,
    ) -> JiraIssueCreateResponse:
        """
        Create a new Jira issue.

        Example:
            payload = JiraIssueFieldsPayload(
                project_key="TEST",
                issue_type="Bug",
                summary="some new issue summary",
                custom={"10010": 1, "10011": "custom data"},
            )
            payload.assign_to(fetcher.get_user("someguy"))
            response = fetcher.create_issue(payload)

        Args:
            payload: Fixed and custom issue fields
            custom: Additional custom fields keyed by field id

        Returns:
            The created issue reference; on rejection, the error details
            Jira reported

        Raises:
            JiraValidationError: If a required field is missing (nothing is sent)
            JiraClientError: If the request or decoding fails
        """
        fields = merge_fields(
            payload, custom, prefix=self.config.custom_field_prefix
        )
        try:
            response = self.request_json(
                "POST", self.api_url("issue"), JiraIssueCreateResponse, {"fields": fields}
            )
        except JiraClientError as e:
            logger.error(f"Error creating {payload.issue_type} in {payload.project_key}: {str(e)}")
            raise

        if not response.ok:
            logger.warning(
                f"Jira rejected issue creation: {response.error_messages} {response.errors}"
            )
        return response

    def log_work(
        self,
        issue_key: str,
        worklog: JiraWorklogInput,
        adjust_estimate: str = "auto",
        new_estimate: str | None = None,
        reduce_by: str | None = None,
    ) -> JiraWorklog:
        """
        Add a worklog entry to an issue.

        Args:
            issue_key: The issue the worklog belongs to
            worklog: Time spent, optional comment and start time
            adjust_estimate: How to update the remaining estimate:
                "new" sets it to ``new_estimate``, "leave" keeps it,
                "manual" reduces it by ``reduce_by``, "auto" (default)
                reduces it by the time spent
            new_estimate: Required with "new" (e.g. "2d")
            reduce_by: Required with "manual" (e.g. "2d")

        Returns:
            The created worklog

        Raises:
            JiraValidationError: If the estimate arguments are inconsistent
            JiraClientError: If the request or decoding fails
        """
        if adjust_estimate not in ADJUST_ESTIMATE_OPTIONS:
            raise JiraValidationError(
                f"adjust_estimate must be one of {', '.join(ADJUST_ESTIMATE_OPTIONS)}",
                field_name="adjustEstimate",
            )
        if adjust_estimate == "new" and not new_estimate:
            raise JiraValidationError(
                "new_estimate is required when adjust_estimate is 'new'",
                field_name="newEstimate",
            )
        if adjust_estimate == "manual" and not reduce_by:
            raise JiraValidationError(
                "reduce_by is required when adjust_estimate is 'manual'",
                field_name="reduceBy",
            )

        params: dict[str, Any] = {"adjustEstimate": adjust_estimate}
        if adjust_estimate == "new":
            params["newEstimate"] = new_estimate
        if adjust_estimate == "manual":
            params["reduceBy"] = reduce_by

        url = with_query(
            self.api_url("issue", quote_segment(issue_key), "worklog"), params
        )
        result = self.request_json(
            "POST", url, JiraWorklog, worklog.to_api_payload(self.time_codec)
        )
        logger.info(f"Logged {worklog.time_spent} on {issue_key}")
        return result

    def get_issue_worklogs(self, issue_key: str) -> JiraWorklogList:
        """
        Get the worklogs of an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            The worklogs with their pagination window
        """
        url = self.api_url("issue", quote_segment(issue_key), "worklog")
        return self.request_json("GET", url, JiraWorklogList)
