"""Module for Jira sprints operations."""

import logging

from ..models.jira import JiraSprintList, JiraSprintReport
from ..utils.urls import with_query
from .client import JiraClient

logger = logging.getLogger("jira-rest")


class SprintsMixin(JiraClient):
    """Mixin for Jira sprints operations (greenhopper API)."""

    def list_sprints(
        self,
        rapid_view_id: int,
        include_history: bool = False,
        include_future: bool = False,
    ) -> JiraSprintList:
        """
        List the sprints of a rapid board.

        Args:
            rapid_view_id: Id of the board
            include_history: Include completed sprints
            include_future: Include sprints that have not started

        Returns:
            JiraSprintList
        """
        url = with_query(
            self.greenhopper_url("sprintquery", rapid_view_id),
            {
                "includeHistoricSprints": include_history,
                "includeFutureSprints": include_future,
            },
        )
        return self.request_json("GET", url, JiraSprintList)

    def get_sprint_report(self, rapid_view_id: int, sprint_id: int) -> JiraSprintReport:
        """
        Get the report of a sprint.

        Args:
            rapid_view_id: Id of the board
            sprint_id: Id of the sprint

        Returns:
            JiraSprintReport with estimate sums
        """
        url = with_query(
            self.greenhopper_url("rapid", "charts", "sprintreport"),
            {"rapidViewId": rapid_view_id, "sprintId": sprint_id},
        )
        return self.request_json("GET", url, JiraSprintReport)
