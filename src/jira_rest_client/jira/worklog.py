"""Module for Jira timesheet operations."""

import logging
from datetime import date

from ..exceptions import JiraInvalidArgumentError
from ..models.jira import JiraTimesheet
from ..utils.urls import join_url, with_query
from .client import JiraClient

logger = logging.getLogger("jira-rest")

TIMESHEET_DATE_FORMAT = "%Y-%m-%d"


class WorklogMixin(JiraClient):
    """Mixin for the timesheet gadget endpoint.

    See http://www.jiratimesheet.com/wiki/RESTful_endpoint.html
    """

    def get_timesheet(self, username: str, start: date, end: date) -> JiraTimesheet:
        """
        Get the raw timesheet of a user for a date range.

        Args:
            username: The user whose worklogs to report
            start: First day of the range
            end: Last day of the range

        Returns:
            Worklog entries grouped by issue

        Raises:
            JiraInvalidArgumentError: If end is before start
        """
        if end < start:
            raise JiraInvalidArgumentError(
                f"Timesheet end {end.isoformat()} is before start {start.isoformat()}"
            )

        url = with_query(
            join_url(self.config.url, self.config.timesheet_path, "raw-timesheet.json"),
            {
                "targetUser": username,
                "startDate": start.strftime(TIMESHEET_DATE_FORMAT),
                "endDate": end.strftime(TIMESHEET_DATE_FORMAT),
            },
        )
        timesheet = self.request_json("GET", url, JiraTimesheet)
        logger.debug(f"Timesheet for {username} covers {len(timesheet.worklog)} issues")
        return timesheet
