"""
Test fixtures for model testing.
"""

from typing import Any

import pytest

from tests.fixtures.jira_mocks import (
    MOCK_JIRA_ISSUE_RESPONSE,
    MOCK_JIRA_SEARCH_RESPONSE,
    MOCK_JIRA_TIMESHEET_RESPONSE,
)


@pytest.fixture
def jira_issue_data() -> dict[str, Any]:
    """Return mock Jira issue data."""
    return MOCK_JIRA_ISSUE_RESPONSE


@pytest.fixture
def jira_search_data() -> dict[str, Any]:
    """Return mock Jira search (JQL) results."""
    return MOCK_JIRA_SEARCH_RESPONSE


@pytest.fixture
def jira_timesheet_data() -> dict[str, Any]:
    """Return mock timesheet report data."""
    return MOCK_JIRA_TIMESHEET_RESPONSE
