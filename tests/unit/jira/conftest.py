"""Test fixtures for Jira unit tests."""

import os
from unittest.mock import MagicMock, patch

import pytest
from requests import Session

from jira_rest_client.jira import JiraFetcher
from jira_rest_client.jira.client import JiraClient
from jira_rest_client.jira.config import JiraConfig


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "JIRA_URL": "https://test.atlassian.net",
            "JIRA_USERNAME": "test_username",
            "JIRA_PASSWORD": "test_password",
        },
        clear=True,  # Clear existing environment variables
    ):
        yield


@pytest.fixture
def mock_config():
    """Create a JiraConfig instance."""
    return JiraConfig(
        url="https://test.atlassian.net",
        username="test_username",
        password="test_password",
    )


@pytest.fixture
def mock_session():
    """Mock requests.Session; tests set ``request.return_value``."""
    session = MagicMock(spec=Session)
    session.proxies = {}
    return session


@pytest.fixture
def jira_client(mock_config, mock_session):
    """Create a JiraClient instance with a mocked session."""
    return JiraClient(config=mock_config, session=mock_session)


@pytest.fixture
def jira_fetcher(mock_config, mock_session):
    """Create a JiraFetcher instance with a mocked session."""
    return JiraFetcher(config=mock_config, session=mock_session)
