"""Tests for the Jira users mixin."""

import logging
from urllib.parse import parse_qs, urlsplit

from jira_rest_client.models.jira import JiraUser
from tests.fixtures.jira_mocks import MOCK_JIRA_USER_RESPONSE


def test_get_user(jira_fetcher, mock_session, make_response):
    mock_session.request.return_value = make_response(MOCK_JIRA_USER_RESPONSE)

    user = jira_fetcher.get_user("fred")

    assert mock_session.request.call_args.args[1] == (
        "https://test.atlassian.net/rest/api/latest/user?username=fred"
    )
    assert isinstance(user, JiraUser)
    assert user.display_name == "Fred F. User"
    assert user.email == "fred@example.com"
    assert user.time_zone == "Australia/Sydney"
    assert user.avatar_url == "https://example.atlassian.net/avatar/fred48.png"


def test_search_users(jira_fetcher, mock_session, make_response):
    """Test that user search decodes a top-level array."""
    mock_session.request.return_value = make_response(
        [MOCK_JIRA_USER_RESPONSE, {"name": "wilma", "active": False}]
    )

    users = jira_fetcher.search_users("fred", include_inactive=True)

    url = mock_session.request.call_args.args[1]
    assert urlsplit(url).path == "/rest/api/latest/user/search"
    assert parse_qs(urlsplit(url).query) == {
        "username": ["fred"],
        "startAt": ["0"],
        "maxResults": ["50"],
        "includeActive": ["true"],
        "includeInactive": ["true"],
    }
    assert [u.name for u in users] == ["fred", "wilma"]
    assert users[1].active is False


def test_search_users_caps_max_results(jira_fetcher, mock_session, make_response, caplog):
    mock_session.request.return_value = make_response([])

    with caplog.at_level(logging.WARNING, logger="jira-rest"):
        users = jira_fetcher.search_users("f", max_results=5000)

    query = parse_qs(urlsplit(mock_session.request.call_args.args[1]).query)
    assert query["maxResults"] == ["1000"]
    assert users == []
    assert "exceeds 1000" in caplog.text
