"""Tests for the Jira search mixin."""

from urllib.parse import parse_qs, urlsplit

import pytest

from jira_rest_client.exceptions import JiraDecodeError
from tests.fixtures.jira_mocks import MOCK_JIRA_SEARCH_RESPONSE


def _query(mock_session):
    url = mock_session.request.call_args.args[1]
    return parse_qs(urlsplit(url).query)


def test_search_issues(jira_fetcher, mock_session, make_response):
    """Test a JQL search with an explicit window."""
    mock_session.request.return_value = make_response(MOCK_JIRA_SEARCH_RESPONSE)

    result = jira_fetcher.search_issues(
        "project = PROJ", start_at=50, max_results=50, fields=["summary", "status"]
    )

    url = mock_session.request.call_args.args[1]
    assert url.startswith("https://test.atlassian.net/rest/api/latest/search?")
    assert _query(mock_session) == {
        "jql": ["project = PROJ"],
        "startAt": ["50"],
        "maxResults": ["50"],
        "fields": ["summary,status"],
    }

    assert result.total == 120
    assert [issue.key for issue in result.issues] == ["PROJ-123", "PROJ-124"]
    assert result.issues[1].fields.status.name == "Done"
    assert result.pagination.page == 1
    assert result.pagination.page_count == 3
    assert result.pagination.pages == [0, 1, 2]


def test_search_issues_server_defaults(jira_fetcher, mock_session, make_response):
    """Test that unset window arguments are left to the server."""
    mock_session.request.return_value = make_response(MOCK_JIRA_SEARCH_RESPONSE)

    jira_fetcher.search_issues("project = PROJ")

    assert _query(mock_session) == {"jql": ["project = PROJ"]}


def test_search_issues_without_validation(jira_fetcher, mock_session, make_response):
    mock_session.request.return_value = make_response(MOCK_JIRA_SEARCH_RESPONSE)

    jira_fetcher.search_issues("project = PROJ", validate_query=False, expand="names")

    query = _query(mock_session)
    assert query["validateQuery"] == ["false"]
    assert query["expand"] == ["names"]


def test_search_issues_missing_counters(jira_fetcher, mock_session, make_response):
    """Test that a response without counters carries no pagination window."""
    mock_session.request.return_value = make_response({"issues": []})

    result = jira_fetcher.search_issues("project = NONE")

    assert result.total == -1
    assert result.pagination is None


def test_search_issues_empty_result(jira_fetcher, mock_session, make_response):
    mock_session.request.return_value = make_response(
        {"startAt": 0, "maxResults": 50, "total": 0, "issues": []}
    )

    result = jira_fetcher.search_issues("project = NONE")

    assert result.issues == []
    assert result.pagination.page_count == 0
    assert result.pagination.pages == []


def test_search_issues_error_page(jira_fetcher, mock_session, make_response):
    mock_session.request.return_value = make_response(
        "<html>Service Unavailable</html>", status_code=503
    )

    with pytest.raises(JiraDecodeError) as exc_info:
        jira_fetcher.search_issues("project = PROJ")

    assert exc_info.value.raw == b"<html>Service Unavailable</html>"


def test_issues_assigned_to(jira_fetcher, mock_session, make_response):
    mock_session.request.return_value = make_response(MOCK_JIRA_SEARCH_RESPONSE)

    jira_fetcher.issues_assigned_to('fred "the" user', max_results=10)

    query = _query(mock_session)
    assert query["jql"] == ['assignee="fred \\"the\\" user"']
    assert query["maxResults"] == ["10"]
    assert "startAt" not in query


def test_issues_by_raw_jql(jira_fetcher, mock_session, make_response):
    mock_session.request.return_value = make_response(MOCK_JIRA_SEARCH_RESPONSE)

    result = jira_fetcher.issues_by_raw_jql("labels = urgent")

    assert _query(mock_session) == {"jql": ["labels = urgent"]}
    assert len(result.issues) == 2
