"""Tests for the URL utilities."""

import pytest

from jira_rest_client.utils.urls import join_url, quote_segment, with_query


@pytest.mark.parametrize(
    ("base", "parts", "expected"),
    [
        ("https://jira.example.com", ("rest", "api"), "https://jira.example.com/rest/api"),
        (
            "https://jira.example.com/",
            ("/rest/api/latest/", "issue"),
            "https://jira.example.com/rest/api/latest/issue",
        ),
        ("https://jira.example.com/jira", ("", 7), "https://jira.example.com/jira/7"),
        ("https://jira.example.com", (), "https://jira.example.com"),
    ],
)
def test_join_url(base, parts, expected):
    assert join_url(base, *parts) == expected


def test_quote_segment():
    assert quote_segment("PROJ-1") == "PROJ-1"
    assert quote_segment("a/b c") == "a%2Fb%20c"
    assert quote_segment(42) == "42"


def test_with_query():
    url = with_query(
        "https://jira.example.com/search",
        {"jql": "project = A", "startAt": 0, "validateQuery": False, "expand": None},
    )
    assert url == (
        "https://jira.example.com/search?jql=project+%3D+A&startAt=0&validateQuery=false"
    )


def test_with_query_appends_to_existing():
    assert with_query("https://x/a?b=1", {"c": True}) == "https://x/a?b=1&c=true"


@pytest.mark.parametrize("params", [None, {}, {"a": None}])
def test_with_query_nothing_to_add(params):
    assert with_query("https://x/a", params) == "https://x/a"
