"""Tests for building issue creation fields."""

import pytest

from jira_rest_client.exceptions import JiraValidationError
from jira_rest_client.jira.fields import merge_fields
from jira_rest_client.models.jira import JiraIssueFieldsPayload, JiraTimetracking


@pytest.fixture
def payload():
    return JiraIssueFieldsPayload(
        project_key="TEST", issue_type="Bug", summary="some new issue summary"
    )


def test_merge_fixed_fields(payload):
    """Test the required fields and their wire shapes."""
    fields = merge_fields(payload)

    assert fields == {
        "project": {"key": "TEST"},
        "issuetype": {"name": "Bug"},
        "summary": "some new issue summary",
    }


def test_merge_optional_fields(payload):
    """Test that optional fields appear only when populated."""
    payload.description = "Steps to reproduce"
    payload.parent_key = "TEST-1"
    payload.assignee = "someguy"
    payload.priority = "High"
    payload.labels = ["backend"]
    payload.time_tracking = JiraTimetracking(original_estimate="2d")

    fields = merge_fields(payload)

    assert fields["description"] == "Steps to reproduce"
    assert fields["parent"] == {"key": "TEST-1"}
    assert fields["assignee"] == {"name": "someguy"}
    assert fields["priority"] == {"name": "High"}
    assert fields["labels"] == ["backend"]
    assert fields["timetracking"] == {"originalEstimate": "2d"}


def test_merge_skips_empty_time_tracking(payload):
    payload.time_tracking = JiraTimetracking()
    assert "timetracking" not in merge_fields(payload)


def test_merge_custom_fields(payload):
    """Test that custom ids are prefixed and keep their values."""
    fields = merge_fields(payload, {"100": "a", "200": 2})

    assert fields["customfield_100"] == "a"
    assert fields["customfield_200"] == 2
    assert "100" not in fields


def test_merge_custom_fields_already_prefixed(payload):
    fields = merge_fields(payload, {"customfield_10010": {"value": "Team A"}})

    assert fields["customfield_10010"] == {"value": "Team A"}
    assert "customfield_customfield_10010" not in fields


def test_merge_custom_argument_overrides_payload(payload):
    """Test that explicit custom values win over payload.custom."""
    payload.custom = {"10010": 1, "10011": "custom data"}

    fields = merge_fields(payload, {"10010": 5})

    assert fields["customfield_10010"] == 5
    assert fields["customfield_10011"] == "custom data"


def test_merge_custom_fields_sorted(payload):
    """Test that custom entries follow the fixed ones in id order."""
    fields = merge_fields(payload, {"300": 3, "100": 1, "200": 2})

    assert list(fields)[-3:] == [
        "customfield_100",
        "customfield_200",
        "customfield_300",
    ]


@pytest.mark.parametrize("prefix", ["cf_", "custom_"])
def test_merge_custom_prefix(payload, prefix):
    fields = merge_fields(payload, {"42": True}, prefix=prefix)
    assert fields[f"{prefix}42"] is True
    assert "customfield_42" not in fields


def test_merge_custom_collision(payload):
    """Test that a custom id mapping onto a fixed key is rejected."""
    with pytest.raises(JiraValidationError) as exc_info:
        merge_fields(payload, {"summary": "x"}, prefix="")

    assert exc_info.value.field_name == "summary"


@pytest.mark.parametrize(
    ("overrides", "field_name"),
    [
        ({"issue_type": ""}, "issuetype"),
        ({"project_key": ""}, "project"),
        ({"summary": ""}, "summary"),
        ({"issue_type": "", "summary": ""}, "issuetype"),
    ],
)
def test_merge_missing_required(payload, overrides, field_name):
    """Test that the first missing required field is reported."""
    invalid = payload.model_copy(update=overrides)

    with pytest.raises(JiraValidationError) as exc_info:
        merge_fields(invalid, {"100": "a"})

    assert exc_info.value.field_name == field_name
    assert isinstance(exc_info.value, ValueError)
