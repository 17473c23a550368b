"""
Root pytest configuration file for Jira REST client tests.
"""

import json
from typing import Any

import pytest
import requests


def build_response(
    body: Any = b"",
    status_code: int = 200,
    url: str = "https://test.atlassian.net/rest/api/latest",
) -> requests.Response:
    """Build a fully read requests.Response with the given body."""
    if isinstance(body, dict | list):
        body = json.dumps(body).encode("utf-8")
    elif isinstance(body, str):
        body = body.encode("utf-8")

    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response._content = body
    response._content_consumed = True
    return response


@pytest.fixture
def make_response():
    """Factory fixture returning requests.Response objects."""
    return build_response
