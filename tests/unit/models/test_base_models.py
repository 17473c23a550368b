"""
Tests for the base models and utility functions.
"""

from typing import Any

import pytest

from jira_rest_client.models.base import ApiModel, as_int, codec_from
from jira_rest_client.utils.date import JiraTimeCodec


class TestApiModel:
    """Tests for the ApiModel base class."""

    def test_base_from_api_response_not_implemented(self):
        """Test that from_api_response raises NotImplementedError if not overridden."""
        with pytest.raises(NotImplementedError):
            ApiModel.from_api_response({})

    def test_base_to_simplified_dict(self):
        """Test that to_simplified_dict returns a dictionary with non-None values."""

        class TestModel(ApiModel):
            field1: str = "test"
            field2: int = 123
            field3: str | None = None

            @classmethod
            def from_api_response(cls, data: dict[str, Any], **kwargs):
                return cls()

        result = TestModel().to_simplified_dict()

        assert result == {"field1": "test", "field2": 123}


class TestHelpers:
    """Tests for the conversion helpers."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(5, 5), ("42", 42), (None, 0), ("n/a", 0), ([], 0)],
    )
    def test_as_int(self, value, expected):
        assert as_int(value) == expected

    def test_as_int_custom_default(self):
        assert as_int(None, default=-1) == -1

    def test_codec_from(self):
        """Test that a passed codec is used and a default one is built otherwise."""
        codec = JiraTimeCodec("%Y-%m-%d")
        assert codec_from({"time_codec": codec}) is codec
        assert isinstance(codec_from({}), JiraTimeCodec)
        assert codec_from({"time_codec": "bogus"}).layout != "bogus"
