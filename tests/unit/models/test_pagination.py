"""
Tests for the pagination window.
"""

import pytest

from jira_rest_client.exceptions import JiraInvalidArgumentError
from jira_rest_client.models.jira import JiraPagination, compute_pagination


class TestJiraPagination:
    """Tests for JiraPagination."""

    def test_empty_result(self):
        """Test that an empty result has no pages."""
        pagination = JiraPagination.compute(0, 0, 50)

        assert pagination.page == 0
        assert pagination.page_count == 0
        assert pagination.pages == []

    @pytest.mark.parametrize(
        ("total", "start_at", "max_results", "page", "page_count"),
        [
            (120, 0, 50, 0, 3),
            (120, 50, 50, 1, 3),
            (120, 100, 50, 2, 3),
            (100, 0, 50, 0, 2),
            (1, 0, 50, 0, 1),
            (10, 3, 5, 1, 2),
        ],
    )
    def test_compute(self, total, start_at, max_results, page, page_count):
        pagination = compute_pagination(total, start_at, max_results)

        assert pagination.page == page
        assert pagination.page_count == page_count
        assert pagination.pages == list(range(page_count))
        assert (pagination.total, pagination.start_at, pagination.max_results) == (
            total,
            start_at,
            max_results,
        )

    def test_window_covers_total(self):
        """Test that page_count pages of max_results cover every item."""
        for total in range(0, 31):
            for max_results in range(1, 11):
                pagination = JiraPagination.compute(total, 0, max_results)
                assert pagination.page_count * max_results >= total
                assert (pagination.page_count - 1) * max_results < max(total, 1)

    @pytest.mark.parametrize("max_results", [0, -1])
    def test_invalid_page_size(self, max_results):
        with pytest.raises(JiraInvalidArgumentError, match="max_results"):
            JiraPagination.compute(10, 0, max_results)

    @pytest.mark.parametrize(("total", "start_at"), [(-1, 0), (10, -5)])
    def test_negative_counters(self, total, start_at):
        with pytest.raises(JiraInvalidArgumentError):
            JiraPagination.compute(total, start_at, 10)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            compute_pagination(1, 0, 0)

    def test_from_response(self):
        """Test that responses without a usable window yield None."""
        assert JiraPagination.from_response(10, 0, 0) is None
        assert JiraPagination.from_response(-1, -1, -1) is None
        assert JiraPagination.from_response(10, 0, 5).page_count == 2
