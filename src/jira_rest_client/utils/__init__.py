"""
Utility functions for the Jira REST client.
"""

from .date import (
    JIRA_TIME_LAYOUT,
    ZERO_TIME,
    JiraTime,
    JiraTimeCodec,
    format_time,
    parse_date,
)
from .logging import loggable_body, mask_sensitive, setup_logging
from .urls import join_url, quote_segment, with_query

__all__ = [
    "JIRA_TIME_LAYOUT",
    "ZERO_TIME",
    "JiraTime",
    "JiraTimeCodec",
    "format_time",
    "join_url",
    "loggable_body",
    "mask_sensitive",
    "parse_date",
    "quote_segment",
    "setup_logging",
    "with_query",
]
