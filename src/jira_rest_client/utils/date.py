"""Date and time helpers for Jira payloads.

Jira's REST API writes timestamps as ``2006-01-02T15:04:05.000-0700``:
millisecond precision and a numeric offset without a colon. Some endpoints
quote the value, others emit it bare, so the codec strips one pair of
surrounding quotes before parsing.
"""

import logging
from datetime import datetime, timezone

import dateutil.parser
from pydantic import BaseModel, ConfigDict, field_validator

from ..exceptions import JiraDecodeError

logger = logging.getLogger("jira-rest-client")

JIRA_TIME_LAYOUT = "%Y-%m-%dT%H:%M:%S.%f%z"

# Zero value of a JiraTime; distinct from the Unix epoch.
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def format_time(value: datetime, layout: str = JIRA_TIME_LAYOUT) -> str:
    """Format a datetime with millisecond precision using a strftime layout.

    Naive values are taken as UTC, the same rule decoding applies.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    millis = f"{value.microsecond // 1000:03d}"
    return value.strftime(layout.replace("%f", millis))


class JiraTime(BaseModel):
    """
    A point in time decoded from a Jira timestamp, plus the layout it came from.

    A freshly constructed JiraTime is unset. Use :meth:`is_set` to tell it
    apart from a parsed value, including one that is exactly the Unix epoch.
    """

    model_config = ConfigDict(frozen=True)

    value: datetime = ZERO_TIME
    layout: str = JIRA_TIME_LAYOUT

    @field_validator("value")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)

    def is_set(self) -> bool:
        """Return True if this value was produced by decoding or explicit construction."""
        return self.value != ZERO_TIME

    def encode(self) -> str:
        """Encode using the layout this value was parsed with.

        Raises:
            ValueError: If the value is unset
        """
        if not self.is_set():
            raise ValueError("Cannot encode an unset JiraTime")
        return format_time(self.value, self.layout)

    def __str__(self) -> str:
        return self.encode() if self.is_set() else ""


class JiraTimeCodec:
    """Encode and decode Jira timestamps with a fixed layout.

    The canonical wire encoding is the layout string itself (milliseconds,
    numeric offset); epoch milliseconds are never produced.
    """

    def __init__(self, layout: str = JIRA_TIME_LAYOUT) -> None:
        self.layout = layout

    def decode(self, raw: str | bytes) -> JiraTime:
        """
        Decode a wire timestamp.

        Args:
            raw: The timestamp, optionally wrapped in double quotes

        Returns:
            The decoded JiraTime

        Raises:
            JiraDecodeError: If the value does not match the layout
        """
        if isinstance(raw, bytes):
            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise JiraDecodeError("Timestamp is not valid UTF-8", raw=raw) from e
        else:
            text = str(raw)

        if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
            text = text[1:-1]

        try:
            value = datetime.strptime(text, self.layout)
        except ValueError as e:
            raise JiraDecodeError(
                f"Invalid Jira timestamp {text!r}, expected layout {self.layout}",
                raw=raw,
            ) from e

        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return JiraTime(value=value, layout=self.layout)

    def decode_optional(self, raw: str | bytes | None) -> JiraTime:
        """Decode a timestamp that may be missing; missing values stay unset."""
        if raw is None or raw == "" or raw == b"":
            return JiraTime(layout=self.layout)
        return self.decode(raw)

    def encode(self, value: JiraTime | datetime) -> str:
        """
        Encode a value with this codec's layout.

        Raises:
            ValueError: If the value is an unset JiraTime
        """
        if isinstance(value, JiraTime):
            if not value.is_set():
                raise ValueError("Cannot encode an unset JiraTime")
            value = value.value
        return format_time(value, self.layout)


def parse_date(date_str: str | int | None) -> datetime | None:
    """
    Parse a date string from any format to a datetime object for type consistency.

    The input string `date_str` accepts:
    - None
    - Epoch timestamp (only contains digits and is in milliseconds)
    - Other formats supported by `dateutil.parser` (ISO 8601, RFC 3339, etc.)

    Args:
        date_str: Date string

    Returns:
        Parsed datetime or None if date_str is None / empty string
    """

    if not date_str:
        return None
    if isinstance(date_str, int) or date_str.isdigit():
        return datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
    return dateutil.parser.parse(date_str)
