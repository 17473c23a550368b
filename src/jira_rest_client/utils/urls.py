"""URL helpers for building Jira resource URLs."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode


def join_url(base: str, *parts: str | int) -> str:
    """Join a base URL and path segments with exactly one slash between them.

    Segments are used verbatim, so callers escape user-supplied values
    (issue keys, usernames) with :func:`quote_segment` first.

    Args:
        base: Base URL, with or without a trailing slash
        *parts: Path segments or prefixes such as ``/rest/api/latest``

    Returns:
        The joined URL
    """
    url = base.rstrip("/")
    for part in parts:
        segment = str(part).strip("/")
        if segment:
            url = f"{url}/{segment}"
    return url


def quote_segment(value: str | int) -> str:
    """Percent-encode a value for use as a single path segment."""
    return quote(str(value), safe="")


def with_query(url: str, params: Mapping[str, Any] | None) -> str:
    """Append query parameters to a URL.

    ``None`` values are skipped and booleans are rendered the way Jira
    expects them (``true``/``false``).

    Args:
        url: URL without a query string
        params: Query parameters

    Returns:
        The URL with an encoded query string, or the URL unchanged
    """
    if not params:
        return url

    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        pairs.append((key, str(value)))

    if not pairs:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(pairs)}"
