"""Decoding of raw Jira response bodies into typed records.

Callers choose the path per endpoint: REST endpoints use :func:`decode_json`,
the activity stream uses :func:`decode_xml`. Both raise
:class:`~jira_rest_client.exceptions.JiraDecodeError` carrying the original
bytes instead of returning an empty record.
"""

import json
import logging
import xml.etree.ElementTree as ET
from typing import Any, TypeVar

from pydantic import ValidationError

from ..exceptions import JiraDecodeError
from ..models.base import ApiModel
from ..models.jira.activity import JiraActivityFeed
from ..utils.logging import loggable_body

logger = logging.getLogger("jira-rest")

T = TypeVar("T", bound=ApiModel)


def decode_json(
    raw: bytes,
    model: type[T] | None = None,
    *,
    many: bool = False,
    **kwargs: Any,
) -> Any:
    """
    Decode a JSON response body.

    Args:
        raw: Response body
        model: Record type to build; None returns the parsed JSON as-is
        many: Expect a top-level array and return a list of ``model``
        **kwargs: Passed to ``model.from_api_response`` (e.g. ``time_codec``)

    Returns:
        A ``model`` instance, a list of them, or the parsed JSON

    Raises:
        JiraDecodeError: If the body is not valid JSON, has the wrong
            top-level shape, or holds values the model cannot accept
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Malformed JSON response: {e}: {loggable_body(raw, 200)}")
        raise JiraDecodeError(f"Malformed JSON response: {e}", raw=raw) from e

    if model is None:
        return data

    expected = list if many else dict
    if not isinstance(data, expected):
        msg = f"Expected a JSON {'array' if many else 'object'} for {model.__name__}, got {type(data).__name__}"
        logger.error(f"{msg}: {loggable_body(raw, 200)}")
        raise JiraDecodeError(msg, raw=raw)

    try:
        if many:
            return [model.from_api_response(item, **kwargs) for item in data]
        return model.from_api_response(data, **kwargs)
    except JiraDecodeError as e:
        logger.error(f"Could not decode {model.__name__}: {e}")
        raise JiraDecodeError(str(e), raw=raw) from e
    except ValidationError as e:
        logger.error(f"Could not decode {model.__name__}: {e}")
        raise JiraDecodeError(f"Invalid {model.__name__} payload: {e}", raw=raw) from e
    except (TypeError, ValueError, AttributeError) as e:
        logger.error(f"Could not decode {model.__name__}: {e}")
        raise JiraDecodeError(
            f"Unexpected {model.__name__} payload shape: {e}", raw=raw
        ) from e


def decode_xml(raw: bytes, model: type[JiraActivityFeed] = JiraActivityFeed) -> JiraActivityFeed:
    """
    Decode an Atom response body.

    Args:
        raw: Response body
        model: Feed type exposing ``from_xml``

    Returns:
        The decoded feed

    Raises:
        JiraDecodeError: If the body is not well-formed XML or not an Atom feed
    """
    try:
        root = ET.fromstring(raw)
    except ET.ParseError as e:
        logger.error(f"Malformed XML response: {e}: {loggable_body(raw, 200)}")
        raise JiraDecodeError(f"Malformed XML response: {e}", raw=raw) from e

    try:
        return model.from_xml(root)
    except JiraDecodeError as e:
        logger.error(f"Could not decode {model.__name__}: {e}")
        raise JiraDecodeError(str(e), raw=raw) from e
    except ValidationError as e:
        logger.error(f"Could not decode {model.__name__}: {e}")
        raise JiraDecodeError(f"Invalid {model.__name__} payload: {e}", raw=raw) from e
    except (TypeError, ValueError, AttributeError) as e:
        logger.error(f"Could not decode {model.__name__}: {e}")
        raise JiraDecodeError(
            f"Unexpected {model.__name__} payload shape: {e}", raw=raw
        ) from e
