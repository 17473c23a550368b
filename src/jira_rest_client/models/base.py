"""
Base model for the Jira REST client's decoded records.

Every record is built from a decoded response through ``from_api_response``
(JSON) or ``from_xml`` (Atom), and can be reduced to a plain dictionary with
``to_simplified_dict``.
"""

from typing import Any, TypeVar

from pydantic import BaseModel

from ..utils.date import JiraTimeCodec

# Type variable for the return type of from_api_response
T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for all API models with common conversion methods.
    """

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Args:
            data: The API response data
            **kwargs: Additional context parameters, such as ``time_codec``

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a simplified dictionary.

        Returns:
            A dictionary with only the populated fields
        """
        return self.model_dump(exclude_none=True)


def codec_from(kwargs: dict[str, Any]) -> JiraTimeCodec:
    """Return the time codec passed to ``from_api_response`` or a default one."""
    codec = kwargs.get("time_codec")
    return codec if isinstance(codec, JiraTimeCodec) else JiraTimeCodec()


def as_int(value: Any, default: int = 0) -> int:
    """Coerce an API value to int, falling back to ``default``."""
    try:
        return int(value) if value is not None else default
    except (ValueError, TypeError):
        return default
