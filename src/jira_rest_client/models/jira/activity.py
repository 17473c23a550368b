"""
Jira activity stream models.

The activity stream is served as an Atom feed. These models are built from
the parsed XML tree through ``from_xml`` rather than from JSON.
"""

import logging
import xml.etree.ElementTree as ET
from datetime import datetime
from typing import Any

from pydantic import Field

from ...exceptions import JiraDecodeError
from ...utils.date import parse_date
from ..base import ApiModel
from ..constants import ATOM_NAMESPACE, EMPTY_STRING

logger = logging.getLogger(__name__)

_NS = f"{{{ATOM_NAMESPACE}}}"


def _text(element: ET.Element | None, tag: str) -> str:
    if element is None:
        return EMPTY_STRING
    child = element.find(f"{_NS}{tag}")
    if child is None or child.text is None:
        return EMPTY_STRING
    return child.text.strip()


def _updated(element: ET.Element) -> datetime | None:
    raw = _text(element, "updated")
    if not raw:
        return None
    try:
        return parse_date(raw)
    except (ValueError, OverflowError) as e:
        raise JiraDecodeError(f"Invalid Atom timestamp {raw!r}", raw=raw) from e


class AtomLink(ApiModel):
    """An Atom ``link`` element."""

    rel: str = EMPTY_STRING
    href: str = EMPTY_STRING

    @classmethod
    def from_xml(cls, element: ET.Element) -> "AtomLink":
        return cls(
            rel=element.get("rel", EMPTY_STRING), href=element.get("href", EMPTY_STRING)
        )


class AtomPerson(ApiModel):
    """An Atom person construct (``author``)."""

    name: str = EMPTY_STRING
    uri: str = EMPTY_STRING
    email: str = EMPTY_STRING
    inner_xml: str = EMPTY_STRING

    @classmethod
    def from_xml(cls, element: ET.Element | None) -> "AtomPerson":
        if element is None:
            return cls()

        inner = (element.text or "") + "".join(
            ET.tostring(child, encoding="unicode") for child in element
        )
        return cls(
            name=_text(element, "name"),
            uri=_text(element, "uri"),
            email=_text(element, "email"),
            inner_xml=inner,
        )


class AtomText(ApiModel):
    """An Atom text construct (``summary``)."""

    type: str = EMPTY_STRING
    body: str = EMPTY_STRING

    @classmethod
    def from_xml(cls, element: ET.Element | None) -> "AtomText":
        if element is None:
            return cls()
        return cls(type=element.get("type", EMPTY_STRING), body=element.text or "")


class AtomCategory(ApiModel):
    """An Atom ``category`` element."""

    term: str = EMPTY_STRING

    @classmethod
    def from_xml(cls, element: ET.Element | None) -> "AtomCategory":
        if element is None:
            return cls()
        return cls(term=element.get("term", EMPTY_STRING))


class AtomEntry(ApiModel):
    """
    Model representing one activity item (an Atom ``entry``).
    """

    title: str = EMPTY_STRING
    id: str = EMPTY_STRING
    links: list[AtomLink] = Field(default_factory=list)
    updated: datetime | None = None
    author: AtomPerson = Field(default_factory=AtomPerson)
    summary: AtomText = Field(default_factory=AtomText)
    category: AtomCategory = Field(default_factory=AtomCategory)

    @classmethod
    def from_xml(cls, element: ET.Element) -> "AtomEntry":
        """
        Create an AtomEntry from an ``entry`` element.

        Raises:
            JiraDecodeError: If ``updated`` is not a valid timestamp
        """
        return cls(
            title=_text(element, "title"),
            id=_text(element, "id"),
            links=[AtomLink.from_xml(link) for link in element.findall(f"{_NS}link")],
            updated=_updated(element),
            author=AtomPerson.from_xml(element.find(f"{_NS}author")),
            summary=AtomText.from_xml(element.find(f"{_NS}summary")),
            category=AtomCategory.from_xml(element.find(f"{_NS}category")),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"title": self.title, "author": self.author.name}
        if self.updated:
            result["updated"] = self.updated.isoformat()
        if self.category.term:
            result["category"] = self.category.term
        return result


class JiraActivityFeed(ApiModel):
    """
    Model representing a Jira activity stream feed.
    """

    title: str = EMPTY_STRING
    id: str = EMPTY_STRING
    links: list[AtomLink] = Field(default_factory=list)
    updated: datetime | None = None
    author: AtomPerson = Field(default_factory=AtomPerson)
    entries: list[AtomEntry] = Field(default_factory=list)

    @classmethod
    def from_xml(cls, root: ET.Element) -> "JiraActivityFeed":
        """
        Create a JiraActivityFeed from the root element of an Atom document.

        Args:
            root: Parsed ``feed`` element

        Returns:
            A JiraActivityFeed instance

        Raises:
            JiraDecodeError: If the root is not an Atom feed or a timestamp is invalid
        """
        if root.tag != f"{_NS}feed":
            raise JiraDecodeError(f"Expected an Atom feed, got <{root.tag}>")

        entries = [AtomEntry.from_xml(entry) for entry in root.findall(f"{_NS}entry")]
        logger.debug(f"Decoded activity feed with {len(entries)} entries")

        return cls(
            title=_text(root, "title"),
            id=_text(root, "id"),
            links=[AtomLink.from_xml(link) for link in root.findall(f"{_NS}link")],
            updated=_updated(root),
            author=AtomPerson.from_xml(root.find(f"{_NS}author")),
            entries=entries,
        )

    def link(self, rel: str = "self") -> str | None:
        """Href of the first link with the given relation."""
        for link in self.links:
            if link.rel == rel:
                return link.href
        return None
