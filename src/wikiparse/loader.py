"""Load :class:`RawPage` records from a Special:Export XML document."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from os import PathLike
from typing import IO

from loguru import logger

from .errors import MissingFieldError, PageLoadError
from .page import RawPage

_NAMESPACE = re.compile(r"\{[^}]+\}")


def _strip_namespaces(root: ET.Element) -> ET.Element:
    """Drop ``{http://www.mediawiki.org/xml/export-0.N/}`` prefixes in place."""
    for elem in root.iter():
        if isinstance(elem.tag, str):
            elem.tag = _NAMESPACE.sub("", elem.tag)
    return root


def _field(page: ET.Element, path: str, name: str, index: int) -> str:
    elem = page.find(path)
    if elem is None:
        raise MissingFieldError(name, index)
    return elem.text or ""


def _revision_id(page: ET.Element, index: int) -> str:
    # Flat test files put <id> directly under <page> with no <revision>.
    if page.find("revision/id") is not None:
        return _field(page, "revision/id", "revision id", index)
    return _field(page, ".//id", "revision id", index)


def _pages_from_root(root: ET.Element) -> list[RawPage]:
    _strip_namespaces(root)
    pages: list[RawPage] = []
    # iter() includes the root itself, so a bare <page> document also works.
    for index, elem in enumerate(root.iter("page")):
        pages.append(
            RawPage(
                title=_field(elem, ".//title", "title", index),
                revision_id=_revision_id(elem, index),
                body=_field(elem, ".//text", "text", index),
            )
        )
    return pages


def parse_pages(xml_text: str) -> list[RawPage]:
    """Parse every ``<page>`` element of an export document held in memory.

    Raises:
        PageLoadError: If the document is not well-formed XML.
        MissingFieldError: If a page lacks its title, id or text element.
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        raise PageLoadError(f"Malformed export XML: {exc}") from exc
    return _pages_from_root(root)


def load_pages(source: str | PathLike[str] | IO[bytes]) -> list[RawPage]:
    """Load every ``<page>`` element from an export file path or binary stream.

    Raises:
        PageLoadError: If the file cannot be read or is not well-formed XML.
        MissingFieldError: If a page lacks its title, id or text element.
    """
    try:
        tree = ET.parse(source)
    except ET.ParseError as exc:
        raise PageLoadError(f"Malformed export XML in {source}: {exc}") from exc
    except OSError as exc:
        raise PageLoadError(f"Cannot read {source}: {exc}") from exc

    pages = _pages_from_root(tree.getroot())
    logger.info("Loaded {} page(s) from {}", len(pages), source)
    return pages
