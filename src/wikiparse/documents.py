"""Assemble extracted pages into output XML documents.

Each document has a ``WikipediaPageParseData`` root with one ``page``
element per extracted page::

    <page>
      <title>…</title>
      <rev>…</rev>
      <category>…</category>   (one per token, depending on the kind)
      …
    </page>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable, Mapping
from enum import Enum
from pathlib import Path

from loguru import logger

from .errors import DocumentWriteError
from .page import ExtractedPage

ROOT_TAG = "WikipediaPageParseData"


class DocumentKind(Enum):
    ALL = "all"
    CATEGORIES = "categories"
    CITATIONS = "citations"
    ANCHORS = "anchors"
    TEXT = "text"

    @classmethod
    def parse(cls, name: str) -> DocumentKind:
        """Look up a kind by its value (case-insensitive).

        Raises:
            ValueError: If *name* is not a document kind.
        """
        try:
            return cls(name.lower())
        except ValueError:
            available = ", ".join(kind.value for kind in cls)
            raise ValueError(
                f"Unknown document kind {name!r}. Available kinds: {available}"
            ) from None


def _sub(parent: ET.Element, tag: str, text: str) -> None:
    ET.SubElement(parent, tag).text = text


def _append_tokens(page_elem: ET.Element, page: ExtractedPage, kind: DocumentKind) -> None:
    if kind in (DocumentKind.CATEGORIES, DocumentKind.ALL):
        for category in page.categories:
            _sub(page_elem, "category", category)
    if kind in (DocumentKind.CITATIONS, DocumentKind.ALL):
        for citation in page.citations:
            _sub(page_elem, "citation", citation)
    if kind in (DocumentKind.ANCHORS, DocumentKind.ALL):
        for anchor in page.anchors:
            _sub(page_elem, "anchor", anchor)
    if kind in (DocumentKind.TEXT, DocumentKind.ALL):
        _sub(page_elem, "text", page.text)


def build_document(pages: Iterable[ExtractedPage], kind: DocumentKind) -> ET.Element:
    """Build the document tree holding *kind* tokens for every page."""
    root = ET.Element(ROOT_TAG)
    for page in pages:
        page_elem = ET.SubElement(root, "page")
        _sub(page_elem, "title", page.title)
        _sub(page_elem, "rev", page.revision_id)
        _append_tokens(page_elem, page, kind)
    return root


def write_document(root: ET.Element, path: str | Path) -> Path:
    """Serialize *root* to *path* as UTF-8 with an XML declaration.

    Raises:
        DocumentWriteError: If the directory or the file cannot be written.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        ET.ElementTree(root).write(path, encoding="utf-8", xml_declaration=True)
    except OSError as exc:
        raise DocumentWriteError(f"Cannot write {path}: {exc}") from exc
    return path


def write_documents(
    pages: Iterable[ExtractedPage],
    output_dir: str | Path,
    filenames: Mapping[DocumentKind, str],
    kinds: Iterable[DocumentKind] | None = None,
) -> dict[DocumentKind, Path]:
    """Write one document per kind into *output_dir*.

    Args:
        pages: Extracted pages, written in the given order.
        output_dir: Target directory, created if missing.
        filenames: File name for each kind.
        kinds: Kinds to write. Defaults to every kind.

    Returns:
        Dict mapping each written kind to its path.
    """
    pages = list(pages)
    output_dir = Path(output_dir)
    kinds = list(DocumentKind) if kinds is None else list(kinds)

    written: dict[DocumentKind, Path] = {}
    for kind in kinds:
        path = write_document(build_document(pages, kind), output_dir / filenames[kind])
        logger.info("Wrote {} document with {} page(s) to {}", kind.value, len(pages), path)
        written[kind] = path
    return written
