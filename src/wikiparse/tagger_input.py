"""Turn written output documents into plain-text tagger input files.

Each document written by :mod:`wikiparse.documents` is read back and its
token elements are written to a ``.txt`` file, one entry per line, ready
for a whitespace-splitting part-of-speech tagger. Title and revision
elements are not copied.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable, Mapping
from pathlib import Path

from loguru import logger

from .documents import DocumentKind
from .errors import DocumentReadError, DocumentWriteError

# Element tags carried into the text file for each kind, in document order.
TOKEN_TAGS: dict[DocumentKind, tuple[str, ...]] = {
    DocumentKind.CATEGORIES: ("category",),
    DocumentKind.CITATIONS: ("citation",),
    DocumentKind.ANCHORS: ("anchor",),
    DocumentKind.TEXT: ("text",),
    DocumentKind.ALL: ("category", "citation", "anchor", "text"),
}


def read_document(path: str | Path, kind: DocumentKind) -> list[tuple[str, ...]]:
    """Read the token strings of every page in an output document.

    Returns:
        One tuple per ``<page>``, holding the text of its *kind* elements in
        document order. Empty elements give ``""``.

    Raises:
        DocumentReadError: If the file cannot be read or is not well-formed.
    """
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise DocumentReadError(f"Malformed document {path}: {exc}") from exc
    except OSError as exc:
        raise DocumentReadError(f"Cannot read {path}: {exc}") from exc

    tags = TOKEN_TAGS[kind]
    return [
        tuple(child.text or "" for child in page if child.tag in tags)
        for page in root.iter("page")
    ]


def write_text_file(pages: Iterable[tuple[str, ...]], path: str | Path) -> Path:
    """Write every non-empty token on its own line.

    Raises:
        DocumentWriteError: If the directory or the file cannot be written.
    """
    path = Path(path)
    lines = [token for tokens in pages for token in tokens if token]
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as fh:
            for line in lines:
                fh.write(line + "\n")
    except OSError as exc:
        raise DocumentWriteError(f"Cannot write {path}: {exc}") from exc
    return path


def write_tagger_inputs(
    documents: Mapping[DocumentKind, Path],
    output_dir: str | Path,
    filenames: Mapping[DocumentKind, str],
) -> dict[DocumentKind, Path]:
    """Convert each written document into its tagger input file.

    Args:
        documents: Paths of the written documents, keyed by kind.
        output_dir: Target directory, created if missing.
        filenames: Text file name for each kind.

    Returns:
        Dict mapping each kind to the text file written for it.
    """
    output_dir = Path(output_dir)
    written: dict[DocumentKind, Path] = {}
    for kind, document in documents.items():
        pages = read_document(document, kind)
        path = write_text_file(pages, output_dir / filenames[kind])
        logger.info("Wrote {} tagger input for {} page(s) to {}", kind.value, len(pages), path)
        written[kind] = path
    return written
