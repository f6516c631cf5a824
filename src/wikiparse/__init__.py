"""wikiparse: extract categories, citations, links and plain text from wikitext."""

from .engine import ExtractionEngine, extract_page
from .errors import (
    DocumentReadError,
    DocumentWriteError,
    MissingFieldError,
    PageLoadError,
    WikiParseError,
)
from .loader import load_pages, parse_pages
from .page import ExtractedPage, RawPage
from .scanners import (
    get_scanner,
    list_scanners,
    normalize_text,
    register_scanner,
    scan_anchors,
    scan_categories,
    scan_citations,
)

__all__ = [
    "ExtractionEngine",
    "extract_page",
    "RawPage",
    "ExtractedPage",
    "load_pages",
    "parse_pages",
    "WikiParseError",
    "PageLoadError",
    "MissingFieldError",
    "DocumentReadError",
    "DocumentWriteError",
    "scan_categories",
    "scan_citations",
    "scan_anchors",
    "normalize_text",
    "get_scanner",
    "list_scanners",
    "register_scanner",
]
