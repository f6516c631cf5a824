"""Extraction engine: fans a page body out to every scanner.

The four scanners read the same immutable body and share no state, so one
page is a sequence of independent calls and many pages can be processed on
a thread pool without any locking.
"""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from loguru import logger

from .page import ExtractedPage, RawPage
from .scanners import get_scanner


class ExtractionEngine:
    """Turn :class:`RawPage` records into :class:`ExtractedPage` records."""

    def __init__(self, max_capture: int | None = None, workers: int = 1) -> None:
        """Initialize the engine.

        Args:
            max_capture: Upper bound on the length of a single ``[[…]]`` or
                ``{{…}}`` capture; longer captures are abandoned. ``None``
                disables the guard.
            workers: Default thread count for :meth:`extract_many`.
        """
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.max_capture = max_capture
        self.workers = workers

    def _run(self, name: str, body: str):
        return get_scanner(name)(body, max_capture=self.max_capture)

    def extract(self, page: RawPage) -> ExtractedPage:
        """Run the category, citation, anchor and text scanners over one page."""
        body = page.body
        extracted = ExtractedPage(
            title=page.title,
            revision_id=page.revision_id,
            categories=self._run("categories", body),
            citations=self._run("citations", body),
            anchors=self._run("anchors", body),
            text=self._run("text", body),
        )
        logger.debug(
            "Extracted {!r} (rev {}): {} categories, {} citations, {} anchors",
            page.title,
            page.revision_id,
            len(extracted.categories),
            len(extracted.citations),
            len(extracted.anchors),
        )
        return extracted

    def extract_many(
        self, pages: Iterable[RawPage], workers: int | None = None
    ) -> list[ExtractedPage]:
        """Extract every page, preserving input order.

        With more than one worker, pages are extracted on a
        ``ThreadPoolExecutor``.
        """
        pages = list(pages)
        workers = workers or self.workers

        if workers == 1 or len(pages) < 2:
            return [self.extract(page) for page in pages]

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="extract") as pool:
            return list(pool.map(self.extract, pages))


_default_engine = ExtractionEngine()


def extract_page(page: RawPage) -> ExtractedPage:
    """Extract *page* with a default, unbounded engine."""
    return _default_engine.extract(page)
