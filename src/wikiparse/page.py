"""Page records flowing into and out of the extraction engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RawPage:
    """One ``<page>`` from an export file, before extraction."""

    title: str
    revision_id: str
    body: str
    """Raw wikitext of the page's main text field."""


@dataclass(frozen=True, slots=True)
class ExtractedPage:
    """Tokens extracted from a single :class:`RawPage`."""

    title: str
    revision_id: str

    categories: tuple[str, ...]
    """Category names, ``Category:`` prefix stripped."""

    citations: tuple[str, ...]
    """Titles sliced out of ``{{cite …}}`` templates."""

    anchors: tuple[str, ...]
    """Link targets of non-category ``[[…]]`` links."""

    text: str
    """Body reduced to ASCII letters, digits and spaces, brace blocks removed."""

    @property
    def tokens(self) -> list[str]:
        """Whitespace-separated tokens of :attr:`text`, as handed to a tagger."""
        return self.text.split()
