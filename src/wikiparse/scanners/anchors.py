"""Inline link scanner: ``[[Target|display]]`` → ``Target``.

Links that sit inside a brace block (``{{infobox … [[Link]] …}}``) are not
reported. The guard is a raw count of lone ``{`` and ``}`` characters seen
outside a link, so an unbalanced brace earlier in the page shifts it for
the rest of the scan.
"""

from __future__ import annotations

from .capture import collect
from .categories import CATEGORY_PREFIX


def _anchor(content: str) -> str | None:
    if content.startswith(CATEGORY_PREFIX):
        return None
    bar = content.find("|")
    # A leading "|" does not count as a display-text separator.
    if bar > 0:
        return content[:bar]
    return content


def scan_anchors(body: str, *, max_capture: int | None = None) -> tuple[str, ...]:
    """Return link targets from *body* that are not category links."""
    return collect(body, "[", _anchor, brace_gated=True, max_capture=max_capture)
