"""Citation title scanner for ``{{cite …}}`` templates.

The title is located with a plain index computation::

    start = content.find("title") + len("title")
    end = content.find("|", start)

and ``content[start:end]`` is emitted when both indices are positive. The
slice therefore begins right after the ``title`` marker and keeps the
``=`` (``{{cite web|title=Example|url=x}}`` yields ``"=Example"``). When the
marker is missing, ``find`` returns ``-1`` and ``start`` becomes ``4``, so
``{{cite web|url=x}}`` yields ``" web"``. The indexing is literal on purpose,
including that missing-marker offset.
"""

from __future__ import annotations

from .capture import collect

CITATION_PREFIX = "cite"
TITLE_MARKER = "title"
FIELD_SEPARATOR = "|"


def citation_title(content: str) -> str | None:
    """Slice the title out of the content of one ``{{ … }}`` template."""
    if not content.startswith(CITATION_PREFIX):
        return None

    start = content.find(TITLE_MARKER) + len(TITLE_MARKER)
    end = content.find(FIELD_SEPARATOR, start)

    if start > 0 and end > 0:
        return content[start:end]
    return None


def scan_citations(body: str, *, max_capture: int | None = None) -> tuple[str, ...]:
    """Return citation titles from every ``{{cite …}}`` template in *body*."""
    return collect(body, "{", citation_title, max_capture=max_capture)
