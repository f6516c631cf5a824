"""Plain-text normalization ahead of whitespace tokenization and tagging."""

from __future__ import annotations

import string

RETAINED_CHARACTERS = frozenset(string.ascii_letters + string.digits + " ")


def normalize_text(body: str, *, max_capture: int | None = None) -> str:
    """Strip brace blocks and everything but ASCII letters, digits and spaces.

    A signed brace-depth counter is updated on every ``{`` and ``}``; while
    it is above zero characters are dropped. Unmatched closers can drive the
    counter negative, which suppresses nothing. No characters are ever
    substituted, so removing ``{{…}}`` between two spaces leaves both spaces.

    ``max_capture`` is accepted so all scanners share one call signature;
    the normalizer emits continuously and has no buffer to bound.
    """
    retained: list[str] = []
    depth = 0

    for ch in body:
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        if depth > 0:
            continue
        if ch in RETAINED_CHARACTERS:
            retained.append(ch)

    return "".join(retained)
