"""Category membership scanner: ``[[Category:Name]]`` → ``Name``."""

from __future__ import annotations

from .capture import collect

CATEGORY_PREFIX = "Category:"


def _category(content: str) -> str | None:
    if content.startswith(CATEGORY_PREFIX):
        return content[len(CATEGORY_PREFIX) :]
    return None


def scan_categories(body: str, *, max_capture: int | None = None) -> tuple[str, ...]:
    """Return the category names linked from *body*, in encounter order.

    Only the exact, case-sensitive ``Category:`` prefix is recognized; sort
    keys after ``|`` are kept as part of the name.
    """
    return collect(body, "[", _category, max_capture=max_capture)
