"""Scanner registry.

Scanners are registered at import time and looked up by name. Each one is a
pure function ``scanner(body, *, max_capture=None)`` returning either a
tuple of tokens or, for the text normalizer, a single string.
"""

from collections.abc import Callable

from .anchors import scan_anchors
from .capture import collect, iter_captures
from .categories import scan_categories
from .citations import citation_title, scan_citations
from .text import normalize_text

Scanner = Callable[..., "tuple[str, ...] | str"]

_REGISTRY: dict[str, Scanner] = {}


def register_scanner(name: str, scanner: Scanner) -> Scanner:
    """Register *scanner* under *name*, replacing any previous entry."""
    _REGISTRY[name] = scanner
    return scanner


def get_scanner(name: str) -> Scanner:
    """Look up a registered scanner by name.

    Raises:
        ValueError: If the scanner name is not registered.
    """
    if name not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY.keys()))
        raise ValueError(f"Unknown scanner {name!r}. Available scanners: {available}")
    return _REGISTRY[name]


def list_scanners() -> list[str]:
    """Return sorted list of registered scanner names."""
    return sorted(_REGISTRY.keys())


register_scanner("categories", scan_categories)
register_scanner("citations", scan_citations)
register_scanner("anchors", scan_anchors)
register_scanner("text", normalize_text)

__all__ = [
    "Scanner",
    "register_scanner",
    "get_scanner",
    "list_scanners",
    "iter_captures",
    "collect",
    "scan_categories",
    "scan_citations",
    "citation_title",
    "scan_anchors",
    "normalize_text",
]
