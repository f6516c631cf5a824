"""Two-character delimiter capture loop shared by the bracket and brace scanners.

Every scanner that looks for ``[[ … ]]`` or ``{{ … }}`` walks the body the
same way: a two-state machine (idle / buffering) with one character of
lookahead. A fresh opening pair while buffering throws the partial buffer
away and starts again, so delimiters never nest. A capture still open at
end of input is discarded.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

Classifier = Callable[[str], "str | None"]

_CLOSERS = {"[": "]", "{": "}"}


def iter_captures(
    body: str,
    opener: str,
    *,
    brace_gated: bool = False,
    max_capture: int | None = None,
) -> Iterator[str]:
    """Yield the content of every completed ``opener*2 … closer*2`` capture.

    Args:
        body: Raw page text.
        opener: ``"["`` or ``"{"``; the closing character is derived from it.
        brace_gated: Track a brace-depth counter from lone ``{``/``}`` seen
            while idle and skip every character while the depth is above
            zero. Used by the anchor scanner to ignore links nested in
            templates.
        max_capture: Abandon a capture once its buffer grows past this many
            characters. ``None`` means no limit.

    Captures are yielded in the order of their closing delimiter.
    """
    closer = _CLOSERS[opener]
    buffer: list[str] | None = None
    depth = 0

    # The last character is only ever consulted as lookahead.
    last = len(body) - 1
    i = 0
    while i < last:
        current = body[i]
        following = body[i + 1]

        if brace_gated:
            if buffer is None:
                if current == "{":
                    depth += 1
                elif current == "}":
                    depth -= 1
            if depth > 0:
                i += 1
                continue

        if current == opener and following == opener:
            buffer = []
            i += 2
            continue

        if current == closer and following == closer:
            if buffer is not None:
                yield "".join(buffer)
                buffer = None
        elif buffer is not None:
            buffer.append(current)
            if max_capture is not None and len(buffer) > max_capture:
                buffer = None

        i += 1


def collect(
    body: str,
    opener: str,
    classify: Classifier,
    *,
    brace_gated: bool = False,
    max_capture: int | None = None,
) -> tuple[str, ...]:
    """Run :func:`iter_captures` and keep every non-``None`` classification."""
    tokens: list[str] = []
    for content in iter_captures(
        body, opener, brace_gated=brace_gated, max_capture=max_capture
    ):
        token = classify(content)
        if token is not None:
            tokens.append(token)
    return tuple(tokens)
