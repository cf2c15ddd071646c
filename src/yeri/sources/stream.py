"""Line-oriented command streams (serial consoles, pipes, files)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    """Yield one command token per non-blank line.

    Line terminators and surrounding whitespace are stripped, so ``"0\\r\\n"``
    from a modem link becomes ``"0"``.
    """
    for line in lines:
        token = line.strip()
        if token:
            yield token
