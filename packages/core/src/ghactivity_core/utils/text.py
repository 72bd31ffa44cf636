from __future__ import annotations

TRUNCATE_LENGTH = 32
ELLIPSIS = "..."

_LINE_BREAKS = ("\n", "\r")


def _fits(text: str, max_length: int) -> bool:
    return len(text) <= max_length and not any(b in text for b in _LINE_BREAKS)


def truncate(text: str, max_length: int = TRUNCATE_LENGTH) -> str:
    """Bound ``text`` to ``max_length`` visible characters.

    Cuts at the last whitespace seen before the limit, or at the limit itself
    when there is none. A line break before the limit ends the text early.
    Anything cut gets ``ELLIPSIS`` appended; a trailing ellipsis on text that
    already fits is not counted, so truncating twice is a no-op.
    """
    if max_length < 1:
        raise ValueError(f"max_length must be positive, got {max_length}")

    if text.endswith(ELLIPSIS) and _fits(text[: -len(ELLIPSIS)], max_length):
        return text

    last_space = max_length
    length = 0
    for i, char in enumerate(text):
        if char in _LINE_BREAKS:
            return text[:i] + ELLIPSIS

        if char.isspace():
            last_space = i

        length += 1
        if length > max_length:
            return text[:last_space] + ELLIPSIS

    return text
