"""Line separator conversion helpers."""

from __future__ import annotations

import re

from .models import LineSeparator

_ANY_SEPARATOR = re.compile(r"\r\n|\r|\n")


def convert_line_separators(text: str, separator: "str | LineSeparator") -> str:
    """Rewrite every ``\\r\\n``, ``\\r`` and ``\\n`` in ``text`` as ``separator``."""

    target = LineSeparator.coerce(separator).value
    return _ANY_SEPARATOR.sub(target, text)


def normalize_line_separators(text: str) -> str:
    return convert_line_separators(text, LineSeparator.LF)


def detect_line_separator(
    text: str, default: "str | LineSeparator" = LineSeparator.LF
) -> LineSeparator:
    """Return the first separator used in ``text``, or ``default`` if none."""

    match = _ANY_SEPARATOR.search(text)
    if match is None:
        return LineSeparator.coerce(default)
    return LineSeparator(match.group(0))


__all__ = [
    "convert_line_separators",
    "detect_line_separator",
    "normalize_line_separators",
]
