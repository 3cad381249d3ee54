"""Pure range-patching over opaque text."""

from .engine import (
    apply_replacements,
    order_replacements,
    replacement_sort_key,
    validate_replacements,
)
from .models import (
    OUT_OF_RANGE,
    Applied,
    BufferSnapshot,
    LineSeparator,
    PatchResult,
    Rejected,
    TextReplacement,
)
from .separators import (
    convert_line_separators,
    detect_line_separator,
    normalize_line_separators,
)

__all__ = [
    "Applied",
    "BufferSnapshot",
    "LineSeparator",
    "OUT_OF_RANGE",
    "PatchResult",
    "Rejected",
    "TextReplacement",
    "apply_replacements",
    "convert_line_separators",
    "detect_line_separator",
    "normalize_line_separators",
    "order_replacements",
    "replacement_sort_key",
    "validate_replacements",
]
