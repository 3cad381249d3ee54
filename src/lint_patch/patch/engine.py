"""Batch text-patch engine.

Replacements are applied right to left: sorted by descending end offset,
then descending start offset. Every edit therefore lands to the right of all
pending ones, and their offsets stay valid without recomputation.

Offsets are relative to LF-only text. Buffers declaring another separator
are normalized to LF for the walk and converted back afterwards.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from lint_patch.runtime import telemetry

from .models import (
    OUT_OF_RANGE,
    Applied,
    BufferSnapshot,
    LineSeparator,
    PatchResult,
    Rejected,
    TextReplacement,
)
from .separators import convert_line_separators, normalize_line_separators


def replacement_sort_key(replacement: TextReplacement) -> Tuple[int, int]:
    return (replacement.start + replacement.length, replacement.start)


def order_replacements(
    replacements: Iterable[TextReplacement],
) -> List[TextReplacement]:
    """Return ``replacements`` in application order (rightmost first)."""

    return sorted(replacements, key=replacement_sort_key, reverse=True)


def _in_range(replacement: TextReplacement, length: int) -> bool:
    return (
        replacement.start >= 0
        and replacement.length >= 0
        and replacement.start + replacement.length <= length
    )


def _working_text(snapshot: BufferSnapshot) -> str:
    if snapshot.line_separator is LineSeparator.LF:
        return snapshot.text
    return normalize_line_separators(snapshot.text)


def _reject(snapshot: BufferSnapshot, replacement: TextReplacement) -> Rejected:
    telemetry.record_event(
        "patch.rejected",
        level="debug",
        data={
            "start": replacement.start,
            "length": replacement.length,
            "version": snapshot.version,
        },
    )
    return Rejected(reason=OUT_OF_RANGE, replacement=replacement)


def validate_replacements(
    snapshot: BufferSnapshot, replacements: Iterable[TextReplacement]
) -> Optional[Rejected]:
    """Dry pass over ``replacements``; return the rejection or ``None``.

    Lengths are tracked arithmetically, so the result matches what
    ``apply_replacements`` would decide without building any text.
    """

    length = len(_working_text(snapshot))
    for replacement in order_replacements(replacements):
        if not _in_range(replacement, length):
            return _reject(snapshot, replacement)
        length += len(replacement.text) - replacement.length
    return None


def apply_replacements(
    snapshot: BufferSnapshot, replacements: Iterable[TextReplacement]
) -> PatchResult:
    """Apply a batch to ``snapshot`` atomically.

    Returns ``Applied`` with the patched text (in the snapshot's separator)
    or ``Rejected`` naming the first out-of-range replacement, in which case
    no edit is reflected anywhere.
    """

    ordered: Sequence[TextReplacement] = order_replacements(replacements)
    if not ordered:
        return Applied(new_text=snapshot.text, applied_count=0)

    working = _working_text(snapshot)
    for replacement in ordered:
        if not _in_range(replacement, len(working)):
            return _reject(snapshot, replacement)
        working = (
            working[: replacement.start]
            + replacement.text
            + working[replacement.end :]
        )

    if snapshot.line_separator is not LineSeparator.LF:
        working = convert_line_separators(working, snapshot.line_separator)
    return Applied(new_text=working, applied_count=len(ordered))


__all__ = [
    "apply_replacements",
    "order_replacements",
    "replacement_sort_key",
    "validate_replacements",
]
