"""Value types consumed and produced by the patch engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class LineSeparator(str, Enum):
    LF = "\n"
    CRLF = "\r\n"
    CR = "\r"

    @classmethod
    def coerce(cls, value: "str | LineSeparator") -> "LineSeparator":
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unsupported line separator {value!r}") from exc


@dataclass(frozen=True, slots=True)
class TextReplacement:
    """Replace ``length`` characters at ``start`` with ``replacement_text``.

    Offsets address the LF-normalized view of the text. Values come from an
    external fix source and are only checked when a batch is applied.
    """

    start: int
    length: int
    replacement_text: Optional[str] = None

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def text(self) -> str:
        return self.replacement_text or ""

    @classmethod
    def from_span(
        cls, start: int, end: int, text: Optional[str] = None
    ) -> "TextReplacement":
        return cls(start=start, length=end - start, replacement_text=text)


@dataclass(frozen=True, slots=True)
class BufferSnapshot:
    """Buffer content and declared separator captured at one version."""

    text: str
    line_separator: LineSeparator = LineSeparator.LF
    version: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "line_separator", LineSeparator.coerce(self.line_separator)
        )

    @property
    def length(self) -> int:
        return len(self.text)


OUT_OF_RANGE = "out-of-range replacement"


@dataclass(frozen=True, slots=True)
class Applied:
    new_text: str
    applied_count: int = 0

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Rejected:
    reason: str
    replacement: Optional[TextReplacement] = None

    @property
    def ok(self) -> bool:
        return False


PatchResult = Union[Applied, Rejected]


__all__ = [
    "Applied",
    "BufferSnapshot",
    "LineSeparator",
    "OUT_OF_RANGE",
    "PatchResult",
    "Rejected",
    "TextReplacement",
]
