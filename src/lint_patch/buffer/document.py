"""Versioned text storage for lint_patch buffers."""

from __future__ import annotations

from dataclasses import dataclass

from lint_patch.patch import BufferSnapshot, LineSeparator, detect_line_separator


@dataclass(frozen=True, slots=True)
class BufferDocument:
    """Immutable text plus its declared separator and version.

    Every change goes through ``replace_text`` which returns a new document
    with the version bumped, so a captured version identifies one exact text.
    """

    text: str = ""
    line_separator: LineSeparator = LineSeparator.LF
    version: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "line_separator", LineSeparator.coerce(self.line_separator)
        )

    @classmethod
    def from_text(
        cls, text: str, *, line_separator: "str | LineSeparator | None" = None
    ) -> "BufferDocument":
        separator = (
            detect_line_separator(text)
            if line_separator is None
            else LineSeparator.coerce(line_separator)
        )
        return cls(text=text, line_separator=separator, version=0)

    def replace_text(self, text: str) -> "BufferDocument":
        """Return a document holding ``text`` at the next version."""

        return BufferDocument(
            text=text, line_separator=self.line_separator, version=self.version + 1
        )

    def snapshot(self) -> BufferSnapshot:
        return BufferSnapshot(
            text=self.text, line_separator=self.line_separator, version=self.version
        )

    @property
    def length(self) -> int:
        return len(self.text)
