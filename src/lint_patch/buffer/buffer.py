"""Editable buffer façade combining a versioned document with undo history."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional

from lint_patch.patch import BufferSnapshot, LineSeparator
from lint_patch.runtime import telemetry

from .document import BufferDocument
from .sync import BufferValidationError, StaleBufferError
from .undo import UndoEntry, UndoTimeline


@dataclass(slots=True)
class BufferDelta:
    version: int
    text: str
    label: str


class Buffer:
    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        undo: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.undo_timeline = undo or UndoTimeline()

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        name: str = "default",
        line_separator: "str | LineSeparator | None" = None,
    ) -> "Buffer":
        return cls(
            name=name,
            document=BufferDocument.from_text(text, line_separator=line_separator),
        )

    @property
    def version(self) -> int:
        return self.document.version

    def get_text(self) -> str:
        return self.document.text

    def get_length(self) -> int:
        return self.document.length

    def get_declared_separator(self) -> LineSeparator:
        return self.document.line_separator

    def snapshot(self) -> BufferSnapshot:
        return self.document.snapshot()

    def set_text(
        self, text: str, *, label: str, expected_version: Optional[int] = None
    ) -> BufferDelta:
        """Replace the whole text as one undoable step.

        With ``expected_version`` the write is refused (``StaleBufferError``)
        if the buffer moved on since that version was captured.
        """

        if expected_version is not None and expected_version != self.version:
            raise StaleBufferError(expected=expected_version, actual=self.version)
        with Transaction(self, label) as tx:
            tx.commit(text)
        return BufferDelta(version=self.version, text=self.get_text(), label=label)

    def replace_range(self, start: int, end: int, text: str, *, label: str) -> BufferDelta:
        if start < 0 or end < start or end > self.get_length():
            raise BufferValidationError(
                f"Range [{start}, {end}) outside buffer of length {self.get_length()}",
                start=start,
                end=end,
            )
        current = self.get_text()
        return self.set_text(current[:start] + text + current[end:], label=label)

    def undo(self) -> Optional[BufferDelta]:
        entry = self.undo_timeline.undo()
        if entry is None:
            return None
        self.document = self.document.replace_text(entry.before_text)
        return BufferDelta(version=self.version, text=self.get_text(), label=entry.label)

    def redo(self) -> Optional[BufferDelta]:
        entry = self.undo_timeline.redo()
        if entry is None:
            return None
        self.document = self.document.replace_text(entry.after_text)
        return BufferDelta(version=self.version, text=self.get_text(), label=entry.label)


class Transaction(AbstractContextManager["Transaction"]):
    """Groups a buffer write into one telemetry span and one undo entry.

    Nothing touches the buffer until ``commit``; leaving the block through an
    exception before that point keeps the previous document.
    """

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self.committed = False
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name, "version": self.buffer.version},
        )
        self._span_cm.__enter__()
        return self

    def commit(self, after_text: str) -> None:
        if self.committed:
            raise RuntimeError(f"Transaction '{self.label}' already committed")
        before = self.buffer.document
        self.buffer.document = before.replace_text(after_text)
        self.buffer.undo_timeline.push(
            UndoEntry(
                label=self.label,
                before_text=before.text,
                after_text=after_text,
                version_before=before.version,
                version_after=self.buffer.version,
            )
        )
        self.committed = True

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
