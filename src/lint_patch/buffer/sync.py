"""Boundary types shared by buffers and host adapters."""

from __future__ import annotations

from typing import Optional, Protocol

from lint_patch.patch import BufferSnapshot, LineSeparator


class EditableBuffer(Protocol):
    """What a fix action needs from a host buffer."""

    @property
    def version(self) -> int: ...

    def get_text(self) -> str: ...

    def get_length(self) -> int: ...

    def get_declared_separator(self) -> LineSeparator: ...

    def snapshot(self) -> BufferSnapshot: ...

    def set_text(
        self, text: str, *, label: str, expected_version: Optional[int] = None
    ) -> object: ...


class BufferValidationError(RuntimeError):
    """Raised when a direct edit addresses offsets outside the buffer."""

    def __init__(
        self, message: str, *, start: int | None = None, end: int | None = None
    ) -> None:
        super().__init__(message)
        self.start = start
        self.end = end


class StaleBufferError(RuntimeError):
    """Raised when a write targets a buffer version that is no longer live."""

    def __init__(self, *, expected: int, actual: int) -> None:
        super().__init__(
            f"Buffer changed since version {expected} (now {actual})"
        )
        self.expected = expected
        self.actual = actual
