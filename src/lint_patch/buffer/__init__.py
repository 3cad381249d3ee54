"""Versioned, undoable text buffers."""

from .buffer import Buffer, BufferDelta, Transaction
from .document import BufferDocument
from .sync import BufferValidationError, EditableBuffer, StaleBufferError
from .undo import UndoEntry, UndoTimeline

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferDocument",
    "BufferValidationError",
    "EditableBuffer",
    "StaleBufferError",
    "Transaction",
    "UndoEntry",
    "UndoTimeline",
]
