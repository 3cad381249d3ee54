"""Textual host integration; ``app`` holds the runnable demo."""

from .controller import Analyzer, TextualFixAdapter, TextualUIHooks

__all__ = ["Analyzer", "TextualFixAdapter", "TextualUIHooks"]
