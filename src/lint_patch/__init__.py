"""Apply linter fix replacements to text buffers, atomically and separator-aware."""

__all__ = [
    "adapters",
    "buffer",
    "fixes",
    "patch",
    "runtime",
    "settings",
]

__version__ = "0.1.0"
