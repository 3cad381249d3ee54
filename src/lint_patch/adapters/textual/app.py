"""Textual demo that applies stored lint fixes to a file."""

from __future__ import annotations

import argparse
import json
import os
from dataclasses import dataclass
from typing import List, Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use lint_patch.adapters.textual.app"
    ) from exc

from lint_patch.buffer import Buffer
from lint_patch.fixes import LintProblem
from lint_patch.runtime import telemetry

from .controller import TextualFixAdapter, TextualUIHooks


def read_source(path: str) -> str:
    # keep the file's own separators; the buffer detects and declares them
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def load_problems(path: str) -> List[LintProblem]:
    """Read ``[{"code", "message", "fix": [{"start", "length", "text"}]}]``."""

    with open(path, encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, list):
        raise ValueError(f"{path}: expected a JSON list of problems")
    return [LintProblem.from_dict(item) for item in payload]


@dataclass
class UIState:
    buffer_text: str = ""
    status_text: str = ""
    fixes: tuple[str, ...] = ()


class LintPatchApp(App[None]):
    """Shows a file, the fixes offered for it, and applies them on demand."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		width: 3fr;
		border: round $accent;
		padding: 0 1;
		overflow: auto;
	}

	#fix-list {
		width: 1fr;
		border: round $secondary;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("f", "apply_fix", "Apply fix"),
        ("u", "undo", "Undo"),
        ("ctrl+s", "save", "Save"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, source_path: str, problems_path: Optional[str]) -> None:
        super().__init__()
        self._state = UIState()
        self._source_path = source_path
        self._problems_path = problems_path
        self.adapter: TextualFixAdapter | None = None
        self._buffer_widget: Static | None = None
        self._fixes_widget: Static | None = None
        self._status_widget: Static | None = None
        self._logger = telemetry.get_logger("lint_patch.demo")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        with Horizontal():
            self._buffer_widget = Static("", id="buffer-view", markup=False)
            yield self._buffer_widget
            self._fixes_widget = Static("", id="fix-list", markup=False)
            yield self._fixes_widget
        self._status_widget = Static("", id="status-line", markup=False)
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        buffer = Buffer.from_text(
            read_source(self._source_path), name=os.path.basename(self._source_path)
        )
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            update_fixes=self._update_fixes,
            log=self._logger.debug,
        )
        self.adapter = TextualFixAdapter(buffer, hooks)
        if self._problems_path:
            self.adapter.load_problems(load_problems(self._problems_path))
        self._update_status(f"{len(self._state.fixes)} fix(es) offered")

    def action_apply_fix(self) -> None:
        if self.adapter:
            self.adapter.apply_next()

    def action_undo(self) -> None:
        if self.adapter:
            self.adapter.undo()

    def action_save(self) -> None:
        if not self.adapter:
            return
        with open(self._source_path, "w", encoding="utf-8", newline="") as handle:
            handle.write(self.adapter.buffer.get_text())
        self._update_status(f"saved {self._source_path}")

    def _update_buffer(self, text: str) -> None:
        self._state.buffer_text = text
        if self._buffer_widget:
            # show separators as LF so CR-only files still render line by line
            self._buffer_widget.update(text.replace("\r\n", "\n").replace("\r", "\n"))

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _update_fixes(self, fixes: List[str]) -> None:
        self._state.fixes = tuple(fixes)
        if self._fixes_widget:
            body = "\n".join(f"{i + 1}. {text}" for i, text in enumerate(fixes))
            self._fixes_widget.update(body or "no fixes")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Apply stored lint fixes to a file.")
    parser.add_argument("source", help="File to patch")
    parser.add_argument(
        "--problems",
        default=os.environ.get("LINT_PATCH_PROBLEMS"),
        help="JSON file listing problems and their fixes",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "performance"),
        default=None,
        help="telelog preset to use instead of LINT_PATCH_* variables",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    app = LintPatchApp(source_path=args.source, problems_path=args.problems)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
