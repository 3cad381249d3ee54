"""UI-agnostic controller feeding fix outcomes to Textual widgets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from lint_patch.buffer import Buffer
from lint_patch.fixes import FixAction, FixOutcome, LintProblem, collect_fix_actions
from lint_patch.fixes.policy import FixPolicy
from lint_patch.settings import FixSettings

Analyzer = Callable[[str], Iterable[LintProblem]]


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[str], None]
    update_status: Callable[[str], None] = _noop
    update_fixes: Callable[[List[str]], None] = _noop
    log: Callable[[str], None] = _noop


class TextualFixAdapter:
    """Offers fixes for one buffer and reports every outcome to the hooks.

    Actions are bound to the buffer version they were collected at. After a
    write, ``analyzer`` (when given) re-lints the new text; without one the
    remaining actions simply go stale.
    """

    def __init__(
        self,
        buffer: Buffer,
        hooks: TextualUIHooks,
        *,
        analyzer: Optional[Analyzer] = None,
        policy: Optional[FixPolicy] = None,
        settings: Optional[FixSettings] = None,
    ) -> None:
        self.buffer = buffer
        self.hooks = hooks
        self.analyzer = analyzer
        self.policy = policy
        self.settings = settings
        self.actions: List[FixAction] = []
        self._refresh_buffer()

    def load_problems(self, problems: Iterable[LintProblem]) -> List[FixAction]:
        self.actions = collect_fix_actions(
            self.buffer,
            problems,
            policy=self.policy,
            reanalyze=self._reanalyze,
            settings=self.settings,
        )
        self._refresh_fixes()
        self._log("problems <-", offered=len(self.actions))
        return self.actions

    def apply(self, index: int) -> FixOutcome:
        if not 0 <= index < len(self.actions):
            outcome = FixOutcome(status="unavailable", version=self.buffer.version)
            self._report("fix", outcome)
            return outcome
        action = self.actions[index]
        outcome = action.invoke(self.buffer)
        self._report(action.text, outcome)
        return outcome

    def apply_next(self) -> FixOutcome:
        return self.apply(0)

    def undo(self) -> bool:
        delta = self.buffer.undo()
        if delta is None:
            self.hooks.update_status("nothing to undo")
            return False
        self.hooks.update_status(f"undo {delta.label}")
        self._refresh_buffer()
        self._reanalyze(self.buffer)
        return True

    def _reanalyze(self, buffer: Buffer) -> None:
        if self.analyzer is None:
            self.actions = [a for a in self.actions if a.is_available(buffer)]
            self._refresh_fixes()
            return
        self.load_problems(self.analyzer(buffer.get_text()))

    def _report(self, label: str, outcome: FixOutcome) -> None:
        if outcome.changed:
            self.hooks.update_status(f"{label}: applied {outcome.applied}")
            self._refresh_buffer()
        else:
            self.hooks.update_status(f"{label}: {outcome.status}")
        self._log(
            "fix ->",
            label=label,
            status=outcome.status,
            version=outcome.version,
            reason=outcome.reason,
        )

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.buffer.get_text())

    def _refresh_fixes(self) -> None:
        self.hooks.update_fixes([action.text for action in self.actions])

    def _log(self, prefix: str, **fields: object) -> None:
        parts = [prefix, f"buffer={self.buffer.name!r}"]
        parts.extend(f"{k}={v!r}" for k, v in fields.items() if v is not None)
        self.hooks.log(" ".join(parts))


__all__ = ["Analyzer", "TextualFixAdapter", "TextualUIHooks"]
