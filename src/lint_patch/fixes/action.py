"""Quick-fix action applying one problem's replacements to a buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from lint_patch.buffer import EditableBuffer, StaleBufferError
from lint_patch.patch import Rejected, apply_replacements
from lint_patch.runtime.telemetry import span
from lint_patch.settings import FixSettings, get_settings

from .models import LintProblem
from .policy import FixPolicy, default_policy

FAMILY_NAME = "Fix current error"

Reanalyze = Callable[[EditableBuffer], None]


def fix_text(code: Optional[str]) -> str:
    subject = f"'{code}'" if code else "current error"
    return f"Fix {subject}"


@dataclass(slots=True)
class FixOutcome:
    """Result returned from ``FixAction.invoke``."""

    status: str
    applied: int = 0
    version: Optional[int] = None
    reason: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.status == "applied"


class FixAction:
    """Fix bound to one buffer and the buffer version the problem came from.

    The action only applies while the buffer is still at that version; any
    rejected, stale or empty fix ends as a silent no-op outcome.
    """

    def __init__(
        self,
        buffer: EditableBuffer,
        problem: LintProblem,
        version: int,
        *,
        policy: Optional[FixPolicy] = None,
        reanalyze: Optional[Reanalyze] = None,
        settings: Optional[FixSettings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.problem = problem
        self.version = version
        self.policy = policy or default_policy(self.settings)
        self.reanalyze = reanalyze
        self._buffer = buffer

    @property
    def text(self) -> str:
        return fix_text(self.problem.code)

    @property
    def family_name(self) -> str:
        return FAMILY_NAME

    def is_available(self, buffer: EditableBuffer) -> bool:
        return (
            buffer is self._buffer
            and buffer.version == self.version
            and self.problem.has_fix
            and self.policy(self.problem)
        )

    def invoke(self, buffer: EditableBuffer) -> FixOutcome:
        if not self.is_available(buffer):
            return FixOutcome(status="unavailable", version=buffer.version)

        fix = self.problem.fix
        if not fix:
            return FixOutcome(status="noop", version=buffer.version)

        with span(
            "fixes::invoke",
            component="fixes",
            metadata={"code": self.problem.code or "", "version": self.version},
        ) as handle:
            snapshot = buffer.snapshot()
            result = apply_replacements(snapshot, fix.replacements)
            if isinstance(result, Rejected):
                handle.add_metadata("rejected", result.reason)
                return FixOutcome(
                    status="rejected", version=snapshot.version, reason=result.reason
                )

            if self.settings.skip_unchanged and result.new_text == snapshot.text:
                return FixOutcome(status="noop", version=snapshot.version)

            try:
                buffer.set_text(
                    result.new_text,
                    label=self.text,
                    expected_version=snapshot.version,
                )
            except StaleBufferError as exc:
                handle.add_metadata("stale", exc.actual)
                return FixOutcome(
                    status="stale", version=exc.actual, reason=str(exc)
                )

        if self.reanalyze is not None:
            self.reanalyze(buffer)
        return FixOutcome(
            status="applied", applied=result.applied_count, version=buffer.version
        )


def collect_fix_actions(
    buffer: EditableBuffer,
    problems: Iterable[LintProblem],
    *,
    policy: Optional[FixPolicy] = None,
    reanalyze: Optional[Reanalyze] = None,
    settings: Optional[FixSettings] = None,
) -> List[FixAction]:
    """Build the actions currently offered for ``problems`` on ``buffer``."""

    version = buffer.version
    actions = [
        FixAction(
            buffer,
            problem,
            version,
            policy=policy,
            reanalyze=reanalyze,
            settings=settings,
        )
        for problem in problems
    ]
    return [action for action in actions if action.is_available(buffer)]


__all__ = [
    "FAMILY_NAME",
    "FixAction",
    "FixOutcome",
    "collect_fix_actions",
    "fix_text",
]
