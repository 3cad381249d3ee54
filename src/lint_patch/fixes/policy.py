"""Predicates deciding which problems may offer an automatic fix."""

from __future__ import annotations

from typing import Callable, Optional

from lint_patch.settings import FixSettings, get_settings

from .models import LintProblem

FixPolicy = Callable[[LintProblem], bool]


def allow_all() -> FixPolicy:
    def _policy(problem: LintProblem) -> bool:
        del problem
        return True

    return _policy


def deny_codes(*codes: str) -> FixPolicy:
    """Refuse fixes for problems whose code is one of ``codes``."""

    denied = frozenset(code for code in codes if code)

    def _policy(problem: LintProblem) -> bool:
        return problem.code not in denied

    return _policy


def default_policy(settings: Optional[FixSettings] = None) -> FixPolicy:
    return deny_codes(*(settings or get_settings()).denied_codes)


__all__ = ["FixPolicy", "allow_all", "default_policy", "deny_codes"]
