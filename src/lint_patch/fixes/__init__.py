"""Quick-fix actions built on the patch engine."""

from .action import FAMILY_NAME, FixAction, FixOutcome, collect_fix_actions, fix_text
from .models import FixSuggestion, LintProblem
from .policy import FixPolicy, allow_all, default_policy, deny_codes

__all__ = [
    "FAMILY_NAME",
    "FixAction",
    "FixOutcome",
    "FixPolicy",
    "FixSuggestion",
    "LintProblem",
    "allow_all",
    "collect_fix_actions",
    "default_policy",
    "deny_codes",
    "fix_text",
]
