"""Problems reported by a linter and the fixes attached to them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from lint_patch.patch import TextReplacement


@dataclass(frozen=True, slots=True)
class FixSuggestion:
    """Replacements a linter proposes for one problem."""

    replacements: tuple[TextReplacement, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "replacements", tuple(self.replacements))

    def __bool__(self) -> bool:
        return bool(self.replacements)

    @classmethod
    def of(cls, *replacements: TextReplacement) -> "FixSuggestion":
        return cls(replacements=replacements)

    @classmethod
    def from_dicts(cls, items: Iterable[Mapping[str, Any]]) -> "FixSuggestion":
        """Build from ``{"start", "length", "text"}`` mappings."""

        return cls(
            replacements=tuple(
                TextReplacement(
                    start=int(item["start"]),
                    length=int(item.get("length", 0)),
                    replacement_text=item.get("text"),
                )
                for item in items
            )
        )


@dataclass(frozen=True, slots=True)
class LintProblem:
    code: Optional[str]
    message: str = ""
    fix: Optional[FixSuggestion] = None
    line: Optional[int] = None
    column: Optional[int] = None

    @property
    def has_fix(self) -> bool:
        return self.fix is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LintProblem":
        raw_fix = data.get("fix")
        return cls(
            code=data.get("code"),
            message=str(data.get("message", "")),
            fix=None if raw_fix is None else FixSuggestion.from_dicts(raw_fix),
            line=data.get("line"),
            column=data.get("column"),
        )


__all__ = ["FixSuggestion", "LintProblem"]
