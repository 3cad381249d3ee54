from __future__ import annotations

from typing import List

from lint_patch.adapters.textual import TextualFixAdapter, TextualUIHooks
from lint_patch.buffer import Buffer
from lint_patch.fixes import FixSuggestion, LintProblem
from lint_patch.patch import TextReplacement
from lint_patch.settings import FixSettings

SOURCE = "let a = 'x'\nlet b = 'y'\n"


def quote_problems(text: str) -> List[LintProblem]:
    """Tiny analyzer: one problem per single-quoted character."""

    problems = []
    index = text.find("'")
    while index != -1:
        problems.append(
            LintProblem(
                code="quotes",
                fix=FixSuggestion.of(TextReplacement(index, 3, f'"{text[index + 1]}"')),
            )
        )
        index = text.find("'", index + 3)
    return problems


def make_adapter(**kwargs):
    buffer = Buffer.from_text(SOURCE, name="demo.ts")
    recorded = {"buffer": [], "status": [], "fixes": [], "log": []}
    hooks = TextualUIHooks(
        update_buffer=recorded["buffer"].append,
        update_status=recorded["status"].append,
        update_fixes=recorded["fixes"].append,
        log=recorded["log"].append,
    )
    adapter = TextualFixAdapter(buffer, hooks, settings=FixSettings(), **kwargs)
    return adapter, recorded


def test_adapter_pushes_initial_buffer_and_offered_fixes() -> None:
    adapter, recorded = make_adapter()

    adapter.load_problems(quote_problems(SOURCE))

    assert recorded["buffer"] == [SOURCE]
    assert recorded["fixes"][-1] == ["Fix 'quotes'", "Fix 'quotes'"]
    assert any(line.startswith("problems <-") for line in recorded["log"])


def test_apply_without_analyzer_drops_stale_fixes() -> None:
    adapter, recorded = make_adapter()
    adapter.load_problems(quote_problems(SOURCE))

    outcome = adapter.apply_next()

    assert outcome.status == "applied"
    assert recorded["buffer"][-1] == "let a = \"x\"\nlet b = 'y'\n"
    assert recorded["status"][-1] == "Fix 'quotes': applied 1"
    assert adapter.actions == []
    assert recorded["fixes"][-1] == []


def test_apply_with_analyzer_offers_fresh_fixes() -> None:
    adapter, recorded = make_adapter(analyzer=quote_problems)
    adapter.load_problems(quote_problems(SOURCE))

    adapter.apply_next()
    adapter.apply_next()

    assert adapter.buffer.get_text() == 'let a = "x"\nlet b = "y"\n'
    assert adapter.actions == []
    assert any(line.startswith("fix ->") for line in recorded["log"])


def test_apply_with_nothing_offered_reports_unavailable() -> None:
    adapter, recorded = make_adapter()

    outcome = adapter.apply_next()

    assert outcome.status == "unavailable"
    assert recorded["status"][-1] == "fix: unavailable"


def test_undo_restores_text_and_reanalyzes() -> None:
    adapter, recorded = make_adapter(analyzer=quote_problems)
    adapter.load_problems(quote_problems(SOURCE))
    adapter.apply_next()

    assert adapter.undo() is True

    assert adapter.buffer.get_text() == SOURCE
    assert recorded["buffer"][-1] == SOURCE
    assert len(adapter.actions) == 2
    assert adapter.undo() is False
    assert recorded["status"][-1] == "nothing to undo"
