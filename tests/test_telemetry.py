from __future__ import annotations

from contextlib import contextmanager
from types import SimpleNamespace
from typing import Any, Iterator, List

import pytest

from lint_patch.buffer import Buffer, Transaction
from lint_patch.runtime import telemetry


class FakeConfig:
    """Records every ``with_*`` call made while building a config."""

    def __init__(self) -> None:
        self.calls: List[tuple[str, tuple[Any, ...]]] = []

    def __getattr__(self, name: str) -> Any:
        if not name.startswith("with_"):
            raise AttributeError(name)

        def _record(*args: Any) -> "FakeConfig":
            self.calls.append((name, args))
            return self

        return _record

    def called(self, name: str) -> List[tuple[Any, ...]]:
        return [args for call, args in self.calls if call == name]


class FakeLogger:
    def __init__(self, name: str, config: FakeConfig) -> None:
        self.name = name
        self.config = config
        self.records: List[tuple[Any, ...]] = []
        self.context: dict[str, str] = {}

    @classmethod
    def with_config(cls, name: str, config: FakeConfig) -> "FakeLogger":
        return cls(name, config)

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        self.context.pop(key, None)

    @contextmanager
    def track_component(self, name: str) -> Iterator[None]:
        self.records.append(("component", name))
        yield

    @contextmanager
    def profile(self, name: str) -> Iterator[None]:
        self.records.append(("profile", name))
        yield

    def _structured(self, level: str, message: str, pairs) -> None:
        self.records.append((level, message, dict(pairs)))

    def debug_with(self, message: str, pairs) -> None:
        self._structured("debug", message, pairs)

    def info_with(self, message: str, pairs) -> None:
        self._structured("info", message, pairs)

    def error_with(self, message: str, pairs) -> None:
        self._structured("error", message, pairs)


@pytest.fixture(autouse=True)
def fake_telelog(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in (
        "LOGGER",
        "LOG_LEVEL",
        "LOG_FILE",
        "LOG_JSON",
        "LOG_BUFFERED",
        "LOG_BUFFER_SIZE",
    ):
        monkeypatch.delenv(f"LINT_PATCH_{name}", raising=False)
    monkeypatch.setattr(
        telemetry, "tl", SimpleNamespace(Config=FakeConfig, Logger=FakeLogger)
    )
    monkeypatch.setattr(telemetry, "_ACTIVE_CONFIG", None)
    telemetry._LOGGER_CACHE.clear()
    yield
    telemetry._LOGGER_CACHE.clear()


@pytest.mark.parametrize("preset", ["bogus", "performance_analysis"])
def test_unknown_preset_is_rejected(preset: str) -> None:
    with pytest.raises(ValueError, match="Unknown preset"):
        telemetry.configure(preset=preset)


def test_span_handle_exposes_only_metadata_and_failure() -> None:
    assert not hasattr(telemetry.SpanHandle, "cancel")


def test_config_and_preset_are_exclusive() -> None:
    with pytest.raises(ValueError, match="not both"):
        telemetry.configure(config=FakeConfig(), preset="development")


def test_preset_config_enables_profiling() -> None:
    telemetry.configure(preset="production")

    config = telemetry.get_logger("preset").config
    assert config.called("with_min_level") == [("INFO",)]
    assert config.called("with_file_output") == [("lint_patch.log",)]
    assert config.called("with_profiling") == [(True,)]


def test_env_config_reads_prefixed_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LINT_PATCH_LOG_LEVEL", "debug")
    monkeypatch.setenv("LINT_PATCH_LOG_BUFFERED", "yes")

    telemetry.configure()

    config = telemetry.get_logger().config
    assert config.called("with_min_level") == [("DEBUG",)]
    assert config.called("with_buffer_size") == [(2048,)]


def test_get_logger_caches_per_name() -> None:
    first = telemetry.get_logger("lint_patch.fixes")

    assert telemetry.get_logger("lint_patch.fixes") is first
    assert telemetry.get_logger("lint_patch.buffer") is not first
    assert telemetry.get_logger().name == "lint_patch"


def test_configure_drops_cached_loggers() -> None:
    first = telemetry.get_logger("lint_patch.fixes")

    telemetry.configure(preset="development")

    assert telemetry.get_logger("lint_patch.fixes") is not first


def test_record_event_emits_structured_pairs() -> None:
    telemetry.record_event("patch.rejected", level="debug", data={"start": 8})

    logger = telemetry.get_logger()
    assert logger.records[-1] == (
        "debug",
        "event::patch.rejected",
        {"event": "patch.rejected", "start": "8"},
    )


def test_span_tracks_component_and_clears_context() -> None:
    with telemetry.span(
        "fixes::invoke", component="fixes", metadata={"code": "quotes"}
    ) as handle:
        logger = telemetry.get_logger()
        assert logger.context == {"code": "quotes"}
        handle.add_metadata("rejected", "out-of-range replacement")

    assert ("component", "fixes") in logger.records
    assert ("profile", "fixes::invoke") in logger.records
    assert logger.context == {}


def test_failed_transaction_reports_span_failure() -> None:
    buffer = Buffer.from_text("safe", name="demo.ts")

    with pytest.raises(RuntimeError, match="boom"):
        with Transaction(buffer, "explode"):
            raise RuntimeError("boom")

    logger = telemetry.get_logger()
    failures = [record for record in logger.records if record[:2] == ("error", "span::fail")]
    assert len(failures) == 1
    payload = failures[0][2]
    assert payload["span"] == "buffer::explode"
    assert payload["component"] == "buffer"
    assert payload["reason"] == "boom"
    assert payload["buffer"] == "demo.ts"
    assert buffer.get_text() == "safe"
