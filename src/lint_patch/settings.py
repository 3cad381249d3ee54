"""Environment-driven settings for fix application."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from lint_patch.runtime.telemetry import env_flag, env_value

DEFAULT_DENIED_CODES = ("linebreak-style",)


def _split_codes(raw: str) -> tuple[str, ...]:
    return tuple(dict.fromkeys(code.strip() for code in raw.split(",") if code.strip()))


@dataclass(frozen=True, slots=True)
class FixSettings:
    # linebreak-style fixes rewrite separators and fight normalization
    denied_codes: tuple[str, ...] = DEFAULT_DENIED_CODES
    skip_unchanged: bool = True

    @classmethod
    def from_env(cls) -> "FixSettings":
        raw = env_value("DENIED_CODES")
        denied = DEFAULT_DENIED_CODES if raw is None else _split_codes(raw)
        return cls(
            denied_codes=denied,
            skip_unchanged=env_flag("SKIP_UNCHANGED", True),
        )


@lru_cache(maxsize=None)
def get_settings() -> FixSettings:
    return FixSettings.from_env()


def reset_settings() -> None:
    get_settings.cache_clear()


__all__ = ["DEFAULT_DENIED_CODES", "FixSettings", "get_settings", "reset_settings"]
