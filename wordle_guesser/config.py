"""
Runtime settings.

Defaults live here; every knob can be overridden through an environment
variable so the service handler can be configured without code changes.
The CLI exposes the same knobs as flags.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from wordle_guesser.errors import ConfigError

DEFAULT_WORD_LENGTH = 5
DEFAULT_CHUNK_SIZE = 2048
MAX_DEFAULT_WORKERS = 8


def default_workers() -> int:
    return min(MAX_DEFAULT_WORKERS, os.cpu_count() or 1)


def _env_int(environ: Mapping[str, str], name: str, default: int | None) -> int | None:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer; got {raw!r}") from e
    if value < 1:
        raise ConfigError(f"{name} must be at least 1; got {value}")
    return value


def _env_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    dictionary_path: str | None = None   # None -> bundled word list
    word_length: int = DEFAULT_WORD_LENGTH
    workers: int | None = None           # None -> default_workers()
    chunk_size: int = DEFAULT_CHUNK_SIZE
    log_level: str = "INFO"
    log_json: bool = False

    def __post_init__(self):
        for name in ("word_length", "workers", "chunk_size"):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ConfigError(f"{name} must be at least 1; got {value}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """
        Build settings from WORDLE_* environment variables.

        Raises ConfigError if an integer variable is unparseable or below 1.
        """
        env = os.environ if environ is None else environ
        return cls(
            dictionary_path=env.get("WORDLE_DICTIONARY") or None,
            word_length=_env_int(env, "WORDLE_WORD_LENGTH", DEFAULT_WORD_LENGTH),
            workers=_env_int(env, "WORDLE_WORKERS", None),
            chunk_size=_env_int(env, "WORDLE_CHUNK_SIZE", DEFAULT_CHUNK_SIZE),
            log_level=(env.get("WORDLE_LOG_LEVEL") or "INFO").upper(),
            log_json=_env_bool(env, "WORDLE_LOG_JSON", False),
        )
