"""Runtime settings for the REPL.

Defaults can be overridden with environment variables; command line flags
override both.

    ACTOR_REPL_MAILBOX_CAPACITY   buffered messages per mailbox (default 1)
    ACTOR_REPL_STARTUP_DELAY      seconds before the first read (default 0.5)
    ACTOR_REPL_QUIT_ON_EOF        treat end of input as quit (default off)
    ACTOR_REPL_LOG_LEVEL          logging level (default INFO)
"""

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from .errors import ConfigError

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _env_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(key)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{key} must be a boolean, got {raw!r}")


def _env_number(env: Mapping[str, str], key: str, default: Any, cast) -> Any:
    raw = env.get(key)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigError(f"{key} must be a {cast.__name__}, got {raw!r}") from e


@dataclass(frozen=True)
class ReplConfig:
    mailbox_capacity: int = 1
    startup_delay: float = 0.5
    quit_on_eof: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ReplConfig":
        """Build settings from environment variables (os.environ by default)."""
        env = os.environ if env is None else env
        defaults = cls()
        return cls(
            mailbox_capacity=_env_number(env, "ACTOR_REPL_MAILBOX_CAPACITY", defaults.mailbox_capacity, int),
            startup_delay=_env_number(env, "ACTOR_REPL_STARTUP_DELAY", defaults.startup_delay, float),
            quit_on_eof=_env_bool(env, "ACTOR_REPL_QUIT_ON_EOF", defaults.quit_on_eof),
            log_level=env.get("ACTOR_REPL_LOG_LEVEL", defaults.log_level).upper(),
        )

    def with_overrides(self, **overrides: Any) -> "ReplConfig":
        """Return a copy with the given non-None fields replaced."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def validate(self) -> "ReplConfig":
        if self.mailbox_capacity < 1:
            raise ConfigError(f"mailbox capacity must be at least 1, got {self.mailbox_capacity}")
        if self.startup_delay < 0:
            raise ConfigError(f"startup delay must not be negative, got {self.startup_delay}")
        return self
