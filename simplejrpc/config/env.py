"""Environment-prefixed configuration access."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from simplejrpc.config.formatter import Formatter

if TYPE_CHECKING:
    from simplejrpc.config.base import Config


class Env(StrEnum):
    """Deployment environment used as a configuration key prefix."""

    TEST = "test"
    PROD = "prod"
    DEV = "dev"


def new_env(value: str) -> Env:
    """Normalize ``value`` to an Env, case-insensitively; unknown values mean PROD."""
    try:
        return Env(value.lower())
    except ValueError:
        return Env.PROD


def concat_env_val(env: Env | str, val: str) -> str:
    """Return ``"<env>.<val>"``."""
    resolved = env if isinstance(env, Env) else new_env(env)
    return f"{resolved.value}.{val}"


class EnvFormatter(Formatter):
    """Wraps a formatter and prefixes every section with the environment name."""

    def __init__(self, env: Env | str, formatter: Formatter) -> None:
        self.env = env if isinstance(env, Env) else new_env(env)
        self._formatter = formatter

    def get_value(self, section: str) -> Formatter:
        return self._formatter.get_value(concat_env_val(self.env, section))

    def string(self) -> str:
        return self._formatter.string()

    def int(self) -> int:
        return self._formatter.int()

    def float64(self) -> float:
        return self._formatter.float64()

    def bool(self) -> bool:
        return self._formatter.bool()

    def map(self) -> dict[str, Any]:
        return self._formatter.map()

    def list(self) -> list[Any]:
        return self._formatter.list()


def with_env_formatter(env: str) -> Callable[[Config], None]:
    """Return a config option that wraps the config's formatter with ``env``."""

    def apply(config: Config) -> None:
        config.clone_with_formatter(EnvFormatter(new_env(env), config.cfg()))

    return apply