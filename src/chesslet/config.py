"""Engine configuration: defaults, TOML file and environment overrides.

Precedence, lowest first: dataclass defaults, the ``[engine]`` table of a
TOML file, ``CHESSLET_*`` environment variables. Command-line flags are
applied on top by :mod:`chesslet.app`.

Example ``chesslet.toml``::

    [engine]
    time_limit = 5.0
    max_depth = 4
    seed = 7
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from chesslet.engine.search import SearchLimits

DEFAULT_CONFIG_PATH = "chesslet.toml"
CONFIG_PATH_ENV = "CHESSLET_CONFIG"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# environment variable -> (field name, parser)
_ENV_OVERRIDES: dict[str, tuple[str, type]] = {
    "CHESSLET_TIME_LIMIT": ("time_limit", float),
    "CHESSLET_MAX_DEPTH": ("max_depth", int),
    "CHESSLET_SEED": ("seed", int),
    "CHESSLET_LOG_LEVEL": ("log_level", str),
}

# field name -> (accepted types, description for error messages)
_FIELD_TYPES: dict[str, tuple[tuple[type, ...], str]] = {
    "time_limit": ((int, float), "a number"),
    "start_depth": ((int,), "an integer"),
    "max_depth": ((int, type(None)), "an integer"),
    "seed": ((int, type(None)), "an integer"),
    "unrestricted_black_double_step": ((bool,), "true or false"),
    "log_level": ((str,), "a string"),
}


@dataclass(frozen=True)
class EngineConfig:
    """Settings for the engine and the terminal game."""

    time_limit: float = 3.0
    start_depth: int = 2
    max_depth: int | None = None
    seed: int | None = None
    unrestricted_black_double_step: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        for name, (types, expected) in _FIELD_TYPES.items():
            value = getattr(self, name)
            # bool is an int subclass; only the flag field takes it.
            if not isinstance(value, types) or (isinstance(value, bool) and bool not in types):
                raise ValueError(f"{name} must be {expected}, got {value!r}")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        # Reuse the search-side validation for depth and time values.
        self.search_limits()

    def search_limits(self) -> SearchLimits:
        return SearchLimits(
            time_limit=self.time_limit,
            start_depth=self.start_depth,
            max_depth=self.max_depth,
        )

    def merged(self, overrides: Mapping[str, Any]) -> EngineConfig:
        """Copy with *overrides* applied; ``None`` values are skipped."""
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **values)

    @staticmethod
    def load_from_toml(path: str | Path) -> EngineConfig:
        """Read the ``[engine]`` table of *path*; defaults if the file is missing."""
        cfg = EngineConfig()
        path = Path(path)
        if not path.is_file():
            return cfg
        with path.open("rb") as f:
            raw = tomllib.load(f)
        table = raw.get("engine", {})
        if not isinstance(table, dict):
            raise ValueError(f"[engine] in {path} must be a table")
        return cfg.merged(table)


def env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    """Parse ``CHESSLET_*`` variables into config overrides."""
    overrides: dict[str, Any] = {}
    for var, (name, parse) in _ENV_OVERRIDES.items():
        raw = environ.get(var)
        if not raw:
            continue
        try:
            overrides[name] = parse(raw)
        except ValueError:
            raise ValueError(f"Invalid value for {var}: {raw!r}") from None
    return overrides


def load_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> EngineConfig:
    """Load configuration from *path* (or ``$CHESSLET_CONFIG``) and the environment."""
    env = os.environ if environ is None else environ
    if path is None:
        path = env.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH)
    cfg = EngineConfig.load_from_toml(path)
    return cfg.merged(env_overrides(env))
