"""Runtime settings for agilecore, read from the environment."""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

ENV_PREFIX = "AGILECORE_"

# "short" renders dates as M/D/YYYY without zero padding
SHORT_DATE_FORMAT = "short"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass(frozen=True)
class Settings:
    """Engine and logging settings.

    Attributes:
        order_step: Distance from a neighbour when an issue is dropped at
            either end of a scope.
        renormalize_stride: Spacing used when a scope's order values are
            renumbered.
        min_order_gap: Smallest gap between adjacent order values before a
            scope should be renormalized.
        date_format: Display format for dates; "short" or a strftime pattern.
        log_dir: Directory for the rotating log file. None keeps file
            logging off.
        log_level: One of LOG_LEVELS.
        log_max_bytes: Size at which the log file rotates.
        log_backup_count: Rotated files kept beside the current one.
    """

    order_step: float = 1.0
    renormalize_stride: float = 1024.0
    min_order_gap: float = 1e-6
    date_format: str = SHORT_DATE_FORMAT
    log_dir: str | None = None
    log_level: str = "INFO"
    log_max_bytes: int = 10 * 1024 * 1024  # 10MB
    log_backup_count: int = 5

    def __post_init__(self) -> None:
        for name in ("order_step", "renormalize_stride", "min_order_gap"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ConfigError(f"{name} must be a positive number, got {value!r}")
        if not self.date_format:
            raise ConfigError("date_format must not be empty")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")
        if self.log_max_bytes <= 0:
            raise ConfigError(f"log_max_bytes must be positive, got {self.log_max_bytes!r}")
        if self.log_backup_count < 0:
            raise ConfigError(f"log_backup_count must not be negative, got {self.log_backup_count!r}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Create settings from AGILECORE_* environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Settings with defaults for every unset variable.

        Raises:
            ConfigError: If a variable is set to an invalid value.
        """
        if environ is None:
            environ = os.environ

        def read(name: str) -> str | None:
            raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is None or raw.strip() == "":
                return None
            return raw.strip()

        values: dict[str, object] = {}
        for name, kind in (
            ("order_step", float),
            ("renormalize_stride", float),
            ("min_order_gap", float),
            ("log_max_bytes", int),
            ("log_backup_count", int),
        ):
            raw = read(name)
            if raw is None:
                continue
            try:
                values[name] = kind(raw)
            except ValueError as e:
                expected = "a number" if kind is float else "a whole number"
                raise ConfigError(f"{ENV_PREFIX}{name.upper()} must be {expected}, got {raw!r}") from e

        date_format = environ.get(f"{ENV_PREFIX}DATE_FORMAT")
        if date_format:
            values["date_format"] = date_format

        log_dir = read("log_dir")
        if log_dir is not None:
            values["log_dir"] = log_dir

        log_level = read("log_level")
        if log_level is not None:
            if log_level.upper() not in LOG_LEVELS:
                raise ConfigError(
                    f"{ENV_PREFIX}LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
                )
            values["log_level"] = log_level.upper()

        return cls(**values)  # type: ignore[arg-type]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return process-wide settings, loaded once from the environment."""
    return Settings.from_env()
