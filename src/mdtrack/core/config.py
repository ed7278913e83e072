"""Configuration management for mdtrack."""

import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from .exceptions import ConfigError
from .types import Period

WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


@dataclass
class Config:
    """Main application configuration."""

    # Used when a tracker has no period directive
    default_period: Period = Period.ALL_TIME
    # Informational; filename dates are always matched by the built-in grammar
    date_format: str = "YYYY-MM-DD"
    week_start: str = "sunday"
    vault_path: Path = field(default_factory=lambda: Path("."))
    encoding: str = "utf-8"
    glob_patterns: list[str] = field(default_factory=lambda: ["**/*.md"])
    poll_interval: float = 2.0

    @property
    def week_start_index(self) -> int:
        """Weekday number of the first day of the week (Monday is 0)."""
        return WEEKDAYS.index(self.week_start)

    def __post_init__(self) -> None:
        if isinstance(self.default_period, str):
            self.default_period = _parse_period(self.default_period)
        self.week_start = self.week_start.lower()
        if self.week_start not in WEEKDAYS:
            raise ConfigError(
                f"Invalid week_start: {self.week_start!r}",
                hint=f"Use one of: {', '.join(WEEKDAYS)}",
            )
        self.vault_path = Path(self.vault_path)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls()._apply_env()

    @classmethod
    def from_file(cls, path: Path | str) -> "Config":
        """Load configuration from a TOML file, then apply env overrides.

        Args:
            path: Path to the TOML file.

        Returns:
            Config with file values and environment overrides applied.
        """
        with open(path, "rb") as f:
            data = tomllib.load(f)

        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {k: v for k, v in data.items() if k in known}
        if "vault_path" in values:
            values["vault_path"] = Path(values["vault_path"]).expanduser()

        return cls(**values)._apply_env()

    @classmethod
    def from_env_or_file(cls, path: Path | str | None = None) -> "Config":
        """Load from an explicit file, MDTRACK_CONFIG, or the environment."""
        path = path or os.environ.get("MDTRACK_CONFIG")
        if path:
            return cls.from_file(path)
        return cls.from_env()

    def _apply_env(self) -> "Config":
        if period := os.environ.get("MDTRACK_DEFAULT_PERIOD"):
            self.default_period = _parse_period(period)

        if week_start := os.environ.get("MDTRACK_WEEK_START"):
            self.week_start = week_start
            self.__post_init__()

        if vault := os.environ.get("MDTRACK_VAULT"):
            self.vault_path = Path(vault).expanduser()

        if interval := os.environ.get("MDTRACK_POLL_INTERVAL"):
            self.poll_interval = float(interval)

        return self


def _parse_period(value: str) -> Period:
    try:
        return Period(value)
    except ValueError:
        raise ConfigError(
            f"Invalid default period: {value!r}",
            hint=f"Use one of: {', '.join(p.value for p in Period)}",
        ) from None
