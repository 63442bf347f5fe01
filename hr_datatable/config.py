from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

PAGE_SIZE_OPTIONS = (5, 10, 20, 50)
DELETE_MODES = ("two_phase", "optimistic")
DEFAULT_PREFERENCES_FILE = Path.home() / ".hr_datatable_preferences.json"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class TableConfig:
    default_page_size: int = 10
    page_size_options: tuple[int, ...] = PAGE_SIZE_OPTIONS
    highlight_seconds: float = 10.0
    reset_page_on_filter_change: bool = False
    delete_mode: str = "two_phase"
    preferences_path: Path = DEFAULT_PREFERENCES_FILE
    preferences_url: str | None = None
    http_timeout_seconds: float = 10.0

    def validate(self) -> None:
        _validate(
            self.default_page_size in self.page_size_options,
            (
                "Invalid HR_TABLE_DEFAULT_PAGE_SIZE: "
                f"expected one of {list(self.page_size_options)}, got {self.default_page_size}"
            ),
        )
        _validate(
            self.highlight_seconds > 0,
            f"Invalid HR_TABLE_HIGHLIGHT_SECONDS: expected > 0, got {self.highlight_seconds}",
        )
        _validate(
            self.delete_mode in DELETE_MODES,
            f"Invalid HR_TABLE_DELETE_MODE: expected one of {list(DELETE_MODES)}, got {self.delete_mode!r}",
        )
        _validate(
            self.http_timeout_seconds > 0,
            f"Invalid HR_TABLE_HTTP_TIMEOUT_SECONDS: expected > 0, got {self.http_timeout_seconds}",
        )


def _coerce_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _read_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected a number, got {raw!r}") from exc


def _read_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected an integer, got {raw!r}") from exc


def _validate(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigError(message)


def load_config(env_file: str | None = None) -> TableConfig:
    """Load table settings from the environment with optional .env override."""
    load_dotenv(env_file)

    preferences_path = (os.getenv("HR_TABLE_PREFERENCES_PATH") or "").strip()
    preferences_url = (os.getenv("HR_TABLE_PREFERENCES_URL") or "").strip()

    config = TableConfig(
        default_page_size=_read_int("HR_TABLE_DEFAULT_PAGE_SIZE", "10"),
        highlight_seconds=_read_float("HR_TABLE_HIGHLIGHT_SECONDS", "10"),
        reset_page_on_filter_change=_coerce_bool(os.getenv("HR_TABLE_RESET_PAGE_ON_FILTER"), False),
        delete_mode=(os.getenv("HR_TABLE_DELETE_MODE") or "two_phase").strip().lower(),
        preferences_path=Path(preferences_path).expanduser() if preferences_path else DEFAULT_PREFERENCES_FILE,
        preferences_url=preferences_url.rstrip("/") or None,
        http_timeout_seconds=_read_float("HR_TABLE_HTTP_TIMEOUT_SECONDS", "10"),
    )
    config.validate()
    return config
