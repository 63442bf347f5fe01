import os
from pathlib import Path

import pytest

from hr_datatable.config import DEFAULT_PREFERENCES_FILE, ConfigError, TableConfig, load_config

ENV_NAMES = (
    "HR_TABLE_DEFAULT_PAGE_SIZE",
    "HR_TABLE_HIGHLIGHT_SECONDS",
    "HR_TABLE_RESET_PAGE_ON_FILTER",
    "HR_TABLE_DELETE_MODE",
    "HR_TABLE_PREFERENCES_PATH",
    "HR_TABLE_PREFERENCES_URL",
    "HR_TABLE_HTTP_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    yield
    # load_dotenv writes straight into os.environ
    for name in ENV_NAMES:
        os.environ.pop(name, None)


def test_defaults(tmp_path: Path) -> None:
    config = load_config(str(tmp_path / "missing.env"))

    assert config == TableConfig()
    assert config.preferences_path == DEFAULT_PREFERENCES_FILE


def test_env_file_values(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "\n".join(
            [
                "HR_TABLE_DEFAULT_PAGE_SIZE=20",
                "HR_TABLE_HIGHLIGHT_SECONDS=3.5",
                "HR_TABLE_RESET_PAGE_ON_FILTER=yes",
                "HR_TABLE_DELETE_MODE=Optimistic",
                f"HR_TABLE_PREFERENCES_PATH={tmp_path / 'prefs.json'}",
                "HR_TABLE_PREFERENCES_URL=https://hr.example.test/api/",
            ]
        ),
        encoding="utf-8",
    )

    config = load_config(str(env_file))

    assert config.default_page_size == 20
    assert config.highlight_seconds == 3.5
    assert config.reset_page_on_filter_change is True
    assert config.delete_mode == "optimistic"
    assert config.preferences_path == tmp_path / "prefs.json"
    assert config.preferences_url == "https://hr.example.test/api"


@pytest.mark.parametrize(
    ("name", "value", "fragment"),
    [
        ("HR_TABLE_DEFAULT_PAGE_SIZE", "12", "HR_TABLE_DEFAULT_PAGE_SIZE"),
        ("HR_TABLE_DEFAULT_PAGE_SIZE", "ten", "expected an integer"),
        ("HR_TABLE_HIGHLIGHT_SECONDS", "0", "HR_TABLE_HIGHLIGHT_SECONDS"),
        ("HR_TABLE_DELETE_MODE", "later", "HR_TABLE_DELETE_MODE"),
        ("HR_TABLE_HTTP_TIMEOUT_SECONDS", "-1", "HR_TABLE_HTTP_TIMEOUT_SECONDS"),
    ],
)
def test_invalid_values_raise(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, name: str, value: str, fragment: str
) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigError, match=fragment):
        load_config(str(tmp_path / "missing.env"))
