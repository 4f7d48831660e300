"""Pytest configuration and fixtures for Chronos tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
import yaml

# Add the parent directory to sys.path so chronos can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from chronos.config import reset_settings  # noqa: E402
from chronos.core.instant import Instant  # noqa: E402
from chronos.i18n.translator import reset_translator  # noqa: E402

BASE_FORMAT = "%Y-%m-%d %H:%M:%S"


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Start every test from default settings and a fresh translator."""
    for name in ("DEFAULT_FORMAT", "DEFAULT_TIMEZONE", "LANGUAGE", "DEFAULT_LANGUAGE"):
        monkeypatch.delenv(f"CHRONOS_{name}", raising=False)
    reset_settings()
    reset_translator()
    yield
    reset_settings()
    reset_translator()


@pytest.fixture
def base() -> Instant:
    """A fixed reference instant: Friday 2024-03-15 12:00:00 UTC."""
    return Instant.from_format("2024-03-15 12:00:00", BASE_FORMAT, "UTC")


@pytest.fixture
def phrase_dir(tmp_path):
    """Create a temporary directory with small YAML phrase tables.

    Returns a directory structure like:
    - en.yml (complete for the unit and adverb keys)
    - xx.yml (a made-up language missing most keys)
    """
    en = {
        "year": "#year# yr",
        "years": "#years# yrs",
        "month": "#month# mo",
        "months": "#months# mos",
        "day": "#day# d",
        "days": "#days# ds",
        "hour": "#hour# h",
        "hours": "#hours# hs",
        "minute": "#minute# min",
        "minutes": "#minutes# mins",
        "second": "#second# s",
        "seconds": "#seconds# ss",
        "ago": "#time# back",
        "later": "in #time#",
        "same-time": "simultaneously",
        "now": "right now",
        "today": "earlier today",
        "yesterday": "the day before",
        "tomorrow": "the day after",
        "greeting": "Hello #name#, it is #day#",
    }
    with open(tmp_path / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump(en, f, allow_unicode=True)

    xx = {"ago": "#time# xx-ago"}
    with open(tmp_path / "xx.yml", "w", encoding="utf-8") as f:
        yaml.dump(xx, f, allow_unicode=True)

    return tmp_path
