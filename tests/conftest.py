"""Shared fixtures for brandcn tests."""

from pathlib import Path

import pytest

from brandcn.config.settings import clear_settings_cache
from brandcn.store import LogoStore

SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><title>{}</title></svg>\n'

LIBRARY_LOGOS = [
    "vercel",
    "neon",
    "figma",
    "github",
    "github_dark",
    "github_light",
    "github_wordmark",
    "apple",
    "apple_dark",
    "apple-music",
    "apple-music_wordmark",
]


def make_library(directory: Path, names: list[str]) -> Path:
    """Write one small SVG per name into ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    for name in names:
        (directory / f"{name}.svg").write_text(SVG.format(name))
    return directory


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep BRANDCN_* variables from the developer's shell out of tests."""
    for var in (
        "BRANDCN_LIBRARY_DIR",
        "BRANDCN_LOG_LEVEL",
        "BRANDCN_DEV",
        "BRANDCN_STORE_LATENCY_MS",
    ):
        monkeypatch.delenv(var, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def library_dir(tmp_path) -> Path:
    """Library directory with a realistic mix of base logos and variants."""
    return make_library(tmp_path / "library", LIBRARY_LOGOS)


@pytest.fixture
def library(library_dir) -> LogoStore:
    return LogoStore(library_dir)


@pytest.fixture
def target(tmp_path) -> LogoStore:
    """Target store whose directory does not exist yet."""
    return LogoStore(tmp_path / "project" / "components" / "logos")
