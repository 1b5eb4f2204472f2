from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep a developer's .env or shell overrides out of the tests."""
    monkeypatch.delenv("PRESENTOR_HOME", raising=False)
    monkeypatch.delenv("PRESENTOR_CONFIG_DIR", raising=False)


@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    """A storage root that does not exist yet."""
    return tmp_path / "Presentor"


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    return tmp_path / "config"
