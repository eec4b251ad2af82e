import os
import sys
import configparser
import pytest
from pathlib import Path
from click.testing import CliRunner

# Add project root to sys.path for local imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from utils.filehash_config import ENV_VAR_MAPPING

# ────────────────────────────────────────────────
# FILE FIXTURES
# ────────────────────────────────────────────────

@pytest.fixture
def abc_file(tmp_path) -> Path:
    """A file holding the bytes b"abc"."""
    path = tmp_path / "abc.txt"
    path.write_bytes(b"abc")
    return path


@pytest.fixture
def empty_file(tmp_path) -> Path:
    """A zero-length file."""
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    return path


@pytest.fixture
def large_file(tmp_path) -> Path:
    """A file spanning several 1 KiB chunks with a short final chunk."""
    path = tmp_path / "large.bin"
    path.write_bytes(bytes(range(256)) * 20 + b"tail")
    return path


# ────────────────────────────────────────────────
# CONFIGURATION FIXTURES
# ────────────────────────────────────────────────

@pytest.fixture
def write_config(tmp_path):
    """Write a config.ini from a dict of sections and return its path."""
    def _write(sections: dict) -> Path:
        config = configparser.ConfigParser()
        for section, values in sections.items():
            config[section] = values
        config_path = tmp_path / "test_filehash_config.ini"
        with config_path.open("w") as config_file:
            config.write(config_file)
        return config_path
    return _write


@pytest.fixture(autouse=True)
def clean_filehash_env(monkeypatch):
    """Keep FILEHASH_* variables from the outer environment out of tests."""
    for env_var in ENV_VAR_MAPPING:
        monkeypatch.delenv(env_var, raising=False)


# ────────────────────────────────────────────────
# CLI FIXTURES
# ────────────────────────────────────────────────

@pytest.fixture
def runner():
    """Fixture providing a Click CliRunner instance."""
    return CliRunner()
