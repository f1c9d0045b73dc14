"""Pytest configuration: point the config dir at a temp dir before any hashbox import."""

import os
import tempfile

import pytest

_tmp = tempfile.mkdtemp(prefix="hashbox_test_")
os.environ["HASHBOX_CONFIG_DIR"] = _tmp


@pytest.fixture
def config_dir(monkeypatch, tmp_path):
    """Fresh, empty config directory for one test."""
    monkeypatch.setenv("HASHBOX_CONFIG_DIR", str(tmp_path / "config"))
    return tmp_path / "config"
