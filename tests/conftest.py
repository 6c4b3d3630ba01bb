"""Shared test fixtures for lognaming test suite."""

import io
import json
import os
from unittest.mock import patch

import pytest

from lognaming.diagnostics import manager as _manager_mod


# ---------------------------------------------------------------------------
# Diagnostics singleton
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_diagnostics():
    """Reset the DiagnosticOutput singleton between tests."""
    old = _manager_mod._diagnostics
    yield
    _manager_mod._diagnostics = old


@pytest.fixture
def buf():
    """A StringIO buffer for capturing diagnostics output."""
    return io.StringIO()


# ---------------------------------------------------------------------------
# Logger registry
# ---------------------------------------------------------------------------
class RecordingRegistry:
    """Get-or-create registry that remembers every name it was asked for."""

    def __init__(self):
        self.loggers = {}
        self.requested = []

    def __call__(self, name):
        self.requested.append(name)
        if name not in self.loggers:
            self.loggers[name] = FakeLogger(name)
        return self.loggers[name]


class FakeLogger:
    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"FakeLogger({self.name!r})"


@pytest.fixture
def registry():
    """A fresh RecordingRegistry."""
    return RecordingRegistry()


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.lognaming/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def tmp_project(tmp_path):
    """Provide a temporary project directory."""
    project = tmp_path / "project"
    (project / "src" / "pkg").mkdir(parents=True)
    return project


@pytest.fixture
def sample_project_config(tmp_project):
    """Write a .lognaming.json file in the tmp project."""
    config = {
        "category-separator": ".",
        "namespaces": {
            "myapp.db": {"category-case": "upper"},
        },
        "diagnostics": {"threshold": "info", "channels": ["resolve:debug"]},
    }
    path = tmp_project / ".lognaming.json"
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path, config


@pytest.fixture
def sample_global_config(tmp_config_home):
    """Write a global config file in the tmp home."""
    config_dir = tmp_config_home / ".lognaming"
    config_dir.mkdir()
    config = {
        "category-separator": "/",
        "category-case": "lower",
        "namespaces": {
            "myapp": {"category-separator": "|"},
        },
    }
    path = config_dir / "config.json"
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path, config
