"""Shared pytest fixtures for Suitcase tests."""

import os
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from suitcase.config.settings import ENV_PREFIX, Settings
from suitcase.integrations.shell import Shell, ShellOutput

FLUTTER_PUBSPEC = """name: {name}
description: A Flutter app.
environment:
  sdk: ">=3.0.0 <4.0.0"
dependencies:
  flutter:
    sdk: flutter
"""

DART_PUBSPEC = """name: {name}
description: A Dart package.
environment:
  sdk: ">=3.0.0 <4.0.0"
dependencies:
  path: ^1.8.0
"""


@pytest.fixture(autouse=True)
def restore_cwd():
    """Return to the original working directory after every test."""
    original = os.getcwd()
    yield
    os.chdir(original)


@pytest.fixture(autouse=True)
def clean_suitcase_env(restore_cwd, monkeypatch):
    """Keep SUITCASE_* variables from the developer's shell out of tests."""
    for key in Settings.get_config_keys():
        monkeypatch.delenv(f"{ENV_PREFIX}{key}", raising=False)


@pytest.fixture
def make_project(tmp_path: Path):
    """Factory creating a Dart or Flutter project below ``tmp_path``."""

    def _make(relative: str, flutter: bool = False, content: str | None = None) -> Path:
        project_dir = tmp_path / relative
        project_dir.mkdir(parents=True, exist_ok=True)
        if content is None:
            template = FLUTTER_PUBSPEC if flutter else DART_PUBSPEC
            content = template.format(name=project_dir.name.replace("-", "_"))
        (project_dir / "pubspec.yaml").write_text(content)
        return project_dir

    return _make


@pytest.fixture
def workspace(make_project, tmp_path: Path) -> Path:
    """A directory tree with two Flutter apps, two Dart packages and noise.

    Layout:
        apps/mobile          Flutter
        apps/mobile/build/x  ignored (build output)
        apps/mobile/ios/y    ignored (platform folder)
        apps/web             Flutter
        packages/core        Dart
        packages/core/.dart_tool/z  ignored
        tools/cli            Dart
    """
    make_project("apps/mobile", flutter=True)
    make_project("apps/mobile/build/x")
    make_project("apps/mobile/ios/y")
    make_project("apps/web", flutter=True)
    make_project("packages/core")
    make_project("packages/core/.dart_tool/z")
    make_project("tools/cli")
    return tmp_path


@pytest.fixture
def fake_shell() -> MagicMock:
    """A Shell double whose run() succeeds with empty output by default."""
    shell = MagicMock(spec=Shell)
    shell.run.return_value = ShellOutput(stdout="", stderr="")
    return shell


@pytest.fixture
def mock_subprocess():
    """Mock subprocess.run as used by the Shell wrapper."""
    with patch("suitcase.integrations.shell.subprocess.run") as mock:
        mock.return_value = MagicMock(returncode=0, stdout="", stderr="")
        yield mock


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch) -> Path:
    """Change into a fresh repository-like directory (contains .git)."""
    work = tmp_path / "work"
    (work / ".git").mkdir(parents=True)
    monkeypatch.chdir(work)
    return work
