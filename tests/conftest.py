"""
Shared pytest fixtures for colb tests.

- reset_container: Fresh DI container for every test
- clean_colb_env: No COLB_* overrides leaking in from the shell
- workspace: A workspace with a build/ folder and one source package
- presenter: Colorless ConsolePresenter writing to in-memory buffers
"""

import io
import os
from pathlib import Path

import pytest

from colb.core.bootstrap import reset
from colb.presenters.console import ConsolePresenter


@pytest.fixture(autouse=True)
def reset_container():
    """Start every test without a bootstrapped container."""
    reset()
    yield
    reset()


@pytest.fixture(autouse=True)
def clean_colb_env(monkeypatch):
    """Keep COLB_* overrides from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("COLB_"):
            monkeypatch.delenv(key)


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """
    Create a workspace layout::

        ws/
          build/
          src/my_pkg/package.xml
    """
    ws = tmp_path / "ws"
    (ws / "build").mkdir(parents=True)
    pkg = ws / "src" / "my_pkg"
    pkg.mkdir(parents=True)
    (pkg / "package.xml").write_text("<package/>\n")
    return ws.resolve()


@pytest.fixture
def presenter() -> ConsolePresenter:
    """Presenter whose output can be read back via _file/_err_file."""
    return ConsolePresenter(use_color=False, file=io.StringIO(), err_file=io.StringIO())
