"""
Unit tests for workspace and package detection.
"""

from pathlib import Path

import pytest

from colb.core.exceptions import PackageNotFoundError, WorkspaceNotFoundError
from colb.services.workspace import (
    detect_workspace,
    find_upwards,
    package_or,
    require_package,
    resolve_workspace,
)


class TestPackageDetection:
    def test_finds_package_from_nested_dir(self, workspace: Path):
        nested = workspace / "src" / "my_pkg" / "include" / "my_pkg" / "detail"
        nested.mkdir(parents=True)

        assert package_or(None, nested) == "my_pkg"

    def test_explicit_package_wins(self, workspace: Path):
        assert package_or("other", workspace / "src" / "my_pkg") == "other"

    def test_none_outside_packages(self, workspace: Path):
        assert package_or(None, workspace / "src") is None

    def test_require_package_raises(self, workspace: Path):
        with pytest.raises(PackageNotFoundError) as exc_info:
            require_package(None, workspace)

        assert "try specifying it explicitly" in str(exc_info.value)

    def test_nearest_package_wins(self, workspace: Path):
        inner = workspace / "src" / "my_pkg" / "vendor" / "inner"
        inner.mkdir(parents=True)
        (inner / "package.xml").write_text("<package/>\n")

        assert package_or(None, inner) == "inner"

    def test_missing_start_dir_finds_nothing(self, tmp_path: Path):
        assert find_upwards(["package.xml"], tmp_path / "does-not-exist") is None


class TestWorkspaceDetection:
    def test_build_folder_marks_workspace(self, workspace: Path):
        assert detect_workspace(workspace / "src" / "my_pkg") == workspace

    def test_config_file_marks_workspace(self, tmp_path: Path):
        ws = tmp_path / "ws"
        (ws / "src").mkdir(parents=True)
        (ws / ".colb.toml").write_text("")

        assert detect_workspace(ws / "src") == ws.resolve()

    def test_explicit_workspace(self, workspace: Path, tmp_path: Path):
        other = tmp_path / "other"
        other.mkdir()

        assert resolve_workspace(str(other), start=workspace) == other.resolve()

    def test_explicit_workspace_must_exist(self, tmp_path: Path):
        with pytest.raises(WorkspaceNotFoundError):
            resolve_workspace(str(tmp_path / "missing"))

    def test_detected_workspace(self, workspace: Path):
        assert resolve_workspace(None, start=workspace / "src" / "my_pkg") == workspace
