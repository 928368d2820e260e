"""
Unit tests for the build, test and clean workflows.

Commands are recorded by a fake runner instead of being executed, so the
tests check which phases run, in which order, with which profile.
"""

from unittest.mock import patch

import pytest

from colb.core.exceptions import InvalidArgumentError, PackageNotFoundError, PhaseFailed
from colb.core.models.config import BuildType, ColbConfig
from colb.services.execution.runner import exit_on_error
from colb.services.workflow.service import Workflow, format_packages


class RecordingRunner:
    """Records FinalizedCommands instead of running them.

    Statuses are handed out in order; once exhausted every command
    succeeds.
    """

    def __init__(self, statuses=None):
        self.commands = []
        self._statuses = list(statuses or [])

    def run(self, command):
        self.commands.append(command)
        return self._statuses.pop(0) if self._statuses else 0

    def run_checked(self, command):
        exit_on_error(self.run(command))

    @property
    def programs(self):
        return [c.program for c in self.commands]

    @property
    def verbs(self):
        """colcon verb (or program) of each recorded command."""
        return [c.args[2] if c.program == "colcon" else c.program for c in self.commands]


@pytest.fixture
def runner():
    return RecordingRunner()


@pytest.fixture
def make_workflow(workspace, presenter):
    def factory(runner, config=None, cwd=None):
        return Workflow(
            workspace=workspace,
            config=config or ColbConfig(),
            runner=runner,
            presenter=presenter,
            cwd=cwd or workspace,
        )

    return factory


class TestBuild:
    """colb build."""

    def test_dependencies_then_packages(self, make_workflow, runner, presenter):
        make_workflow(runner).build(["foo"])

        first, second = runner.commands
        assert list(first.args[-4:]) == ["--packages-up-to", "foo", "--packages-skip", "foo"]
        assert list(second.args[-2:]) == ["--packages-select", "foo"]
        assert "-DBUILD_TESTING=OFF" in first.args
        assert "-DBUILD_TESTING=ON" in second.args

        out = presenter._file.getvalue()
        assert "┌[ Building dependencies for 'foo' ]" in out
        assert "┌[ Building 'foo' ]" in out

    def test_skip_dependencies(self, make_workflow, runner):
        make_workflow(runner).build(["foo", "bar"], skip_dependencies=True)

        assert len(runner.commands) == 1
        assert list(runner.commands[0].args[-3:]) == ["--packages-select", "foo", "bar"]

    def test_skip_tests(self, make_workflow, runner):
        config = ColbConfig()

        make_workflow(runner, config).build(["foo"], skip_tests=True)

        for command in runner.commands:
            assert "-DBUILD_TESTING=OFF" in command.args
            assert "-DBUILD_TESTING=ON" not in command.args
        assert config.package.build_tests is True

    def test_build_type_only_for_packages(self, make_workflow, runner):
        make_workflow(runner).build(["foo"], build_type=BuildType.RELEASE)

        deps, pkgs = runner.commands
        assert "-DCMAKE_BUILD_TYPE=Debug" in deps.args
        assert "-DCMAKE_BUILD_TYPE=Release" in pkgs.args

    def test_dependency_failure_stops(self, make_workflow):
        runner = RecordingRunner(statuses=[3])

        with pytest.raises(PhaseFailed) as exc_info:
            make_workflow(runner).build(["foo"])

        assert exc_info.value.exit_code == 3
        assert len(runner.commands) == 1

    def test_defaults_to_current_package(self, make_workflow, runner, workspace):
        make_workflow(runner, cwd=workspace / "src" / "my_pkg").build()

        assert list(runner.commands[-1].args[-2:]) == ["--packages-select", "my_pkg"]

    def test_no_package_detected(self, make_workflow, runner, workspace):
        with pytest.raises(PackageNotFoundError):
            make_workflow(runner, cwd=workspace).build()

        assert runner.commands == []

    def test_commands_run_in_workspace(self, make_workflow, runner, workspace):
        make_workflow(runner).build(["foo"])

        assert all(c.cwd == workspace for c in runner.commands)


class TestTest:
    """colb test."""

    def test_all_tests(self, make_workflow, runner):
        make_workflow(runner).test("pkg")

        assert runner.verbs == ["build", "test", "test-result"]
        build, test, result = runner.commands
        assert list(build.args[-2:]) == ["--packages-select", "pkg"]
        assert "-R" not in test.args
        assert list(test.args[:2]) == ["--log-base", "log"]
        assert "--verbose" in result.args and "--all" in result.args

    def test_single_test_through_colcon(self, make_workflow, runner, workspace):
        make_workflow(runner).test("pkg", test="foo")

        assert runner.verbs == ["ninja", "test", "test-result"]
        ninja = runner.commands[0]
        assert ninja.argv() == ["ninja", "-C", str(workspace / "build" / "pkg"), "foo"]
        assert "^foo$" in runner.commands[1].args

    def test_direct_skip_rebuild_runs_only_ctest(self, make_workflow, runner, presenter):
        make_workflow(runner).test("pkg", test="foo", direct=True, skip_rebuild=True)

        assert runner.programs == ["ctest"]
        assert "┌[ Running test 'foo' in 'pkg' ]" in presenter._file.getvalue()

    def test_direct_rebuilds_target_first(self, make_workflow, runner):
        make_workflow(runner).test("pkg", test="foo", direct=True)

        assert runner.programs == ["ninja", "ctest"]

    def test_rebuild_dependencies_with_single_test(self, make_workflow, runner):
        make_workflow(runner).test("pkg", test="foo", rebuild_dependencies=True)

        assert runner.verbs == ["build", "build", "ninja", "test", "test-result"]
        deps, pkg = runner.commands[:2]
        assert "--packages-up-to" in deps.args
        assert list(pkg.args[-2:]) == ["--packages-select", "pkg"]

    def test_rebuild_dependencies_whole_package(self, make_workflow, runner):
        make_workflow(runner).test("pkg", rebuild_dependencies=True)

        assert runner.verbs == ["build", "build", "test", "test-result"]

    def test_skip_rebuild_ignores_rebuild_dependencies(self, make_workflow, runner):
        make_workflow(runner).test("pkg", skip_rebuild=True, rebuild_dependencies=True)

        assert runner.verbs == ["test", "test-result"]

    def test_direct_without_test_warns(self, make_workflow, runner, presenter):
        make_workflow(runner).test("pkg", direct=True, skip_rebuild=True)

        assert runner.verbs == ["test", "test-result"]
        assert "--direct" in presenter._err_file.getvalue()

    def test_failing_tests_skip_results(self, make_workflow):
        runner = RecordingRunner(statuses=[0, 1])

        with pytest.raises(PhaseFailed) as exc_info:
            make_workflow(runner).test("pkg")

        assert exc_info.value.exit_code == 1
        assert runner.verbs == ["build", "test"]

    def test_package_from_cwd(self, make_workflow, runner, workspace):
        make_workflow(runner, cwd=workspace / "src" / "my_pkg").test(skip_rebuild=True)

        assert list(runner.commands[0].args[-2:]) == ["--packages-select", "my_pkg"]


class TestClean:
    """colb clean."""

    def test_nothing_to_clean(self, make_workflow, runner, presenter):
        with patch("colb.services.workflow.service.shutil.rmtree") as mock_rmtree:
            report = make_workflow(runner).clean("foo")

        assert report.nothing_to_clean
        mock_rmtree.assert_not_called()
        assert "└> # Nothing to clean up" in presenter._file.getvalue()

    def test_removes_build_and_install(self, make_workflow, runner, workspace, presenter):
        build_dir = workspace / "build" / "foo"
        install_dir = workspace / "install" / "foo"
        build_dir.mkdir(parents=True)
        install_dir.mkdir(parents=True)
        (build_dir / "CMakeCache.txt").write_text("")

        report = make_workflow(runner).clean("foo")

        assert report.removed == [build_dir, install_dir]
        assert not build_dir.exists()
        assert not install_dir.exists()
        assert f"└> rm -r '{build_dir}'" in presenter._file.getvalue()
        assert runner.commands == []

    def test_only_existing_folders(self, make_workflow, runner, workspace):
        install_dir = workspace / "install" / "foo"
        install_dir.mkdir(parents=True)

        report = make_workflow(runner).clean("foo")

        assert report.removed == [install_dir]

    def test_error_does_not_stop_second_folder(self, make_workflow, runner, workspace, presenter):
        (workspace / "build" / "foo").mkdir(parents=True)
        (workspace / "install" / "foo").mkdir(parents=True)

        with patch(
            "colb.services.workflow.service.shutil.rmtree",
            side_effect=[PermissionError("denied"), None],
        ) as mock_rmtree:
            report = make_workflow(runner).clean("foo")

        assert mock_rmtree.call_count == 2
        assert report.removed == [workspace / "install" / "foo"]
        assert [path for path, _ in report.errors] == [workspace / "build" / "foo"]
        assert "denied" in presenter._err_file.getvalue()
        assert "Nothing to clean up" not in presenter._file.getvalue()

    def test_empty_package_rejected(self, make_workflow, runner):
        with pytest.raises(InvalidArgumentError):
            make_workflow(runner).clean("")


def test_format_packages():
    assert format_packages(["a"]) == "'a'"
    assert format_packages(["a", "b"]) == "'a', 'b'"
