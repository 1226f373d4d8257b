"""Tests for the suitcase.commands subcommand implementations."""

import sys
from pathlib import Path

import pytest

from suitcase.commands.fdp import discover_projects, find_projects
from suitcase.commands.ford import for_every_dart_project
from suitcase.commands.fua import fvm_use_for_every_flutter_project
from suitcase.commands.gho import git_hub_open
from suitcase.commands.upgrade import upgrade
from suitcase.integrations.shell import ShellOutput
from suitcase.utils.errors import (
    BatchCommandError,
    CommandFailedError,
    GitOperationError,
    NoRemotesConfiguredError,
    NotAGitRepositoryError,
    PackageNotInstalledError,
    PathDoesNotExistError,
    ProjectCommandError,
)


def _git_shell(
    fake_shell,
    *,
    inside="true",
    branches="  origin/main\n",
    url="git@github.com:me/repo.git",
):
    """Answer the git queries gho makes, in order."""

    def _run(command, *args, **kwargs):
        if command != "git":
            return ShellOutput(stdout="")
        if "rev-parse" in args:
            return ShellOutput(stdout=f"{inside}\n")
        if "branch" in args:
            return ShellOutput(stdout=branches)
        if "config" in args:
            if url is None:
                raise CommandFailedError(command, [str(arg) for arg in args], status=1)
            return ShellOutput(stdout=f"{url}\n")
        raise AssertionError(f"unexpected git call: {args}")

    fake_shell.run.side_effect = _run
    return fake_shell


class TestGitHubOpen:
    def test_opens_browser_url(self, fake_shell, tmp_path):
        _git_shell(fake_shell)

        url = git_hub_open(fake_shell, str(tmp_path), open_command="xdg-open")

        assert url == "https://github.com/me/repo"
        fake_shell.run.assert_called_with("xdg-open", "https://github.com/me/repo")

    def test_uses_requested_remote(self, fake_shell, tmp_path):
        _git_shell(fake_shell)

        git_hub_open(fake_shell, str(tmp_path), remote="upstream")

        config_calls = [c for c in fake_shell.run.call_args_list if "config" in c[0]]
        assert config_calls[0][0][-1] == "remote.upstream.url"

    def test_missing_path(self, fake_shell, tmp_path):
        with pytest.raises(PathDoesNotExistError):
            git_hub_open(fake_shell, str(tmp_path / "missing"))

        fake_shell.run.assert_not_called()

    def test_not_a_git_repository(self, fake_shell, tmp_path):
        fake_shell.run.side_effect = CommandFailedError("git", [], status=128)

        with pytest.raises(NotAGitRepositoryError):
            git_hub_open(fake_shell, str(tmp_path))

    def test_no_remotes(self, fake_shell, tmp_path):
        _git_shell(fake_shell, branches="")

        with pytest.raises(NoRemotesConfiguredError):
            git_hub_open(fake_shell, str(tmp_path))

        assert not any(c[0][0] == "open" for c in fake_shell.run.call_args_list)

    def test_remote_without_url(self, fake_shell, tmp_path):
        _git_shell(fake_shell, url=None)

        with pytest.raises(GitOperationError):
            git_hub_open(fake_shell, str(tmp_path))

    def test_open_failure_propagates(self, fake_shell, tmp_path):
        _git_shell(fake_shell)
        git_answers = fake_shell.run.side_effect

        def _run(command, *args, **kwargs):
            if command == "open":
                raise CommandFailedError(command, [str(arg) for arg in args], status=1)
            return git_answers(command, *args, **kwargs)

        fake_shell.run.side_effect = _run

        with pytest.raises(CommandFailedError):
            git_hub_open(fake_shell, str(tmp_path))


PIP_LIST_EDITABLE = """\
Package  Version Editable project location
-------- ------- -------------------------
rich     13.7.1
suitcase 0.4.0   /home/me/code/suitcase
"""

PIP_LIST_INDEX = """\
Package  Version
-------- -------
rich     13.7.1
suitcase 0.4.0
"""


def _pip_shell(fake_shell, list_output, install_output):
    def _run(command, *args, **kwargs):
        if "list" in args:
            return ShellOutput(stdout=list_output)
        if "install" in args:
            return ShellOutput(stdout=install_output)
        raise AssertionError(f"unexpected call: {command} {args}")

    fake_shell.run.side_effect = _run
    return fake_shell


class TestUpgrade:
    def test_editable_install_upgrades_from_path(self, fake_shell):
        _pip_shell(fake_shell, PIP_LIST_EDITABLE, "Successfully installed suitcase-0.5.0\n")

        message = upgrade(fake_shell)

        assert message == "Upgraded suitcase from v0.4.0 to v0.5.0"
        install_args = fake_shell.run.call_args_list[-1][0]
        assert install_args[0] == sys.executable
        assert "--editable" in install_args
        assert "/home/me/code/suitcase" in install_args

    def test_index_install_upgrades_from_pypi(self, fake_shell):
        _pip_shell(fake_shell, PIP_LIST_INDEX, "Successfully installed suitcase-0.5.0\n")

        upgrade(fake_shell)

        install_args = fake_shell.run.call_args_list[-1][0]
        assert "--editable" not in install_args
        assert "suitcase" in install_args

    def test_already_up_to_date(self, fake_shell):
        _pip_shell(
            fake_shell,
            PIP_LIST_INDEX,
            "Requirement already satisfied: suitcase in /venv/lib/site-packages (0.4.0)\n",
        )

        assert upgrade(fake_shell) == "suitcase is already up to date (v0.4.0)"

    def test_unparseable_output(self, fake_shell):
        _pip_shell(fake_shell, PIP_LIST_INDEX, "something unexpected\n")

        message = upgrade(fake_shell)

        assert message == "Upgraded suitcase successfully (but failed to parse output from pip)"

    def test_package_not_installed(self, fake_shell):
        _pip_shell(fake_shell, "Package Version\n------- -------\nrich 13.7.1\n", "")

        with pytest.raises(PackageNotInstalledError) as exc_info:
            upgrade(fake_shell)

        assert "['rich']" in str(exc_info.value)
        assert fake_shell.run.call_count == 1

    def test_pip_failure_propagates(self, fake_shell):
        def _run(command, *args, **kwargs):
            if "list" in args:
                return ShellOutput(stdout=PIP_LIST_INDEX)
            raise CommandFailedError(command, list(args), status=1, stderr="network down")

        fake_shell.run.side_effect = _run

        with pytest.raises(CommandFailedError):
            upgrade(fake_shell)


class TestFindProjects:
    def test_discover_projects(self, workspace):
        assert len(discover_projects(str(workspace))) == 4

    def test_prints_summary_and_table(self, workspace, capsys):
        projects = find_projects(str(workspace))

        out = capsys.readouterr().out
        assert len(projects) == 4
        assert "Found 4 projects (2 Dart, 2 Flutter)" in out

    def test_no_projects(self, tmp_path, capsys):
        assert find_projects(str(tmp_path)) == []
        assert "No projects found" in capsys.readouterr().out

    def test_missing_path(self, tmp_path):
        with pytest.raises(PathDoesNotExistError):
            find_projects(str(tmp_path / "missing"))


class TestForEveryDartProject:
    def test_runs_in_all_projects(self, workspace, fake_shell, capsys):
        result = for_every_dart_project(fake_shell, ["dart", "pub", "get"], path=str(workspace))

        assert len(result.succeeded) == 4
        fake_shell.run.assert_called_with("bash", "-c", "dart pub get")
        out = capsys.readouterr().out
        assert "Found 4 Dart and Flutter projects" in out
        assert "succeeded in 4 projects" in out

    def test_excludes_flutter_projects(self, workspace, fake_shell, capsys):
        result = for_every_dart_project(
            fake_shell, ["dart", "test"], path=str(workspace), include_flutter_projects=False
        )

        assert [p.name for p in result.succeeded] == ["core", "cli"]
        assert "Found 2 Dart (non-Flutter) projects" in capsys.readouterr().out

    def test_no_projects(self, tmp_path, fake_shell, capsys):
        result = for_every_dart_project(fake_shell, ["ls"], path=str(tmp_path))

        assert result.ok
        fake_shell.run.assert_not_called()
        assert "No projects found" in capsys.readouterr().out

    def test_failures_raise_batch_error_after_all_projects(self, workspace, fake_shell):
        def _run(program, *args, **kwargs):
            if Path.cwd().name == "web":
                raise CommandFailedError(program, list(args), status=1)
            return ShellOutput(stdout="")

        fake_shell.run.side_effect = _run

        with pytest.raises(BatchCommandError) as exc_info:
            for_every_dart_project(fake_shell, ["dart", "test"], path=str(workspace))

        assert fake_shell.run.call_count == 4
        assert [name for name, _ in exc_info.value.errors] == ["web"]

    def test_fail_fast(self, workspace, fake_shell):
        fake_shell.run.side_effect = CommandFailedError("bash", [], status=1)

        with pytest.raises(ProjectCommandError):
            for_every_dart_project(fake_shell, ["false"], path=str(workspace), fail_fast=True)

        assert fake_shell.run.call_count == 1

    def test_custom_program(self, workspace, fake_shell):
        for_every_dart_project(fake_shell, ["echo", "hi"], path=str(workspace), program="sh")

        fake_shell.run.assert_called_with("sh", "-c", "echo hi")

    def test_extra_ignored(self, workspace, fake_shell):
        result = for_every_dart_project(
            fake_shell, ["x"], path=str(workspace), extra_ignored=["apps"]
        )

        assert [p.name for p in result.succeeded] == ["core", "cli"]


class TestFvmUseForEveryFlutterProject:
    def test_installs_then_uses_version(self, workspace, fake_shell, capsys):
        result = fvm_use_for_every_flutter_project(fake_shell, "3.19.0", path=str(workspace))

        calls = [c[0] for c in fake_shell.run.call_args_list]
        assert calls[0] == ("fvm", "install", "3.19.0")
        assert calls[1:] == [("bash", "-c", "fvm use 3.19.0")] * 2
        assert [p.name for p in result.succeeded] == ["mobile", "web"]
        out = capsys.readouterr().out
        assert "Found 2 Flutter projects" in out
        assert "Flutter 3.19.0 set in 2 projects" in out

    def test_include_dart_projects_forces(self, workspace, fake_shell, capsys):
        result = fvm_use_for_every_flutter_project(
            fake_shell, "3.19.0", path=str(workspace), include_dart_projects=True
        )

        assert len(result.succeeded) == 4
        fake_shell.run.assert_called_with("bash", "-c", "fvm use 3.19.0 --force")
        assert "Found 4 Dart and Flutter projects" in capsys.readouterr().out

    def test_custom_fvm_command(self, workspace, fake_shell):
        fvm_use_for_every_flutter_project(
            fake_shell, "stable", path=str(workspace), fvm_command="/opt/fvm/bin/fvm"
        )

        assert fake_shell.run.call_args_list[0][0] == ("/opt/fvm/bin/fvm", "install", "stable")
        fake_shell.run.assert_called_with("bash", "-c", "/opt/fvm/bin/fvm use stable")

    def test_no_flutter_projects_skips_install(self, make_project, tmp_path, fake_shell, capsys):
        make_project("only_dart")

        result = fvm_use_for_every_flutter_project(fake_shell, "3.19.0", path=str(tmp_path))

        assert result.ok
        fake_shell.run.assert_not_called()
        assert "No projects found" in capsys.readouterr().out

    def test_install_failure_stops_before_projects(self, workspace, fake_shell):
        fake_shell.run.side_effect = CommandFailedError("fvm", ["install"], status=1)

        with pytest.raises(CommandFailedError):
            fvm_use_for_every_flutter_project(fake_shell, "9.9.9", path=str(workspace))

        assert fake_shell.run.call_count == 1

    def test_project_failures_raise_batch_error(self, workspace, fake_shell):
        def _run(program, *args, **kwargs):
            if program == "bash" and Path.cwd().name == "mobile":
                raise CommandFailedError(program, list(args), status=1)
            return ShellOutput(stdout="")

        fake_shell.run.side_effect = _run

        with pytest.raises(BatchCommandError) as exc_info:
            fvm_use_for_every_flutter_project(fake_shell, "3.19.0", path=str(workspace))

        assert [name for name, _ in exc_info.value.errors] == ["mobile"]
