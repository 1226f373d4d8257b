"""Tests for suitcase.integrations.shell module."""

import sys
from unittest.mock import MagicMock, patch

import pytest

from suitcase.integrations.shell import Shell, ShellOutput
from suitcase.utils.errors import CommandFailedError, ShellStartError


class TestShellRun:
    def test_returns_captured_output(self):
        output = Shell().run(sys.executable, "-c", "print('hello')")

        assert isinstance(output, ShellOutput)
        assert output.stdout.strip() == "hello"

    def test_captures_stderr(self):
        output = Shell().run(sys.executable, "-c", "import sys; sys.stderr.write('warn')")

        assert output.stderr == "warn"

    def test_non_zero_exit_raises_command_failed(self):
        with pytest.raises(CommandFailedError) as exc_info:
            Shell().run(
                sys.executable,
                "-c",
                "import sys; print('out'); sys.stderr.write('err'); sys.exit(3)",
            )

        error = exc_info.value
        assert error.status == 3
        assert error.stdout.strip() == "out"
        assert error.stderr == "err"
        assert "got status: exit status: 3" in str(error)

    def test_missing_program_raises_shell_start_error(self):
        with pytest.raises(ShellStartError) as exc_info:
            Shell().run("suitcase-definitely-not-a-program", "--flag")

        assert exc_info.value.command == "suitcase-definitely-not-a-program"
        assert exc_info.value.args_list == ["--flag"]

    def test_runs_in_given_cwd(self, tmp_path):
        output = Shell().run(sys.executable, "-c", "import os; print(os.getcwd())", cwd=tmp_path)

        assert output.stdout.strip() == str(tmp_path.resolve())

    def test_converts_args_to_strings(self, mock_subprocess, tmp_path):
        Shell().run("git", "-C", tmp_path, "status")

        args = mock_subprocess.call_args[0][0]
        assert args == ["git", "-C", str(tmp_path), "status"]

    def test_never_uses_a_shell(self, mock_subprocess):
        Shell().run("echo", "$HOME")

        kwargs = mock_subprocess.call_args[1]
        assert kwargs.get("shell", False) is False
        assert kwargs["capture_output"] is True
        assert kwargs["text"] is True

    def test_none_streams_become_empty_strings(self, mock_subprocess):
        mock_subprocess.return_value = MagicMock(returncode=0, stdout=None, stderr=None)

        output = Shell().run("true")

        assert output == ShellOutput(stdout="", stderr="")

    def test_logs_command_and_exit_code(self, mock_subprocess):
        with patch("suitcase.integrations.shell.log_command") as mock_log:
            Shell().run("git", "status")

        mock_log.assert_called_once_with("git status", exit_code=0)

    def test_invalid_utf8_output_is_replaced(self):
        output = Shell().run(
            sys.executable, "-c", "import sys; sys.stdout.buffer.write(b'ok \\xff\\xfe')"
        )

        assert output.stdout.startswith("ok ")
        assert "�" in output.stdout

    def test_invalid_utf8_in_failed_command(self):
        with pytest.raises(CommandFailedError) as exc_info:
            Shell().run(
                sys.executable,
                "-c",
                "import sys; sys.stderr.buffer.write(b'\\xff'); sys.exit(1)",
            )

        assert exc_info.value.stderr == "�"

    def test_decodes_as_utf8_with_replacement(self, mock_subprocess):
        Shell().run("true")

        kwargs = mock_subprocess.call_args[1]
        assert kwargs["encoding"] == "utf-8"
        assert kwargs["errors"] == "replace"
