"""Unit tests for shell execution utilities."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest
from fspro.utils.shell import CommandResult, find_command, run_command


class TestCommandResult:
    """Tests for CommandResult."""

    def test_success(self) -> None:
        """Exit code 0 is success."""
        assert CommandResult(stdout="", stderr="", returncode=0).success is True
        assert CommandResult(stdout="", stderr="", returncode=2).success is False


class TestRunCommand:
    """Tests for run_command function."""

    @patch("fspro.utils.shell.subprocess.run")
    def test_captures_output(self, mock_run: MagicMock) -> None:
        """run_command returns captured stdout, stderr and exit code."""
        mock_run.return_value = MagicMock(stdout="out", stderr="err", returncode=3)

        result = run_command(["xdg-open", "/tmp"])

        assert result == CommandResult(stdout="out", stderr="err", returncode=3)
        call_kwargs = mock_run.call_args.kwargs
        assert call_kwargs["capture_output"] is True
        assert call_kwargs["text"] is True
        assert call_kwargs["check"] is False

    @patch("fspro.utils.shell.subprocess.run")
    def test_passes_timeout(self, mock_run: MagicMock) -> None:
        """run_command forwards the timeout."""
        mock_run.return_value = MagicMock(stdout="", stderr="", returncode=0)

        run_command(["true"], timeout=5.0)

        assert mock_run.call_args.kwargs["timeout"] == 5.0

    @patch("fspro.utils.shell.subprocess.run")
    def test_timeout_propagates(self, mock_run: MagicMock) -> None:
        """TimeoutExpired is not swallowed."""
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="sleep", timeout=1)

        with pytest.raises(subprocess.TimeoutExpired):
            run_command(["sleep", "10"], timeout=1)


class TestFindCommand:
    """Tests for find_command function."""

    @patch("fspro.utils.shell.shutil.which")
    def test_returns_first_available(self, mock_which: MagicMock) -> None:
        """The first installed candidate wins."""
        mock_which.side_effect = lambda name: "/usr/bin/gio" if name == "gio" else None

        assert find_command(["xdg-open", "gio", "kde-open"]) == "gio"

    @patch("fspro.utils.shell.shutil.which", return_value=None)
    def test_none_when_missing(self, _mock_which: MagicMock) -> None:
        """None is returned when nothing is installed."""
        assert find_command(["xdg-open", "gio"]) is None
