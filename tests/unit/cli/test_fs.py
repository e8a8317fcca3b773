"""Unit tests for filesystem CLI commands.

Tests for fspro fs move, info and open.
"""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

from fspro.cli.main import app
from fspro.filesystem.errors import LaunchError
from typer.testing import CliRunner

runner = CliRunner()


class TestFsMove:
    """Tests for fspro fs move command."""

    def test_move_with_excludes(self, sample_tree: Path, tmp_path: Path) -> None:
        """Excluded entries stay in the source."""
        dest = tmp_path / "dest"

        result = runner.invoke(app, ["fs", "move", str(sample_tree), str(dest), "-x", "b.txt"])

        assert result.exit_code == 0
        assert "Moved 2 entries" in result.output
        assert sorted(p.name for p in dest.iterdir()) == ["a.txt", "c"]
        assert sorted(p.name for p in sample_tree.iterdir()) == ["b.txt"]

    def test_dry_run_moves_nothing(self, sample_tree: Path, tmp_path: Path) -> None:
        """--dry-run lists candidates without touching the filesystem."""
        dest = tmp_path / "dest"

        result = runner.invoke(app, ["fs", "move", str(sample_tree), str(dest), "--dry-run"])

        assert result.exit_code == 0
        assert "[DRY-RUN] 3 entries would be moved." in result.output
        assert not dest.exists()
        assert sorted(p.name for p in sample_tree.iterdir()) == ["a.txt", "b.txt", "c"]

    def test_missing_source(self, tmp_path: Path) -> None:
        """A missing source exits with code 1."""
        result = runner.invoke(
            app, ["fs", "move", str(tmp_path / "missing"), str(tmp_path / "dest")]
        )

        assert result.exit_code == 1
        assert "Entries moved before the failure were kept." in result.output

    def test_dry_run_missing_source(self, tmp_path: Path) -> None:
        """A dry run of a missing source also fails."""
        result = runner.invoke(
            app, ["fs", "move", str(tmp_path / "missing"), str(tmp_path / "dest"), "-n"]
        )

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestFsInfo:
    """Tests for fspro fs info command."""

    def test_json(self, sample_tree: Path) -> None:
        """--format json prints camelCase metadata."""
        result = runner.invoke(app, ["fs", "info", str(sample_tree / "a.txt"), "-f", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["fullName"] == "a.txt"
        assert data["size"] == 6
        assert data["isFile"] is True

    def test_omit_size(self, sample_tree: Path) -> None:
        """--omit-size reports size 0."""
        result = runner.invoke(
            app, ["fs", "info", str(sample_tree), "--omit-size", "--format", "json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.output)["size"] == 0

    def test_table(self, sample_tree: Path) -> None:
        """The default output is a table."""
        result = runner.invoke(app, ["fs", "info", str(sample_tree / "a.txt")])

        assert result.exit_code == 0
        assert "Extension" in result.output
        assert "txt" in result.output

    def test_missing(self, tmp_path: Path) -> None:
        """A missing path exits with code 1."""
        result = runner.invoke(app, ["fs", "info", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Cannot read metadata" in result.output


class TestFsOpen:
    """Tests for fspro fs open command."""

    def test_open_with_explorer(self, sample_tree: Path) -> None:
        """Flags are forwarded to open_path."""
        target = sample_tree / "a.txt"
        mock_open = MagicMock()
        with patch("fspro.cli.commands.fs.open_path", mock_open):
            result = runner.invoke(app, ["fs", "open", str(target), "--explorer"])

        assert result.exit_code == 0
        mock_open.assert_called_once_with(target, explorer=True, enter_dir=False)

    def test_missing_path(self, tmp_path: Path) -> None:
        """A missing path is rejected before launching anything."""
        mock_open = MagicMock()
        with patch("fspro.cli.commands.fs.open_path", mock_open):
            result = runner.invoke(app, ["fs", "open", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Path does not exist" in result.output
        mock_open.assert_not_called()

    def test_launch_error(self, sample_tree: Path) -> None:
        """Launch failures exit with code 1."""
        with patch(
            "fspro.cli.commands.fs.open_path",
            side_effect=LaunchError("No opener found"),
        ):
            result = runner.invoke(app, ["fs", "open", str(sample_tree)])

        assert result.exit_code == 1
        assert "No opener found" in result.output
