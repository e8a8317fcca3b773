"""Unit tests for include/exclude name filtering."""

from pathlib import Path

import pytest
from fspro.filesystem.filters import FilterOptions, passes
from pydantic import ValidationError


class TestPasses:
    """Tests for the passes function."""

    @pytest.mark.parametrize("name", ["a.txt", "c", ".hidden", "", "Ünïcode.md"])
    def test_empty_lists_accept_everything(self, name: str) -> None:
        """With no includes and no excludes every name passes."""
        assert passes(name, [], []) is True

    def test_exclude_rejects(self) -> None:
        """A name listed in excludes is rejected."""
        assert passes("b.txt", [], ["b.txt"]) is False
        assert passes("a.txt", [], ["b.txt"]) is True

    def test_include_restricts(self) -> None:
        """A non-empty include list only lets listed names through."""
        assert passes("a.txt", ["a.txt"], []) is True
        assert passes("b.txt", ["a.txt"], []) is False

    def test_exclude_wins_over_include(self) -> None:
        """A name in both lists is rejected."""
        assert passes("a.txt", ["a.txt", "b.txt"], ["a.txt"]) is False
        assert passes("b.txt", ["a.txt", "b.txt"], ["a.txt"]) is True

    def test_exact_match_only(self) -> None:
        """Matching uses the full name: no case folding, globbing or prefixes."""
        assert passes("A.txt", [], ["a.txt"]) is True
        assert passes("a.txt", [], ["*.txt"]) is True
        assert passes("a.txt", [], ["a"]) is True
        assert passes("a", ["a.txt"], []) is False


class TestFilterOptions:
    """Tests for the FilterOptions model."""

    def test_defaults_are_empty(self) -> None:
        """Omitted fields default to empty lists."""
        options = FilterOptions()
        assert options.includes == []
        assert options.excludes == []
        assert options.is_empty is True

    def test_none_fields_become_empty(self) -> None:
        """Explicit None is treated like an omitted field."""
        options = FilterOptions(includes=None, excludes=None)  # type: ignore[arg-type]
        assert options.includes == []
        assert options.excludes == []

    def test_forbids_extra_fields(self) -> None:
        """Unknown fields raise ValidationError."""
        with pytest.raises(ValidationError):
            FilterOptions(patterns=["*.txt"])  # type: ignore[call-arg]

    def test_is_frozen(self) -> None:
        """FilterOptions cannot be reassigned after construction."""
        options = FilterOptions(excludes=["x"])
        with pytest.raises(ValidationError):
            options.excludes = []  # type: ignore[misc]

    def test_resolve_none(self) -> None:
        """resolve(None) gives permissive options."""
        assert FilterOptions.resolve(None).is_empty is True

    def test_resolve_returns_same_instance(self) -> None:
        """resolve passes FilterOptions through unchanged."""
        options = FilterOptions(includes=["a.txt"])
        assert FilterOptions.resolve(options) is options

    def test_resolve_mapping_with_partial_fields(self) -> None:
        """resolve accepts a mapping with only one of the two keys."""
        options = FilterOptions.resolve({"excludes": ["b.txt"]})
        assert options.includes == []
        assert options.excludes == ["b.txt"]

    def test_passes_delegates(self) -> None:
        """FilterOptions.passes applies exclude precedence."""
        options = FilterOptions(includes=["a.txt"], excludes=["a.txt"])
        assert options.passes("a.txt") is False

    def test_select_preserves_order(self, tmp_path: Path) -> None:
        """select keeps passing paths in their input order."""
        paths = [tmp_path / "z.txt", tmp_path / "b.txt", tmp_path / "a.txt", tmp_path / "c"]
        options = FilterOptions(excludes=["b.txt"])

        assert options.select(paths) == [tmp_path / "z.txt", tmp_path / "a.txt", tmp_path / "c"]

    def test_select_matches_display_name_not_stem(self, tmp_path: Path) -> None:
        """select compares the name including its extension."""
        paths = [tmp_path / "notes.md", tmp_path / "notes"]
        options = FilterOptions(includes=["notes"])

        assert options.select(paths) == [tmp_path / "notes"]
