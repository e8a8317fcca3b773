"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import io
import tarfile
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory for every test."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home / "fspro"


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Source directory with a.txt, b.txt and c/d.txt."""
    root = tmp_path / "source"
    (root / "c").mkdir(parents=True)
    (root / "a.txt").write_bytes(b"alpha\n")
    (root / "b.txt").write_bytes(b"bravo\n")
    (root / "c" / "d.txt").write_bytes(b"delta\n")
    return root


def build_archive(path: Path, members: dict[str, bytes | None]) -> Path:
    """Write a tar.gz whose member names are stored verbatim.

    Args:
        path: Archive file to create.
        members: Stored name to content; None creates a directory record.

    Returns:
        The archive path.
    """
    with tarfile.open(path, "w:gz") as tar:
        for name, content in members.items():
            info = tarfile.TarInfo(name)
            if content is None:
                info.type = tarfile.DIRTYPE
                info.mode = 0o755
                tar.addfile(info)
            else:
                info.size = len(content)
                info.mode = 0o644
                tar.addfile(info, io.BytesIO(content))
    return path


def snapshot(root: Path) -> dict[str, bytes | None]:
    """Map every path under root (posix, relative) to its bytes, None for dirs."""
    return {
        p.relative_to(root).as_posix(): None if p.is_dir() else p.read_bytes()
        for p in sorted(root.rglob("*"))
    }


@pytest.fixture
def make_archive():
    """Expose build_archive to tests."""
    return build_archive


@pytest.fixture
def tree_snapshot():
    """Expose snapshot to tests."""
    return snapshot
