"""Shared fixtures for fenmov tests."""

import pytest

from fenmov.config import ConfigManager


@pytest.fixture(autouse=True)
def no_user_config(monkeypatch):
    """Keep a developer's own config file out of the tests."""
    monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG_LOCATIONS", [])


@pytest.fixture
def tree(tmp_path):
    """
    Create a source tree with files at depth 1 and depth 2.

    source/
        a.txt
        b.txt
        sub/
            c.txt
            deeper/
                d.txt
    """
    source = tmp_path / "source"
    (source / "sub" / "deeper").mkdir(parents=True)
    (source / "a.txt").write_text("a")
    (source / "b.txt").write_text("b")
    (source / "sub" / "c.txt").write_text("c")
    (source / "sub" / "deeper" / "d.txt").write_text("d")
    return source


@pytest.fixture
def target(tmp_path):
    """Create an empty target directory."""
    target = tmp_path / "target"
    target.mkdir()
    return target


@pytest.fixture
def five_files(tmp_path):
    """Create a flat source directory holding five files."""
    source = tmp_path / "five"
    source.mkdir()
    for name in ["1.txt", "2.txt", "3.txt", "4.txt", "5.txt"]:
        (source / name).write_text(name)
    return source
