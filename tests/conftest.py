"""Shared test fixtures."""

from pathlib import Path

import pytest
from subpath_serve.config import Config, ServeConfig, ServerConfig


@pytest.fixture
def serve_dir(tmp_path: Path) -> Path:
    """Create a served folder with a duplicated basename and a .git directory.

    Layout:
        folder1/a
        folder2/a
        folder3/b
        .git/config
        .git/objects/ab/cdef
    """
    root = tmp_path / "serve"
    for folder, name, text in [
        ("folder1", "a", "first a\n"),
        ("folder2", "a", "second a\n"),
        ("folder3", "b", "just b\n"),
    ]:
        (root / folder).mkdir(parents=True)
        (root / folder / name).write_text(text)

    git = root / ".git"
    (git / "objects" / "ab").mkdir(parents=True)
    (git / "config").write_text("[core]\n")
    (git / "objects" / "ab" / "cdef").write_text("blob")
    return root


@pytest.fixture
def make_config(serve_dir: Path):
    """Build a validated Config for serve_dir, with optional prefix."""

    def _make(git_http_prefix: str | None = None) -> Config:
        return Config(
            server=ServerConfig(),
            serve=ServeConfig(folder=serve_dir, git_http_prefix=git_http_prefix),
        ).validate()

    return _make


@pytest.fixture
def test_config(make_config) -> Config:
    """Create a test configuration serving serve_dir without a prefix."""
    return make_config()
