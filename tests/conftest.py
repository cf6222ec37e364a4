"""Shared fixtures for building content trees."""

import errno
from pathlib import Path

import pytest


def make_post(root: Path, folder: str, metadata: str | None = None, filename: str = "index.qmd") -> Path:
    """Create a post folder, optionally with a metadata file."""
    post = root / folder
    post.mkdir(parents=True)
    if metadata is not None:
        (post / filename).write_text(metadata, encoding="utf-8")
    return post


@pytest.fixture
def content_root(tmp_path):
    """Content root from the two-post example site."""
    root = tmp_path / "posts"
    root.mkdir()
    make_post(
        root,
        "20240101_alpha",
        '---\ntitle: "Alpha"\ncategories: [SQL, Data Viz]\n---\n\nBody text.\n',
    )
    make_post(root, "20240102_beta")
    return root


@pytest.fixture
def deny_metadata(monkeypatch):
    """Make reading any index.qmd fail with EACCES."""
    original = Path.read_text

    def read_text(self, *args, **kwargs):
        if self.name == "index.qmd":
            raise PermissionError(errno.EACCES, "Permission denied", str(self))
        return original(self, *args, **kwargs)

    monkeypatch.setattr(Path, "read_text", read_text)


@pytest.fixture
def deny_listing(monkeypatch):
    """Make listing any directory fail with EACCES."""

    def iterdir(self):
        raise PermissionError(errno.EACCES, "Permission denied", str(self))

    monkeypatch.setattr(Path, "iterdir", iterdir)
