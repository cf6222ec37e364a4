"""Scan the content root for post folders and their categories."""

from __future__ import annotations

from pathlib import Path

from site_redirects.models.post import Post
from site_redirects.utils.logging import get_logger
from site_redirects.utils.text_utils import derive_slug, extract_list_literal

logger = get_logger(__name__)

DEFAULT_METADATA_FILENAME = "index.qmd"
DEFAULT_CATEGORY_KEY = "categories"

__all__ = [
    "derive_slug",
    "list_post_folders",
    "parse_category_line",
    "extract_categories",
    "load_posts",
]


def list_post_folders(content_root: Path | str) -> list[str]:
    """
    List the post folders directly under the content root.

    A missing or unreadable content root yields an empty list. Names are
    sorted so that repeated builds list posts in the same order.
    """
    root = Path(content_root)
    try:
        names = [entry.name for entry in root.iterdir() if entry.is_dir()]
    except (FileNotFoundError, NotADirectoryError):
        logger.debug(f"Content root {root} not found, no posts")
        return []
    except OSError as e:
        logger.warning(f"Could not list {root}: {e}")
        return []
    return sorted(names)


def parse_category_line(line: str, key: str = DEFAULT_CATEGORY_KEY) -> list[str] | None:
    """
    Parse a metadata line such as ``categories: [SQL, Data Viz]``.

    Returns None if the line does not declare ``key``. A declaration
    without a bracketed list yields an empty list.
    """
    if not line.startswith(f"{key}:"):
        return None
    items = extract_list_literal(line)
    return items if items is not None else []


def _read_metadata(metadata_path: Path) -> str | None:
    """Metadata file text, or None if it is missing or unreadable."""
    try:
        return metadata_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read {metadata_path}: {e}")
        return None


def _parse_categories(text: str, key: str) -> list[str]:
    # First declaring line wins
    for line in text.splitlines():
        categories = parse_category_line(line, key)
        if categories is not None:
            return categories
    return []


def extract_categories(
    post_folder: Path | str,
    metadata_filename: str = DEFAULT_METADATA_FILENAME,
    key: str = DEFAULT_CATEGORY_KEY,
) -> list[str]:
    """Read the categories declared in a post's metadata file."""
    text = _read_metadata(Path(post_folder) / metadata_filename)
    if text is None:
        return []
    return _parse_categories(text, key)


def load_posts(
    content_root: Path | str,
    metadata_filename: str = DEFAULT_METADATA_FILENAME,
    key: str = DEFAULT_CATEGORY_KEY,
) -> list[Post]:
    """Load every post folder under the content root with its categories."""
    root = Path(content_root)
    posts = []
    for folder_name in list_post_folders(root):
        metadata_path = root / folder_name / metadata_filename
        text = _read_metadata(metadata_path)
        posts.append(
            Post(
                folder_name=folder_name,
                categories=_parse_categories(text, key) if text is not None else [],
                metadata_path=metadata_path if text is not None else None,
            )
        )
    return posts
