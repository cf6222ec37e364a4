"""Build and write the redirect table for the hosting platform."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import yaml

from site_redirects.core.scanner import (
    DEFAULT_CATEGORY_KEY,
    DEFAULT_METADATA_FILENAME,
    load_posts,
)
from site_redirects.models.category import Category
from site_redirects.models.post import Post
from site_redirects.models.redirect import RedirectKind, RedirectRule, RedirectTable
from site_redirects.utils.logging import LogContext, get_logger
from site_redirects.utils.text_utils import unique_in_order

logger = get_logger(__name__)

DEFAULT_POSTS_PREFIX = "/posts"


class RedirectWriteError(Exception):
    """Raised when an output file cannot be written."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot write {path}: {cause}")


def post_rule(post: Post, posts_prefix: str = DEFAULT_POSTS_PREFIX) -> RedirectRule:
    """Rule sending /<slug> to the post's published folder."""
    return RedirectRule(
        source=f"/{post.slug}",
        destination=f"{posts_prefix.rstrip('/')}/{post.folder_name}",
        kind=RedirectKind.post,
    )


def category_rule(category: Category) -> RedirectRule:
    """Rule sending /category/<key> to the filtered listing page."""
    return RedirectRule(
        source=f"/category/{category.key}",
        destination=f"/#category={category.encoded}",
        kind=RedirectKind.category,
    )


def collect_categories(posts: Iterable[Post]) -> list[Category]:
    """Unique categories across posts, in order of first appearance."""
    counts: dict[str, int] = {}
    for post in posts:
        # A post listing a category twice still counts once
        for name in unique_in_order(post.categories):
            counts[name] = counts.get(name, 0) + 1
    return [Category(display_name=name, post_count=count) for name, count in counts.items()]


def build_table(
    content_root: Path | str,
    metadata_filename: str = DEFAULT_METADATA_FILENAME,
    category_key: str = DEFAULT_CATEGORY_KEY,
    posts_prefix: str = DEFAULT_POSTS_PREFIX,
) -> RedirectTable:
    """Scan the content root and compute all redirect rules."""
    with LogContext(logger, f"scanning {content_root}"):
        posts = load_posts(content_root, metadata_filename, category_key)
        categories = collect_categories(posts)

    rules = [post_rule(post, posts_prefix) for post in posts]
    rules.extend(category_rule(category) for category in categories)
    table = RedirectTable(posts=posts, categories=categories, rules=rules)

    for slug, folders in table.duplicate_slugs().items():
        logger.warning(f"Slug /{slug} is shared by {', '.join(folders)}")
    for key, names in table.colliding_category_keys().items():
        logger.warning(f"Categories {', '.join(names)} all map to /category/{key}")

    logger.info(
        f"Built {len(table.post_rules)} post and {len(table.category_rules)} category redirects"
    )
    return table


def build_redirect_table(
    content_root: Path | str,
    metadata_filename: str = DEFAULT_METADATA_FILENAME,
    category_key: str = DEFAULT_CATEGORY_KEY,
    posts_prefix: str = DEFAULT_POSTS_PREFIX,
) -> list[str]:
    """Redirect file lines: post redirects followed by category redirects."""
    return build_table(content_root, metadata_filename, category_key, posts_prefix).lines


def write_redirect_file(lines: Iterable[str], output_path: Path | str) -> Path:
    """Write one rule per line, replacing any existing file."""
    path = Path(output_path)
    try:
        with open(path, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
    except OSError as e:
        raise RedirectWriteError(path, e) from e
    logger.debug(f"Wrote {path}")
    return path


def write_manifest(table: RedirectTable, output_path: Path | str) -> Path:
    """Write a YAML summary of posts and categories behind the redirects."""
    manifest = {
        "posts": [
            {
                "folder": post.folder_name,
                "slug": post.slug,
                "categories": post.categories,
            }
            for post in table.posts
        ],
        "categories": [
            {
                "display_name": category.display_name,
                "key": category.key,
                "encoded": category.encoded,
                "post_count": category.post_count,
            }
            for category in table.categories
        ],
        "redirects": table.lines,
    }

    path = Path(output_path)
    try:
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(manifest, f, default_flow_style=False, allow_unicode=True, sort_keys=False)
    except OSError as e:
        raise RedirectWriteError(path, e) from e
    return path
