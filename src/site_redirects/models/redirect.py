"""Redirect rule models."""

from collections import Counter, defaultdict
from enum import Enum

from pydantic import BaseModel, Field

from site_redirects.models.category import Category
from site_redirects.models.post import Post


class RedirectKind(str, Enum):
    """Where a redirect rule came from."""
    post = "post"
    category = "category"


class RedirectRule(BaseModel):
    """A single source -> destination rule for the host's redirect engine."""

    source: str = Field(..., description="Incoming path, e.g. /my-slug")
    destination: str = Field(..., description="Target path, e.g. /posts/20240216_my-slug")
    kind: RedirectKind

    def to_line(self) -> str:
        """Render as a line of the redirect file."""
        return f"{self.source} {self.destination}"


class RedirectTable(BaseModel):
    """Redirect rules computed from one snapshot of the content root."""

    posts: list[Post] = Field(default_factory=list)
    categories: list[Category] = Field(default_factory=list)
    rules: list[RedirectRule] = Field(default_factory=list)

    @property
    def lines(self) -> list[str]:
        """Rendered rules, post rules first."""
        return [rule.to_line() for rule in self.rules]

    @property
    def post_rules(self) -> list[RedirectRule]:
        return [r for r in self.rules if r.kind == RedirectKind.post]

    @property
    def category_rules(self) -> list[RedirectRule]:
        return [r for r in self.rules if r.kind == RedirectKind.category]

    def duplicate_slugs(self) -> dict[str, list[str]]:
        """Map each slug shared by several posts to their folder names."""
        counts = Counter(post.slug for post in self.posts)
        folders: dict[str, list[str]] = defaultdict(list)
        for post in self.posts:
            if counts[post.slug] > 1:
                folders[post.slug].append(post.folder_name)
        return dict(folders)

    def colliding_category_keys(self) -> dict[str, list[str]]:
        """Map each key produced by several display names to those names."""
        names: dict[str, list[str]] = defaultdict(list)
        for category in self.categories:
            names[category.key].append(category.display_name)
        return {key: values for key, values in names.items() if len(values) > 1}
