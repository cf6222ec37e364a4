"""Pydantic data models."""

from site_redirects.models.category import Category
from site_redirects.models.post import Post
from site_redirects.models.redirect import RedirectKind, RedirectRule, RedirectTable

__all__ = [
    "Category",
    "Post",
    "RedirectKind",
    "RedirectRule",
    "RedirectTable",
]
