"""Category model for post listing labels."""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field

from site_redirects.utils.text_utils import category_key, encode_category


class Category(BaseModel):
    """Represents a category label declared by one or more posts."""

    display_name: str = Field(..., description="Label as written in post metadata")
    post_count: int = Field(default=0, description="Number of posts declaring this category")

    @computed_field
    @property
    def key(self) -> str:
        """Lowercased, hyphenated form used in /category/<key> paths."""
        return category_key(self.display_name)

    @computed_field
    @property
    def encoded(self) -> str:
        """Form used in the listing page fragment."""
        return encode_category(self.display_name)
