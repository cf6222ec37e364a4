"""Post model for folders under the content root."""

from pathlib import Path

from pydantic import BaseModel, Field, computed_field

from site_redirects.utils.text_utils import derive_slug


class Post(BaseModel):
    """A post folder named ``<prefix>_<slug>``."""

    folder_name: str = Field(..., description="Folder name under the content root")
    categories: list[str] = Field(default_factory=list, description="Declared categories")
    metadata_path: Path | None = Field(default=None, description="Metadata file, if present")

    @computed_field
    @property
    def slug(self) -> str:
        """Text after the last underscore in the folder name."""
        return derive_slug(self.folder_name)

    class Config:
        json_schema_extra = {
            "example": {
                "folder_name": "20240216_dannys-diner",
                "categories": ["SQL", "Data Viz"],
                "metadata_path": "posts/20240216_dannys-diner/index.qmd",
            }
        }
