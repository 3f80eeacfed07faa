"""
Pydantic models for folders.
"""

from typing import List

from pydantic import BaseModel, Field

from ..models import Folder


class FolderCreate(BaseModel):
    """Schema for creating several folders in one request."""

    folder_names: List[str] = Field(..., alias="folderNames", min_length=1, example=["Books", "Gifts"])

    model_config = {
        "populate_by_name": True,
    }


class FolderRead(BaseModel):
    id: int
    name: str

    model_config = {
        "from_attributes": True,
    }

    @classmethod
    def from_model(cls, folder: Folder) -> "FolderRead":
        return cls(id=folder.id, name=folder.name)
