"""File-related data models."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class FileInfo(BaseModel):
    """A file selected for probing."""

    absolute_path: Path = Field(..., description="Path as encountered during traversal")
    file_name: str = Field(..., description="Final path segment")

    @classmethod
    def from_path(cls, path: Path) -> "FileInfo":
        """Create file info for a traversed path."""
        return cls(absolute_path=path, file_name=path.name)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
