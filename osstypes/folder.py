"""Folder records and folder request inputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from osstypes.common import ValidationError
from osstypes.file import valid_file_name


@dataclass
class FolderInfo:
    """Metadata of a folder and the ids of its children."""

    id: int = 0
    parent: int = 0
    name: str = ""
    created_at: int = 0
    updated_at: int = 0
    status: int = 0
    files: set[int] = field(default_factory=set)
    folders: set[int] = field(default_factory=set)


@dataclass
class FolderName:
    """A folder id with its name."""

    id: int = 0
    name: str = ""


@dataclass
class CreateFolderInput:
    """Request to create a folder."""

    parent: int = 0
    name: str = ""

    def validate(self) -> None:
        """Raise ValidationError if the folder name is not valid."""
        if not valid_file_name(self.name):
            raise ValidationError("invalid folder name")


@dataclass
class CreateFolderOutput:
    """Result of creating a folder."""

    id: int = 0
    created_at: int = 0


@dataclass
class UpdateFolderInput:
    """Request to update a folder."""

    id: int = 0
    name: Optional[str] = None
    status: Optional[int] = None

    def validate(self) -> None:
        """Raise ValidationError if the input is not acceptable."""
        if self.name is not None and not valid_file_name(self.name):
            raise ValidationError("invalid folder name")
        if self.status is not None and not -1 <= self.status <= 1:
            raise ValidationError("status should be -1, 0 or 1")


@dataclass
class UpdateFolderOutput:
    """Result of updating a folder."""

    updated_at: int = 0