"""Bucket records and bucket update inputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from osstypes.common import ValidationError
from osstypes.file import MAX_FILE_SIZE


@dataclass
class BucketInfo:
    """Settings and counters of a bucket."""

    name: str = ""
    file_id: int = 0
    folder_id: int = 0
    max_file_size: int = 0
    max_folder_depth: int = 0
    max_children: int = 0
    max_custom_data_size: int = 0
    enable_hash_index: bool = False
    status: int = 0
    visibility: int = 0
    total_files: int = 0
    total_chunks: int = 0
    total_folders: int = 0
    managers: set[str] = field(default_factory=set)
    auditors: set[str] = field(default_factory=set)
    trusted_ecdsa_pub_keys: list[bytes] = field(default_factory=list)
    trusted_eddsa_pub_keys: list[bytes] = field(default_factory=list)
    governance_canister: Optional[str] = None


@dataclass
class UpdateBucketInput:
    """Request to change bucket settings; None leaves a setting unchanged."""

    name: Optional[str] = None
    max_file_size: Optional[int] = None
    max_folder_depth: Optional[int] = None
    max_children: Optional[int] = None
    max_custom_data_size: Optional[int] = None
    enable_hash_index: Optional[bool] = None
    status: Optional[int] = None
    visibility: Optional[int] = None
    trusted_ecdsa_pub_keys: Optional[list[bytes]] = None
    trusted_eddsa_pub_keys: Optional[list[bytes]] = None

    def validate(self) -> None:
        """Raise ValidationError if any given setting is out of range."""
        if self.name is not None and not self.name.strip():
            raise ValidationError("invalid bucket name")
        if self.max_file_size is not None:
            if self.max_file_size == 0:
                raise ValidationError("max_file_size should be greater than 0")
            if self.max_file_size < MAX_FILE_SIZE:
                raise ValidationError(
                    f"max_file_size should be greater than or equal to {MAX_FILE_SIZE}"
                )
        if self.max_folder_depth == 0:
            raise ValidationError("max_folder_depth should be greater than 0")
        if self.max_children == 0:
            raise ValidationError("max_children should be greater than 0")
        if self.max_custom_data_size == 0:
            raise ValidationError("max_custom_data_size should be greater than 0")
        if self.status is not None and not -1 <= self.status <= 1:
            raise ValidationError("status should be -1, 0 or 1")
        if self.visibility is not None and self.visibility not in (0, 1):
            raise ValidationError("visibility should be 0 or 1")