"""File records, file request inputs and download URL parameters."""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass
from typing import Any, NamedTuple, Optional
from urllib.parse import parse_qsl, urlsplit

from osstypes.common import ValidationError

CHUNK_SIZE = 256 * 1024
MAX_FILE_SIZE = 384 * 1024 * 1024 * 1024
MAX_FILE_SIZE_PER_CALL = 1024 * 2000

CUSTOM_KEY_BY_HASH = "by_hash"

MapValue = dict[str, Any]

_MAX_NAME_BYTES = 96
_U32_MAX = 2**32 - 1
_HEX_RE = re.compile(r"[0-9a-fA-F]*")
_B64URL_RE = re.compile(r"[A-Za-z0-9_-]*")
_U32_RE = re.compile(r"\+?[0-9]+")


def valid_file_name(name: str) -> bool:
    """Return True if ``name`` is a single, plain path component of at most 96 bytes."""
    if not name or name.strip() != name or len(name.encode("utf-8")) > _MAX_NAME_BYTES:
        return False
    return "/" not in name and name not in (".", "..")


def valid_file_parent(parent: str) -> bool:
    """Return True if ``parent`` is empty, ``/`` or an absolute path of valid names."""
    if parent in ("", "/"):
        return True
    if not parent.startswith("/"):
        return False
    return all(valid_file_name(name) for name in parent[1:].split("/"))


def _check_status(status: Optional[int], low: int) -> None:
    if status is not None and not low <= status <= 1:
        if low == 0:
            raise ValidationError("status should be 0 or 1")
        raise ValidationError("status should be -1, 0 or 1")


@dataclass
class FileInfo:
    """Metadata of a stored file."""

    id: int = 0
    parent: int = 0
    name: str = ""
    content_type: str = ""
    size: int = 0
    filled: int = 0
    created_at: int = 0
    updated_at: int = 0
    chunks: int = 0
    status: int = 0
    hash: Optional[bytes] = None
    dek: Optional[bytes] = None
    custom: Optional[MapValue] = None
    ex: Optional[MapValue] = None


@dataclass
class CreateFileInput:
    """Request to create a file."""

    parent: int = 0
    name: str = ""
    content_type: str = ""
    size: Optional[int] = None
    content: Optional[bytes] = None
    status: Optional[int] = None
    hash: Optional[bytes] = None
    dek: Optional[bytes] = None
    custom: Optional[MapValue] = None

    def validate(self) -> None:
        """Raise ValidationError if the input is not acceptable."""
        if not valid_file_name(self.name):
            raise ValidationError("invalid file name")
        if not self.content_type:
            raise ValidationError("content_type cannot be empty")
        if self.content is not None and not self.content:
            raise ValidationError("content cannot be empty")
        _check_status(self.status, 0)


@dataclass
class CreateFileOutput:
    """Result of creating a file."""

    id: int = 0
    created_at: int = 0


@dataclass
class UpdateFileInput:
    """Request to update a file's metadata."""

    id: int = 0
    name: Optional[str] = None
    content_type: Optional[str] = None
    status: Optional[int] = None
    size: Optional[int] = None
    hash: Optional[bytes] = None
    custom: Optional[MapValue] = None

    def validate(self) -> None:
        """Raise ValidationError if the input is not acceptable."""
        if self.name is not None and not valid_file_name(self.name):
            raise ValidationError("invalid file name")
        if self.content_type is not None and not self.content_type:
            raise ValidationError("content_type cannot be empty")
        _check_status(self.status, -1)


@dataclass
class UpdateFileOutput:
    """Result of updating a file."""

    updated_at: int = 0


@dataclass
class UpdateFileChunkInput:
    """Request to write one chunk of a file."""

    id: int = 0
    chunk_index: int = 0
    content: bytes = b""


@dataclass
class UpdateFileChunkOutput:
    """Result of writing a chunk."""

    filled: int = 0
    updated_at: int = 0


class FileChunk(NamedTuple):
    """A chunk index with its content."""

    index: int = 0
    content: bytes = b""


@dataclass
class MoveInput:
    """Request to move an item from one folder to another."""

    id: int = 0
    from_: int = 0
    to: int = 0


def _parse_u32(text: str) -> int:
    if not _U32_RE.fullmatch(text):
        raise ValidationError("invalid file id")
    value = int(text)
    if value > _U32_MAX:
        raise ValidationError("invalid file id")
    return value


def _parse_hash(text: str) -> bytes:
    if not _HEX_RE.fullmatch(text):
        raise ValidationError(f"invalid hex character in {text!r}")
    if len(text) % 2:
        raise ValidationError("odd length hex string")
    data = bytes.fromhex(text)
    if len(data) != 32:
        raise ValidationError(f"invalid hash length: {len(data)}")
    return data


def _decode_token(value: str) -> bytes:
    if not _B64URL_RE.fullmatch(value) or len(value) % 4 == 1:
        raise ValidationError(f"failed to decode base64 token from {value}")
    try:
        return base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))
    except (binascii.Error, ValueError):
        raise ValidationError(f"failed to decode base64 token from {value}") from None


@dataclass
class UrlFileParam:
    """Parameters of a file download URL such as ``/f/<id>`` or ``/h/<hash>``."""

    file: int = 0
    hash: Optional[bytes] = None
    token: Optional[bytes] = None
    name: Optional[str] = None
    inline: bool = False

    @classmethod
    def from_url(cls, req_url: str) -> "UrlFileParam":
        """Parse a request URL or path into file parameters."""
        full = f"http://localhost{req_url}" if req_url.startswith("/") else req_url
        try:
            parts = urlsplit(full)
        except ValueError:
            raise ValidationError(f"invalid url: {req_url}") from None
        if not parts.scheme:
            raise ValidationError(f"invalid url: {req_url}")

        path = parts.path
        if not path:
            if not parts.netloc:
                raise ValidationError(f"invalid url path: {req_url}")
            path = "/"
        if not path.startswith("/"):
            raise ValidationError(f"invalid url path: {req_url}")
        segments = iter(path[1:].split("/"))

        kind = next(segments, None)
        if kind == "f":
            param = cls(file=_parse_u32(next(segments, "")))
        elif kind == "h":
            param = cls(hash=_parse_hash(next(segments, "")))
        else:
            raise ValidationError(f"invalid url path: {req_url}")

        for key, value in parse_qsl(parts.query, keep_blank_values=True):
            if key == "token":
                param.token = _decode_token(value)
                break
            if key == "filename":
                param.name = value
            elif key == "inline":
                param.inline = True

        filename = next(segments, None)
        if filename is not None:
            param.name = filename
        return param