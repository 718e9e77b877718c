"""Shared helpers: error type, error formatting, checksums and CBOR encoding."""

from __future__ import annotations

import dataclasses
import zlib
from collections.abc import Mapping
from typing import Any

import cbor2

_U64_MAX = 2**64 - 1


class ValidationError(ValueError):
    """Raised when an input value fails validation or parsing."""


def format_error(err: Any) -> str:
    """Return the debug representation of an error value."""
    return repr(err)


def crc32(data: bytes) -> int:
    """Return the CRC-32 (IEEE) checksum of ``data``."""
    return zlib.crc32(data) & 0xFFFFFFFF


def nat_to_u64(nat: int) -> int:
    """Return ``nat`` if it fits in an unsigned 64-bit integer, otherwise 0."""
    if 0 <= nat <= _U64_MAX:
        return int(nat)
    return 0


def _prepare(obj: Any) -> Any:
    """Turn dataclasses, sets and tuples into plain CBOR-friendly values."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name: _prepare(getattr(obj, f.name)) for f in dataclasses.fields(obj)
        }
    if isinstance(obj, Mapping):
        return {key: _prepare(value) for key, value in obj.items()}
    if isinstance(obj, (set, frozenset)):
        return [_prepare(item) for item in sorted(obj)]
    if isinstance(obj, (list, tuple)):
        return [_prepare(item) for item in obj]
    return obj


def to_cbor_bytes(obj: Any) -> bytes:
    """Return the CBOR encoding of ``obj``.

    Dataclasses are encoded as maps of their fields and sets as sorted arrays.
    """
    return cbor2.dumps(_prepare(obj))