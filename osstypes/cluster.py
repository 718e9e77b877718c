"""Cluster records, wasm deployment inputs and principal checks."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from osstypes.common import ValidationError

ANONYMOUS = "2vxsx-fae"
TOKEN_KEY_DERIVATION_PATH = b"ic_oss_cluster"
SECONDS = 1_000_000_000
MILLISECONDS = 1_000_000


@dataclass
class ClusterInfo:
    """Settings and counters of a cluster."""

    name: str = ""
    ecdsa_key_name: str = ""
    schnorr_key_name: str = ""
    ecdsa_token_public_key: str = ""
    schnorr_ed25519_token_public_key: str = ""
    weak_ed25519_token_public_key: str = ""
    token_expiration: int = 0
    managers: set[str] = field(default_factory=set)
    committers: set[str] = field(default_factory=set)
    subject_authz_total: int = 0
    bucket_latest_version: bytes = bytes(32)
    bucket_wasm_total: int = 0
    bucket_deployed_total: int = 0
    bucket_deployment_logs: int = 0
    governance_canister: Optional[str] = None


@dataclass
class WasmInfo:
    """A stored wasm module with its sha256 hash."""

    created_at: int
    created_by: str
    description: str
    wasm: bytes
    hash: bytes


@dataclass
class AddWasmInput:
    """Request to store a wasm module."""

    description: str
    wasm: bytes


@dataclass
class DeployWasmInput:
    """Request to deploy the wasm module to a canister."""

    canister: str
    args: Optional[bytes] = None


@dataclass
class BucketDeploymentInfo:
    """A record of one bucket deployment."""

    deploy_at: int
    canister: str
    prev_hash: bytes
    wasm_hash: bytes
    args: Optional[bytes] = None
    error: Optional[str] = None


def validate_principals(principals: Iterable[str]) -> None:
    """Raise ValidationError if ``principals`` is empty or holds the anonymous principal."""
    items = set(principals)
    if not items:
        raise ValidationError("principals cannot be empty")
    if ANONYMOUS in items:
        raise ValidationError("anonymous user is not allowed")