import cbor2
import pytest

from osstypes.cluster import (
    ANONYMOUS,
    BucketDeploymentInfo,
    ClusterInfo,
    DeployWasmInput,
    WasmInfo,
    validate_principals,
)
from osstypes.common import ValidationError, to_cbor_bytes


def test_validate_principals_empty():
    with pytest.raises(ValidationError, match="principals cannot be empty"):
        validate_principals(set())


def test_validate_principals_anonymous():
    with pytest.raises(ValidationError, match="anonymous user is not allowed"):
        validate_principals({"aaaaa-aa", ANONYMOUS})


def test_validate_principals_accepts_named():
    principals = ["aaaaa-aa", "aaaaa-aa"]
    assert validate_principals(principals) is None
    assert principals == ["aaaaa-aa", "aaaaa-aa"]


def test_cluster_info_defaults():
    info = ClusterInfo()
    assert info.bucket_latest_version == bytes(32)
    assert info.managers == set()
    assert info.governance_canister is None


def test_deploy_wasm_input_default_args():
    deploy = DeployWasmInput(canister="aaaaa-aa")
    assert deploy.args is None
    assert deploy.canister == "aaaaa-aa"


def test_wasm_info_cbor_round_trip():
    info = WasmInfo(
        created_at=1,
        created_by="aaaaa-aa",
        description="first",
        wasm=b"\x00asm",
        hash=bytes(32),
    )
    decoded = cbor2.loads(to_cbor_bytes(info))
    assert decoded["wasm"] == b"\x00asm"
    assert decoded["description"] == "first"
    assert decoded["hash"] == bytes(32)


def test_deployment_info_round_trip():
    log = BucketDeploymentInfo(
        deploy_at=5,
        canister="aaaaa-aa",
        prev_hash=bytes(32),
        wasm_hash=bytes(32),
        error="failed",
    )
    decoded = cbor2.loads(to_cbor_bytes(log))
    assert decoded["error"] == "failed"
    assert decoded["args"] is None
    assert BucketDeploymentInfo(**decoded) == log