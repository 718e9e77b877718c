# osstypes

Data types, validation rules and a permission policy language for an object
storage service that keeps files in folders inside buckets.

## Installation

```
pip install osstypes
```

## Modules

- `osstypes.permission`: `Resource`, `Operation` and `Permission`. Each has a
  `parse` class method. Permissions are written `Resource.Operation[.Constraint]`,
  for example `"File.Read"` or `"Bucket.Read.Info"`, and `"*"` means everything.
  `validate_name` accepts names made only of `A-Z`, `a-z`, `0-9`, `_` and `-`.
- `osstypes.policy`: `Resources`, `Policy` and `Policies`. A policy is written
  `Permission:Resource1,Resource2`. Policies are joined by single spaces.
  `Policies.all()` grants everything. `Policies.read()` grants read and list.
  `append` and `remove` add and take away policies. `has_permission` and
  `has_permission_any` answer access questions.
- `osstypes.file`: `FileInfo`, `CreateFileInput`, `UpdateFileInput`,
  `UpdateFileChunkInput`, `FileChunk`, `MoveInput` and the matching output
  records. It also has `valid_file_name`, `valid_file_parent` and
  `UrlFileParam.from_url`, which reads `/f/<id>` and `/h/<hex sha256>` download
  URLs together with their `token`, `filename` and `inline` query parameters.
  It also defines the size limits `CHUNK_SIZE`, `MAX_FILE_SIZE` and
  `MAX_FILE_SIZE_PER_CALL`.
- `osstypes.folder`: `FolderInfo`, `FolderName`, `CreateFolderInput`,
  `UpdateFolderInput` and their output records.
- `osstypes.bucket`: `BucketInfo` and `UpdateBucketInput`.
- `osstypes.cluster`: `ClusterInfo`, `WasmInfo`, `AddWasmInput`,
  `DeployWasmInput`, `BucketDeploymentInfo` and `validate_principals`.
  `validate_principals` rejects an empty collection and the anonymous principal.
- `osstypes.common`: `crc32`, `to_cbor_bytes`, `nat_to_u64` and `format_error`.
  `to_cbor_bytes` encodes dataclasses as maps and sets as sorted arrays. The
  module also defines `ValidationError`, a `ValueError` subclass.

Every `validate()` method returns nothing when the input is acceptable and
raises `ValidationError` when it is not. So do the `parse` methods,
`validate_name` and `validate_principals`.

## Example

```python
from osstypes.permission import Operation, Permission, Resource
from osstypes.policy import Policies

policies = Policies.parse("File.*:1 Folder.*:2,3,5 Folder.Read Bucket.Read")

wanted = Permission(resource=Resource.parse("File"), operation=Operation.parse("Delete"))
policies.has_permission(wanted, "1")   # True
policies.has_permission(wanted, "2")   # False

str(policies)  # "File.*:1 Folder.*:2,3,5 Folder.Read Bucket.Read"
```

```python
from osstypes.file import UrlFileParam, valid_file_name

valid_file_name("report.txt")   # True
valid_file_name("../secret")    # False

param = UrlFileParam.from_url("/f/42?inline")
param.file, param.inline        # (42, True)
```

## What it does not do

This package only describes and checks data. It does not do any of the following:

- store files, folders or buckets
- run a server
- issue or sign access tokens
- deploy wasm modules

Those jobs are left to whatever service uses these types.

## Running the tests

```
pip install -e ".[test]"
pytest
```