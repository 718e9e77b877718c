"""Resources, operations and permissions in the form ``Resource.Operation[.Constraint]``."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from osstypes.common import ValidationError

_NAME_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_-"
)


def validate_name(s: str) -> None:
    """Check that ``s`` is non-empty and only holds A-Z, a-z, 0-9, '_' or '-'.

    Raises ValidationError otherwise.
    """
    if not s:
        raise ValidationError("empty string")
    for c in s:
        if c not in _NAME_CHARS:
            raise ValidationError(f"invalid character: {c}")


@functools.total_ordering
@dataclass(frozen=True)
class _Term:
    """A named term; well-known names sort first, in declaration order."""

    name: str = "*"

    _KNOWN: ClassVar[tuple[str, ...]] = ("*",)

    def _rank(self) -> int:
        try:
            return self._KNOWN.index(self.name)
        except ValueError:
            return len(self._KNOWN)

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self._rank(), self.name) < (other._rank(), other.name)  # type: ignore[attr-defined]

    def __str__(self) -> str:
        return self.name


class Resource(_Term):
    """A resource kind; ``*`` stands for every resource."""

    _KNOWN: ClassVar[tuple[str, ...]] = ("*", "File", "Folder", "Bucket", "Cluster")

    ALL: ClassVar["Resource"]
    FILE: ClassVar["Resource"]
    FOLDER: ClassVar["Resource"]
    BUCKET: ClassVar["Resource"]
    CLUSTER: ClassVar["Resource"]

    def check(self, value: "Resource") -> bool:
        """Return True if this resource matches ``value`` or covers all resources."""
        return self.name == "*" or value == self

    @classmethod
    def parse(cls, value: str) -> "Resource":
        """Parse a resource name."""
        if value in cls._KNOWN:
            return cls(value)
        try:
            validate_name(value)
        except ValidationError as err:
            raise ValidationError(f"invalid resource: {value}, {err}") from None
        return cls(value)


Resource.ALL = Resource("*")
Resource.FILE = Resource("File")
Resource.FOLDER = Resource("Folder")
Resource.BUCKET = Resource("Bucket")
Resource.CLUSTER = Resource("Cluster")


class Operation(_Term):
    """An operation on a resource; ``*`` stands for every operation."""

    _KNOWN: ClassVar[tuple[str, ...]] = ("*", "List", "Read", "Write", "Delete")

    ALL: ClassVar["Operation"]
    LIST: ClassVar["Operation"]
    READ: ClassVar["Operation"]
    WRITE: ClassVar["Operation"]
    DELETE: ClassVar["Operation"]

    def check(self, value: "Operation") -> bool:
        """Return True if this operation matches ``value`` or covers all operations."""
        return self.name == "*" or value == self

    @classmethod
    def parse(cls, value: str) -> "Operation":
        """Parse an operation name."""
        if value in cls._KNOWN:
            return cls(value)
        try:
            validate_name(value)
        except ValidationError as err:
            raise ValidationError(f"invalid operation: {value}, {err}") from None
        return cls(value)


Operation.ALL = Operation("*")
Operation.LIST = Operation("List")
Operation.READ = Operation("Read")
Operation.WRITE = Operation("Write")
Operation.DELETE = Operation("Delete")


@functools.total_ordering
@dataclass(frozen=True)
class Permission:
    """A permission ``Resource.Operation[.Constraint]``."""

    resource: Resource = field(default=Resource.ALL)
    operation: Operation = field(default=Operation.ALL)
    constraint: Optional[Resource] = None

    def _key(self) -> tuple:
        return (
            self.resource,
            self.operation,
            self.constraint is not None,
            self.constraint if self.constraint is not None else Resource.ALL,
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Permission):
            return NotImplemented
        return self._key() < other._key()

    def is_all(self) -> bool:
        """Return True if this grants every operation on every resource unconstrained."""
        return (
            self.resource == Resource.ALL
            and self.operation == Operation.ALL
            and self.constraint is None
        )

    def check(self, value: "Permission") -> bool:
        """Return True if this permission covers ``value``."""
        return (
            self.resource.check(value.resource)
            and self.operation.check(value.operation)
            and self.check_constraint(value.constraint)
        )

    def check_constraint(self, value: Optional[Resource]) -> bool:
        """Return True if this permission's constraint admits ``value``."""
        if self.constraint is None or self.constraint == Resource.ALL:
            return True
        return value is not None and self.constraint == value

    def __str__(self) -> str:
        if self.constraint is not None and self.constraint != Resource.ALL:
            return f"{self.resource}.{self.operation}.{self.constraint}"
        if self.is_all():
            return "*"
        return f"{self.resource}.{self.operation}"

    @classmethod
    def parse(cls, value: str) -> "Permission":
        """Parse a permission string."""
        if value == "*":
            return cls()
        parts = value.split(".")
        resource = Resource.parse(parts[0])
        if len(parts) < 2:
            raise ValidationError(f"invalid permission format {value}")
        operation = Operation.parse(parts[1])
        constraint = None
        if len(parts) >= 3:
            try:
                constraint = Resource.parse(parts[2])
            except ValidationError as err:
                raise ValidationError(f"invalid constraint: {err}") from None
        if len(parts) > 3:
            raise ValidationError(f"invalid permission format {value}")
        return cls(resource=resource, operation=operation, constraint=constraint)