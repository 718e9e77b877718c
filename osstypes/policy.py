"""Policies in the form ``Permission:Resource1,Resource2,...`` and collections of them."""

from __future__ import annotations

import functools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from osstypes.common import ValidationError
from osstypes.permission import Operation, Permission, Resource, validate_name

ResourcePath = str


@functools.total_ordering
@dataclass(frozen=True)
class Resources:
    """A set of resource paths; an empty set or one holding ``*`` covers every resource."""

    paths: frozenset[ResourcePath] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "paths", frozenset(self.paths))

    def _key(self) -> tuple[str, ...]:
        return tuple(sorted(self.paths))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Resources):
            return NotImplemented
        return self._key() < other._key()

    def __iter__(self) -> Iterator[ResourcePath]:
        return iter(sorted(self.paths))

    def __len__(self) -> int:
        return len(self.paths)

    def __contains__(self, item: object) -> bool:
        return item in self.paths

    def is_all(self) -> bool:
        """Return True if the collection is empty or holds the wildcard ``*``."""
        return not self.paths or "*" in self.paths

    def check(self, value: str) -> bool:
        """Return True if ``value`` is in the collection or it covers every resource."""
        return self.is_all() or value in self.paths

    def __str__(self) -> str:
        if self.is_all():
            return ""
        return ",".join(sorted(self.paths))

    @classmethod
    def parse(cls, value: str) -> "Resources":
        """Parse a comma-separated list of resource paths."""
        if value in ("", "*"):
            return cls()
        paths = frozenset(value.split(","))
        for path in sorted(paths):
            validate_name(path)
        return cls(paths)


@functools.total_ordering
@dataclass(frozen=True)
class Policy:
    """A permission granted on a set of resources."""

    permission: Permission = field(default_factory=Permission)
    resources: Resources = field(default_factory=Resources)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Policy):
            return NotImplemented
        return (self.permission, self.resources) < (other.permission, other.resources)

    def has_permission(self, permission: Permission, resource_path: str) -> bool:
        """Return True if this policy grants ``permission`` on ``resource_path``."""
        return self.permission.check(permission) and self.resources.check(resource_path)

    def has_permission_any(
        self, permission: Permission, resources_path: Iterable[str]
    ) -> bool:
        """Return True if this policy grants ``permission`` on any of the given paths."""
        return self.permission.check(permission) and (
            self.resources.is_all()
            or any(self.resources.check(path) for path in resources_path)
        )

    def __str__(self) -> str:
        if self.resources.is_all():
            return "*" if self.permission.is_all() else str(self.permission)
        return f"{self.permission}:{self.resources}"

    @classmethod
    def parse(cls, value: str) -> "Policy":
        """Parse a policy string."""
        if value == "*":
            return cls()
        parts = value.split(":")
        if len(parts) > 2:
            raise ValidationError(f"invalid policy format {value}")
        permission = Permission.parse(parts[0])
        resources = Resources.parse(parts[1]) if len(parts) == 2 else Resources()
        return cls(permission=permission, resources=resources)


class Policies:
    """An ordered set of policies."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, policies: Iterable[Policy] = ()) -> None:
        self._policies: set[Policy] = set(policies)

    @classmethod
    def all(cls) -> "Policies":
        """Return policies granting every permission on every resource."""
        return cls([Policy()])

    @classmethod
    def read(cls) -> "Policies":
        """Return policies granting read and list on every resource."""
        return cls(
            [
                Policy(permission=Permission(Resource.ALL, Operation.READ)),
                Policy(permission=Permission(Resource.ALL, Operation.LIST)),
            ]
        )

    def append(self, policies: "Policies") -> None:
        """Add every policy of ``policies`` to this collection."""
        self._policies |= policies._policies

    def remove(self, policies: "Policies") -> None:
        """Remove every policy of ``policies`` from this collection."""
        self._policies -= policies._policies

    def has_permission(self, permission: Permission, resource_path: str) -> bool:
        """Return True if any policy grants ``permission`` on ``resource_path``."""
        return any(p.has_permission(permission, resource_path) for p in self._policies)

    def has_permission_any(
        self, permission: Permission, resources_path: Iterable[str]
    ) -> bool:
        """Return True if any policy grants ``permission`` on any of the given paths."""
        paths = list(resources_path)
        return any(p.has_permission_any(permission, paths) for p in self._policies)

    def __iter__(self) -> Iterator[Policy]:
        return iter(sorted(self._policies))

    def __len__(self) -> int:
        return len(self._policies)

    def __contains__(self, item: object) -> bool:
        return item in self._policies

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Policies):
            return NotImplemented
        return self._policies == other._policies

    def __repr__(self) -> str:
        return f"Policies({sorted(self._policies)!r})"

    def __str__(self) -> str:
        return " ".join(str(p) for p in self)

    @classmethod
    def parse(cls, value: str) -> "Policies":
        """Parse a space-separated list of policies."""
        if not value:
            return cls()
        return cls(Policy.parse(part) for part in value.split(" "))