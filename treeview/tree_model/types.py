"""Node and visitation datatypes shared by traversal sources and renderers."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """One tree node: stable identity, display name, and an opaque payload.

    Equality is identity-based; use ``id`` to compare nodes across trees.
    """

    id: Hashable
    name: str
    data: T | None = None
    children: list["Node[T]"] = field(default_factory=list)
    expanded: bool = False

    def add(self, child: "Node[T]") -> "Node[T]":
        """Append ``child`` and return it so nested builders can chain."""
        self.children.append(child)
        return child

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True)
class VisitationRecord(Generic[T]):
    """One pre-order traversal step.

    ``depth`` counts ancestor edges from a root (roots are 0); ``is_last`` is
    true when no sibling follows this node under the same parent.
    """

    node: Node[T]
    depth: int
    is_last: bool


__all__ = ["Node", "VisitationRecord"]
