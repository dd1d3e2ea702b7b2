"""In-memory tree with focus tracking and a lazy visible-node traversal."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator
from typing import TYPE_CHECKING, Generic, TypeVar

from ..context import RenderContext, ensure_context
from ..errors import TraversalError
from .types import Node, VisitationRecord

if TYPE_CHECKING:
    from ..providers import NodeProvider

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Tree(Generic[T]):
    """A forest of ``Node`` roots plus the set of focused node IDs.

    The tree itself does not decide how nodes look; that is the job of the
    ``provider`` handed to the renderer. Children of collapsed nodes are not
    visible.
    """

    def __init__(
        self,
        roots: Iterable[Node[T]],
        provider: NodeProvider[T] | None = None,
        focused: Iterable[Hashable] = (),
    ) -> None:
        self.roots: list[Node[T]] = list(roots)
        if provider is None:
            from ..providers import DefaultProvider

            provider = DefaultProvider()
        self.provider = provider
        self._focused: set[Hashable] = set(focused)

    def is_focused(self, node_id: Hashable) -> bool:
        return node_id in self._focused

    def set_focus(self, *node_ids: Hashable) -> None:
        """Replace the focus set with ``node_ids``."""
        self._focused = set(node_ids)

    @property
    def focused_ids(self) -> frozenset[Hashable]:
        return frozenset(self._focused)

    def find(self, node_id: Hashable) -> Node[T] | None:
        """Return the first node with ``node_id`` anywhere in the tree, visible or not."""
        stack = list(reversed(self.roots))
        seen: set[int] = set()
        while stack:
            node = stack.pop()
            if id(node) in seen:
                continue
            seen.add(id(node))
            if node.id == node_id:
                return node
            stack.extend(reversed(node.children))
        return None

    def all_visible(self, ctx: RenderContext | None = None) -> Iterator[VisitationRecord[T]]:
        """Yield visible nodes in pre-order, one record at a time.

        The context is checked before each record is produced; a cancelled
        context or a cycle on the current path ends the traversal by raising.
        """
        ctx = ensure_context(ctx)
        # Each frame: (siblings, next index, depth).
        stack: list[tuple[list[Node[T]], int, int]] = [(self.roots, 0, 0)]
        path: list[Node[T]] = []
        while stack:
            siblings, index, depth = stack[-1]
            if index >= len(siblings):
                stack.pop()
                if path:
                    path.pop()
                continue
            err = ctx.err()
            if err is not None:
                raise err
            node = siblings[index]
            stack[-1] = (siblings, index + 1, depth)
            if any(ancestor is node for ancestor in path):
                logger.debug("cycle detected at node %r (depth %d)", node.id, depth)
                raise TraversalError(f"cycle detected at node {node.id!r}")
            yield VisitationRecord(node=node, depth=depth, is_last=index == len(siblings) - 1)
            if node.expanded and node.children:
                path.append(node)
                stack.append((node.children, 0, depth + 1))

    def visible_count(self, ctx: RenderContext | None = None) -> int:
        return sum(1 for _record in self.all_visible(ctx))


__all__ = ["Tree"]
