"""Tree-branch prefixes and the ancestor state they are built from."""

from __future__ import annotations

from collections.abc import Sequence

from ..errors import TraversalError

BRANCH_CONTINUE = "│   "
BRANCH_BLANK = "    "
BRANCH_MID = "├── "
BRANCH_LAST = "└── "


def build_prefix(ancestor_is_last: Sequence[bool], is_last: bool) -> str:
    """Return the branch glyphs that connect a non-root node to its ancestors.

    Each flag in ``ancestor_is_last`` says whether the ancestor at that depth
    was the last of its siblings. Ancestors with later siblings draw a
    vertical line through their column; last ancestors leave it blank. The
    node's own branch follows, e.g. ``[False, True]`` with ``is_last`` gives
    ``"│       └── "``.

    Root nodes (depth 0) take no prefix and must not be passed here.
    """
    parts = [BRANCH_BLANK if ancestor_last else BRANCH_CONTINUE for ancestor_last in ancestor_is_last]
    parts.append(BRANCH_LAST if is_last else BRANCH_MID)
    return "".join(parts)


class AncestorFlags:
    """Per-depth "was last child" history for a single pre-order pass.

    While a node at depth ``D`` is rendered the sequence holds exactly ``D``
    slots, one per ancestor. ``update`` moves to the next record: descending
    appends the previous node's flag, returning shallower trims, and staying
    at the same depth only replaces the pending flag of the current node.
    """

    def __init__(self) -> None:
        self._flags: list[bool] = []
        self._depth = -1
        self._current_is_last = False

    def update(self, depth: int, is_last: bool) -> list[bool]:
        if depth < 0:
            raise TraversalError(f"negative depth {depth}")
        if depth > self._depth + 1:
            raise TraversalError(f"depth jumped from {self._depth} to {depth}")
        if depth == self._depth + 1:
            if self._depth >= 0:
                self._flags.append(self._current_is_last)
        else:
            del self._flags[depth:]
        self._depth = depth
        self._current_is_last = is_last
        return list(self._flags)

    def __len__(self) -> int:
        return len(self._flags)


__all__ = [
    "BRANCH_CONTINUE",
    "BRANCH_BLANK",
    "BRANCH_MID",
    "BRANCH_LAST",
    "build_prefix",
    "AncestorFlags",
]
