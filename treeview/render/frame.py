"""Frame assembly: one pre-order pass from visitation records to a text block."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Any

from ..context import RenderContext, ensure_context
from ..errors import TraversalError
from ..tree_model.types import Node, VisitationRecord
from .line import render_node
from .prefix import AncestorFlags, build_prefix

if TYPE_CHECKING:
    from ..tree_model.tree import Tree

logger = logging.getLogger(__name__)

LineFormatter = Callable[[Node[Any], str, bool], str]


@dataclass(frozen=True)
class RenderedFrame:
    """Result of one render pass.

    ``text`` holds every line produced before the pass ended, joined with
    ``\\n`` and without a trailing newline. ``focused_line_index`` is the
    0-based line of the first focused node, or ``-1``. When ``error`` is set
    the pass stopped early and ``text`` is partial.
    """

    text: str
    focused_line_index: int
    line_count: int
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def render_frame(
    records: Iterable[VisitationRecord[Any]],
    is_focused: Callable[[Hashable], bool],
    format_line: LineFormatter,
    ctx: RenderContext | None = None,
) -> RenderedFrame:
    """Turn pre-order visitation records into one newline-joined block.

    Prefixes are computed from ancestor state carried forward record by
    record, so no look-ahead into later siblings is needed. The pass stops at
    the first error raised while pulling a record (or by a malformed depth
    sequence) and after any line once ``ctx`` reports cancellation; either
    way the lines produced so far are returned alongside the error. An
    exception raised by ``format_line`` ends the pass the same way and is
    returned as is.
    """
    ctx = ensure_context(ctx)
    lines: list[str] = []
    focused_line_index = -1
    ancestors = AncestorFlags()

    def finish(error: BaseException | None) -> RenderedFrame:
        return RenderedFrame("\n".join(lines), focused_line_index, len(lines), error)

    iterator = iter(records)
    try:
        while True:
            try:
                record = next(iterator)
            except StopIteration:
                break
            except Exception as exc:
                logger.debug("traversal stopped after %d lines: %s", len(lines), exc)
                return finish(exc)

            depth = record.depth
            try:
                ancestor_is_last = ancestors.update(depth, record.is_last)
            except TraversalError as exc:
                logger.debug("malformed traversal at line %d: %s", len(lines), exc)
                return finish(exc)

            prefix = build_prefix(ancestor_is_last, record.is_last) if depth > 0 else ""

            node_is_focused = is_focused(record.node.id)
            if node_is_focused and focused_line_index == -1:
                focused_line_index = len(lines)

            try:
                line = format_line(record.node, prefix, node_is_focused)
            except Exception as exc:
                logger.debug("line %d failed to render: %s", len(lines), exc)
                return finish(exc)
            lines.append(line)

            err = ctx.err()
            if err is not None:
                logger.debug("render cancelled after %d lines", len(lines))
                return finish(err)
    finally:
        close = getattr(iterator, "close", None)
        if close is not None:
            close()

    return finish(None)


def render_tree(tree: Tree[Any], ctx: RenderContext | None = None) -> RenderedFrame:
    """Render every visible node of ``tree`` with its provider."""
    ctx = ensure_context(ctx)
    return render_frame(
        tree.all_visible(ctx),
        tree.is_focused,
        partial(render_node, tree.provider),
        ctx,
    )


__all__ = ["RenderedFrame", "LineFormatter", "render_frame", "render_tree"]
