"""Scrollable fixed-height window over a rendered tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .ansi import clip_ansi_line
from .context import RenderContext
from .render.frame import render_tree

if TYPE_CHECKING:
    from .tree_model.tree import Tree

logger = logging.getLogger(__name__)


@dataclass
class Viewport:
    """Scroll state plus the content it windows.

    The caller owns a viewport across render passes; ``y_offset`` is the
    first visible line. ``width <= 0`` disables horizontal clipping.
    """

    width: int = 0
    height: int = 0
    y_offset: int = 0
    _lines: list[str] = field(default_factory=list, init=False, repr=False)

    def set_content(self, text: str) -> None:
        """Replace content, moving to the bottom if ``y_offset`` is past the last line."""
        self._lines = text.split("\n") if text else []
        if self.y_offset > len(self._lines) - 1:
            self.goto_bottom()

    @property
    def total_lines(self) -> int:
        return len(self._lines)

    @property
    def max_y_offset(self) -> int:
        return max(0, len(self._lines) - self.height)

    def goto_bottom(self) -> None:
        self.y_offset = self.max_y_offset

    def visible_lines(self) -> list[str]:
        if self.height <= 0:
            lines = list(self._lines)
        else:
            top = max(0, min(self.y_offset, len(self._lines)))
            lines = self._lines[top : top + self.height]
        if self.width > 0:
            lines = [clip_ansi_line(line, self.width) for line in lines]
        return lines

    def view(self) -> str:
        """Return the visible window, padded with blank rows to ``height``."""
        lines = self.visible_lines()
        if self.height > 0 and len(lines) < self.height:
            lines.extend([""] * (self.height - len(lines)))
        return "\n".join(lines)


def position_viewport(viewport: Viewport, focused_line_index: int) -> Viewport:
    """Scroll ``viewport`` the minimum amount needed to show the focused line.

    Above the window the focused line becomes the top row; at or below the
    bottom edge it becomes the bottom row. No-op without a focused line or
    without height.
    """
    if focused_line_index < 0 or viewport.height <= 0:
        return viewport
    if focused_line_index < viewport.y_offset:
        viewport.y_offset = focused_line_index
    elif focused_line_index >= viewport.y_offset + viewport.height:
        viewport.y_offset = max(0, focused_line_index - viewport.height + 1)
    else:
        return viewport
    logger.debug("scrolled to y_offset=%d for focused line %d", viewport.y_offset, focused_line_index)
    return viewport


def render_tree_with_viewport(
    tree: Tree[Any],
    viewport: Viewport,
    ctx: RenderContext | None = None,
) -> tuple[str, BaseException | None]:
    """Render ``tree`` into ``viewport`` and return its visible window.

    Partial output from a failed or cancelled pass is still shown; the error
    is returned next to the view for the caller to report.
    """
    frame = render_tree(tree, ctx)
    viewport.set_content(frame.text)
    position_viewport(viewport, frame.focused_line_index)
    return viewport.view(), frame.error


__all__ = ["Viewport", "position_viewport", "render_tree_with_viewport"]
