"""Tree rendering pipeline.

Prefix builder, icon normalizer, line renderer, and frame assembler. The
frame assembler is the only stateful piece and its state lives for one pass.
"""

from __future__ import annotations

from .frame import LineFormatter, RenderedFrame, render_frame, render_tree
from .icons import ICON_TARGET_WIDTH, normalize_icon_width
from .line import render_node
from .prefix import AncestorFlags, build_prefix

__all__ = [
    "AncestorFlags",
    "build_prefix",
    "ICON_TARGET_WIDTH",
    "normalize_icon_width",
    "render_node",
    "LineFormatter",
    "RenderedFrame",
    "render_frame",
    "render_tree",
]
