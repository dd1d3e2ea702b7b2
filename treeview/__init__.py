"""Public package surface for treeview.

Re-exports the rendering pipeline and viewport helpers. ``main`` is imported
lazily so library users do not pay for CLI setup.
"""

from __future__ import annotations

from .context import RenderContext
from .errors import DeadlineExceeded, RenderCancelled, TraversalError, TreeViewError
from .providers import DefaultProvider, FileTreeProvider, NodeProvider
from .render import (
    AncestorFlags,
    RenderedFrame,
    build_prefix,
    normalize_icon_width,
    render_frame,
    render_node,
    render_tree,
)
from .tree_model import Node, Tree, VisitationRecord, build_file_tree
from .ui_theme import Style
from .viewport import Viewport, position_viewport, render_tree_with_viewport


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "main",
    "RenderContext",
    "TreeViewError",
    "TraversalError",
    "RenderCancelled",
    "DeadlineExceeded",
    "Node",
    "Tree",
    "VisitationRecord",
    "build_file_tree",
    "NodeProvider",
    "DefaultProvider",
    "FileTreeProvider",
    "Style",
    "AncestorFlags",
    "build_prefix",
    "normalize_icon_width",
    "render_node",
    "RenderedFrame",
    "render_frame",
    "render_tree",
    "Viewport",
    "position_viewport",
    "render_tree_with_viewport",
]
