"""Single-line rendering: prefix, icon, label, and style."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from ..tree_model.types import Node
from .icons import normalize_icon_width

if TYPE_CHECKING:
    from ..providers import NodeProvider

T = TypeVar("T")


def render_node(provider: NodeProvider[T], node: Node[T], prefix: str, is_focused: bool) -> str:
    """Return the finished display line for ``node``.

    Result shape: ``"│   └── 📁 folder-name/"`` with the provider's style
    applied to the whole line. Provider exceptions propagate unchanged.
    """
    icon = normalize_icon_width(provider.icon(node))
    label = provider.format(node)
    style = provider.style(node, is_focused)
    return style.render(prefix + icon + label)


__all__ = ["render_node"]
