"""Node providers: how a node looks (icon, label, style).

The renderer asks a provider three questions per visible node and never
inspects the payload itself.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, TypeVar

from .tree_model.build import FileInfo
from .tree_model.types import Node
from .ui_theme import DEFAULT_THEME, Style, TreeTheme

T = TypeVar("T")

FOLDER_ICON = "📁"
FOLDER_OPEN_ICON = "📂"
FILE_ICON = "📄"
PYTHON_ICON = "🐍"
ERROR_ICON = "⚠"

_PYTHON_SUFFIXES = {".py", ".pyi", ".pyw"}


class StyleLike(Protocol):
    def render(self, text: str) -> str: ...


class NodeProvider(Protocol[T]):
    """Accessors the line renderer calls for every visible node."""

    def icon(self, node: Node[T]) -> str: ...

    def format(self, node: Node[T]) -> str: ...

    def style(self, node: Node[T], is_focused: bool) -> StyleLike: ...


class DefaultProvider:
    """Label-only provider: no icon, the node name, theme node colour."""

    def __init__(self, theme: TreeTheme | None = None) -> None:
        self.theme = theme or DEFAULT_THEME

    def icon(self, node: Node[Any]) -> str:
        return ""

    def format(self, node: Node[Any]) -> str:
        return node.name

    def style(self, node: Node[Any], is_focused: bool) -> Style:
        return self.theme.style(self.theme.node, focused=is_focused)


def file_color_for(path: Path, theme: TreeTheme | None = None) -> str:
    """Return ANSI color used for file names based on suffix."""
    active_theme = theme or DEFAULT_THEME
    if path.suffix.lower() in _PYTHON_SUFFIXES:
        return active_theme.node_file_python
    return active_theme.node_file_default


class FileTreeProvider:
    """Provider for trees built by ``build_file_tree``.

    Directories get a trailing ``/`` and an open/closed folder icon; files are
    coloured by suffix. Directories that could not be scanned use the error
    colour and icon.
    """

    def __init__(self, theme: TreeTheme | None = None, show_icons: bool = True) -> None:
        self.theme = theme or DEFAULT_THEME
        self.show_icons = show_icons

    def icon(self, node: Node[FileInfo]) -> str:
        if not self.show_icons:
            return ""
        info = node.data
        if info is None:
            return FILE_ICON
        if info.scan_error is not None:
            return ERROR_ICON
        if info.is_dir:
            return FOLDER_OPEN_ICON if node.expanded else FOLDER_ICON
        if info.path.suffix.lower() in _PYTHON_SUFFIXES:
            return PYTHON_ICON
        return FILE_ICON

    def format(self, node: Node[FileInfo]) -> str:
        info = node.data
        if info is not None and info.is_dir:
            return f"{node.name}/"
        return node.name

    def style(self, node: Node[FileInfo], is_focused: bool) -> Style:
        info = node.data
        if info is None:
            sgr = self.theme.node
        elif info.scan_error is not None:
            sgr = self.theme.node_error
        elif info.is_dir:
            sgr = self.theme.node_dir
        else:
            sgr = file_color_for(info.path, self.theme)
        return self.theme.style(sgr, focused=is_focused)


__all__ = [
    "StyleLike",
    "NodeProvider",
    "DefaultProvider",
    "FileTreeProvider",
    "file_color_for",
    "FOLDER_ICON",
    "FOLDER_OPEN_ICON",
    "FILE_ICON",
    "PYTHON_ICON",
    "ERROR_ICON",
]
