"""Build a ``Tree`` from a filesystem directory."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .tree import Tree
from .types import Node

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 10_000


@dataclass(frozen=True)
class FileInfo:
    """Payload attached to filesystem nodes."""

    path: Path
    is_dir: bool
    file_size: int | None = None
    scan_error: str | None = None


def list_directory_children(directory: Path, show_hidden: bool) -> tuple[list[FileInfo], Exception | None]:
    """List children of ``directory`` sorted directories-first, then by name.

    Returns ``(children, scan_error)``; ``scan_error`` is set when the
    directory cannot be scanned.
    """
    children: list[FileInfo] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                if not show_hidden and child.name.startswith("."):
                    continue
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                file_size: int | None = None
                if not is_dir:
                    try:
                        file_size = int(child.stat(follow_symlinks=False).st_size)
                    except OSError:
                        pass
                children.append(FileInfo(Path(child.path), is_dir, file_size))
    except OSError as exc:
        return [], exc

    children.sort(key=lambda item: (not item.is_dir, item.path.name.lower()))
    return children, None


def build_file_tree(
    root: Path,
    show_hidden: bool = False,
    expand_depth: int = 1,
    max_entries: int = DEFAULT_MAX_ENTRIES,
) -> Tree[FileInfo]:
    """Scan ``root`` into a ``Tree`` whose node IDs are resolved paths.

    Directories shallower than ``expand_depth`` start expanded; only expanded
    directories are scanned. Scanning stops adding nodes once ``max_entries``
    have been collected.
    """
    root = root.resolve()
    is_dir = root.is_dir()
    root_node: Node[FileInfo] = Node(
        id=root,
        name=root.name or str(root),
        data=FileInfo(root, is_dir),
        expanded=is_dir and expand_depth > 0,
    )
    count = 1

    def walk(node: Node[FileInfo], depth: int) -> None:
        """Depth-first scan attaching children to ``node``."""
        nonlocal count
        children, scan_error = list_directory_children(node.data.path, show_hidden)
        if scan_error is not None:
            logger.debug("cannot scan %s: %s", node.data.path, scan_error)
            node.data = FileInfo(node.data.path, True, scan_error=str(scan_error))
            node.expanded = False
            return
        for info in children:
            if count >= max_entries:
                logger.debug("entry limit %d reached under %s", max_entries, root)
                return
            child = node.add(
                Node(
                    id=info.path.resolve(),
                    name=info.path.name,
                    data=info,
                    expanded=info.is_dir and depth + 1 < expand_depth,
                )
            )
            count += 1
            if child.expanded:
                walk(child, depth + 1)

    if root_node.expanded:
        walk(root_node, 0)
    return Tree([root_node])


__all__ = ["FileInfo", "DEFAULT_MAX_ENTRIES", "list_directory_children", "build_file_tree"]
