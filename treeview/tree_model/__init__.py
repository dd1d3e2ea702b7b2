"""Tree data model and traversal sources.

Defines ``Node`` and ``VisitationRecord``, the in-memory ``Tree`` whose
``all_visible`` generator feeds the renderer, and a filesystem builder.
"""

from __future__ import annotations

from .build import DEFAULT_MAX_ENTRIES, FileInfo, build_file_tree, list_directory_children
from .tree import Tree
from .types import Node, VisitationRecord

__all__ = [
    "Node",
    "VisitationRecord",
    "Tree",
    "FileInfo",
    "DEFAULT_MAX_ENTRIES",
    "build_file_tree",
    "list_directory_children",
]
