"""Exception hierarchy shared by traversal, rendering, and cancellation."""

from __future__ import annotations


class TreeViewError(Exception):
    """Base class for errors raised by treeview."""


class TraversalError(TreeViewError):
    """A traversal source produced records that break pre-order structure."""


class RenderCancelled(TreeViewError):
    """The render context was cancelled before the pass finished."""


class DeadlineExceeded(RenderCancelled):
    """The render context deadline passed before the pass finished."""


__all__ = [
    "TreeViewError",
    "TraversalError",
    "RenderCancelled",
    "DeadlineExceeded",
]
