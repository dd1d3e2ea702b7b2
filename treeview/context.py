"""Cooperative cancellation for render passes.

A ``RenderContext`` is polled between traversal steps. It never interrupts
work in flight; producers and the frame assembler check ``err()`` and stop at
the next element boundary.
"""

from __future__ import annotations

import time

from .errors import DeadlineExceeded, RenderCancelled


class RenderContext:
    """Cancellation flag with an optional monotonic deadline.

    Child contexts observe their parent: cancelling the parent cancels every
    child, while cancelling a child leaves the parent live.
    """

    def __init__(self, timeout: float | None = None, parent: RenderContext | None = None) -> None:
        self._parent = parent
        self._cancelled = False
        self._deadline: float | None = None
        if timeout is not None:
            self._deadline = time.monotonic() + max(0.0, float(timeout))

    @classmethod
    def background(cls) -> RenderContext:
        """Return a context that is never cancelled and has no deadline."""
        return cls()

    def cancel(self) -> None:
        self._cancelled = True

    def err(self) -> RenderCancelled | None:
        """Return the cancellation error, or ``None`` while the context is live."""
        if self._cancelled:
            return RenderCancelled("render cancelled")
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return DeadlineExceeded("render deadline exceeded")
        if self._parent is not None:
            return self._parent.err()
        return None

    @property
    def cancelled(self) -> bool:
        return self.err() is not None


def ensure_context(ctx: RenderContext | None) -> RenderContext:
    """Return ``ctx`` or a background context when none was supplied."""
    return ctx if ctx is not None else RenderContext.background()


__all__ = ["RenderContext", "ensure_context"]
