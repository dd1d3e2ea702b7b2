"""Icon width normalization for column-aligned labels."""

from __future__ import annotations

from ..ansi import display_width

ICON_TARGET_WIDTH = 3


def normalize_icon_width(icon: str, target_width: int = ICON_TARGET_WIDTH) -> str:
    """Pad ``icon`` so labels after it start in the same terminal column.

    Width is measured in display columns, so a two-column emoji gets one pad
    space and a one-column glyph gets two. Icons already at or over the target
    get a single separating space unless they end with one. An empty icon
    stays empty so iconless rows carry no gap. Idempotent.

    Providers that return fixed icons can call this once up front and cache
    the result; already-normalized icons pass through without copying.
    """
    if not icon:
        return ""
    width = display_width(icon)
    if width >= target_width:
        if icon.endswith(" "):
            return icon
        return icon + " "
    return icon + " " * (target_width - width)


__all__ = ["ICON_TARGET_WIDTH", "normalize_icon_width"]
