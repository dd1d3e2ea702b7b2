"""UI theme definitions, styles, and selection helpers.

Themes are ANSI palettes for tree rows. A ``Style`` is the only styling
contract the renderer relies on: ``render(text) -> styled text``.
"""

from __future__ import annotations

from dataclasses import dataclass

RESET = "\033[0m"
REVERSE = "\033[7m"


@dataclass(frozen=True)
class Style:
    """Wrap text in an SGR sequence and a trailing reset.

    An empty ``sgr`` renders text unchanged, so plain themes emit no escapes.
    """

    sgr: str = ""
    reset: str = RESET

    def render(self, text: str) -> str:
        if not self.sgr or not text:
            return text
        # Re-apply this style after any reset embedded in ``text``.
        body = text.replace(self.reset, self.reset + self.sgr) if self.reset else text
        return f"{self.sgr}{body}{self.reset}"


PLAIN_STYLE = Style()


@dataclass(frozen=True)
class TreeTheme:
    """Semantic ANSI palette used by node providers."""

    name: str
    reset: str
    node: str
    node_dir: str
    node_file_python: str
    node_file_default: str
    node_error: str
    focused: str

    def style(self, sgr: str, *, focused: bool = False) -> Style:
        """Build a ``Style`` for ``sgr``, adding the focus attribute when requested."""
        if focused:
            sgr = f"{sgr}{self.focused}"
        if not sgr:
            return PLAIN_STYLE
        return Style(sgr=sgr, reset=self.reset)


DEFAULT_THEME = TreeTheme(
    name="default",
    reset=RESET,
    node="\033[38;5;252m",
    node_dir="\033[1;34m",
    node_file_python="\033[38;5;110m",
    node_file_default="\033[38;5;252m",
    node_error="\033[38;5;203m",
    focused=REVERSE,
)

OCEAN_THEME = TreeTheme(
    name="ocean",
    reset=RESET,
    node="\033[38;5;153m",
    node_dir="\033[1;38;5;45m",
    node_file_python="\033[38;5;117m",
    node_file_default="\033[38;5;252m",
    node_error="\033[38;5;209m",
    focused=REVERSE,
)

PLAIN_THEME = TreeTheme(
    name="plain",
    reset="",
    node="",
    node_dir="",
    node_file_python="",
    node_file_default="",
    node_error="",
    focused="",
)

_THEMES: dict[str, TreeTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> TreeTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "RESET",
    "REVERSE",
    "Style",
    "PLAIN_STYLE",
    "TreeTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
