"""Command-line front door for treeview.

Scans a directory into a tree, focuses one path, renders the tree through a
fixed-height viewport, and prints the visible window.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .context import RenderContext
from .providers import FileTreeProvider
from .tree_model import build_file_tree
from .ui_theme import available_theme_names, resolve_theme
from .viewport import Viewport, render_tree_with_viewport

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _nonnegative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _positive_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be > 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print a directory as a branch-connected tree.")
    parser.add_argument("path", nargs="?", default=None, help="Directory to show. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--height", type=_positive_int, default=None, help="Viewport rows (default: whole tree).")
    parser.add_argument("--width", type=_positive_int, default=None, help="Clip rows to this many columns.")
    parser.add_argument("--depth", type=_nonnegative_int, default=1, help="Directory levels to expand (default: 1).")
    parser.add_argument("--focus", metavar="PATH", default=None, help="Path to focus and scroll to.")
    parser.add_argument("--show-hidden", dest="show_hidden", action="store_true", default=None, help="Include dotfiles.")
    parser.add_argument("--hide-hidden", dest="show_hidden", action="store_false", help="Skip dotfiles.")
    parser.add_argument("--icons", dest="show_icons", action="store_true", default=None, help="Show file and folder icons.")
    parser.add_argument("--no-icons", dest="show_icons", action="store_false", help="Omit file and folder icons.")
    parser.add_argument("--timeout", type=_positive_float, default=None, help="Abort rendering after SECONDS.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Store the theme, hidden-file, icon, and height options as defaults.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    return parser


def save_defaults(args: argparse.Namespace, show_hidden: bool, show_icons: bool) -> None:
    """Persist the options given on this run as defaults for later runs."""
    if args.theme is not None:
        config.save_theme_name(args.theme)
    if args.height is not None:
        config.save_viewport_height(args.height)
    config.save_show_hidden(show_hidden)
    config.save_show_icons(show_icons)
    logger.debug("saved defaults to %s", config.CONFIG_PATH)


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the rendered tree window.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Exits with status 1 after printing partial output when
    the render pass fails or is cancelled.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")

    show_hidden = args.show_hidden if args.show_hidden is not None else config.load_show_hidden()
    show_icons = args.show_icons if args.show_icons is not None else config.load_show_icons()
    theme_name = args.theme if args.theme is not None else config.load_theme_name()
    height = args.height if args.height is not None else (config.load_viewport_height() or 0)

    if args.save_defaults:
        save_defaults(args, show_hidden=show_hidden, show_icons=show_icons)

    tree = build_file_tree(path, show_hidden=show_hidden, expand_depth=args.depth)
    tree.provider = FileTreeProvider(resolve_theme(theme_name, no_color=args.no_color), show_icons=show_icons)

    focus_path = Path(args.focus).resolve() if args.focus else path.resolve()
    focus_node = tree.find(focus_path)
    if focus_node is None:
        logger.warning("focus path not in tree: %s", focus_path)
    else:
        tree.set_focus(focus_node.id)

    viewport = Viewport(width=args.width or 0, height=height)
    view, error = render_tree_with_viewport(tree, viewport, RenderContext(timeout=args.timeout))
    sys.stdout.write(view + "\n")
    if error is not None:
        sys.stderr.write(f"treeview: render incomplete: {error}\n")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
