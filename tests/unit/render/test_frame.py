"""Frame assembler tests over synthetic and tree-backed traversals."""

from __future__ import annotations

import unittest

from treeview.context import RenderContext
from treeview.errors import RenderCancelled, TraversalError
from treeview.render import render_frame, render_tree
from treeview.tree_model import Node, Tree, VisitationRecord


def _plain_line(node: Node, prefix: str, is_focused: bool) -> str:
    return f"{prefix}{node.name}"


def _records(*items: tuple[str, int, bool]) -> list[VisitationRecord]:
    return [VisitationRecord(Node(id=name, name=name), depth, is_last) for name, depth, is_last in items]


def _sample_tree() -> Tree:
    root = Node(id="root", name="root", expanded=True)
    src = root.add(Node(id="src", name="src", expanded=True))
    src.add(Node(id="app.py", name="app.py"))
    src.add(Node(id="util.py", name="util.py"))
    docs = root.add(Node(id="docs", name="docs", expanded=True))
    docs.add(Node(id="index.md", name="index.md"))
    hidden = root.add(Node(id="build", name="build"))
    hidden.add(Node(id="out.o", name="out.o"))
    return Tree([root])


class RenderFrameTests(unittest.TestCase):
    def test_empty_traversal_gives_empty_text_and_no_focus(self) -> None:
        frame = render_frame([], lambda _id: True, _plain_line)
        self.assertEqual(frame.text, "")
        self.assertEqual(frame.focused_line_index, -1)
        self.assertEqual(frame.line_count, 0)
        self.assertTrue(frame.ok)

    def test_prefixes_follow_preorder_structure(self) -> None:
        records = _records(
            ("root", 0, True),
            ("a", 1, False),
            ("a1", 2, True),
            ("b", 1, True),
            ("b1", 2, False),
            ("b2", 2, True),
        )
        frame = render_frame(records, lambda _id: False, _plain_line)
        self.assertEqual(
            frame.text.split("\n"),
            [
                "root",
                "    ├── a",
                "    │   └── a1",
                "    └── b",
                "        ├── b1",
                "        └── b2",
            ],
        )
        self.assertFalse(frame.text.endswith("\n"))

    def test_children_of_non_last_root_draw_continuation_line(self) -> None:
        records = _records(("first", 0, False), ("child", 1, True), ("second", 0, True))
        frame = render_frame(records, lambda _id: False, _plain_line)
        self.assertEqual(frame.text, "first\n│   └── child\nsecond")

    def test_focus_index_is_position_of_first_focused_record(self) -> None:
        records = _records(("r", 0, True), ("x", 1, False), ("y", 1, False), ("z", 1, True))
        frame = render_frame(records, lambda node_id: node_id in {"y", "z"}, _plain_line)
        self.assertEqual(frame.focused_line_index, 2)

    def test_focus_flag_is_passed_to_every_focused_line(self) -> None:
        seen: list[tuple[str, bool]] = []

        def formatter(node: Node, prefix: str, is_focused: bool) -> str:
            seen.append((node.name, is_focused))
            return node.name

        records = _records(("r", 0, True), ("x", 1, False), ("y", 1, True))
        render_frame(records, lambda node_id: node_id != "x", formatter)
        self.assertEqual(seen, [("r", True), ("x", False), ("y", True)])

    def test_cancellation_returns_lines_rendered_so_far(self) -> None:
        ctx = RenderContext()
        rendered: list[str] = []

        def formatter(node: Node, prefix: str, is_focused: bool) -> str:
            rendered.append(node.name)
            if len(rendered) == 2:
                ctx.cancel()
            return f"{prefix}{node.name}"

        records = _records(("r", 0, True), ("a", 1, False), ("b", 1, False), ("c", 1, True))
        frame = render_frame(records, lambda node_id: node_id == "a", formatter, ctx)
        self.assertEqual(frame.text, "r\n    ├── a")
        self.assertEqual(frame.line_count, 2)
        self.assertEqual(frame.focused_line_index, 1)
        self.assertIsInstance(frame.error, RenderCancelled)
        self.assertEqual(rendered, ["r", "a"])

    def test_traversal_error_returns_partial_output_and_the_error(self) -> None:
        boom = RuntimeError("broken tree")

        def traversal():
            yield VisitationRecord(Node(id="r", name="r"), 0, True)
            yield VisitationRecord(Node(id="a", name="a"), 1, True)
            raise boom

        frame = render_frame(traversal(), lambda node_id: node_id == "r", _plain_line)
        self.assertEqual(frame.text, "r\n    └── a")
        self.assertEqual(frame.focused_line_index, 0)
        self.assertIs(frame.error, boom)
        self.assertFalse(frame.ok)

    def test_malformed_depth_sequence_is_reported_as_traversal_error(self) -> None:
        records = _records(("r", 0, True), ("deep", 2, True), ("never", 0, True))
        frame = render_frame(records, lambda _id: False, _plain_line)
        self.assertEqual(frame.text, "r")
        self.assertIsInstance(frame.error, TraversalError)

    def test_formatter_error_returns_partial_output_and_the_same_error(self) -> None:
        failure = RuntimeError("accessor failed")

        def formatter(node: Node, prefix: str, is_focused: bool) -> str:
            if node.name == "b":
                raise failure
            return f"{prefix}{node.name}"

        records = _records(("r", 0, True), ("a", 1, False), ("b", 1, True))
        frame = render_frame(records, lambda node_id: node_id == "a", formatter)
        self.assertEqual(frame.text, "r\n    ├── a")
        self.assertEqual(frame.focused_line_index, 1)
        self.assertEqual(frame.line_count, 2)
        self.assertIs(frame.error, failure)

    def test_generator_is_closed_when_pass_stops_early(self) -> None:
        closed: list[bool] = []

        def traversal():
            try:
                yield VisitationRecord(Node(id="r", name="r"), 0, False)
                yield VisitationRecord(Node(id="s", name="s"), 0, True)
            finally:
                closed.append(True)

        ctx = RenderContext()
        ctx.cancel()
        frame = render_frame(traversal(), lambda _id: False, _plain_line, ctx)
        self.assertEqual(frame.text, "r")
        self.assertEqual(closed, [True])


class RenderTreeTests(unittest.TestCase):
    def test_render_tree_uses_provider_and_skips_collapsed_children(self) -> None:
        tree = _sample_tree()
        tree.set_focus("index.md")
        frame = render_tree(tree)
        self.assertTrue(frame.ok)
        self.assertEqual(
            frame.text.split("\n"),
            [
                "\033[38;5;252mroot\033[0m",
                "\033[38;5;252m    ├── src\033[0m",
                "\033[38;5;252m    │   ├── app.py\033[0m",
                "\033[38;5;252m    │   └── util.py\033[0m",
                "\033[38;5;252m    ├── docs\033[0m",
                "\033[38;5;252m\033[7m    │   └── index.md\033[0m",
                "\033[38;5;252m    └── build\033[0m",
            ],
        )
        self.assertEqual(frame.focused_line_index, 5)

    def test_render_tree_with_cancelled_context_renders_nothing(self) -> None:
        ctx = RenderContext()
        ctx.cancel()
        frame = render_tree(_sample_tree(), ctx)
        self.assertEqual(frame.text, "")
        self.assertEqual(frame.focused_line_index, -1)
        self.assertIsInstance(frame.error, RenderCancelled)


if __name__ == "__main__":
    unittest.main()
