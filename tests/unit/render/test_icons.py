"""Icon width normalization tests."""

from __future__ import annotations

import unittest

from treeview.ansi import display_width
from treeview.render import normalize_icon_width


class NormalizeIconWidthTests(unittest.TestCase):
    def test_empty_icon_stays_empty(self) -> None:
        self.assertEqual(normalize_icon_width(""), "")

    def test_narrow_icon_is_padded_to_three_columns(self) -> None:
        self.assertEqual(normalize_icon_width("A"), "A  ")

    def test_wide_emoji_gets_single_pad_space(self) -> None:
        normalized = normalize_icon_width("📁")
        self.assertEqual(normalized, "📁 ")
        self.assertEqual(display_width(normalized), 3)

    def test_east_asian_wide_glyph_counts_two_columns(self) -> None:
        self.assertEqual(normalize_icon_width("中"), "中 ")

    def test_oversized_icon_gets_one_separator_space(self) -> None:
        self.assertEqual(normalize_icon_width("ABC"), "ABC ")
        self.assertEqual(normalize_icon_width("📁📁"), "📁📁 ")

    def test_oversized_icon_already_ending_in_space_is_unchanged(self) -> None:
        self.assertEqual(normalize_icon_width("ABC "), "ABC ")

    def test_custom_target_width(self) -> None:
        self.assertEqual(normalize_icon_width("*", target_width=2), "* ")
        self.assertEqual(normalize_icon_width("**", target_width=2), "** ")

    def test_normalization_is_idempotent(self) -> None:
        for icon in ["", "A", "AB", "ABC", "ABCD ", "📁", "🐍", "中文", "⚠", " "]:
            with self.subTest(icon=icon):
                once = normalize_icon_width(icon)
                self.assertEqual(normalize_icon_width(once), once)


if __name__ == "__main__":
    unittest.main()
