import unittest

from utils import display_width, format_number, format_signed, pad, truncate


class TestFormatting(unittest.TestCase):

    def test_format_number(self):
        self.assertEqual(format_number(0), "0")
        self.assertEqual(format_number(1234567), "1,234,567")

    def test_format_signed(self):
        self.assertEqual(format_signed(0), "+0")
        self.assertEqual(format_signed(505), "+505")
        self.assertEqual(format_signed(12000), "+12,000")
        self.assertEqual(format_signed(-1200), "-1,200")


class TestDisplayWidth(unittest.TestCase):

    def test_wide_characters_count_double(self):
        self.assertEqual(display_width("abc"), 3)
        self.assertEqual(display_width("张三"), 4)
        self.assertEqual(display_width("a张b"), 4)

    def test_truncate_keeps_short_text(self):
        self.assertEqual(truncate("short", 10), "short")

    def test_truncate_adds_ellipsis(self):
        self.assertEqual(truncate("abcdefghij", 8), "abcde...")
        self.assertEqual(display_width(truncate("很长的提交说明很长的提交说明", 10)), 9)

    def test_truncate_collapses_whitespace(self):
        self.assertEqual(truncate("a\tb\nc", 10), "a b c")

    def test_pad(self):
        self.assertEqual(pad("张", 4), "张  ")
        self.assertEqual(pad("7", 3, "right"), "  7")
        self.assertEqual(pad("ab", 6, "center"), "  ab  ")


if __name__ == "__main__":
    unittest.main()
