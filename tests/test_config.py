"""Unit tests for search configuration and selector parsing."""

import sys
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treefind import InvalidSelectionError, MatchMode, SearchConfig, TraversalMode
from treefind.config import parse_selection


class TestSelectorParsing(unittest.TestCase):
    """Test parsing of loose selector values."""

    def test_numeric_selectors(self):
        self.assertIs(MatchMode.parse("1"), MatchMode.FIRST)
        self.assertIs(MatchMode.parse("2"), MatchMode.ALL)
        self.assertIs(TraversalMode.parse("1"), TraversalMode.RECURSIVE)
        self.assertIs(TraversalMode.parse("2"), TraversalMode.ITERATIVE)

    def test_values_and_names(self):
        self.assertIs(MatchMode.parse("all"), MatchMode.ALL)
        self.assertIs(MatchMode.parse("FIRST"), MatchMode.FIRST)
        self.assertIs(TraversalMode.parse("Iterative"), TraversalMode.ITERATIVE)
        self.assertIs(TraversalMode.parse(" recursive "), TraversalMode.RECURSIVE)

    def test_enum_members_pass_through(self):
        self.assertIs(MatchMode.parse(MatchMode.ALL), MatchMode.ALL)

    def test_unknown_values_raise_value_error(self):
        for value in ("3", "0", "", "both", None, 1):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    MatchMode.parse(value)

    def test_enums_are_not_interchangeable(self):
        with self.assertRaises(ValueError):
            MatchMode.parse(TraversalMode.RECURSIVE)

    def test_parse_selection_pair(self):
        self.assertEqual(
            parse_selection("2", "1"),
            (MatchMode.ALL, TraversalMode.RECURSIVE),
        )

    def test_parse_selection_out_of_range(self):
        with self.assertRaises(InvalidSelectionError) as ctx:
            parse_selection("3", "1")
        self.assertEqual(ctx.exception.match_mode, "3")
        self.assertEqual(ctx.exception.traversal_mode, "1")

    def test_invalid_selection_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_selection("1", "9")


class TestSearchConfig(unittest.TestCase):
    """Test SearchConfig construction."""

    def test_defaults(self):
        config = SearchConfig(root_path="/home/user", file_name="a.txt")
        self.assertIs(config.match_mode, MatchMode.FIRST)
        self.assertIs(config.traversal_mode, TraversalMode.RECURSIVE)
        self.assertFalse(config.follow_symlinks)

    def test_from_selectors(self):
        config = SearchConfig.from_selectors("/home/user", "a.txt", "2", "2")
        self.assertIs(config.match_mode, MatchMode.ALL)
        self.assertIs(config.traversal_mode, TraversalMode.ITERATIVE)

    def test_from_selectors_invalid(self):
        with self.assertRaises(InvalidSelectionError):
            SearchConfig.from_selectors("/home/user", "a.txt", "3", "1")


if __name__ == '__main__':
    unittest.main()
