"""Configuration for treefind searches.

Defines how callers specify what to search for and how: which match
cardinality to use and which traversal strategy walks the tree.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

from .errors import InvalidSelectionError


class _SelectorEnum(Enum):
    """Enum that can be parsed from the loose values a driver hands over."""

    @classmethod
    def _numeric_selectors(cls) -> Dict[str, "_SelectorEnum"]:
        return {}

    @classmethod
    def parse(cls, value: Any) -> "_SelectorEnum":
        """Parse an enum member, its value, its name or a numeric selector.

        Args:
            value: Enum member or string such as "first", "ALL" or "1"

        Returns:
            The matching enum member

        Raises:
            ValueError: If the value does not name a member
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            numeric = cls._numeric_selectors()
            if text in numeric:
                return numeric[text]
            for member in cls:
                if text.lower() in (member.value, member.name.lower()):
                    return member
        raise ValueError(f"Unknown {cls.__name__}: {value!r}")


class MatchMode(_SelectorEnum):
    """How many matches a search returns."""
    FIRST = "first"     # First match or None
    ALL = "all"         # Every match, possibly empty

    @classmethod
    def _numeric_selectors(cls):
        return {"1": cls.FIRST, "2": cls.ALL}


class TraversalMode(_SelectorEnum):
    """How the search walks the tree."""
    RECURSIVE = "recursive"     # Call-stack recursion, pre-order
    ITERATIVE = "iterative"     # Explicit LIFO stack

    @classmethod
    def _numeric_selectors(cls):
        return {"1": cls.RECURSIVE, "2": cls.ITERATIVE}


def parse_selection(match_mode: Any, traversal_mode: Any):
    """Parse a selector pair into enums.

    Args:
        match_mode: Match selector (enum, value, name or "1"/"2")
        traversal_mode: Traversal selector (enum, value, name or "1"/"2")

    Returns:
        Tuple of (MatchMode, TraversalMode)

    Raises:
        InvalidSelectionError: If either selector is outside the enumeration
    """
    try:
        return MatchMode.parse(match_mode), TraversalMode.parse(traversal_mode)
    except ValueError as e:
        raise InvalidSelectionError(match_mode, traversal_mode) from e


@dataclass
class SearchConfig:
    """Everything a driver collects before running a search."""

    root_path: str
    file_name: str
    match_mode: MatchMode = MatchMode.FIRST
    traversal_mode: TraversalMode = TraversalMode.RECURSIVE
    follow_symlinks: bool = False

    @classmethod
    def from_selectors(
        cls,
        root_path: str,
        file_name: str,
        match_mode: Union[str, MatchMode],
        traversal_mode: Union[str, TraversalMode],
        follow_symlinks: bool = False,
    ) -> "SearchConfig":
        """Build a config from raw driver input.

        Raises:
            InvalidSelectionError: If the selector pair is not recognized
        """
        match, traversal = parse_selection(match_mode, traversal_mode)
        return cls(
            root_path=root_path,
            file_name=file_name,
            match_mode=match,
            traversal_mode=traversal,
            follow_symlinks=follow_symlinks,
        )
