"""
Selector part and combinator definitions for cssforge.

Parts are ordered: a compound selector may only use them in the order
element, id, class, attribute, pseudo-class, pseudo-element.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Union


class SelectorPart(IntEnum):
    """Category of a compound selector fragment, in permitted order."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def is_singleton(self) -> bool:
        """Whether the part may occur at most once per selector."""
        return self in _SINGLETON_PARTS

    @property
    def label(self) -> str:
        """Human readable name of the part."""
        return self.name.lower().replace("_", "-")

    def render(self, value: str) -> str:
        """Render a fragment value with this part's delimiter.

        Args:
            value: Fragment text without its delimiter.

        Returns:
            Rendered fragment, e.g. ``#main`` for an id.
        """
        prefix, suffix = _DELIMITERS[self]
        return f"{prefix}{value}{suffix}"


_SINGLETON_PARTS = frozenset(
    {SelectorPart.ELEMENT, SelectorPart.ID, SelectorPart.PSEUDO_ELEMENT}
)

_DELIMITERS = {
    SelectorPart.ELEMENT: ("", ""),
    SelectorPart.ID: ("#", ""),
    SelectorPart.CLASS: (".", ""),
    SelectorPart.ATTRIBUTE: ("[", "]"),
    SelectorPart.PSEUDO_CLASS: (":", ""),
    SelectorPart.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(str, Enum):
    """Combinators joining two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @classmethod
    def coerce(cls, value: Union["Combinator", str]) -> str:
        """Return the raw symbol for a combinator member or string."""
        if isinstance(value, Combinator):
            return value.value
        return str(value)


CombinatorLike = Union[Combinator, str]


__all__ = [
    "Combinator",
    "CombinatorLike",
    "SelectorPart",
]
