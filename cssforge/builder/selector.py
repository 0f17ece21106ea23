"""
Compound selector builder for cssforge.

SelectorBuilder accumulates selector fragments through chained calls and
enforces the CSS compound selector grammar:

    element? id? class* attribute* pseudo-class* pseudo-element?

Example:
    >>> SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    'a[href$=".png"]:focus'
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from cssforge.builder.parts import Combinator, CombinatorLike, SelectorPart
from cssforge.config.options import BuilderOptions

logger = logging.getLogger(__name__)

DUPLICATE_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)
OUT_OF_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(ValueError):
    """Base class for selector construction errors."""


class DuplicateSelectorPartError(SelectorError):
    """Raised when element, id or pseudo-element is used a second time."""

    def __init__(self, part: SelectorPart) -> None:
        self.part = part
        super().__init__(DUPLICATE_PART_MESSAGE)


class OutOfOrderSelectorError(SelectorError):
    """Raised when a part is appended after a later part was used."""

    def __init__(self, part: SelectorPart, after: SelectorPart) -> None:
        self.part = part
        self.after = after
        super().__init__(OUT_OF_ORDER_MESSAGE)


class InvalidCombinatorError(SelectorError):
    """Raised by strict builders for combinators outside the allowed set."""

    def __init__(self, combinator: str, allowed: list[str]) -> None:
        self.combinator = combinator
        self.allowed = allowed
        super().__init__(
            f"Invalid combinator {combinator!r}, expected one of "
            f"{', '.join(repr(c) for c in allowed)}"
        )


class Stringifiable(Protocol):
    def stringify(self) -> str: ...


class SelectorBuilder:
    """Chainable builder for compound and combined CSS selectors.

    Each append method validates the call against the parts already used
    and raises before touching any state, so a rejected call leaves the
    builder exactly as it was.

    Example:
        selector = SelectorBuilder().id("main").class_("container").class_("editable")
        selector.stringify()  # '#main.container.editable'
    """

    def __init__(self, options: Optional[BuilderOptions] = None) -> None:
        """Initialize an empty builder.

        Args:
            options: Builder options. Defaults to BuilderOptions().
        """
        self._options = options or BuilderOptions()
        self._text = ""
        self._parts: list[SelectorPart] = []
        self._highest: Optional[SelectorPart] = None
        self._has_element = False
        self._has_id = False
        self._has_pseudo_element = False

    # Introspection

    @property
    def options(self) -> BuilderOptions:
        """Options this builder was created with."""
        return self._options

    @property
    def parts(self) -> tuple[SelectorPart, ...]:
        """Parts appended so far, in call order."""
        return tuple(self._parts)

    @property
    def has_element(self) -> bool:
        """Whether an element part has been appended."""
        return self._has_element

    @property
    def has_id(self) -> bool:
        """Whether an id part has been appended."""
        return self._has_id

    @property
    def has_pseudo_element(self) -> bool:
        """Whether a pseudo-element part has been appended."""
        return self._has_pseudo_element

    # Part appends

    def element(self, value: str) -> "SelectorBuilder":
        """Append an element (type) selector, e.g. ``div``."""
        return self._append(SelectorPart.ELEMENT, value)

    def id(self, value: str) -> "SelectorBuilder":
        """Append an id selector rendered as ``#value``."""
        return self._append(SelectorPart.ID, value)

    def class_(self, value: str) -> "SelectorBuilder":
        """Append a class selector rendered as ``.value``."""
        return self._append(SelectorPart.CLASS, value)

    def attr(self, value: str) -> "SelectorBuilder":
        """Append an attribute selector rendered as ``[value]``.

        The value is used verbatim, e.g. ``href$=".png"``.
        """
        return self._append(SelectorPart.ATTRIBUTE, value)

    attribute = attr

    def pseudo_class(self, value: str) -> "SelectorBuilder":
        """Append a pseudo-class rendered as ``:value``."""
        return self._append(SelectorPart.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> "SelectorBuilder":
        """Append a pseudo-element rendered as ``::value``."""
        return self._append(SelectorPart.PSEUDO_ELEMENT, value)

    def combine(
        self,
        left: Stringifiable,
        combinator: CombinatorLike,
        right: Stringifiable,
    ) -> "SelectorBuilder":
        """Append ``left``, the combinator and ``right`` to this builder.

        The combinator is always surrounded by a single space on each
        side, the descendant combinator included. Neither operand is
        modified.

        Args:
            left: Selector on the left of the combinator.
            combinator: Combinator member or raw symbol.
            right: Selector on the right of the combinator.

        Returns:
            Self for chaining.

        Raises:
            InvalidCombinatorError: If strict_combinators is enabled and
                the symbol is not in allowed_combinators.
        """
        symbol = Combinator.coerce(combinator)
        if (
            self._options.strict_combinators
            and symbol not in self._options.allowed_combinators
        ):
            logger.debug("Rejected combinator %r", symbol)
            raise InvalidCombinatorError(symbol, self._options.allowed_combinators)

        combined = f"{left.stringify()} {symbol} {right.stringify()}"
        logger.debug("Combined selector: %s", combined)
        self._text += combined
        return self

    def stringify(self) -> str:
        """Return the selector text built so far."""
        return self._text

    def _append(self, part: SelectorPart, value: str) -> "SelectorBuilder":
        if part.is_singleton and self._is_used(part):
            logger.debug("Rejected duplicate %s %r", part.label, value)
            raise DuplicateSelectorPartError(part)

        if self._highest is not None and part < self._highest:
            logger.debug(
                "Rejected %s %r after %s", part.label, value, self._highest.label
            )
            raise OutOfOrderSelectorError(part, self._highest)

        self._parts.append(part)
        self._highest = part
        self._text += part.render(value)

        if part is SelectorPart.ELEMENT:
            self._has_element = True
        elif part is SelectorPart.ID:
            self._has_id = True
        elif part is SelectorPart.PSEUDO_ELEMENT:
            self._has_pseudo_element = True

        return self

    def _is_used(self, part: SelectorPart) -> bool:
        if part is SelectorPart.ELEMENT:
            return self._has_element
        if part is SelectorPart.ID:
            return self._has_id
        if part is SelectorPart.PSEUDO_ELEMENT:
            return self._has_pseudo_element
        return False

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self._text!r})"


__all__ = [
    "DUPLICATE_PART_MESSAGE",
    "OUT_OF_ORDER_MESSAGE",
    "DuplicateSelectorPartError",
    "InvalidCombinatorError",
    "OutOfOrderSelectorError",
    "SelectorBuilder",
    "SelectorError",
]
