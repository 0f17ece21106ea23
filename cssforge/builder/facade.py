"""
Facade entry points for cssforge.

Every entry point starts a fresh SelectorBuilder, so callers never manage
builder lifetimes themselves:

    from cssforge.builder import facade as css

    css.element("div").id("main").class_("container").stringify()
    css.combine(css.element("ul"), ">", css.element("li")).stringify()
"""

from __future__ import annotations

from typing import Optional

from cssforge.builder.parts import CombinatorLike
from cssforge.builder.selector import SelectorBuilder, Stringifiable
from cssforge.config.options import BuilderOptions


def create_selector_builder(options: Optional[BuilderOptions] = None) -> SelectorBuilder:
    """Create an empty SelectorBuilder.

    Args:
        options: Builder options.

    Returns:
        New SelectorBuilder instance.
    """
    return SelectorBuilder(options)


class CssSelectorBuilder:
    """Stateless facade creating a new builder per call.

    The facade only carries the options handed to each builder it creates.

    Example:
        builder = CssSelectorBuilder()
        builder.element("a").attr('href$=".png"').pseudo_class("focus")
    """

    def __init__(self, options: Optional[BuilderOptions] = None) -> None:
        self._options = options or BuilderOptions()

    @property
    def options(self) -> BuilderOptions:
        return self._options

    def _new(self) -> SelectorBuilder:
        return create_selector_builder(self._options)

    def element(self, value: str) -> SelectorBuilder:
        return self._new().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return self._new().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._new().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._new().attr(value)

    attribute = attr

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._new().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._new().pseudo_element(value)

    def combine(
        self,
        left: Stringifiable,
        combinator: CombinatorLike,
        right: Stringifiable,
    ) -> SelectorBuilder:
        return self._new().combine(left, combinator, right)


css_selector_builder = CssSelectorBuilder()


def element(value: str) -> SelectorBuilder:
    """Start a selector with an element part."""
    return css_selector_builder.element(value)


def id_(value: str) -> SelectorBuilder:
    """Start a selector with an id part."""
    return css_selector_builder.id(value)


def class_(value: str) -> SelectorBuilder:
    """Start a selector with a class part."""
    return css_selector_builder.class_(value)


def attr(value: str) -> SelectorBuilder:
    """Start a selector with an attribute part."""
    return css_selector_builder.attr(value)


def pseudo_class(value: str) -> SelectorBuilder:
    """Start a selector with a pseudo-class part."""
    return css_selector_builder.pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    """Start a selector with a pseudo-element part."""
    return css_selector_builder.pseudo_element(value)


def combine(
    left: Stringifiable, combinator: CombinatorLike, right: Stringifiable
) -> SelectorBuilder:
    """Join two selectors with a combinator into a new selector."""
    return css_selector_builder.combine(left, combinator, right)


__all__ = [
    "CssSelectorBuilder",
    "attr",
    "class_",
    "combine",
    "create_selector_builder",
    "css_selector_builder",
    "element",
    "id_",
    "pseudo_class",
    "pseudo_element",
]
