"""
Selector builder for cssforge.

- **SelectorBuilder**: chainable compound/combined selector builder
- **CssSelectorBuilder**: facade starting a new builder per call
- **SelectorPart** / **Combinator**: grammar building blocks

Example usage:

    from cssforge.builder import css_selector_builder as css

    css.element("div").id("main").class_("container").stringify()
    # 'div#main.container'

    css.combine(
        css.element("div").id("main"),
        "+",
        css.element("table").id("data"),
    ).stringify()
    # 'div#main + table#data'
"""

from .facade import (
    CssSelectorBuilder,
    attr,
    class_,
    combine,
    create_selector_builder,
    css_selector_builder,
    element,
    id_,
    pseudo_class,
    pseudo_element,
)
from .parts import Combinator, CombinatorLike, SelectorPart
from .selector import (
    DUPLICATE_PART_MESSAGE,
    OUT_OF_ORDER_MESSAGE,
    DuplicateSelectorPartError,
    InvalidCombinatorError,
    OutOfOrderSelectorError,
    SelectorBuilder,
    SelectorError,
)

__all__ = [
    # Builder
    "SelectorBuilder",
    "create_selector_builder",
    # Facade
    "CssSelectorBuilder",
    "css_selector_builder",
    "element",
    "id_",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    # Grammar
    "SelectorPart",
    "Combinator",
    "CombinatorLike",
    # Errors
    "SelectorError",
    "DuplicateSelectorPartError",
    "OutOfOrderSelectorError",
    "InvalidCombinatorError",
    "DUPLICATE_PART_MESSAGE",
    "OUT_OF_ORDER_MESSAGE",
]
