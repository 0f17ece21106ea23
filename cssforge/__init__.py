"""
cssforge: builder for CSS compound and combined selectors.

Selectors are assembled from structured calls and validated against the
compound selector grammar (element, id, classes, attributes,
pseudo-classes, pseudo-element, in that order).

Basic usage:
    from cssforge import css_selector_builder as css

    css.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    css.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # 'a[href$=".png"]:focus'

Combining selectors:
    from cssforge import Combinator, combine, element

    combine(element("ul"), Combinator.CHILD, element("li")).stringify()
    # 'ul > li'

Configured facade:
    from cssforge import CssSelectorBuilder
    from cssforge.config import load_config

    css = CssSelectorBuilder(load_config("cssforge.toml"))
"""

__version__ = "0.1.0"
__license__ = "MIT"

from cssforge.builder import (
    Combinator,
    CssSelectorBuilder,
    DuplicateSelectorPartError,
    InvalidCombinatorError,
    OutOfOrderSelectorError,
    SelectorBuilder,
    SelectorError,
    SelectorPart,
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
from cssforge.config import BuilderOptions, load_config

__all__ = [
    "__version__",
    # Builder
    "SelectorBuilder",
    "create_selector_builder",
    "SelectorPart",
    "Combinator",
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
    # Errors
    "SelectorError",
    "DuplicateSelectorPartError",
    "OutOfOrderSelectorError",
    "InvalidCombinatorError",
    # Config
    "BuilderOptions",
    "load_config",
]
