"""Selector builder: compose CSS selectors from typed, ordered fragments."""

from __future__ import annotations

from selector_builder.builder import (
    BuildResult,
    add_fragment,
    attempt,
    combine,
    stringify,
    with_attribute,
    with_class,
    with_element,
    with_id,
    with_pseudo_class,
    with_pseudo_element,
)
from selector_builder.config import BuilderConfig
from selector_builder.errors import (
    DuplicateCategoryError,
    OrderViolationError,
    SelectorError,
)
from selector_builder.facade import CssSelectorBuilder, css_selector_builder
from selector_builder.model import (
    CANONICAL_ORDER,
    Category,
    CombinedSelector,
    Combinator,
    Selector,
    SelectorFragments,
    SimpleSelector,
)
from selector_builder.objects import Rectangle, from_json, to_json

__version__ = "0.1.0"

__all__ = [
    "BuildResult",
    "BuilderConfig",
    "CANONICAL_ORDER",
    "Category",
    "CombinedSelector",
    "Combinator",
    "CssSelectorBuilder",
    "DuplicateCategoryError",
    "OrderViolationError",
    "Rectangle",
    "Selector",
    "SelectorError",
    "SelectorFragments",
    "SimpleSelector",
    "add_fragment",
    "attempt",
    "combine",
    "css_selector_builder",
    "from_json",
    "stringify",
    "to_json",
    "with_attribute",
    "with_class",
    "with_element",
    "with_id",
    "with_pseudo_class",
    "with_pseudo_element",
    "__version__",
]
