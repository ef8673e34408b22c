from selector_builder.model.fragments import (
    CANONICAL_ORDER,
    SINGLETON_CATEGORIES,
    Category,
    SelectorFragments,
)
from selector_builder.model.selector import (
    CombinedSelector,
    Combinator,
    Selector,
    SimpleSelector,
)

__all__ = [
    "CANONICAL_ORDER",
    "SINGLETON_CATEGORIES",
    "Category",
    "SelectorFragments",
    "CombinedSelector",
    "Combinator",
    "Selector",
    "SimpleSelector",
]
