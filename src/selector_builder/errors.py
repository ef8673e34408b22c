"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selector_builder.model.fragments import Category

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for fragments rejected while building a selector."""

    def __init__(self, message: str, *, category: Category | None = None) -> None:
        super().__init__(message)
        self.category = category


class DuplicateCategoryError(SelectorError):
    """A singleton part (element, id, pseudo-element) was supplied twice."""

    def __init__(self, category: Category) -> None:
        super().__init__(DUPLICATE_MESSAGE, category=category)


class OrderViolationError(SelectorError):
    """A part was supplied after a part that must come later."""

    def __init__(self, category: Category, conflicting: Category) -> None:
        super().__init__(ORDER_MESSAGE, category=category)
        self.conflicting = conflicting
