"""Fragment model: the parts a simple selector is assembled from."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """Kind of a selector fragment, declared in canonical order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def label(self) -> str:
        return self.value

    @property
    def position(self) -> int:
        return CANONICAL_ORDER.index(self)

    @property
    def is_singleton(self) -> bool:
        return self in SINGLETON_CATEGORIES

    def later(self) -> tuple[Category, ...]:
        """Return the categories that must follow this one."""
        return CANONICAL_ORDER[self.position + 1:]


CANONICAL_ORDER: tuple[Category, ...] = tuple(Category)

SINGLETON_CATEGORIES: frozenset[Category] = frozenset(
    {Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT}
)

_BLANK_IS_UNSET: frozenset[Category] = frozenset({Category.ELEMENT, Category.ID})

# Category -> SelectorFragments field name
_FIELDS: dict[Category, str] = {
    Category.ELEMENT: "element",
    Category.ID: "id",
    Category.CLASS: "classes",
    Category.ATTRIBUTE: "attributes",
    Category.PSEUDO_CLASS: "pseudo_classes",
    Category.PSEUDO_ELEMENT: "pseudo_element",
}


@dataclass(frozen=True)
class SelectorFragments:
    """Immutable set of fragments accumulated by one selector lineage.

    Attributes:
        element: Type selector, e.g. ``a`` or ``div``.
        id: Value rendered after ``#``.
        classes: Class names, in the order they were added.
        attributes: Raw attribute expressions such as ``href$=".png"``.
        pseudo_classes: Pseudo-class names such as ``focus``.
        pseudo_element: Pseudo-element name such as ``before``.
    """

    element: str | None = None
    id: str | None = None
    classes: tuple[str, ...] = ()
    attributes: tuple[str, ...] = ()
    pseudo_classes: tuple[str, ...] = ()
    pseudo_element: str | None = None

    def get(self, category: Category) -> str | tuple[str, ...] | None:
        """Return the raw stored value for *category*."""
        return getattr(self, _FIELDS[category])

    def has(self, category: Category) -> bool:
        """True if at least one fragment of *category* is present.

        An empty element or id counts as unset.
        """
        value = self.get(category)
        if category in _BLANK_IS_UNSET:
            return bool(value)
        if category.is_singleton:
            return value is not None
        return bool(value)

    @property
    def is_empty(self) -> bool:
        return not any(self.has(category) for category in CANONICAL_ORDER)

    def present(self) -> tuple[Category, ...]:
        """Categories populated on this lineage, in canonical order."""
        return tuple(c for c in CANONICAL_ORDER if self.has(c))

    def added(self, category: Category, value: str) -> SelectorFragments:
        """Return a copy with *value* stored under *category*.

        No ordering checks happen here; see ``selector_builder.builder``.
        """
        name = _FIELDS[category]
        if category.is_singleton:
            return dataclasses.replace(self, **{name: value})
        return dataclasses.replace(self, **{name: getattr(self, name) + (value,)})
