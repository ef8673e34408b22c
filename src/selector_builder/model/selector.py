"""Selector model: the simple and combined selector variants."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from selector_builder.config import BuilderConfig
from selector_builder.model.fragments import Category, SelectorFragments


class Combinator(Enum):
    """Combinator tokens with a defined CSS meaning.

    Any other string is still accepted by ``combine`` and rendered as given.
    """

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


@dataclass(frozen=True)
class SimpleSelector:
    """A compound selector such as ``a#top.nav[href]:hover::after``.

    Every chaining method returns a new selector; ``self`` is never changed.
    """

    fragments: SelectorFragments = field(default_factory=SelectorFragments)

    # --- chaining ---------------------------------------------------------------

    def element(self, value: str) -> SimpleSelector:
        return self._add(Category.ELEMENT, value)

    def id(self, value: str) -> SimpleSelector:
        return self._add(Category.ID, value)

    def class_(self, value: str) -> SimpleSelector:
        return self._add(Category.CLASS, value)

    def attr(self, value: str) -> SimpleSelector:
        return self._add(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return self._add(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return self._add(Category.PSEUDO_ELEMENT, value)

    def _add(self, category: Category, value: str) -> SimpleSelector:
        from selector_builder.builder import add_fragment

        return add_fragment(self, category, value)

    # --- rendering --------------------------------------------------------------

    def stringify(self, config: BuilderConfig | None = None) -> str:
        """Render the fragments in canonical order.

        An empty selector renders as the configured fallback element name.
        """
        f = self.fragments
        parts: list[str] = []
        if f.has(Category.ELEMENT):
            parts.append(f.element)
        if f.has(Category.ID):
            parts.append(f"#{f.id}")
        if f.classes:
            parts.append("." + ".".join(f.classes))
        parts.extend(f"[{attr}]" for attr in f.attributes)
        if f.pseudo_classes:
            parts.append(":" + ":".join(f.pseudo_classes))
        if f.pseudo_element is not None:
            parts.append(f"::{f.pseudo_element}")

        result = "".join(parts)
        if result:
            return result
        return (config or BuilderConfig()).fallback_element

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator token."""

    left: Selector
    combinator: str
    right: Selector

    def __post_init__(self) -> None:
        if isinstance(self.combinator, Combinator):
            object.__setattr__(self, "combinator", self.combinator.value)

    def stringify(self, config: BuilderConfig | None = None) -> str:
        # The token is padded with one space on each side, even when it is
        # itself the descendant space.
        left = self.left.stringify(config)
        right = self.right.stringify(config)
        return f"{left} {self.combinator} {right}"

    def __str__(self) -> str:
        return self.stringify()


Selector = Union[SimpleSelector, CombinedSelector]
