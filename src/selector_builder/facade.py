"""Entry-point namespace for building selectors.

    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'
"""

from __future__ import annotations

from selector_builder.builder import combine
from selector_builder.model.selector import (
    CombinedSelector,
    Combinator,
    Selector,
    SimpleSelector,
)

__all__ = ["CssSelectorBuilder", "css_selector_builder"]


class CssSelectorBuilder:
    """Starts new selector lineages.

    Holds no state: every call begins from an empty ``SimpleSelector``, so
    separate builder sessions never see each other's fragments.
    """

    def element(self, value: str) -> SimpleSelector:
        return SimpleSelector().element(value)

    def id(self, value: str) -> SimpleSelector:
        return SimpleSelector().id(value)

    def class_(self, value: str) -> SimpleSelector:
        return SimpleSelector().class_(value)

    def attr(self, value: str) -> SimpleSelector:
        return SimpleSelector().attr(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_element(value)

    def combine(
        self, left: Selector, combinator: str | Combinator, right: Selector
    ) -> CombinedSelector:
        return combine(left, combinator, right)

    def __repr__(self) -> str:
        return "CssSelectorBuilder()"


css_selector_builder = CssSelectorBuilder()
