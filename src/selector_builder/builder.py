"""Pure selector-building operations.

Each ``with_*`` function takes a simple selector and a fragment value and
returns a new selector carrying one more fragment. Fragments must arrive in
canonical order:

    element -> id -> class -> attribute -> pseudo-class -> pseudo-element

element, id and pseudo-element may each appear at most once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from selector_builder.config import BuilderConfig
from selector_builder.errors import (
    DuplicateCategoryError,
    OrderViolationError,
    SelectorError,
)
from selector_builder.model.fragments import Category
from selector_builder.model.selector import (
    CombinedSelector,
    Combinator,
    Selector,
    SimpleSelector,
)

__all__ = [
    "BuildResult",
    "add_fragment",
    "attempt",
    "combine",
    "stringify",
    "with_attribute",
    "with_class",
    "with_element",
    "with_id",
    "with_pseudo_class",
    "with_pseudo_element",
]

logger = logging.getLogger(__name__)


def _check(selector: SimpleSelector, category: Category) -> None:
    """Raise if *category* cannot be added to *selector* now."""
    fragments = selector.fragments

    # Duplicates first: a second element is not "later" than element.
    if category.is_singleton and fragments.has(category):
        raise DuplicateCategoryError(category)

    for later in category.later():
        if fragments.has(later):
            raise OrderViolationError(category, later)


def add_fragment(selector: SimpleSelector, category: Category, value: str) -> SimpleSelector:
    """Return a new selector with *value* added under *category*.

    Raises:
        DuplicateCategoryError: *category* is a singleton already present.
        OrderViolationError: a later category is already present.
        TypeError: *selector* is not a simple selector.
    """
    if not isinstance(selector, SimpleSelector):
        raise TypeError(
            f"Fragments can only be added to a simple selector, got {type(selector).__name__}"
        )
    try:
        _check(selector, category)
    except SelectorError as exc:
        logger.debug(
            "Rejected %s %r on '%s': %s", category.label, value, selector, exc
        )
        raise
    return SimpleSelector(selector.fragments.added(category, value))


def with_element(selector: SimpleSelector, value: str) -> SimpleSelector:
    return add_fragment(selector, Category.ELEMENT, value)


def with_id(selector: SimpleSelector, value: str) -> SimpleSelector:
    return add_fragment(selector, Category.ID, value)


def with_class(selector: SimpleSelector, value: str) -> SimpleSelector:
    return add_fragment(selector, Category.CLASS, value)


def with_attribute(selector: SimpleSelector, value: str) -> SimpleSelector:
    """Add a raw attribute expression; it is rendered wrapped in brackets."""
    return add_fragment(selector, Category.ATTRIBUTE, value)


def with_pseudo_class(selector: SimpleSelector, value: str) -> SimpleSelector:
    return add_fragment(selector, Category.PSEUDO_CLASS, value)


def with_pseudo_element(selector: SimpleSelector, value: str) -> SimpleSelector:
    return add_fragment(selector, Category.PSEUDO_ELEMENT, value)


def combine(left: Selector, combinator: str | Combinator, right: Selector) -> CombinedSelector:
    """Join two finished selectors with a combinator token.

    Never fails; the token is not checked against the known combinators.
    """
    return CombinedSelector(left=left, combinator=combinator, right=right)


def stringify(selector: Selector, config: BuilderConfig | None = None) -> str:
    """Render *selector*, recursing through combined selectors."""
    return selector.stringify(config)


# ---------------------------------------------------------------------------
# Result-returning variant
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BuildResult:
    """Either the extended selector or the error that prevented it."""

    selector: SimpleSelector | None = None
    error: SelectorError | None = None

    def __post_init__(self) -> None:
        if (self.selector is None) == (self.error is None):
            raise ValueError("BuildResult needs exactly one of selector or error")

    @classmethod
    def ok(cls, selector: SimpleSelector) -> BuildResult:
        return cls(selector=selector)

    @classmethod
    def err(cls, error: SelectorError) -> BuildResult:
        return cls(error=error)

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def unwrap(self) -> SimpleSelector:
        """Return the selector, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.selector  # type: ignore[return-value]


def attempt(selector: SimpleSelector, category: Category, value: str) -> BuildResult:
    """Like ``add_fragment`` but reports selector errors instead of raising."""
    try:
        return BuildResult.ok(add_fragment(selector, category, value))
    except SelectorError as exc:
        return BuildResult.err(exc)
