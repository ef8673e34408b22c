"""CLI command: selector-builder build -- render a selector from fragments."""

from __future__ import annotations

import sys

import click

from selector_builder.builder import add_fragment
from selector_builder.config import BuilderConfig
from selector_builder.errors import SelectorError
from selector_builder.model.fragments import Category
from selector_builder.model.selector import SimpleSelector
from selector_builder.objects import to_json

# Fragment prefix accepted on the command line -> category
FRAGMENT_KINDS: dict[str, Category] = {
    "element": Category.ELEMENT,
    "id": Category.ID,
    "class": Category.CLASS,
    "attr": Category.ATTRIBUTE,
    "pseudo-class": Category.PSEUDO_CLASS,
    "pseudo-element": Category.PSEUDO_ELEMENT,
}


def parse_fragment(raw: str) -> tuple[Category, str]:
    """Split ``kind=value`` into its category and value.

    Only the first ``=`` separates, so ``attr=href$=".png"`` keeps its value.
    """
    kind, sep, value = raw.partition("=")
    if not sep:
        raise click.BadParameter(f"expected KIND=VALUE, got {raw!r}", param_hint="FRAGMENT")
    category = FRAGMENT_KINDS.get(kind.strip())
    if category is None:
        choices = ", ".join(FRAGMENT_KINDS)
        raise click.BadParameter(
            f"unknown fragment kind {kind!r} (choose from {choices})", param_hint="FRAGMENT"
        )
    return category, value


@click.command()
@click.argument("fragments", nargs=-1)
@click.option("--fallback", default=None, help="Element name rendered for an empty selector.")
@click.option("--json", "as_json", is_flag=True, help="Print the selector model as JSON.")
def build(fragments: tuple[str, ...], fallback: str | None, as_json: bool) -> None:
    """Build a selector from KIND=VALUE fragments, applied in the order given.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    Exits with code 1 if the fragments break the selector ordering rules.
    """
    parsed = [parse_fragment(raw) for raw in fragments]

    config = BuilderConfig.from_env()
    if fallback:
        config = BuilderConfig(fallback_element=fallback)

    selector = SimpleSelector()
    try:
        for category, value in parsed:
            selector = add_fragment(selector, category, value)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(to_json(selector))
    else:
        click.echo(selector.stringify(config))
