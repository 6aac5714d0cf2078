"""
This module renders :py:class:`~recipemd.recipe.Recipe` objects as HTML
fragments using:

.. autofunction:: render_recipe

Descriptions and instructions are Markdown and are rendered into HTML using
:py:mod:`marko`.

CSS Classes
===========

The generated HTML uses the following CSS class names:

``rmd-recipe``
    Applied to the ``<article>`` containing the whole recipe.
``rmd-description``, ``rmd-instructions``
    Applied to the ``<div>`` containing the description and instructions.
``rmd-tags``, ``rmd-yields``
    Applied to the ``<ul>`` listing tags and yields.
``rmd-ingredients``
    Applied to each ``<ul>`` of ingredients.
``rmd-ingredient-group``
    Applied to the ``<section>`` containing an ingredient group.
``rmd-amount``
    Applied to the ``<span>`` containing an ingredient's amount.
"""

from typing import Optional, Tuple

from html import escape

from xml.sax.saxutils import quoteattr

from textwrap import indent

import marko  # type: ignore

from recipemd.recipe import Amount, Ingredient, IngredientGroup, Recipe
from recipemd.number_formatting import format_amount


markdown = marko.Markdown()


def t(tag: str, body: Optional[str] = None, **attrs: str) -> str:
    """
    Generate an HTML tag. Trailing underscores are trimmed from attribute
    names (e.g. ``class_``) and double underscores become hyphens.

    Examples::

        >>> t("br")
        '<br />'
        >>> t("a", "Eggs", href="eggs.md")
        '<a href="eggs.md">Eggs</a>'
    """
    attrs_str = "".join(
        f" {name.rstrip('_').replace('__', '-')}={quoteattr(value)}"
        for name, value in attrs.items()
    )

    if body is None:
        return f"<{tag}{attrs_str} />"
    if "\n" in body:
        body = "\n" + indent(body, "  ").rstrip() + "\n"
    return f"<{tag}{attrs_str}>{body}</{tag}>"


def render_markdown(source: str) -> str:
    return str(markdown(source)).strip()


def render_amount(amount: Amount) -> str:
    return t("span", escape(format_amount(amount)), class_="rmd-amount")


def render_ingredient(ingredient: Ingredient) -> str:
    name = escape(ingredient.name).replace("\n", "<br />")
    if ingredient.link is not None:
        name = t("a", name, href=ingredient.link)
    if ingredient.amount is not None:
        name = f"{render_amount(ingredient.amount)} {name}"
    return t("li", name)


def render_ingredient_list(ingredients: Tuple[Ingredient, ...]) -> str:
    return t(
        "ul",
        "\n".join(render_ingredient(i) for i in ingredients),
        class_="rmd-ingredients",
    )


def render_ingredient_group(group: IngredientGroup, level: int = 2) -> str:
    """
    Render an ingredient group and its subgroups. Nested groups use
    successively deeper heading levels (up to ``<h6>``).
    """
    parts = []
    if group.title is not None:
        parts.append(t(f"h{min(level, 6)}", escape(group.title)))
    if group.ingredients:
        parts.append(render_ingredient_list(group.ingredients))
    parts.extend(
        render_ingredient_group(subgroup, level + 1)
        for subgroup in group.ingredient_groups
    )
    return t("section", "\n".join(parts), class_="rmd-ingredient-group")


def render_recipe(recipe: Recipe) -> str:
    """Render a complete recipe as an HTML ``<article>``."""
    parts = [t("h1", escape(recipe.title))]

    if recipe.description is not None:
        parts.append(
            t("div", render_markdown(recipe.description), class_="rmd-description")
        )
    if recipe.tags:
        parts.append(
            t(
                "ul",
                "\n".join(t("li", escape(tag)) for tag in recipe.tags),
                class_="rmd-tags",
            )
        )
    if recipe.yields:
        parts.append(
            t(
                "ul",
                "\n".join(t("li", escape(format_amount(y))) for y in recipe.yields),
                class_="rmd-yields",
            )
        )

    parts.append("<hr />")
    if recipe.ingredients:
        parts.append(render_ingredient_list(recipe.ingredients))
    parts.extend(render_ingredient_group(g) for g in recipe.ingredient_groups)

    if recipe.instructions is not None:
        parts.append("<hr />")
        parts.append(
            t("div", render_markdown(recipe.instructions), class_="rmd-instructions")
        )

    return t("article", "\n".join(parts), class_="rmd-recipe")
