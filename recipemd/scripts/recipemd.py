"""
The ``recipemd`` command parses a RecipeMD file and prints it, or parts of
it, in various formats.

.. highlight:: bash

Basic usage
===========

.. code:: text

    $ recipemd RECIPE_FILE

This prints a plain text rendering of the recipe. Alternatively, pass
``--json`` (``-j``) for a JSON rendering (see
:py:mod:`recipemd.serialization`), ``--html`` for an HTML rendering,
``--title`` (``-t``) to print just the title or ``--ingredients`` (``-i``)
to print just the ingredient list.

Scaling recipes
===============

Recipes can be scaled by a factor using ``--multiply`` (``-m``), which takes
integers (e.g. '2'), decimal numbers (e.g. '1.5') and fractions (e.g. '1/2'
or '1 1/3').

Alternatively a recipe can be scaled to make a particular yield using
``--yield`` (``-y``), for example ``--yield "4 servings"``. The recipe must
list a yield in the same unit.

Ingredient groups can be flattened into a single list with ``--flatten``
(``-f``).
"""

import sys

from argparse import ArgumentParser

from pathlib import Path

from typing import Iterable, List, Optional

from recipemd.recipe import Recipe, Ingredient, IngredientGroup
from recipemd.parser import parse
from recipemd.amount import parse_amount, parse_factor
from recipemd.exceptions import RecipeMDError
from recipemd.serialization import dumps
from recipemd.number_formatting import format_amount
from recipemd.renderer.html import render_recipe


def format_ingredient_lines(recipe: Recipe) -> List[str]:
    """
    List the ingredients of a recipe, one per line, with group titles as
    Markdown-style headings.
    """
    lines: List[str] = []

    def add_ingredients(ingredients: Iterable[Ingredient]) -> None:
        for ingredient in ingredients:
            if ingredient.amount is not None:
                text = f"{format_amount(ingredient.amount)} {ingredient.name}"
            else:
                text = ingredient.name
            lines.append(text)

    def add_group(group: IngredientGroup, level: int) -> None:
        lines.append("")
        lines.append(f"{'#' * level} {group.title}")
        add_ingredients(group.ingredients)
        for subgroup in group.ingredient_groups:
            add_group(subgroup, level + 1)

    add_ingredients(recipe.ingredients)
    for group in recipe.ingredient_groups:
        add_group(group, 2)

    # Drop the spacer before the first group when there are no ungrouped
    # ingredients
    if lines and lines[0] == "":
        lines.pop(0)
    return lines


def format_recipe_text(recipe: Recipe) -> str:
    """Produce a plain text rendering of a recipe."""
    sections = [recipe.title]
    if recipe.description is not None:
        sections.append(recipe.description)
    if recipe.tags:
        sections.append("Tags: " + ", ".join(recipe.tags))
    if recipe.yields:
        sections.append("Yields: " + ", ".join(format_amount(y) for y in recipe.yields))
    sections.append("\n".join(format_ingredient_lines(recipe)))
    if recipe.instructions is not None:
        sections.append(recipe.instructions)
    return "\n\n".join(sections)


def main(argv: Optional[List[str]] = None) -> None:
    parser = ArgumentParser(
        description="""
            Parse a RecipeMD file and print it, or parts of it.
        """,
    )

    parser.add_argument(
        "recipe",
        type=Path,
        help="""
            The filename of the RecipeMD file to read.
        """,
    )

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--json",
        "-j",
        dest="output",
        action="store_const",
        const="json",
        default="text",
        help="""
            Print the recipe as JSON.
        """,
    )
    output_group.add_argument(
        "--html",
        dest="output",
        action="store_const",
        const="html",
        help="""
            Print the recipe as an HTML fragment.
        """,
    )
    output_group.add_argument(
        "--title",
        "-t",
        dest="output",
        action="store_const",
        const="title",
        help="""
            Print only the recipe's title.
        """,
    )
    output_group.add_argument(
        "--ingredients",
        "-i",
        dest="output",
        action="store_const",
        const="ingredients",
        help="""
            Print only the ingredients, one per line.
        """,
    )

    scaling_group = parser.add_mutually_exclusive_group()
    scaling_group.add_argument(
        "--multiply",
        "-m",
        type=parse_factor,
        metavar="FACTOR",
        default=None,
        help="""
            Multiply all amounts by the given factor. May be a decimal (e.g.
            '3' or '1.5') or a fraction (e.g. '1/2' or '1 1/2').
        """,
    )
    scaling_group.add_argument(
        "--yield",
        "-y",
        dest="required_yield",
        type=parse_amount,
        metavar="AMOUNT",
        default=None,
        help="""
            Scale the recipe to produce the given yield (e.g. '4 servings').
            The recipe must give a yield in the same unit.
        """,
    )

    parser.add_argument(
        "--flatten",
        "-f",
        action="store_true",
        help="""
            Merge all ingredient groups into a single list of ingredients.
        """,
    )

    args = parser.parse_args(argv)

    try:
        with args.recipe.open(encoding="utf-8") as f:
            recipe = parse(f.read())
        if args.multiply is not None:
            recipe = recipe.scale(args.multiply)
        elif args.required_yield is not None:
            recipe = recipe.with_yield(args.required_yield)
    except (OSError, UnicodeDecodeError, RecipeMDError) as e:
        sys.stderr.write(f"{args.recipe}: Error: {e}\n")
        sys.exit(1)

    if args.flatten:
        recipe = recipe.flatten()

    if args.output == "json":
        print(dumps(recipe, indent=2))
    elif args.output == "html":
        print(render_recipe(recipe))
    elif args.output == "title":
        print(recipe.title)
    elif args.output == "ingredients":
        print("\n".join(format_ingredient_lines(recipe)))
    else:
        print(format_recipe_text(recipe))


if __name__ == "__main__":
    main()
