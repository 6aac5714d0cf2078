"""
Conversion of recipes into JSON-compatible values.

The JSON representation mirrors the data model in :py:mod:`recipemd.recipe`
with the exception that an :py:attr:`~recipemd.recipe.Amount.factor` is given
as a decimal string (e.g. ``"1.5"``) so that it can be represented exactly.
For example::

    {
      "title": "Water",
      "description": null,
      "tags": ["drink"],
      "yields": [{"factor": "1", "unit": "glass"}],
      "ingredients": [
        {"name": "glass", "amount": {"factor": "1", "unit": null}, "link": null}
      ],
      "ingredient_groups": [],
      "instructions": "Turn on the faucet and fill the glass."
    }

.. autofunction:: recipe_to_json

.. autofunction:: dumps

.. autofunction:: format_factor
"""

from typing import Any, Dict, Optional

import json

from decimal import Decimal, localcontext

from fractions import Fraction

from recipemd.recipe import Amount, Ingredient, IngredientGroup, Recipe


def has_terminating_expansion(factor: Fraction) -> bool:
    """Does the factor have a finite decimal representation?"""
    denominator = factor.denominator
    for prime in (2, 5):
        while denominator % prime == 0:
            denominator //= prime
    return denominator == 1


def format_factor(factor: Fraction) -> str:
    """
    Format a factor as a decimal string. Factors with a terminating decimal
    expansion are formatted exactly, others are rounded to 28 significant
    figures. Exponent notation is never used.
    """
    numerator = Decimal(factor.numerator)
    denominator = Decimal(factor.denominator)
    if not has_terminating_expansion(factor):
        return format(numerator / denominator, "f")

    # Enough digits to hold the exact quotient
    with localcontext() as context:
        context.prec = (
            len(str(abs(factor.numerator))) + 3 * len(str(factor.denominator)) + 1
        )
        return format(numerator / denominator, "f")


def amount_to_json(amount: Amount) -> Dict[str, Any]:
    return {
        "factor": format_factor(amount.factor) if amount.factor is not None else None,
        "unit": amount.unit,
    }


def ingredient_to_json(ingredient: Ingredient) -> Dict[str, Any]:
    return {
        "name": ingredient.name,
        "amount": (
            amount_to_json(ingredient.amount) if ingredient.amount is not None else None
        ),
        "link": ingredient.link,
    }


def ingredient_group_to_json(group: IngredientGroup) -> Dict[str, Any]:
    return {
        "title": group.title,
        "ingredients": [ingredient_to_json(i) for i in group.ingredients],
        "ingredient_groups": [
            ingredient_group_to_json(g) for g in group.ingredient_groups
        ],
    }


def recipe_to_json(recipe: Recipe) -> Dict[str, Any]:
    """
    Convert a :py:class:`~recipemd.recipe.Recipe` into a dictionary suitable
    for passing to :py:func:`json.dumps`.
    """
    return {
        "title": recipe.title,
        "description": recipe.description,
        "tags": list(recipe.tags),
        "yields": [amount_to_json(y) for y in recipe.yields],
        "ingredients": [ingredient_to_json(i) for i in recipe.ingredients],
        "ingredient_groups": [
            ingredient_group_to_json(g) for g in recipe.ingredient_groups
        ],
        "instructions": recipe.instructions,
    }


def dumps(recipe: Recipe, indent: Optional[int] = None, **kwargs: Any) -> str:
    """Serialize a recipe as a JSON string."""
    return json.dumps(
        recipe_to_json(recipe), indent=indent, ensure_ascii=False, **kwargs
    )
