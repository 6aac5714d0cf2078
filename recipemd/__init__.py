"""
A parser for RecipeMD, a human-writable Markdown dialect for recipes.

A RecipeMD document is parsed into an immutable
:py:class:`~recipemd.recipe.Recipe` using:

.. autofunction:: recipemd.parse

See :py:mod:`recipemd.recipe` for the data model and
:py:mod:`recipemd.serialization` for conversion to JSON.
"""

__version__ = "1.0"

from recipemd.recipe import Amount, Ingredient, IngredientGroup, Recipe
from recipemd.exceptions import (
    RecipeMDError,
    InvalidRecipeError,
    RecipeParserError,
    YieldError,
)
from recipemd.parser import parse
