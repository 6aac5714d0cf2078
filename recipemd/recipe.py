r"""
The :py:mod:`recipemd.recipe` module defines the immutable data structure a
RecipeMD document is parsed into.


Overview
========

A recipe consists of a title, an optional description, a list of tags, a
list of yields, ingredients and optional instructions. For example, the
following document::

    # Water

    A refreshing drink.

    *drink, non-alcoholic*

    **1 glass**

    ---

    - *1* glass

    ## Source

    - *1* faucet

    ---

    Turn on the faucet and fill the glass.

Is represented as:

.. code:: python

    Recipe(
        title="Water",
        description="A refreshing drink.",
        tags=("drink", "non-alcoholic"),
        yields=(Amount(Fraction(1), "glass"),),
        ingredients=(Ingredient("glass", Amount(Fraction(1))),),
        ingredient_groups=(
            IngredientGroup(
                "Source",
                ingredients=(Ingredient("faucet", Amount(Fraction(1))),),
            ),
        ),
        instructions="Turn on the faucet and fill the glass.",
    )

Ingredients may be grouped under headings. Deeper headings produce nested
groups (see :py:attr:`IngredientGroup.ingredient_groups`).


Data structures
===============

.. autoclass:: Recipe
    :members:

.. autoclass:: IngredientGroup
    :members:

.. autoclass:: Ingredient
    :members:

.. autoclass:: Amount
    :members:
"""

from typing import Union, Optional, Iterator, Tuple

from fractions import Fraction

from dataclasses import dataclass, replace

from recipemd.exceptions import YieldError


@dataclass(frozen=True)
class Amount:
    """
    A quantity, e.g. "1 1/2 cups". At least one of :py:attr:`factor` and
    :py:attr:`unit` is given.
    """

    factor: Optional[Fraction] = None
    """
    The (exact) numerical part of this amount. None if no number was given
    (e.g. "a pinch").
    """

    unit: Optional[str] = None
    """
    The unit the :py:attr:`factor` is given in (or, when :py:attr:`factor` is
    None, the whole amount text). None when unitless (e.g. "3" for 3 eggs).
    """

    def scale(self, factor: Union[int, Fraction]) -> "Amount":
        if self.factor is None:
            return self
        return replace(self, factor=self.factor * factor)


@dataclass(frozen=True)
class Ingredient:
    name: str
    """
    The name of the ingredient. Where an ingredient's list item contains
    several blocks, the source text of the later blocks is appended after a
    newline.
    """

    amount: Optional[Amount] = None

    link: Optional[str] = None
    """
    The URL an ingredient's name was wrapped in, if any. Typically used to
    refer to another recipe.
    """

    def scale(self, factor: Union[int, Fraction]) -> "Ingredient":
        if self.amount is None:
            return self
        return replace(self, amount=self.amount.scale(factor))


@dataclass(frozen=True)
class IngredientGroup:
    """
    A titled group of ingredients, introduced by a heading in the ingredient
    section.
    """

    title: Optional[str] = None

    ingredients: Tuple[Ingredient, ...] = ()
    """The ingredients listed directly beneath this group's heading."""

    ingredient_groups: Tuple["IngredientGroup", ...] = ()
    """
    Nested groups, introduced by deeper headings following this group's
    heading, in document order.
    """

    @property
    def leaf_ingredients(self) -> Iterator[Ingredient]:
        """
        Iterate over all ingredients in this group and its subgroups in
        document order.
        """
        yield from self.ingredients
        for group in self.ingredient_groups:
            yield from group.leaf_ingredients

    def scale(self, factor: Union[int, Fraction]) -> "IngredientGroup":
        return replace(
            self,
            ingredients=tuple(i.scale(factor) for i in self.ingredients),
            ingredient_groups=tuple(g.scale(factor) for g in self.ingredient_groups),
        )


@dataclass(frozen=True)
class Recipe:
    """
    A complete, parsed, recipe. Use :py:func:`recipemd.parse` to produce
    one from a RecipeMD document.
    """

    title: str

    description: Optional[str] = None
    """The verbatim Markdown source of the description, if any."""

    tags: Tuple[str, ...] = ()

    yields: Tuple[Amount, ...] = ()

    ingredients: Tuple[Ingredient, ...] = ()
    """Ingredients listed before the first ingredient group heading."""

    ingredient_groups: Tuple[IngredientGroup, ...] = ()

    instructions: Optional[str] = None
    """The verbatim Markdown source of the instructions, if any."""

    @property
    def leaf_ingredients(self) -> Iterator[Ingredient]:
        """
        Iterate over all ingredients in the recipe, including those in
        (nested) groups, in document order.
        """
        yield from self.ingredients
        for group in self.ingredient_groups:
            yield from group.leaf_ingredients

    def flatten(self) -> "Recipe":
        """
        Return a copy of this recipe with all grouped ingredients moved into
        :py:attr:`ingredients`.
        """
        return replace(
            self, ingredients=tuple(self.leaf_ingredients), ingredient_groups=()
        )

    def scale(self, factor: Union[int, Fraction]) -> "Recipe":
        """Multiply all yields and ingredient amounts by the given factor."""
        return replace(
            self,
            yields=tuple(y.scale(factor) for y in self.yields),
            ingredients=tuple(i.scale(factor) for i in self.ingredients),
            ingredient_groups=tuple(g.scale(factor) for g in self.ingredient_groups),
        )

    def with_yield(self, required: Amount) -> "Recipe":
        """
        Scale this recipe such that it produces the required yield.

        The yield with the same unit as the required amount is used to
        determine the scaling factor. As a special case, when a unitless yield
        is requested but the recipe has no unitless yield, the recipe is
        treated as yielding one (i.e. the required factor is used as a
        multiplier).

        Raises :py:exc:`~recipemd.exceptions.YieldError` if no suitable yield
        exists.
        """
        if required.factor is None:
            raise YieldError(f"Required yield {required.unit!r} has no number.")

        for recipe_yield in self.yields:
            if recipe_yield.unit == required.unit and recipe_yield.factor:
                return self.scale(required.factor / recipe_yield.factor)

        if required.unit is None:
            return self.scale(required.factor)

        raise YieldError(f"Recipe has no yield given in {required.unit!r}.")
