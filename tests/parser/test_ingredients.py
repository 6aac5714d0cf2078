import pytest

from typing import Tuple

from textwrap import dedent

from fractions import Fraction

from markdown_it.token import Token

from recipemd.recipe import Amount, Ingredient, IngredientGroup

from recipemd.exceptions import InvalidRecipeError, RecipeParserError

from recipemd.parser.tokens import TokenArena

from recipemd.parser.ingredients import (
    heading_level,
    parse_ingredient_section,
    parse_ingredient,
)


def parse_section(
    source: str,
) -> Tuple[Tuple[Ingredient, ...], Tuple[IngredientGroup, ...]]:
    arena = TokenArena.from_source(dedent(source).strip())
    ingredients, groups, pos = parse_ingredient_section(arena, 0)
    assert pos == len(arena)
    return ingredients, groups


@pytest.mark.parametrize("tag, exp", [("h1", 1), ("h2", 2), ("h6", 6)])
def test_heading_level(tag: str, exp: int) -> None:
    assert heading_level(tag) == exp


class TestParseIngredient:
    def test_amount(self) -> None:
        arena = TokenArena.from_source("- *1 1/2 cups* flour\n")
        ingredient, pos = parse_ingredient(arena, 1)
        assert ingredient == Ingredient("flour", Amount(Fraction(3, 2), "cups"))
        assert arena.peek_type(pos) == "bullet_list_close"

    def test_not_a_list_item(self) -> None:
        arena = TokenArena.from_source("- flour\n")
        with pytest.raises(RecipeParserError):
            parse_ingredient(arena, 0)


class TestParseIngredientSection:
    def test_empty(self) -> None:
        arena = TokenArena.from_source("---\n")
        assert parse_ingredient_section(arena, 0) == ((), (), 0)

    def test_simple_list(self) -> None:
        assert parse_section(
            """
            - *1* glass
            - *1* faucet
            - water
            """
        ) == (
            (
                Ingredient("glass", Amount(Fraction(1))),
                Ingredient("faucet", Amount(Fraction(1))),
                Ingredient("water"),
            ),
            (),
        )

    def test_ordered_list(self) -> None:
        assert parse_section(
            """
            1. *2* eggs
            2. *a pinch* salt
            """
        ) == (
            (
                Ingredient("eggs", Amount(Fraction(2))),
                Ingredient("salt", Amount(None, "a pinch")),
            ),
            (),
        )

    def test_consecutive_lists(self) -> None:
        # Changing the bullet character starts a new list
        assert parse_section(
            """
            - eggs
            * milk
            """
        ) == ((Ingredient("eggs"), Ingredient("milk")), ())

    def test_wrapping_link(self) -> None:
        assert parse_section("- *200 g* [Flour](https://example.com)") == (
            (Ingredient("Flour", Amount(Fraction(200), "g"), "https://example.com"),),
            (),
        )

    def test_multi_line_name(self) -> None:
        assert parse_section(
            """
            - *1* egg
              beaten
            """
        ) == ((Ingredient("egg\nbeaten", Amount(Fraction(1))),), ())

    def test_continuation_blocks(self) -> None:
        # NB: Links are not extracted when the name has continuation blocks
        assert parse_section(
            """
            - *1* [Flour](https://example.com)

              finely ground
            """
        ) == (
            (
                Ingredient(
                    "[Flour](https://example.com)\n\n  finely ground",
                    Amount(Fraction(1)),
                ),
            ),
            (),
        )

    def test_nested_list_is_part_of_name(self) -> None:
        ingredients, groups = parse_section(
            """
            - spice mix
              - cumin
            - salt
            """
        )
        assert ingredients == (
            Ingredient("spice mix\n  - cumin"),
            Ingredient("salt"),
        )

    @pytest.mark.parametrize(
        "source",
        [
            # Amount only
            "- *1*",
            # Empty list item
            "- salt\n-",
        ],
    )
    def test_missing_name(self, source: str) -> None:
        arena = TokenArena.from_source(source)
        with pytest.raises(InvalidRecipeError, match="Missing ingredient name"):
            parse_ingredient_section(arena, 0)

    def test_groups(self) -> None:
        assert parse_section(
            """
            - *1* bowl

            ## Dough

            - *200 g* flour

            ### Filling

            - *2* apples

            ## Topping

            - sugar
            """
        ) == (
            (Ingredient("bowl", Amount(Fraction(1))),),
            (
                IngredientGroup(
                    "Dough",
                    (Ingredient("flour", Amount(Fraction(200), "g")),),
                    (
                        IngredientGroup(
                            "Filling", (Ingredient("apples", Amount(Fraction(2))),)
                        ),
                    ),
                ),
                IngredientGroup("Topping", (Ingredient("sugar"),)),
            ),
        )

    def test_nested_group_without_ingredients(self) -> None:
        assert parse_section(
            """
            # Everything

            ## Wet

            - milk

            ## Dry

            - flour
            """
        ) == (
            (),
            (
                IngredientGroup(
                    "Everything",
                    (),
                    (
                        IngredientGroup("Wet", (Ingredient("milk"),)),
                        IngredientGroup("Dry", (Ingredient("flour"),)),
                    ),
                ),
            ),
        )

    def test_shallower_heading_after_deep_heading(self) -> None:
        assert parse_section(
            """
            ### Deep

            - a

            ## Shallower

            - b
            """
        ) == (
            (),
            (
                IngredientGroup("Deep", (Ingredient("a"),)),
                IngredientGroup("Shallower", (Ingredient("b"),)),
            ),
        )

    def test_stops_at_other_blocks(self) -> None:
        arena = TokenArena.from_source("- a\n\n---\n\nb\n")
        ingredients, groups, pos = parse_ingredient_section(arena, 0)
        assert ingredients == (Ingredient("a"),)
        assert arena.peek_type(pos) == "hr"

    def test_missing_list_close_consumes_to_end(self) -> None:
        arena = TokenArena(
            (
                Token("bullet_list_open", "ul", 1, level=0, map=[0, 1]),
                Token("list_item_open", "li", 1, level=1, map=[0, 1]),
                Token("paragraph_open", "p", 1, level=2, map=[0, 1]),
                Token("inline", "", 0, level=3, map=[0, 1], content="egg"),
                Token("paragraph_close", "p", -1, level=2),
            ),
            "- egg",
            ("- egg",),
        )
        assert parse_ingredient_section(arena, 0) == ((Ingredient("egg"),), (), 5)

    def test_list_close_mismatch(self) -> None:
        arena = TokenArena(
            (
                Token("bullet_list_open", "ul", 1, level=0, map=[0, 2]),
                Token("list_item_open", "li", 1, level=1, map=[0, 1]),
                Token("paragraph_open", "p", 1, level=2, map=[0, 1]),
                Token("inline", "", 0, level=3, map=[0, 1], content="egg"),
                Token("paragraph_close", "p", -1, level=2),
                Token("list_item_close", "li", -1, level=1),
                Token("hr", "hr", 0, level=1, map=[1, 2]),
                Token("bullet_list_close", "ul", -1, level=0),
            ),
            "- egg\n---",
            ("- egg", "---"),
        )
        with pytest.raises(RecipeParserError):
            parse_ingredient_section(arena, 0)
