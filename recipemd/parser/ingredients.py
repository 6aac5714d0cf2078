"""
Parsing of the ingredient section of a RecipeMD document into a tree of
ingredients and (nested) ingredient groups.

The ingredient section consists of lists, whose items are ingredients, and
headings, which start ingredient groups. A heading nested more deeply than
the preceding heading starts a subgroup of the group that heading started.

.. autofunction:: parse_ingredient_section
"""

from typing import List, Optional, Tuple

from recipemd.recipe import Ingredient, IngredientGroup
from recipemd.amount import parse_amount
from recipemd.exceptions import RecipeParserError
from recipemd.parser.tokens import TokenArena, get_close_index
from recipemd.parser.inline import extract_leading_amount_span, extract_wrapping_link


LIST_OPEN_TYPES = ("bullet_list_open", "ordered_list_open")


def parse_ingredient_section(
    arena: TokenArena, pos: int
) -> Tuple[Tuple[Ingredient, ...], Tuple[IngredientGroup, ...], int]:
    """
    Parse the lists and headings which make up the ingredient section,
    stopping at the first other kind of block (or the end of the document).

    Returns the ungrouped ingredients, the top-level ingredient groups and
    the advanced cursor.
    """
    ingredients: List[Ingredient] = []
    groups: List[IngredientGroup] = []
    while True:
        token_type = arena.peek_type(pos)
        if token_type == "heading_open":
            new_groups, pos = parse_groups(arena, pos, -1)
            groups.extend(new_groups)
        elif token_type in LIST_OPEN_TYPES:
            new_ingredients, pos = parse_list(arena, pos)
            ingredients.extend(new_ingredients)
        else:
            return tuple(ingredients), tuple(groups), pos


def heading_level(tag: str) -> int:
    """Get the level of a heading from its tag (e.g. 2 for 'h2')."""
    return int(tag[1:])


def parse_groups(
    arena: TokenArena, pos: int, parent_level: int
) -> Tuple[List[IngredientGroup], int]:
    """
    Parse a series of sibling ingredient groups whose headings are deeper
    than ``parent_level``, along with their subgroups.
    """
    groups: List[IngredientGroup] = []
    while arena.peek_type(pos) == "heading_open":
        level = heading_level(arena.tokens[pos].tag)
        if level <= parent_level:
            break

        title = arena.expect(pos + 1, "heading content").content
        arena.expect(pos + 2, "heading_close")
        pos += 3

        ingredients: List[Ingredient] = []
        if arena.peek_type(pos) in LIST_OPEN_TYPES:
            ingredients, pos = parse_list(arena, pos)

        subgroups, pos = parse_groups(arena, pos, level)

        groups.append(
            IngredientGroup(title, tuple(ingredients), tuple(subgroups))
        )
    return groups, pos


def parse_list(arena: TokenArena, pos: int) -> Tuple[List[Ingredient], int]:
    """
    Parse one or more consecutive (bullet or ordered) lists of ingredients.
    """
    ingredients: List[Ingredient] = []
    while arena.peek_type(pos) in LIST_OPEN_TYPES:
        close_index = get_close_index(arena.tokens, pos)
        pos += 1

        while arena.peek_type(pos) == "list_item_open":
            ingredient, pos = parse_ingredient(arena, pos)
            ingredients.append(ingredient)

        if pos != close_index:
            raise RecipeParserError(
                f"Expected list to end at token {close_index}, "
                f"but it ended at token {pos}."
            )
        pos = min(close_index + 1, len(arena))
    return ingredients, pos


def parse_ingredient(arena: TokenArena, pos: int) -> Tuple[Ingredient, int]:
    """
    Parse a single list item as an ingredient.

    The first paragraph of the list item may begin with an emphasised amount
    and, if it is the only block in the item, its remaining text may be a
    link which wraps the ingredient's name. Any further blocks in the list
    item are appended to the name verbatim.
    """
    list_item_open = arena.expect(pos, "list_item_open")
    if list_item_open.type != "list_item_open":
        raise RecipeParserError(
            f"Expected 'list_item_open', got {list_item_open.type} instead."
        )
    item_pos = pos
    close_index = get_close_index(arena.tokens, pos)
    pos += 1

    amount: Optional[str] = None
    link: Optional[str] = None
    name = ""
    continuation_start_line: Optional[int] = None
    if arena.peek_type(pos) == "paragraph_open":
        paragraph_open = arena.tokens[pos]
        content = arena.expect(pos + 1, "paragraph content").content
        pos = min(get_close_index(arena.tokens, pos) + 1, len(arena))
        if paragraph_open.map is not None:
            continuation_start_line = paragraph_open.map[1]

        amount, name = extract_leading_amount_span(content)
        if pos == close_index:
            link, name = extract_wrapping_link(name)

    continuation, pos = arena.consume_blocks(
        pos, lambda pos: pos >= close_index, continuation_start_line
    )
    if continuation is not None:
        name += "\n" + continuation

    if pos != close_index:
        raise RecipeParserError(
            f"Expected list item to end at token {close_index}, "
            f"but it ended at token {pos}."
        )
    pos = min(close_index + 1, len(arena))

    name = name.strip()
    if not name:
        raise arena.error(item_pos, "Missing ingredient name.")

    return (
        Ingredient(
            name,
            parse_amount(amount) if amount is not None else None,
            link,
        ),
        pos,
    )
