"""
Splitting of a RecipeMD document into its parts.

A RecipeMD document is laid out as follows::

    # Title

    Optional description (any number of blocks).

    *optional, tags*

    **optional yields, 2 servings**

    ---

    - *1* ingredient
    - ...

    ---

    Optional instructions (any number of blocks).

.. autofunction:: parse_document
"""

from typing import List, Optional, Tuple

from recipemd.recipe import Amount, Recipe
from recipemd.amount import parse_amount, split_list
from recipemd.exceptions import RecipeParserError
from recipemd.parser.tokens import TokenArena
from recipemd.parser.inline import LabelKind, peek_labeled_paragraph
from recipemd.parser.ingredients import parse_ingredient_section


def parse_title(arena: TokenArena, pos: int) -> Tuple[str, int]:
    heading_open = arena.tokens[pos] if pos < len(arena) else None
    if heading_open is None or heading_open.type != "heading_open":
        raise arena.error(
            pos,
            f"Title (heading_open with level h1) required, "
            f"got {heading_open.type if heading_open else None} instead.",
        )
    if heading_open.tag != "h1":
        raise arena.error(
            pos,
            f"Title (heading_open with level h1) required, "
            f"got level {heading_open.tag} instead.",
        )

    title = arena.expect(pos + 1, "heading content").content
    heading_close = arena.expect(pos + 2, "heading_close")
    if heading_close.type != "heading_close":
        raise RecipeParserError(
            f"Expected 'heading_close', got {heading_close.type} instead."
        )

    return title, pos + 3


def is_metadata_or_hr(arena: TokenArena, pos: int) -> bool:
    """
    Does the description end here (i.e. at a horizontal rule or a tags or
    yields paragraph)?
    """
    return (
        arena.peek_type(pos) == "hr" or peek_labeled_paragraph(arena, pos) is not None
    )


def parse_tags_and_yields(
    arena: TokenArena, pos: int
) -> Tuple[Tuple[str, ...], Tuple[Amount, ...], int]:
    """
    Parse the (optional) tags and yields paragraphs which follow the
    description, in either order.
    """
    tags: Optional[List[str]] = None
    yields: Optional[List[Amount]] = None

    labeled_paragraph = peek_labeled_paragraph(arena, pos)
    while labeled_paragraph is not None:
        kind, content = labeled_paragraph
        if kind is LabelKind.TAGS:
            if tags is not None:
                raise arena.error(pos, "Tags may not be specified multiple times.")
            tags = [tag.strip() for tag in split_list(content)]
        else:
            if yields is not None:
                raise arena.error(pos, "Yields may not be specified multiple times.")
            yields = [parse_amount(y) for y in split_list(content)]

        pos += 3
        labeled_paragraph = peek_labeled_paragraph(arena, pos)

    return tuple(tags or ()), tuple(yields or ()), pos


def expect_hr(arena: TokenArena, pos: int, before: str) -> int:
    if arena.peek_type(pos) != "hr":
        raise arena.error(
            pos, f"Expected hr before {before}, got {arena.peek_type(pos)} instead."
        )
    return pos + 1


def parse_document(source: str) -> Recipe:
    """
    Parse a complete RecipeMD document.

    Raises
    ======
    :py:exc:`~recipemd.exceptions.InvalidRecipeError`
        If the document isn't valid RecipeMD.
    :py:exc:`~recipemd.exceptions.RecipeParserError`
        If the Markdown tokenizer produced something unexpected.
    """
    arena = TokenArena.from_source(source)

    title, pos = parse_title(arena, 0)
    description, pos = arena.consume_blocks(
        pos, lambda pos: is_metadata_or_hr(arena, pos)
    )
    tags, yields, pos = parse_tags_and_yields(arena, pos)

    pos = expect_hr(arena, pos, "ingredient list")
    ingredients, ingredient_groups, pos = parse_ingredient_section(arena, pos)

    if pos < len(arena):
        pos = expect_hr(arena, pos, "instructions")
    instructions, pos = arena.consume_blocks(pos)

    return Recipe(
        title=title,
        description=description,
        tags=tags,
        yields=yields,
        ingredients=ingredients,
        ingredient_groups=ingredient_groups,
        instructions=instructions,
    )
