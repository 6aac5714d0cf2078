"""
Extraction of the inline parts of RecipeMD syntax from paragraph text: the
emphasised amount at the start of an ingredient, links wrapping an
ingredient's name and the emphasised paragraphs giving a recipe's tags and
yields.

.. autofunction:: extract_leading_amount_span

.. autofunction:: extract_wrapping_link

.. autofunction:: peek_labeled_paragraph
"""

from typing import List, Optional, Sequence, Tuple

from enum import Enum

from markdown_it.token import Token

from recipemd.parser.tokens import (
    TokenArena,
    emphasis_markdown,
    link_markdown,
    tokenize_inline,
    get_close_index,
)


class LabelKind(Enum):
    """The kinds of labeled paragraph which may follow the description."""

    TAGS = "em_open"
    """A paragraph in *emphasis* lists tags."""

    YIELDS = "strong_open"
    """A paragraph in **strong emphasis** lists yields."""


def serialize_inline_tokens(tokens: Sequence[Token]) -> str:
    """
    Turn emphasis-tokenized inline tokens back into text. Text tokens are
    reproduced as-is while other tokens (e.g. emphasis markers) are
    replaced by their markup.
    """
    return "".join(token.content or token.markup for token in tokens)


def skip_empty_text_tokens(tokens: Sequence[Token], pos: int) -> int:
    """Advance past any empty text tokens (left behind by the tokenizer)."""
    while pos < len(tokens) and tokens[pos].type == "text" and tokens[pos].content == "":
        pos += 1
    return pos


def skip_whitespace_text_tokens(tokens: Sequence[Token], pos: int) -> int:
    """Advance past any text tokens containing only (or no) whitespace."""
    while (
        pos < len(tokens)
        and tokens[pos].type == "text"
        and tokens[pos].content.strip() == ""
    ):
        pos += 1
    return pos


def extract_leading_amount_span(text: str) -> Tuple[Optional[str], str]:
    """
    Split off the emphasised amount at the start of an ingredient's text.

    Returns a (amount, rest) tuple. If the text doesn't begin with emphasis,
    amount is None and rest is the whole text.

    For example ``"*1 1/2 cups* flour"`` becomes ``("1 1/2 cups", " flour")``.
    """
    tokens = tokenize_inline(emphasis_markdown, text)

    pos = skip_empty_text_tokens(tokens, 0)
    if pos < len(tokens) and tokens[pos].type == "em_open":
        close_index = get_close_index(tokens, pos)
        amount = serialize_inline_tokens(tokens[pos + 1 : close_index])
        return amount, serialize_inline_tokens(tokens[close_index + 1 :])
    else:
        return None, serialize_inline_tokens(tokens)


def extract_wrapping_link(text: str) -> Tuple[Optional[str], str]:
    """
    If the given text consists solely of a link (ignoring surrounding
    whitespace), return a (url, link_text) tuple. Otherwise returns (None,
    text).
    """
    tokens = tokenize_inline(link_markdown, text)

    start = skip_whitespace_text_tokens(tokens, 0)
    if start >= len(tokens) or tokens[start].type != "link_open":
        return None, text

    close_index = get_close_index(tokens, start)
    if skip_whitespace_text_tokens(tokens, close_index + 1) < len(tokens):
        return None, text

    link_open = tokens[start]
    name = "".join(token.content for token in tokens[start + 1 : close_index])
    href = link_open.attrGet("href")
    return (str(href) if href is not None else None), name


def match_labeled_paragraph(text: str) -> Optional[Tuple[LabelKind, str]]:
    """
    If the given paragraph text is entirely wrapped in emphasis, return the
    kind of emphasis and the (serialized) text within. Otherwise returns None.
    """
    tokens: List[Token] = tokenize_inline(emphasis_markdown, text)

    start = skip_empty_text_tokens(tokens, 0)
    if start >= len(tokens) or tokens[start].type not in ("em_open", "strong_open"):
        return None

    close_index = get_close_index(tokens, start)
    if skip_empty_text_tokens(tokens, close_index + 1) < len(tokens):
        return None

    return (
        LabelKind(tokens[start].type),
        serialize_inline_tokens(tokens[start + 1 : close_index]),
    )


def peek_labeled_paragraph(
    arena: TokenArena, pos: int
) -> Optional[Tuple[LabelKind, str]]:
    """
    Check whether the next block is a paragraph consisting only of emphasised
    (tags) or strongly emphasised (yields) text. Does not advance the cursor:
    when a match is found, the caller should consume exactly three tokens
    (paragraph_open, inline and paragraph_close).
    """
    if (
        arena.peek_type(pos) != "paragraph_open"
        or arena.peek_type(pos, 1) != "inline"
        or arena.peek_type(pos, 2) != "paragraph_close"
    ):
        return None
    return match_labeled_paragraph(arena.tokens[pos + 1].content)
