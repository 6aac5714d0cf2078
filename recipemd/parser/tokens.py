"""
Markdown tokenization, via :py:mod:`markdown_it`, and helpers for walking
the resulting token streams.

Three tokenizers are used:

* :py:data:`block_markdown` splits a document into block tokens. Inline
  parsing is disabled: the text of headings and paragraphs is left in the
  ``content`` of their ``inline`` tokens.
* :py:data:`emphasis_markdown` tokenizes inline text recognising only
  emphasis (and backslash escapes).
* :py:data:`link_markdown` tokenizes inline text recognising only links.

The block tokens of a document are held in a :py:class:`TokenArena` which is
never modified. Parsing routines instead take a cursor (an index into the
arena) and return the advanced cursor alongside their result.

.. autoclass:: TokenArena
    :members:

.. autofunction:: get_close_index
"""

from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

import re

from markdown_it import MarkdownIt
from markdown_it.token import Token

from peggie.error_message_generation import extract_line

from recipemd.exceptions import InvalidRecipeError, RecipeParserError


INLINE_RULES = [
    "text",
    "linkify",
    "newline",
    "escape",
    "backticks",
    "strikethrough",
    "emphasis",
    "link",
    "image",
    "autolink",
    "html_inline",
    "entity",
]
"""
Names of the markdown-it inline rules. Not all of these are enabled in every
preset (and 'linkify' is only present in newer versions) so these are
always disabled with ``ignoreInvalid``.
"""

INLINE_POST_PROCESSING_RULES = [
    "balance_pairs",
    "strikethrough",
    "emphasis",
    "fragments_join",
    "text_collapse",
]

block_markdown = MarkdownIt("commonmark").disable(
    ["reference"] + INLINE_RULES + INLINE_POST_PROCESSING_RULES, True
)

emphasis_markdown = (
    MarkdownIt("commonmark")
    .disable(INLINE_RULES, True)
    .enable(["text", "escape", "emphasis"])
)

link_markdown = MarkdownIt("zero").enable("link")


def tokenize_inline(md: MarkdownIt, text: str) -> List[Token]:
    """Tokenize a fragment of inline text, returning its inline tokens."""
    inline_tokens = md.parseInline(text)
    if not inline_tokens:
        return []
    return list(inline_tokens[0].children or [])


def get_close_index(tokens: Sequence[Token], open_index: int) -> int:
    """
    Find the index of the '*_close' token matching the '*_open' token at
    ``open_index``: the first following token of the corresponding close
    type at the same nesting level.

    When no such token exists ``len(tokens)`` is returned, i.e. the open
    token is treated as being closed by the end of the token stream.
    """
    open_token = tokens[open_index]
    if not open_token.type.endswith("_open"):
        raise RecipeParserError(f"Expected open token, got {open_token.type} instead.")

    close_type = open_token.type[: -len("_open")] + "_close"
    for index in range(open_index + 1, len(tokens)):
        token = tokens[index]
        if token.type == close_type and token.level == open_token.level:
            return index
    return len(tokens)


line_split_pattern = re.compile(r"\r?\n")


class TokenArena(NamedTuple):
    """
    The block tokens of a document along with the source they came from.
    """

    tokens: Tuple[Token, ...]

    source: str

    lines: Tuple[str, ...]
    """The source split into lines (for recovering verbatim source text)."""

    @classmethod
    def from_source(cls, source: str) -> "TokenArena":
        return cls(
            tuple(block_markdown.parse(source)),
            source,
            tuple(line_split_pattern.split(source)),
        )

    def __len__(self) -> int:
        return len(self.tokens)

    def peek_type(self, pos: int, offset: int = 0) -> Optional[str]:
        """
        The type of the token ``offset`` tokens after the cursor, or None if
        the end of the stream has been reached.
        """
        if pos + offset < len(self.tokens):
            return self.tokens[pos + offset].type
        return None

    def expect(self, pos: int, description: str) -> Token:
        """
        Return the token at the cursor, throwing a
        :py:exc:`~recipemd.exceptions.RecipeParserError` if the end of the
        stream has been reached.
        """
        if pos >= len(self.tokens):
            raise RecipeParserError(f"Expected {description}, got None instead.")
        return self.tokens[pos]

    def skip_block(self, pos: int) -> Tuple[Tuple[int, int], int]:
        """
        Consume one whole block (e.g. a paragraph or a complete list)
        starting at the cursor.

        Returns the (start, end) source line range of the block along with
        the advanced cursor.
        """
        open_token = self.expect(pos, "another block")
        if open_token.map is None:
            raise RecipeParserError(
                f"Can't map {open_token.type} token to the source."
            )
        start_line, end_line = open_token.map

        if open_token.type.endswith("_open"):
            pos = get_close_index(self.tokens, pos)
        return (start_line, end_line), min(pos + 1, len(self.tokens))

    def text_for_lines(self, start_line: int, end_line: int) -> str:
        """Return the verbatim source of the given (0-based, half-open) lines."""
        return "\n".join(self.lines[start_line:end_line])

    def error(self, pos: int, explanation: str) -> InvalidRecipeError:
        """
        Create an :py:exc:`~recipemd.exceptions.InvalidRecipeError`, located
        at the source line of the token at the cursor (if any).
        """
        if pos < len(self.tokens) and self.tokens[pos].map is not None:
            line = self.tokens[pos].map[0] + 1
            return InvalidRecipeError(
                explanation, line, extract_line(self.source, line).rstrip("\r")
            )
        return InvalidRecipeError(explanation)

    def consume_blocks(
        self,
        pos: int,
        until: Callable[[int], bool] = lambda pos: False,
        start_line: Optional[int] = None,
    ) -> Tuple[Optional[str], int]:
        """
        Consume whole blocks until the end of the stream or until ``until``
        returns True for the cursor position.

        Returns the verbatim source text spanned by the consumed blocks (or
        None if no blocks were consumed) and the advanced cursor. When given,
        the text starts at ``start_line`` rather than the first consumed
        block.
        """
        end_line: Optional[int] = None
        while pos < len(self.tokens) and not until(pos):
            (block_start_line, end_line), pos = self.skip_block(pos)
            if start_line is None:
                start_line = block_start_line

        if start_line is None or end_line is None:
            return None, pos
        return self.text_for_lines(start_line, end_line), pos
