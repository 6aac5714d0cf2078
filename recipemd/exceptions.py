"""
Exceptions thrown while parsing and manipulating recipes.

.. autoexception:: RecipeMDError

.. autoexception:: InvalidRecipeError

.. autoexception:: RecipeParserError

.. autoexception:: YieldError
"""

from typing import Optional

from dataclasses import dataclass

from peggie.error_message_generation import format_error_message


class RecipeMDError(Exception):
    """Base class for all exceptions thrown by this package."""


@dataclass
class InvalidRecipeError(RecipeMDError):
    """
    Thrown when a document does not conform to the RecipeMD grammar (e.g.
    the title is missing or tags are given twice).

    When cast to :py:class:`str`, errors whose location is known take the
    form:

    .. code:: text

        At line 5 column 1:
            *more, tags*
            ^
        Tags may not be specified multiple times.
    """

    explanation: str

    line: Optional[int] = None
    """The (1-based) line number of the offending block, if known."""

    snippet: Optional[str] = None
    """The source line at :py:attr:`line`."""

    def __str__(self) -> str:
        if self.line is None or self.snippet is None:
            return self.explanation
        return format_error_message(self.line, 1, self.snippet, self.explanation)


class RecipeParserError(RecipeMDError):
    """
    Thrown when the Markdown token stream does not have the shape the parser
    relies on. This indicates a bug rather than a problem with the document.
    """


class YieldError(RecipeMDError):
    """
    Thrown when a recipe cannot be scaled to a requested yield.
    """
