"""
RecipeMD documents are parsed into :py:class:`~recipemd.recipe.Recipe`
objects using :py:func:`recipemd.parser.parse`:

.. autofunction:: recipemd.parser.parse

Internally, documents are first split into Markdown block tokens by
:py:mod:`markdown_it` (see :py:mod:`recipemd.parser.tokens`). These are then
walked by a small recursive descent parser:

* :py:mod:`recipemd.parser.document` splits the document into its title,
  description, tags, yields, ingredients and instructions,
* :py:mod:`recipemd.parser.ingredients` builds the tree of ingredients and
  ingredient groups and
* :py:mod:`recipemd.parser.inline` picks apart the inline syntax used for
  amounts, links, tags and yields.
"""

from recipemd.recipe import Recipe

from recipemd.parser.document import parse_document


def parse(source: str) -> Recipe:
    """
    Parse a RecipeMD document into a :py:class:`~recipemd.recipe.Recipe`.

    Raises
    ======
    recipemd.exceptions.InvalidRecipeError
        If the document is not valid RecipeMD.
    recipemd.exceptions.RecipeParserError
        In the (unexpected) case that the parser encounters a Markdown token
        stream it cannot make sense of.
    """
    return parse_document(source)
