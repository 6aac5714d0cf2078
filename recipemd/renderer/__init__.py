"""
Parsed recipes (:py:mod:`recipemd.recipe`) may be rendered for display.

:py:mod:`recipemd.renderer.html`: HTML Renderer
===============================================

.. automodule:: recipemd.renderer.html
"""
