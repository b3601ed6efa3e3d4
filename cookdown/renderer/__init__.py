"""
Recipes are rendered into HTML in two stages. First each part of the recipe is
formatted as markdown (:py:mod:`cookdown.renderer.formatting`), then each
markdown fragment is rendered to HTML, removing redundant paragraph wrappers
from inline fragments (:py:mod:`cookdown.renderer.compact`).
:py:mod:`cookdown.renderer.sections` ties these together.

.. autofunction:: cookdown.renderer.sections.render_recipe
"""

from cookdown.renderer.sections import RecipeRenderChild, render_recipe
