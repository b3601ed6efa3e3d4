"""
Cookdown renders structured Cooklang recipes (as produced by a Cooklang
parser) into markdown fragments and HTML.

A recipe is rendered as four sections (Ingredients, Cookware, Steps and Image)
by :py:class:`cookdown.renderer.sections.RecipeRenderChild`, or more
conveniently :py:func:`cookdown.renderer.sections.render_recipe`.
"""

__version__ = "0.1"
