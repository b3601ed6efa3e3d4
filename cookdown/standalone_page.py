"""
Generates a stand alone HTML page for a single recipe.
"""

from typing import Optional

import asyncio

from pathlib import Path

import lxml.html  # type: ignore

from cookdown.loader import load_recipe

from cookdown.settings import RenderSettings

from cookdown.markdown.engine import MarkoEngine

from cookdown.renderer.sections import render_recipe

from cookdown.templates import standalone_recipe_template


async def render_recipe_html(
    input_file: Path,
    settings: Optional[RenderSettings] = None,
    embed_local_links: bool = True,
) -> str:
    """
    Load and render a recipe JSON file into a HTML ``<div>`` with the class
    ``cookdown-recipe``.
    """
    recipe = load_recipe(input_file)

    container = lxml.html.Element("div", {"class": "cookdown-recipe"})
    await render_recipe(
        recipe,
        container,
        str(input_file),
        settings=settings,
        engine=MarkoEngine(
            embed_local_links=embed_local_links,
            root=input_file.parent,
        ),
    )

    return lxml.html.tostring(container, encoding="unicode")


def generate_standalone_page(
    input_file: Path,
    settings: Optional[RenderSettings] = None,
    embed_local_links: bool = True,
) -> str:
    """
    Generate a standalone page with a rendered recipe.

    Parameters
    ==========
    input_file : Path
        The recipe JSON file to render. The page title is taken from its
        filename.
    settings : RenderSettings or None
        Rendering settings, or None to use the defaults.
    embed_local_links : bool
        If True, links to local files (e.g. images) will be replaced by
        ``data:`` URLs with the referenced file contents embedded.
    """
    recipe_html = asyncio.run(
        render_recipe_html(input_file, settings, embed_local_links)
    )

    return standalone_recipe_template.render(
        title=input_file.stem.replace("_", " "),
        body=recipe_html,
    )
