"""
Renders a complete recipe as a series of sections:

* Ingredients: a bulleted list of ingredients (with quantities in bold).
* Cookware: a bulleted list of cookware.
* Steps: the steps of the recipe, by default as a numbered list.
* Image: any images given in the recipe's ``image`` metadata.

Each section consists of a heading followed by its content. List entries are
rendered via :py:func:`~cookdown.renderer.compact.render_compact_markdown`
so that they appear inline within their ``<li>``.

Rendering is performed by a :py:class:`RecipeRenderChild` component which
starts rendering when loaded. Most users will instead want the
:py:func:`render_recipe` wrapper.

.. autoclass:: RecipeRenderChild
    :members:

.. autofunction:: render_recipe
"""

from typing import Optional

import asyncio

import lxml.html  # type: ignore

from cookdown.recipe import Recipe

from cookdown.component import Component

from cookdown.exceptions import RenderCancelled

from cookdown.settings import RenderSettings, StepStyle, DEFAULT_SETTINGS

from cookdown.markdown.engine import MarkdownEngine, MarkoEngine

from cookdown.renderer.compact import create_el, render_compact_markdown

from cookdown.renderer.formatting import (
    render_heading,
    render_ingredient,
    render_cookware,
    render_step,
)


def clear_element(element: lxml.html.HtmlElement) -> None:
    """Remove all text and children from an element, keeping its attributes."""
    element.text = None
    for child in list(element):
        element.remove(child)


class RecipeRenderChild(Component):
    """
    A component which, when loaded, renders a recipe into a container element.

    The render runs as an :py:mod:`asyncio` task (available as
    :py:attr:`rendering`) and so the component must be loaded from within a
    running event loop. If the component is unloaded before the render
    completes, the task is cancelled leaving the container partially
    populated.

    Each load starts its render within a fresh child component (the 'scope'
    handed to the markdown engine). Unloading discards the scope, so a render
    from before an unload never resumes writing into the container, even if
    this component has since been loaded again.
    """

    rendering: Optional["asyncio.Task[None]"]
    """The task performing the most recently started render, if any."""

    def __init__(
        self,
        recipe: Recipe,
        container: lxml.html.HtmlElement,
        source_path: str,
        settings: Optional[RenderSettings] = None,
        engine: Optional[MarkdownEngine] = None,
    ) -> None:
        super().__init__()
        self.recipe = recipe
        self.container = container
        self.source_path = source_path
        self.settings = settings if settings is not None else DEFAULT_SETTINGS
        self.engine: MarkdownEngine = engine if engine is not None else MarkoEngine()
        self.rendering = None

    def on_load(self) -> None:
        self._cancel_rendering()
        scope = self.add_child(Component())
        self.rendering = asyncio.get_running_loop().create_task(self.render(scope))

    def on_unload(self) -> None:
        self._cancel_rendering()

    def _cancel_rendering(self) -> None:
        task = self.rendering
        if task is None or task.done():
            return
        # A render which unloads us from within the engine ends itself via
        # RenderCancelled
        if task is asyncio.current_task(task.get_loop()):
            return
        task.cancel()

    async def render(self, scope: Optional[Component] = None) -> None:
        """
        Clear the container and render the recipe into it.

        The ``scope`` component is passed to the markdown engine and the
        render stops as soon as it is unloaded. Defaults to this component.

        Exceptions raised by the markdown engine are propagated, except for
        :py:exc:`~cookdown.exceptions.RenderCancelled` which just ends the
        render.
        """
        try:
            await self._render(scope if scope is not None else self)
        except RenderCancelled:
            # Unloaded mid-render: the partial output is no longer wanted
            return

    async def _render_markdown(
        self, markdown: str, container: lxml.html.HtmlElement, scope: Component
    ) -> None:
        await self.engine(markdown, container, self.source_path, scope)

    async def _render_list_entry(
        self, list_el: lxml.html.HtmlElement, markdown: str, scope: Component
    ) -> None:
        li = create_el(list_el, "li")
        span = create_el(li, "span")
        await render_compact_markdown(
            markdown, span, self.source_path, scope, self.engine
        )

    async def _render_heading(self, text: str, scope: Component) -> None:
        await self._render_markdown(
            render_heading(text, self.settings.heading_level), self.container, scope
        )

    async def _render(self, scope: Component) -> None:
        settings = self.settings
        recipe = self.recipe

        clear_element(self.container)

        await self._render_heading(settings.ingredients_heading, scope)
        list_el = create_el(self.container, "ul")
        for ingredient in recipe.ingredients:
            await self._render_list_entry(
                list_el, render_ingredient(ingredient), scope
            )

        await self._render_heading(settings.cookware_heading, scope)
        list_el = create_el(self.container, "ul")
        for cookware in recipe.cookware:
            await self._render_list_entry(list_el, render_cookware(cookware), scope)

        await self._render_heading(settings.steps_heading, scope)
        if settings.step_style is StepStyle.PARAGRAPHS:
            for step in recipe.steps:
                await self._render_markdown(render_step(step), self.container, scope)
        else:
            list_el = create_el(
                self.container,
                "ol" if settings.step_style is StepStyle.ORDERED else "ul",
            )
            for step in recipe.steps:
                await self._render_list_entry(list_el, render_step(step), scope)

        await self._render_heading(settings.image_heading, scope)
        for image in recipe.get_metadata("image"):
            await self._render_markdown(image, self.container, scope)


async def render_recipe(
    recipe: Recipe,
    container: lxml.html.HtmlElement,
    source_path: str,
    settings: Optional[RenderSettings] = None,
    engine: Optional[MarkdownEngine] = None,
) -> None:
    """
    Render a recipe into the provided container element (replacing any
    existing content).

    Parameters
    ==========
    recipe : Recipe
        The recipe to render.
    container : lxml.html.HtmlElement
        The element to render into.
    source_path : str
        The path of the file the recipe was loaded from. Used to resolve
        relative links (e.g. to images).
    settings : RenderSettings or None
        Rendering settings. Defaults to :py:data:`DEFAULT_SETTINGS`.
    engine : MarkdownEngine or None
        The markdown engine to use. Defaults to a
        :py:class:`~cookdown.markdown.engine.MarkoEngine`.
    """
    root = Component()
    root.load()
    try:
        child = root.add_child(
            RecipeRenderChild(recipe, container, source_path, settings, engine)
        )
        assert child.rendering is not None
        await child.rendering
    finally:
        root.unload()
