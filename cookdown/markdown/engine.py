"""
The markdown rendering engine used to turn markdown fragments into HTML
elements.

Any coroutine function matching :py:data:`MarkdownEngine` may be used to
render recipes. The default implementation, :py:class:`MarkoEngine`, uses the
:py:mod:`marko` CommonMark parser and :py:mod:`lxml`.
"""

from typing import Awaitable, Callable, List, Optional

import asyncio

from pathlib import Path

from functools import partial

from marko import Markdown

import lxml.html  # type: ignore

from cookdown.component import Component

from cookdown.exceptions import RenderCancelled

from cookdown.markdown.html_postprocessing import (
    HTMLPostprocessingStage,
    parse_fragment,
    append_fragment,
    embed_local_links_as_data_urls,
)


MarkdownEngine = Callable[
    [str, lxml.html.HtmlElement, str, Component],
    Awaitable[None],
]
"""
A coroutine function ``engine(markdown, container, source_path, component)``
which renders ``markdown`` and appends the resulting HTML elements to
``container``.

The ``source_path`` gives the path of the file the markdown came from and is
used to resolve relative links. The render is performed on behalf of
``component``: if the component is unloaded before the render completes the
engine must raise :py:exc:`~cookdown.exceptions.RenderCancelled` and leave
``container`` untouched.
"""


def check_still_loaded(component: Component) -> None:
    """
    Raise :py:exc:`~cookdown.exceptions.RenderCancelled` if the component has
    been unloaded.
    """
    if not component.loaded:
        raise RenderCancelled(f"{component!r} was unloaded")


class MarkoEngine:
    """
    A :py:data:`MarkdownEngine` based on :py:mod:`marko`.

    Parameters
    ==========
    embed_local_links : bool
        If True, links to local files (e.g. images) are replaced by ``data:``
        URLs with the referenced file contents embedded.
    root : Path or None
        The directory outside of which local links may not point. Defaults to
        the directory containing the source file.
    """

    def __init__(self, embed_local_links: bool = False, root: Optional[Path] = None):
        self.embed_local_links = embed_local_links
        self.root = root

    def render_html(self, markdown: str, source_path: str) -> lxml.html.HtmlElement:
        """
        Render markdown into a ``<div>`` wrapped lxml fragment (see
        :py:func:`~cookdown.markdown.html_postprocessing.parse_fragment`).
        """
        # NB: Markdown instances are not thread safe so a fresh one is used
        # for each render.
        html = Markdown().convert(markdown)

        stages: List[HTMLPostprocessingStage] = []
        if self.embed_local_links:
            source = Path(source_path)
            stages.append(
                partial(
                    embed_local_links_as_data_urls,
                    source=source,
                    root=self.root if self.root is not None else source.parent,
                )
            )

        return parse_fragment(html.strip(), stages)

    async def __call__(
        self,
        markdown: str,
        container: lxml.html.HtmlElement,
        source_path: str,
        component: Component,
    ) -> None:
        check_still_loaded(component)

        # Rendering (and reading any embedded files) happens off the event
        # loop.
        loop = asyncio.get_running_loop()
        fragment = await loop.run_in_executor(
            None, self.render_html, markdown, source_path
        )

        check_still_loaded(component)

        append_fragment(container, fragment)
