"""
Compact rendering of inline markdown.

Markdown renderers wrap even the simplest fragment (e.g. ``**salt**``) in a
``<p>``. When such a fragment is placed inside a list item the paragraph
introduces an unwanted block boundary. The routines here render markdown and
then strip a lone wrapping paragraph.

.. autofunction:: compact_single_paragraph

.. autofunction:: render_compact_markdown
"""

import lxml.html  # type: ignore

from cookdown.component import Component

from cookdown.markdown.engine import MarkdownEngine


def create_el(parent: lxml.html.HtmlElement, tag: str, **attrs: str) -> lxml.html.HtmlElement:
    """Create a new (empty) element and append it to ``parent``."""
    element = lxml.html.Element(tag, **attrs)
    parent.append(element)
    return element


def compact_single_paragraph(tree: lxml.html.HtmlElement) -> None:
    """
    A post-processing stage which, if ``tree`` contains exactly one child
    element and that element is a ``<p>``, replaces the paragraph with its
    contents. Otherwise ``tree`` is left unchanged.

    Example::

        <span><p>Add <b>salt</b>.</p></span>

    Becomes::

        <span>Add <b>salt</b>.</span>
    """
    if len(tree) != 1 or tree[0].tag != "p":
        return

    paragraph = tree[0]
    children = list(paragraph)

    # NB: lxml removes the tail text along with an element
    tail = paragraph.tail
    tree.remove(paragraph)

    if paragraph.text:
        tree.text = (tree.text or "") + paragraph.text
    tree.extend(children)
    if tail:
        if children:
            children[-1].tail = (children[-1].tail or "") + tail
        else:
            tree.text = (tree.text or "") + tail


async def render_compact_markdown(
    markdown: str,
    container: lxml.html.HtmlElement,
    source_path: str,
    component: Component,
    engine: MarkdownEngine,
) -> None:
    """
    Render a markdown fragment into a new ``<span>`` appended to ``container``,
    removing any lone wrapping paragraph (see
    :py:func:`compact_single_paragraph`).
    """
    subcontainer = create_el(container, "span")
    await engine(markdown, subcontainer, source_path, component)
    compact_single_paragraph(subcontainer)
