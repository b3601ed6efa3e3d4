import pytest

from typing import List

import html

import asyncio

import lxml.html  # type: ignore

from cookdown.component import Component

from cookdown.markdown.engine import MarkoEngine

from cookdown.markdown.html_postprocessing import parse_fragment, append_fragment

from cookdown.renderer.compact import (
    create_el,
    compact_single_paragraph,
    render_compact_markdown,
)


def to_html(element: lxml.html.HtmlElement) -> str:
    return lxml.html.tostring(element, encoding="unicode")


class FixedEngine:
    """A markdown engine which always renders the same HTML."""

    def __init__(self, html: str) -> None:
        self.html = html
        self.calls: List[str] = []

    async def __call__(
        self,
        markdown: str,
        container: lxml.html.HtmlElement,
        source_path: str,
        component: Component,
    ) -> None:
        self.calls.append(markdown)
        append_fragment(container, parse_fragment(self.html))


def test_create_el() -> None:
    parent = lxml.html.Element("div")
    parent.text = "hi"
    a = create_el(parent, "ul")
    b = create_el(parent, "span", title="foo")
    assert list(parent) == [a, b]
    assert to_html(parent) == '<div>hi<ul></ul><span title="foo"></span></div>'


class TestCompactSingleParagraph:
    @pytest.mark.parametrize(
        "source, exp",
        [
            # Just text
            ("<div><p>Just text</p></div>", "<div>Just text</div>"),
            # Text and tags
            (
                "<div><p>Hello <b>world</b>!</p></div>",
                "<div>Hello <b>world</b>!</div>",
            ),
            # Only tags
            (
                "<div><p><b>bold</b><i>italic</i></p></div>",
                "<div><b>bold</b><i>italic</i></div>",
            ),
            # Empty paragraph
            ("<div><p></p></div>", "<div></div>"),
            # Text following the paragraph is kept
            ("<div><p>a</p>, b</div>", "<div>a, b</div>"),
            ("<div><p>a <b>b</b></p> tail</div>", "<div>a <b>b</b> tail</div>"),
            # Nested paragraphs are not touched
            (
                "<div><p>a <span><b>b</b></span></p></div>",
                "<div>a <span><b>b</b></span></div>",
            ),
        ],
    )
    def test_unwraps_single_paragraph(self, source: str, exp: str) -> None:
        tree = lxml.html.fragment_fromstring(source)
        assert compact_single_paragraph(tree) is None
        assert to_html(tree) == exp

    @pytest.mark.parametrize(
        "source",
        [
            # Nothing
            "<div></div>",
            # Text only
            "<div>text only</div>",
            # Multiple paragraphs
            "<div><p>a</p><p>b</p></div>",
            # Paragraph plus something else
            "<div><p>a</p><ul><li>b</li></ul></div>",
            # A single non-paragraph
            "<div><ul><li>a</li><li>b</li></ul></div>",
            "<div><blockquote><p>a</p></blockquote></div>",
            "<div><h1>a</h1></div>",
        ],
    )
    def test_left_untouched(self, source: str) -> None:
        tree = lxml.html.fragment_fromstring(source)
        before = [child.tag for child in tree]
        compact_single_paragraph(tree)
        assert to_html(tree) == source
        assert [child.tag for child in tree] == before

    def test_second_application_is_no_op(self) -> None:
        tree = lxml.html.fragment_fromstring("<div><p>Add <b>salt</b></p></div>")
        compact_single_paragraph(tree)
        once = to_html(tree)
        compact_single_paragraph(tree)
        assert to_html(tree) == once == "<div>Add <b>salt</b></div>"


class TestRenderCompactMarkdown:
    def run(self, markdown: str, engine: object) -> lxml.html.HtmlElement:
        li = lxml.html.Element("li")
        component = Component()
        component.load()
        asyncio.run(
            render_compact_markdown(
                markdown, li, "recipe.json", component, engine  # type: ignore
            )
        )
        return li

    def test_single_paragraph(self) -> None:
        engine = FixedEngine("<p>Add <strong>salt</strong></p>")
        li = self.run("Add **salt**", engine)
        assert engine.calls == ["Add **salt**"]
        assert to_html(li) == "<li><span>Add <strong>salt</strong></span></li>"

    def test_block_content_passed_through(self) -> None:
        engine = FixedEngine("<ul><li>a</li><li>b</li></ul>")
        li = self.run("- a\n- b", engine)
        assert to_html(li) == "<li><span><ul><li>a</li><li>b</li></ul></span></li>"

    def test_multiple_paragraphs_passed_through(self) -> None:
        engine = FixedEngine("<p>a</p><p>b</p>")
        li = self.run("a\n\nb", engine)
        assert to_html(li) == "<li><span><p>a</p><p>b</p></span></li>"

    def test_appends_to_existing_content(self) -> None:
        li = lxml.html.Element("li")
        create_el(li, "b").text = "first"
        component = Component()
        component.load()
        asyncio.run(
            render_compact_markdown(
                "x", li, "recipe.json", component, FixedEngine("<p>second</p>")
            )
        )
        assert to_html(li) == "<li><b>first</b><span>second</span></li>"

    @pytest.mark.parametrize(
        "markdown, exp",
        [
            ("**salt**", "<li><span><strong>salt</strong></span></li>"),
            ("pot", "<li><span>pot</span></li>"),
            ("*pan*", "<li><span><em>pan</em></span></li>"),
            (
                "**2cups flour**",
                "<li><span><strong>2cups flour</strong></span></li>",
            ),
            (
                html.escape("<b>") + " & co",
                "<li><span>&lt;b&gt; &amp; co</span></li>",
            ),
        ],
    )
    def test_with_marko(self, markdown: str, exp: str) -> None:
        assert to_html(self.run(markdown, MarkoEngine())) == exp

    def test_with_marko_block_content(self) -> None:
        li = self.run("- a\n- b", MarkoEngine())
        (span,) = li
        assert [child.tag for child in span] == ["ul"]
        assert [item.text for item in span[0]] == ["a", "b"]
