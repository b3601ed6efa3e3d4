import pytest

from typing import Optional

from pathlib import Path

import asyncio

import lxml.html  # type: ignore

from cookdown.component import Component

from cookdown.exceptions import (
    LinkToExternalFileError,
    LinkToNonExistentFileError,
    RenderCancelled,
)

from cookdown.markdown.engine import MarkoEngine, check_still_loaded


def to_html(element: lxml.html.HtmlElement) -> str:
    return lxml.html.tostring(element, encoding="unicode")


def render(
    markdown: str,
    engine: Optional[MarkoEngine] = None,
    source_path: str = "recipe.json",
    container: Optional[lxml.html.HtmlElement] = None,
) -> lxml.html.HtmlElement:
    if engine is None:
        engine = MarkoEngine()
    if container is None:
        container = lxml.html.Element("div")
    component = Component()
    component.load()
    asyncio.run(engine(markdown, container, source_path, component))
    return container


def test_check_still_loaded() -> None:
    component = Component()
    with pytest.raises(RenderCancelled):
        check_still_loaded(component)
    component.load()
    check_still_loaded(component)


class TestRenderHTML:
    @pytest.mark.parametrize(
        "markdown, exp",
        [
            ("", "<div></div>"),
            ("## Ingredients", "<div><h2>Ingredients</h2></div>"),
            ("**salt**", "<div><p><strong>salt</strong></p></div>"),
            ("*pot*", "<div><p><em>pot</em></p></div>"),
        ],
    )
    def test_render_html(self, markdown: str, exp: str) -> None:
        fragment = MarkoEngine().render_html(markdown, "recipe.json")
        assert to_html(fragment) == exp


class TestMarkoEngine:
    def test_heading(self) -> None:
        assert to_html(render("# Hi")) == "<div><h1>Hi</h1></div>"

    def test_appends_after_existing_content(self) -> None:
        container = lxml.html.fragment_fromstring("<div>Hi <b>there</b></div>")
        render("text", container=container)
        assert to_html(container) == "<div>Hi <b>there</b><p>text</p></div>"

    def test_multiple_blocks(self) -> None:
        container = render("a\n\nb")
        assert [child.tag for child in container] == ["p", "p"]
        assert [child.text for child in container] == ["a", "b"]

    def test_leaves_links_alone_by_default(self, tmp_path: Path) -> None:
        container = render("![](cake.png)", source_path=str(tmp_path / "r.json"))
        assert container.find(".//img").get("src") == "cake.png"

    def test_embed_local_links(self, tmp_path: Path) -> None:
        (tmp_path / "cake.png").write_bytes(b"PNG")
        container = render(
            "![A cake](cake.png)",
            MarkoEngine(embed_local_links=True),
            str(tmp_path / "recipe.json"),
        )
        img = container.find(".//img")
        assert img.get("src") == "data:image/png;base64,UE5H"
        assert img.get("alt") == "A cake"

    def test_embed_leaves_external_links(self, tmp_path: Path) -> None:
        container = render(
            "![](https://example.com/cake.png)",
            MarkoEngine(embed_local_links=True),
            str(tmp_path / "recipe.json"),
        )
        assert container.find(".//img").get("src") == "https://example.com/cake.png"

    def test_embed_non_existent_file(self, tmp_path: Path) -> None:
        with pytest.raises(LinkToNonExistentFileError):
            render(
                "![](missing.png)",
                MarkoEngine(embed_local_links=True),
                str(tmp_path / "recipe.json"),
            )

    def test_embed_file_outside_root(self, tmp_path: Path) -> None:
        (tmp_path / "outside.png").write_bytes(b"PNG")
        (tmp_path / "recipes").mkdir()
        with pytest.raises(LinkToExternalFileError):
            render(
                "![](../outside.png)",
                MarkoEngine(embed_local_links=True),
                str(tmp_path / "recipes" / "recipe.json"),
            )

    def test_embed_explicit_root(self, tmp_path: Path) -> None:
        (tmp_path / "outside.png").write_bytes(b"PNG")
        (tmp_path / "recipes").mkdir()
        container = render(
            "![](../outside.png)",
            MarkoEngine(embed_local_links=True, root=tmp_path),
            str(tmp_path / "recipes" / "recipe.json"),
        )
        assert container.find(".//img").get("src") == "data:image/png;base64,UE5H"

    def test_not_loaded(self) -> None:
        container = lxml.html.Element("div")
        with pytest.raises(RenderCancelled):
            asyncio.run(MarkoEngine()("text", container, "x", Component()))
        assert to_html(container) == "<div></div>"

    def test_unloaded_during_render(self) -> None:
        container = lxml.html.Element("div")

        async def run() -> None:
            component = Component()
            component.load()
            task = asyncio.ensure_future(
                MarkoEngine()("text", container, "x", component)
            )
            await asyncio.sleep(0)
            component.unload()
            await task

        with pytest.raises(RenderCancelled):
            asyncio.run(run())
        assert to_html(container) == "<div></div>"
