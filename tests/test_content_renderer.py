"""Tests for ContentRenderer and the markdown-it engine."""

from __future__ import annotations

from bs4 import BeautifulSoup

from readme_gallery.domain.entities import ReadmeDocument
from readme_gallery.domain.value_objects import RepoRef
from readme_gallery.infrastructure.markdown_engine import MarkdownItEngine
from readme_gallery.services.content_renderer import ContentRenderer, preformatted

from conftest import RAW_BASE


def _doc(text: str, branch: str = "develop") -> ReadmeDocument:
    return ReadmeDocument(
        ref=RepoRef(owner="octo", repo="demo"),
        raw_text=text,
        html_url="https://github.com/octo/demo#readme",
        display_name="README.md",
        default_branch=branch,
    )


def _srcs(markup: str) -> list[str]:
    return [img["src"] for img in BeautifulSoup(markup, "html.parser").find_all("img")]


class TestMarkdownItEngine:
    def test_line_breaks_preserved(self) -> None:
        assert "<br" in MarkdownItEngine().render("first\nsecond")

    def test_gfm_table(self) -> None:
        out = MarkdownItEngine().render("| a | b |\n|---|---|\n| 1 | 2 |\n")
        assert "<table>" in out

    def test_strikethrough(self) -> None:
        assert "<s>gone</s>" in MarkdownItEngine().render("~~gone~~")

    def test_raw_html_passed_through(self) -> None:
        out = MarkdownItEngine().render('<p align="center"><img src="logo.png"></p>\n')
        assert 'src="logo.png"' in out


class TestContentRenderer:
    def test_raw_html_img_rewritten(self) -> None:
        markup = ContentRenderer(MarkdownItEngine()).render(
            _doc('<p align="center">\n<img src="assets/pic.png" width="200">\n</p>\n')
        )
        assert _srcs(markup) == [f"{RAW_BASE}/assets/pic.png"]

    def test_markdown_img_relative_rewritten(self) -> None:
        markup = ContentRenderer(MarkdownItEngine()).render(_doc("![a](../docs/a.png)"))
        assert _srcs(markup) == [f"{RAW_BASE}/docs/a.png"]

    def test_absolute_images_untouched(self) -> None:
        markup = ContentRenderer(MarkdownItEngine()).render(
            _doc('![x](https://example.com/a.png)\n\n<img src="http://example.com/b.png">\n')
        )
        assert _srcs(markup) == ["https://example.com/a.png", "http://example.com/b.png"]

    def test_already_rewritten_source_is_stable(self) -> None:
        markup = ContentRenderer(MarkdownItEngine()).render(_doc(f"![a]({RAW_BASE}/a.png)"))
        assert _srcs(markup) == [f"{RAW_BASE}/a.png"]

    def test_custom_raw_host(self) -> None:
        renderer = ContentRenderer(MarkdownItEngine(), raw_host="https://mirror.example")
        markup = renderer.render(_doc('<img src="./x.png">', branch="main"))
        assert _srcs(markup) == ["https://mirror.example/octo/demo/main/x.png"]

    def test_no_relative_sources_remain(self) -> None:
        text = '![a](a.png)\n<img src="./b.png">\n<img src="../c.png">\n'
        markup = ContentRenderer(MarkdownItEngine()).render(_doc(text))
        assert all(src.startswith("https://") for src in _srcs(markup))

    def test_multibyte_text_survives(self) -> None:
        markup = ContentRenderer(MarkdownItEngine()).render(_doc("# 古文字 🚀"))
        assert "古文字 🚀" in markup


class TestFallback:
    def test_without_engine_text_is_escaped_and_preformatted(self) -> None:
        text = '# Title\n<img src="a.png"> & more'
        markup = ContentRenderer(None).render(_doc(text))
        assert markup == preformatted(text)
        assert markup.startswith("<pre>")
        assert "&lt;img src=&quot;a.png&quot;&gt; &amp; more" in markup
