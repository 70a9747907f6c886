from pathlib import Path

import pytest

from RenderHTML import markdown_parser
from RenderHTML.model import CodeBlock, Document, Heading, InlineCode, Link, ListBlock, Paragraph
from RenderHTML.renderer_html import render_block, render_document, render_html


def test_render_each_block_kind():
    assert render_block(Heading(level=3, text="Title")) == "<h3>Title</h3>"
    assert render_block(Heading(level=7, text="x")) == "<h7>x</h7>"
    assert render_block(Paragraph(text="hi")) == "<p>hi</p>"
    assert render_block(ListBlock(ordered=False, items=["a", "b"])) == "<ul><li>a</li><li>b</li></ul>"
    assert render_block(ListBlock(ordered=True, items=["a"])) == "<ol><li>a</li></ol>"
    assert render_block(Link(text="docs", url="https://example.com")) == '<a href="https://example.com">docs</a>'
    assert render_block(InlineCode(code="x = 1")) == "<code>x = 1</code>"


def test_code_block_language_class():
    assert render_block(CodeBlock(language="go", code="x := 1")) == (
        '<pre><code class="language-go">x := 1</code></pre>'
    )
    assert render_block(CodeBlock(language="", code="a\nb")) == "<pre><code>a\nb</code></pre>"


def test_code_is_not_escaped():
    assert render_block(CodeBlock(language="", code="a < b && c")) == "<pre><code>a < b && c</code></pre>"


def test_render_html_terminates_each_block():
    html = render_html([Heading(level=1, text="T"), Paragraph(text="p")])
    assert html == "<h1>T</h1>\n<p>p</p>\n"
    assert render_html([]) == ""


def test_render_rejects_non_blocks():
    with pytest.raises(TypeError):
        render_block("<p>not a block</p>")


def test_one_line_per_parsed_block():
    lines = ["# H", "para", "continued", "", "- a", "* b", "1. c", "```sh", "echo 1", "", "echo 2", "```", "end"]
    blocks = markdown_parser.parse_lines(lines)
    html = render_html(blocks)
    assert len(blocks) == 6
    # Code keeps its interior newlines, so count terminators per block instead of lines.
    assert html == "".join(render_block(block) + "\n" for block in blocks)
    assert html.startswith("<h1>H</h1>\n<p>para continued</p>\n<ul><li>a</li><li>b</li></ul>\n<ol><li>c</li></ol>\n")
    assert html.endswith('<pre><code class="language-sh">echo 1\n\necho 2</code></pre>\n<p>end</p>\n')


def test_render_document_writes_file(tmp_path: Path):
    doc = Document(blocks=[Heading(level=2, text="Saved")])
    output_file = tmp_path / "nested" / "out.html"
    html = render_document(doc, output_file)
    assert html == "<h2>Saved</h2>\n"
    assert output_file.read_text(encoding="utf-8") == html


def test_render_document_without_path_only_returns(tmp_path: Path):
    doc = Document(blocks=[Paragraph(text="x")])
    assert render_document(doc) == "<p>x</p>\n"
    assert list(tmp_path.iterdir()) == []
