from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .model import (
    Block,
    CodeBlock,
    Document,
    Heading,
    InlineCode,
    Link,
    ListBlock,
    Paragraph,
)

LINE_TERMINATOR = "\n"


def render_document(doc: Document, output_path: str | Path | None = None) -> str:
    html = render_html(doc.blocks)
    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
    return html


def render_html(blocks: Iterable[Block]) -> str:
    """Render each block and terminate it with a newline.

    User content is inserted verbatim; nothing is HTML-escaped.
    """
    return "".join(render_block(block) + LINE_TERMINATOR for block in blocks)


def render_block(block: Block) -> str:
    if isinstance(block, Heading):
        return _render_heading(block)
    elif isinstance(block, Paragraph):
        return f"<p>{block.text}</p>"
    elif isinstance(block, ListBlock):
        return _render_list(block)
    elif isinstance(block, CodeBlock):
        return _render_code_block(block)
    elif isinstance(block, Link):
        return f'<a href="{block.url}">{block.text}</a>'
    elif isinstance(block, InlineCode):
        return f"<code>{block.code}</code>"
    raise TypeError(f"Cannot render {type(block).__name__!r} as a block element")


def _render_heading(heading: Heading) -> str:
    # Level is used as-is: "#######" gives <h7>.
    tag = f"h{heading.level}"
    return f"<{tag}>{heading.text}</{tag}>"


def _render_list(block: ListBlock) -> str:
    tag = "ol" if block.ordered else "ul"
    items = "".join(f"<li>{item}</li>" for item in block.items)
    return f"<{tag}>{items}</{tag}>"


def _render_code_block(block: CodeBlock) -> str:
    if block.language:
        return f'<pre><code class="language-{block.language}">{block.code}</code></pre>'
    return f"<pre><code>{block.code}</code></pre>"
