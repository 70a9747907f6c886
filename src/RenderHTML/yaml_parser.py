from __future__ import annotations

import logging
from typing import Iterable, List

import yaml

from .inline import transform
from .markdown_parser import split_lines
from .model import Block, CodeBlock, Document, Heading, Link, ListBlock, Paragraph


def parse_yaml_document(text: str) -> Document:
    """Parse a constrained YAML structure into the same blocks the Markdown parser emits."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError("YAML root must be a mapping with defined fields.")

    body = data.get("body")
    if isinstance(body, list):
        return Document(blocks=_parse_body_sequence(body), metadata={"source": "yaml"})

    blocks: List[Block] = []
    for key, value in data.items():
        if not value:
            continue
        if key in {"title", "heading"}:
            blocks.append(_heading(value, level=1))
        elif key == "subtitle":
            blocks.append(_heading(value, level=2))
        elif key in {"context", "paragraph"}:
            blocks.extend(_paragraphs_from_text(str(value)))
        elif key in {"ordered_list", "numbered_list"}:
            blocks.append(_list_block(_normalize_list(value), ordered=True))
        elif key in {"bullet_list", "unordered_list"}:
            blocks.append(_list_block(_normalize_list(value), ordered=False))
        elif key == "code_block":
            blocks.append(_build_code_block(value))
        elif key == "link":
            link = _build_link(value)
            if link:
                blocks.append(link)
        else:
            logging.debug("Ignoring unknown YAML key %r", key)

    return Document(blocks=blocks, metadata={"source": "yaml"})


def _heading(text, level) -> Heading:
    if isinstance(level, bool) or not isinstance(level, (int, str)):
        raise ValueError(f"Heading level must be an integer, got {level!r}")
    try:
        level = int(level)
    except ValueError:
        raise ValueError(f"Heading level must be an integer, got {level!r}") from None
    return Heading(level=level, text=transform(str(text).strip()))


def _list_block(items: Iterable[str], ordered: bool) -> ListBlock:
    return ListBlock(ordered=ordered, items=[transform(item) for item in items])


def _build_code_block(value) -> CodeBlock:
    if isinstance(value, dict):
        return CodeBlock(language=str(value.get("language") or ""), code=str(value.get("code") or ""))
    # Literal block scalars keep their final newline; the fence form never does.
    return CodeBlock(language="", code=str(value).rstrip("\n"))


def _build_link(value) -> Link | None:
    if isinstance(value, dict):
        url = value.get("url") or value.get("href")
        if not url:
            return None
        return Link(text=str(value.get("text") or url), url=str(url))
    return Link(text=str(value), url=str(value))


def _paragraphs_from_text(text: str) -> list[Paragraph]:
    """Split text on blank lines; lines inside a part are joined like Markdown paragraphs."""
    paragraphs = []
    for part in text.split("\n\n"):
        lines = [line.strip() for line in split_lines(part) if line.strip()]
        if lines:
            paragraphs.append(Paragraph(text=transform(" ".join(lines))))
    return paragraphs


def _parse_body_sequence(body: list) -> list[Block]:
    """Parse an ordered list of block descriptors."""
    blocks: list[Block] = []
    for entry in body:
        if isinstance(entry, str):
            blocks.extend(_paragraphs_from_text(entry))
            continue
        if not isinstance(entry, dict):
            logging.warning("Skipping body entry of type %s", type(entry).__name__)
            continue
        if "heading" in entry:
            blocks.append(_heading(entry["heading"], level=entry.get("level", 1)))
        elif "paragraph" in entry:
            blocks.extend(_paragraphs_from_text(str(entry["paragraph"])))
        elif "ordered_list" in entry:
            blocks.append(_list_block(_normalize_list(entry["ordered_list"]), ordered=True))
        elif "bullet_list" in entry:
            blocks.append(_list_block(_normalize_list(entry["bullet_list"]), ordered=False))
        elif "code_block" in entry:
            blocks.append(_build_code_block(entry["code_block"]))
        elif "link" in entry:
            link = _build_link(entry["link"])
            if link:
                blocks.append(link)
        else:
            logging.warning("Skipping unknown body entry with keys %s", sorted(entry))
    return blocks


def _normalize_list(value) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return [str(value)]
