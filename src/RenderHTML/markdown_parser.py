from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence, Tuple

from .inline import transform
from .model import Block, CodeBlock, Document, Heading, ListBlock, Paragraph

FENCE = "```"
ORDERED_MARKER_RE = re.compile(r"^[0-9]+\. ")
ORDERED_ITEM_RE = re.compile(r"^[0-9]+\. (.*)")
UNORDERED_MARKERS = ("- ", "* ")

RuleResult = Tuple[Optional[Block], int]


def parse_markdown(text: str) -> Document:
    lines = split_lines(text)
    blocks = parse_lines(lines)
    return Document(blocks=blocks, metadata={"source": "markdown", "lines": len(lines)})


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` only, dropping one trailing ``\\r`` per line.

    Other separators recognised by ``str.splitlines`` (form feed, U+2028, ...)
    stay inside the line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_lines(lines: Sequence[str]) -> List[Block]:
    """Segment ``lines`` into block elements with a single forward cursor."""
    blocks: List[Block] = []
    i = 0
    while i < len(lines):
        line = lines[i].strip()
        if not line:
            i += 1
            continue
        if line.startswith("#"):
            block, consumed = parse_heading(lines, i)
        elif line.startswith(FENCE):
            block, consumed = parse_code_block(lines, i)
        elif _is_unordered_item(line) or _is_ordered_item(line):
            block, consumed = parse_list(lines, i)
        else:
            block, consumed = parse_paragraph(lines, i)
        if block is not None:
            blocks.append(block)
        i += consumed
    return blocks


def parse_heading(lines: Sequence[str], start: int) -> RuleResult:
    line = lines[start].strip()
    text = line.lstrip("#")
    level = len(line) - len(text)
    return Heading(level=level, text=transform(text.strip())), 1


def parse_code_block(lines: Sequence[str], start: int) -> RuleResult:
    language = lines[start].strip()[len(FENCE) :].strip()
    code_lines: List[str] = []
    i = start + 1
    while i < len(lines):
        if lines[i].strip() == FENCE:
            break
        code_lines.append(lines[i])
        i += 1
    if i < len(lines):
        consumed = i - start + 1  # closing fence
    else:
        logging.debug("Unterminated code fence at line %d; consuming to end of input", start + 1)
        consumed = i - start
    return CodeBlock(language=language, code="\n".join(code_lines)), consumed


def parse_list(lines: Sequence[str], start: int) -> RuleResult:
    """Collect a run of items sharing the marker kind of ``lines[start]``.

    Blank lines inside the run are consumed. The first line with the other
    marker kind, or with no marker, ends the run and is left for the caller.
    """
    ordered = _is_ordered_item(lines[start].strip())
    items: List[str] = []
    i = start
    while i < len(lines):
        line = lines[i].strip()
        if not line:
            i += 1
            continue
        if _is_unordered_item(line):
            if ordered:
                break
            items.append(transform(line[2:]))
        elif _is_ordered_item(line):
            if not ordered:
                break
            match = ORDERED_ITEM_RE.match(line)
            items.append(transform(match.group(1)))
        else:
            break
        i += 1
    if not items:
        return None, max(i - start, 1)
    return ListBlock(ordered=ordered, items=items), i - start


def parse_paragraph(lines: Sequence[str], start: int) -> RuleResult:
    paragraph_lines: List[str] = []
    i = start
    while i < len(lines):
        line = lines[i].strip()
        if not line or _starts_block(line):
            break
        paragraph_lines.append(line)
        i += 1
    if not paragraph_lines:
        return None, 1
    return Paragraph(text=transform(" ".join(paragraph_lines))), i - start


def _is_unordered_item(line: str) -> bool:
    return line.startswith(UNORDERED_MARKERS)


def _is_ordered_item(line: str) -> bool:
    return ORDERED_MARKER_RE.match(line) is not None


def _starts_block(line: str) -> bool:
    return (
        line.startswith("#")
        or line.startswith(FENCE)
        or _is_unordered_item(line)
        or _is_ordered_item(line)
    )
