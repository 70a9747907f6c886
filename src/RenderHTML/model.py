from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence, Tuple


@dataclass(frozen=True)
class Block:
    """Base class for block-level nodes."""


@dataclass(frozen=True)
class Heading(Block):
    level: int
    text: str


@dataclass(frozen=True)
class Paragraph(Block):
    text: str


@dataclass(frozen=True)
class ListBlock(Block):
    ordered: bool
    items: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Callers may hand in any sequence; keep the stored value immutable.
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class CodeBlock(Block):
    language: str
    code: str


@dataclass(frozen=True)
class Link(Block):
    text: str
    url: str


@dataclass(frozen=True)
class InlineCode(Block):
    code: str


@dataclass
class Document:
    blocks: Sequence[Block]
    metadata: dict[str, Any] = field(default_factory=dict)
