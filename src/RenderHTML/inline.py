from __future__ import annotations

import re

INLINE_CODE_RE = re.compile(r"`([^`]+)`")
LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
BOLD_RE = re.compile(r"\*\*([^*]+)\*\*")
ITALIC_RE = re.compile(r"\*([^*]+)\*")

# Each pass runs over the output of the previous one, so order matters:
# code spans go first, and bold must run before italic.
_SUBSTITUTIONS = (
    (INLINE_CODE_RE, r"<code>\1</code>"),
    (LINK_RE, r'<a href="\2">\1</a>'),
    (BOLD_RE, r"<strong>\1</strong>"),
    (ITALIC_RE, r"<em>\1</em>"),
)


def transform(text: str) -> str:
    """Rewrite inline code, links, bold and italic markers into HTML fragments.

    Content is not escaped. Markers that end up inside generated markup (for
    example an asterisk in a link URL) are still rewritten by later passes.
    """
    for pattern, replacement in _SUBSTITUTIONS:
        text = pattern.sub(replacement, text)
    return text
