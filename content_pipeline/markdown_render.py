"""Markdown body to HTML fragment conversion."""
from __future__ import annotations

import markdown

from .rewriters import postprocess

EXTENSIONS = [
    "fenced_code",
    "tables",
]


def render_markdown(body: str) -> str:
    return markdown.markdown(body, extensions=EXTENSIONS)


def markdown_to_html(body: str) -> str:
    """Render a Markdown body and run the post-processing rewriter chain over it."""
    return postprocess(render_markdown(body))
