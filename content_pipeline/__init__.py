"""Markdown to Svelte page pipeline for the site's articles and projects."""

from .build import build_content_type, build_site, main
from .config import ContentType, default_content_types
from .errors import ContentError
from .front_matter import Author, FrontMatter, parse_document
from .markdown_render import markdown_to_html

__all__ = [
    "Author",
    "ContentError",
    "ContentType",
    "FrontMatter",
    "build_content_type",
    "build_site",
    "default_content_types",
    "main",
    "markdown_to_html",
    "parse_document",
]
