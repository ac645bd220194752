"""
page.py
-------
Fills the Svelte page template with a document's metadata and HTML.

The template marks insertion points with ``{{name}}``. Every inserted
value is a JSON literal, so titles or content holding quotes, backslashes
or newlines need no further escaping on the Svelte side.
"""
from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import TemplateError
from .front_matter import FrontMatter

TEMPLATE_FILE = Path(__file__).resolve().parent / "templates" / "page.svelte"
PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")
RELATIVE_IMAGE_SRC = 'src="images/'


def load_template(path: Optional[Path] = None) -> str:
    template_path = Path(path) if path is not None else TEMPLATE_FILE
    try:
        with template_path.open("r", encoding="utf-8") as f:
            return f.read()
    except OSError as exc:
        raise TemplateError(f"cannot read template {template_path}: {exc}") from exc


def js_literal(value: Any) -> str:
    """Serialise a value as a JSON literal that is safe inside a <script> block."""
    return json.dumps(value, ensure_ascii=False).replace("</", "<\\/")


def rewrite_image_paths(html: str, image_url: str) -> str:
    """Point relative ``images/...`` sources at the public asset directory."""
    return html.replace(RELATIVE_IMAGE_SRC, f'src="{image_url.rstrip("/")}/')


def fill_template(template: str, values: Dict[str, str]) -> str:
    def replace(match: re.Match) -> str:
        name = match.group(1)
        if name not in values:
            raise TemplateError(f"unknown template placeholder: {{{{{name}}}}}")
        return values[name]

    return PLACEHOLDER_RE.sub(replace, template)


def render_page(
    front_matter: FrontMatter,
    html: str,
    *,
    image_url: str,
    template: str,
    profile_image: str = "",
) -> str:
    """
    Build the text of a ``+page.svelte`` component.

    Args:
        front_matter: Decoded metadata of the document
        html: Post-processed HTML fragment
        image_url: Public URL prefix of the content type's images
        template: Template text, see load_template()
        profile_image: Data URI of the author picture, or ""

    Returns:
        The page component source.
    """
    content = rewrite_image_paths(html, image_url)
    values = {
        "title": js_literal(front_matter.title),
        "date": js_literal(front_matter.formatted_date),
        "tags": js_literal(front_matter.tags),
        "authors": js_literal([author.to_dict() for author in front_matter.authors]),
        "content": js_literal(content),
        "profile_image": profile_image,
    }
    return fill_template(template, values)
