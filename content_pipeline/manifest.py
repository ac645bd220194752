"""
manifest.py
-----------
Generated TypeScript module listing every entry of a content type, e.g.

    export const articles = [
      {
        "slug": "hello",
        "title": "Hello",
        "authors": [{"name": "Someone", "url": null}],
        "date": "2024-03-05",
        "tags": ["intro"]
      }
    ];

The array is plain JSON, which TypeScript accepts as-is.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from .errors import OutputError
from .front_matter import FrontMatter

LOG = logging.getLogger("content_pipeline")


def manifest_entry(front_matter: FrontMatter) -> dict:
    return {
        "slug": front_matter.slug,
        "title": front_matter.title,
        "authors": [author.to_dict() for author in front_matter.authors],
        "date": front_matter.date,
        "tags": list(front_matter.tags),
    }


def render_manifest(front_matters: Iterable[FrontMatter], variable: str) -> str:
    entries = [manifest_entry(fm) for fm in front_matters]
    array = json.dumps(entries, indent=2, ensure_ascii=False)
    return f"export const {variable} = {array};\n"


def write_manifest(front_matters: Iterable[FrontMatter], path: Path, variable: str) -> None:
    """
    Write the manifest module for one content type.

    Raises:
        OutputError: If the directory or file cannot be written.
    """
    text = render_manifest(front_matters, variable)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OutputError(f"cannot write manifest {path}: {exc}") from exc
    LOG.info("Wrote %s", path)
