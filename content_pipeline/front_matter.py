"""
front_matter.py
---------------
Splitting and decoding of the YAML metadata block that opens every
Markdown source file.

Expected format:
    ---
    title: Some title
    date: 2024-03-05
    tags: [notes]
    authors:
      - name: Someone
        url: https://example.com
    ---

    Body content here...
"""
from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

import yaml

from .errors import FrontMatterError, MetadataError

LOG = logging.getLogger("content_pipeline")

DELIMITER = "---"
DATE_FORMAT = "%Y-%m-%d"
DISPLAY_DATE_FORMAT = "%B %d, %Y"
KNOWN_KEYS = {"title", "date", "tags", "authors", "slug"}


@dataclass
class Author:
    name: str
    url: Optional[str] = None

    def to_dict(self) -> dict:
        return {"name": self.name, "url": self.url}


@dataclass
class FrontMatter:
    title: str
    date: str
    tags: List[str]
    authors: List[Author] = field(default_factory=list)
    slug: str = ""

    @property
    def formatted_date(self) -> str:
        """Return the date as shown on pages, e.g. 'March 05, 2024'."""
        parsed = datetime.datetime.strptime(self.date, DATE_FORMAT)
        return parsed.strftime(DISPLAY_DATE_FORMAT)


def _is_delimiter(line: str) -> bool:
    return line.rstrip("\r\n") == DELIMITER


def split_front_matter(text: str) -> Tuple[str, str]:
    """
    Split raw file text into the metadata block and the Markdown body.

    The first line must be exactly '---' and a later line that is exactly
    '---' closes the block. The body is returned verbatim.

    Raises:
        FrontMatterError: If either delimiter is missing.
    """
    lines = text.splitlines(keepends=True)
    if not lines or not _is_delimiter(lines[0]):
        raise FrontMatterError("document must start with a '---' line")

    for idx in range(1, len(lines)):
        if _is_delimiter(lines[idx]):
            block = "".join(lines[1:idx]).rstrip("\r\n")
            body = "".join(lines[idx + 1 :])
            return block, body

    raise FrontMatterError("front matter is not closed by a '---' line")


def _require(data: dict, key: str) -> Any:
    if key not in data or data[key] is None:
        raise MetadataError(f"missing required field: '{key}'")
    return data[key]


def _decode_date(value: Any) -> str:
    # YAML turns unquoted 2024-03-05 into a date object
    if isinstance(value, datetime.datetime):
        value = value.date()
    if isinstance(value, datetime.date):
        return value.isoformat()
    if not isinstance(value, str):
        raise MetadataError(f"'date' must be a YYYY-MM-DD string, got {type(value).__name__}")
    try:
        datetime.datetime.strptime(value, DATE_FORMAT)
    except ValueError as exc:
        raise MetadataError(f"invalid date '{value}': expected YYYY-MM-DD") from exc
    return value


def _decode_tags(value: Any) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(tag, str) for tag in value):
        raise MetadataError("'tags' must be a list of strings")
    return list(value)


def _decode_authors(value: Any) -> List[Author]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise MetadataError("'authors' must be a list")

    authors = []
    for item in value:
        if not isinstance(item, dict):
            raise MetadataError("each author must be a mapping with a 'name'")
        name = item.get("name")
        url = item.get("url")
        if not isinstance(name, str):
            raise MetadataError("author 'name' must be a string")
        if url is not None and not isinstance(url, str):
            raise MetadataError(f"url of author '{name}' must be a string")
        authors.append(Author(name=name, url=url))
    return authors


def decode_front_matter(block: str) -> FrontMatter:
    """
    Decode a metadata block into a FrontMatter record.

    Args:
        block: YAML text found between the '---' delimiters

    Returns:
        FrontMatter with an empty slug; callers assign it from the file name.

    Raises:
        MetadataError: On YAML errors, missing required fields (title,
            date, tags), wrong value types or an unparseable date.
    """
    try:
        data = yaml.safe_load(block)
    except (yaml.YAMLError, ValueError) as exc:
        # ValueError: YAML dates such as 2024-13-01 fail while being constructed
        raise MetadataError(f"invalid YAML front matter: {exc}") from exc

    if not isinstance(data, dict):
        raise MetadataError("front matter must be a mapping")

    title = _require(data, "title")
    if not isinstance(title, str):
        raise MetadataError("'title' must be a string")

    date = _decode_date(_require(data, "date"))
    tags = _decode_tags(_require(data, "tags"))
    authors = _decode_authors(data.get("authors"))

    ignored = sorted(str(key) for key in data if key not in KNOWN_KEYS)
    if ignored:
        LOG.debug("Ignoring unknown front matter keys: %s", ", ".join(ignored))

    return FrontMatter(title=title, date=date, tags=tags, authors=authors)


def parse_document(text: str, slug: str) -> Tuple[FrontMatter, str]:
    """Split and decode a source document; the slug always comes from the caller."""
    block, body = split_front_matter(text)
    front_matter = decode_front_matter(block)
    front_matter.slug = slug
    return front_matter, body
