"""
conftest.py
-----------
Shared pytest fixtures for the content pipeline tests.
"""
import json

import pytest

from content_pipeline.config import ContentType


def make_document(title="Hello", date="2024-03-05", tags=("intro",), body="Hello world\n", extra=""):
    tag_lines = "".join(f"  - {tag}\n" for tag in tags)
    return f"---\ntitle: {title}\ndate: {date}\ntags:\n{tag_lines}{extra}---\n{body}"


def load_manifest(path, variable):
    text = path.read_text(encoding="utf-8")
    prefix = f"export const {variable} = "
    assert text.startswith(prefix)
    assert text.endswith(";\n")
    return json.loads(text[len(prefix) : -2])


# ----- Content Fixtures -----

@pytest.fixture
def document():
    """Factory for Markdown documents with front matter."""
    return make_document


@pytest.fixture
def read_manifest():
    """Parse a generated manifest module back into a list of entries."""
    return load_manifest


# ----- Path Fixtures -----

@pytest.fixture
def site_root(tmp_path):
    """Site root with an empty data/articles input directory."""
    (tmp_path / "data" / "articles").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def articles(site_root):
    return ContentType(
        name="articles",
        input_dir=site_root / "data" / "articles",
        output_dir=site_root / "src" / "routes" / "articles",
        static_dir=site_root / "static" / "images" / "articles",
        data_file="articleData.ts",
        data_variable="articles",
    )
