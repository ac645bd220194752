"""
build.py
--------
Drives the pipeline for each content type:

    discover *.md -> split/decode front matter -> Markdown -> rewriters
    -> page template -> +page.svelte files, manifest module, image copy

Pages and the manifest are only written once every source file of the
content type rendered successfully, so a broken file never leaves a
manifest that disagrees with the pages on disk.
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from .assets import copy_tree, image_data_uri
from .config import PAGE_FILENAME, PROFILE_IMAGE, ContentType, default_content_types
from .errors import BuildError, ContentError, OutputError
from .front_matter import FrontMatter, parse_document
from .manifest import write_manifest
from .markdown_render import markdown_to_html
from .page import load_template, render_page

LOG = logging.getLogger("content_pipeline")
LOG_FORMAT = "%(levelname)s: %(message)s"


@dataclass
class PageResult:
    source: Path
    output_path: Path
    front_matter: FrontMatter
    text: str


def setup_logging(level: int = logging.INFO) -> None:
    LOG.setLevel(level)
    LOG.propagate = False
    if not LOG.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        LOG.addHandler(handler)


def discover_markdown(input_dir: Path) -> List[Path]:
    return sorted(input_dir.glob("**/*.md"))


def output_path_for(content_type: ContentType, source: Path) -> Path:
    """Mirror the source's relative location, using its stem as a directory."""
    relative = source.relative_to(content_type.input_dir)
    return content_type.output_dir / relative.parent / relative.stem / PAGE_FILENAME


def render_file(
    content_type: ContentType, source: Path, template: str, profile_image: str = ""
) -> PageResult:
    text = source.read_text(encoding="utf-8")
    front_matter, body = parse_document(text, slug=source.stem)
    html = markdown_to_html(body)
    page = render_page(
        front_matter,
        html,
        image_url=content_type.image_url,
        template=template,
        profile_image=profile_image,
    )
    return PageResult(source, output_path_for(content_type, source), front_matter, page)


def render_content(
    content_type: ContentType, template: str, profile_image: str = ""
) -> List[PageResult]:
    """
    Render every Markdown file of a content type in memory.

    Each failing file is logged with its reason and the remaining files are
    still tried, so one run reports every broken source.

    Raises:
        BuildError: If any file could not be read, split or decoded.
    """
    results: List[PageResult] = []
    failed: List[Path] = []
    sources = discover_markdown(content_type.input_dir)

    for source in sources:
        try:
            results.append(render_file(content_type, source, template, profile_image))
        except (ContentError, OSError, UnicodeDecodeError) as exc:
            LOG.error("%s: %s", source, exc)
            failed.append(source)

    if failed:
        raise BuildError(
            f"{len(failed)} of {len(sources)} {content_type.name} files failed; "
            "no pages or manifest were written"
        )
    return results


def write_pages(results: Iterable[PageResult]) -> None:
    for result in results:
        try:
            result.output_path.parent.mkdir(parents=True, exist_ok=True)
            result.output_path.write_text(result.text, encoding="utf-8")
        except OSError as exc:
            raise OutputError(f"cannot write {result.output_path}: {exc}") from exc
        LOG.info("Wrote %s", result.output_path)


def build_content_type(
    content_type: ContentType, template: str, profile_image: str = ""
) -> List[FrontMatter]:
    """Build pages, manifest and images for one content type."""
    if not content_type.input_dir.is_dir():
        LOG.warning("Skipping %s: %s does not exist", content_type.name, content_type.input_dir)
        return []

    results = render_content(content_type, template, profile_image)
    write_pages(results)
    front_matters = [result.front_matter for result in results]
    write_manifest(front_matters, content_type.manifest_path, content_type.data_variable)

    if content_type.images_dir.is_dir():
        copy_tree(content_type.images_dir, content_type.static_dir)

    LOG.info("Built %d %s", len(front_matters), content_type.name)
    return front_matters


def build_site(
    content_types: Iterable[ContentType],
    profile_image_path: Optional[Path] = None,
    template_path: Optional[Path] = None,
) -> List[FrontMatter]:
    template = load_template(template_path)
    profile_image = ""
    if profile_image_path is not None and profile_image_path.is_file():
        profile_image = image_data_uri(profile_image_path)

    built: List[FrontMatter] = []
    for content_type in content_types:
        built.extend(build_content_type(content_type, template, profile_image))
    return built


def main(root: Optional[Path] = None) -> int:
    """Build every default content type under ``root`` (default: cwd)."""
    setup_logging()
    root = Path(root) if root is not None else Path.cwd()
    try:
        build_site(default_content_types(root), profile_image_path=root / PROFILE_IMAGE)
    except ContentError as exc:
        LOG.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
