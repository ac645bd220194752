"""Content type definitions: where sources live and where output goes."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

IMAGES_DIRNAME = "images"
PAGE_FILENAME = "+page.svelte"
PROFILE_IMAGE = Path("static") / "profile_image.svg"


@dataclass(frozen=True)
class ContentType:
    name: str
    input_dir: Path
    output_dir: Path
    static_dir: Path
    data_file: str
    data_variable: str

    @property
    def image_url(self) -> str:
        return f"/images/{self.name}"

    @property
    def images_dir(self) -> Path:
        return self.input_dir / IMAGES_DIRNAME

    @property
    def manifest_path(self) -> Path:
        return self.output_dir / self.data_file


def default_content_types(root: Path) -> List[ContentType]:
    root = Path(root)
    return [
        ContentType(
            name="articles",
            input_dir=root / "data" / "articles",
            output_dir=root / "src" / "routes" / "articles",
            static_dir=root / "static" / "images" / "articles",
            data_file="articleData.ts",
            data_variable="articles",
        ),
        ContentType(
            name="projects",
            input_dir=root / "data" / "projects",
            output_dir=root / "src" / "routes" / "projects",
            static_dir=root / "static" / "images" / "projects",
            data_file="projectData.ts",
            data_variable="projects",
        ),
    ]
