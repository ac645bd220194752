"""Static asset helpers: image directory copies and inline data URIs."""
from __future__ import annotations

import base64
import logging
import mimetypes
import shutil
from pathlib import Path

from .errors import AssetError

LOG = logging.getLogger("content_pipeline")


def copy_tree(source: Path, destination: Path) -> None:
    """
    Recursively copy ``source`` into ``destination``.

    Missing directories are created and existing files are overwritten;
    files already in ``destination`` but absent from ``source`` are kept.

    Raises:
        AssetError: On any underlying I/O failure.
    """
    try:
        destination.mkdir(parents=True, exist_ok=True)
        shutil.copytree(source, destination, dirs_exist_ok=True)
    except OSError as exc:
        raise AssetError(f"cannot copy {source} to {destination}: {exc}") from exc
    LOG.info("Copied assets: %s -> %s", source, destination)


def _guess_mime_type(path: Path) -> str:
    mime, _ = mimetypes.guess_type(path.name)
    return mime or "application/octet-stream"


def image_data_uri(path: Path) -> str:
    try:
        payload = path.read_bytes()
    except OSError as exc:
        raise AssetError(f"cannot read image {path}: {exc}") from exc
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:{_guess_mime_type(path)};base64,{encoded}"
