"""
test_assets.py
--------------
Unit tests for content_pipeline.assets.
"""
import base64

import pytest

from content_pipeline.assets import copy_tree, image_data_uri
from content_pipeline.errors import AssetError


class TestCopyTree:
    """Test copy_tree function."""

    def test_recursive_copy(self, tmp_path):
        src = tmp_path / "images"
        (src / "nested" / "deeper").mkdir(parents=True)
        (src / "a.png").write_bytes(b"a")
        (src / "nested" / "b.png").write_bytes(b"b")
        (src / "nested" / "deeper" / "c.svg").write_bytes(b"c")

        dst = tmp_path / "static" / "images" / "articles"
        copy_tree(src, dst)

        copied = sorted(p.relative_to(dst).as_posix() for p in dst.rglob("*") if p.is_file())
        assert copied == ["a.png", "nested/b.png", "nested/deeper/c.svg"]
        assert (dst / "nested" / "deeper" / "c.svg").read_bytes() == b"c"

    def test_overwrites_existing(self, tmp_path):
        src = tmp_path / "images"
        src.mkdir()
        (src / "a.png").write_bytes(b"new")
        dst = tmp_path / "dst"
        dst.mkdir()
        (dst / "a.png").write_bytes(b"old")
        (dst / "keep.png").write_bytes(b"keep")

        copy_tree(src, dst)

        assert (dst / "a.png").read_bytes() == b"new"
        assert (dst / "keep.png").read_bytes() == b"keep"

    def test_missing_source(self, tmp_path):
        with pytest.raises(AssetError):
            copy_tree(tmp_path / "missing", tmp_path / "dst")


class TestImageDataUri:
    """Test image_data_uri function."""

    def test_png(self, tmp_path):
        path = tmp_path / "me.png"
        path.write_bytes(b"\x89PNG")
        assert image_data_uri(path) == "data:image/png;base64," + base64.b64encode(b"\x89PNG").decode()

    def test_unknown_extension(self, tmp_path):
        path = tmp_path / "me.unknownext"
        path.write_bytes(b"x")
        assert image_data_uri(path).startswith("data:application/octet-stream;base64,")

    def test_missing_file(self, tmp_path):
        with pytest.raises(AssetError):
            image_data_uri(tmp_path / "missing.png")
