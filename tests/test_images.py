"""Tests for image classification, directory scanning and grouping."""

import os

import pytest

from assetgen.images import (
    PDF,
    PNG,
    PdfAsset,
    PngAsset,
    classify_image,
    group_images,
    scan_directory,
)


def _touch(directory, *names):
    for name in names:
        (directory / name).write_bytes(name.encode())


class TestClassifyImage:
    """Test filename classification into kind, scale and logical name."""

    def test_png_2x(self):
        image = classify_image("icon@2x.png")
        assert (image.kind, image.scale, image.name) == (PNG, "2x", "icon")

    def test_png_3x(self):
        image = classify_image("/tmp/in/icon@3x.png")
        assert (image.kind, image.scale, image.name) == (PNG, "3x", "icon")
        assert image.path == "/tmp/in/icon@3x.png"

    def test_png_1x(self):
        image = classify_image("icon.png")
        assert (image.kind, image.scale, image.name) == (PNG, "1x", "icon")

    def test_pdf(self):
        image = classify_image("icon.pdf")
        assert (image.kind, image.scale, image.name) == (PDF, None, "icon")

    def test_pdf_keeps_scale_like_suffix(self):
        assert classify_image("logo@2x.pdf").name == "logo@2x"

    def test_dotted_name(self):
        image = classify_image("arrow.left@2x.png")
        assert (image.scale, image.name) == ("2x", "arrow.left")

    def test_marker_not_before_extension(self):
        image = classify_image("icon@2x-dark.png")
        assert (image.scale, image.name) == ("1x", "icon@2x-dark")

    @pytest.mark.parametrize("path", ["photo.jpg", "icon.svg", "README", "icon.PNG", ".png", "notes.txt"])
    def test_ignored(self, path):
        assert classify_image(path) is None


class TestScanDirectory:
    """Test input directory scanning."""

    def test_sorted_and_filtered(self, tmp_path):
        _touch(tmp_path, "b.png", "a@2x.png", "c.pdf", "notes.txt", "photo.jpg")
        os.mkdir(tmp_path / "nested.png")
        images = scan_directory(str(tmp_path))
        assert [os.path.basename(i.path) for i in images] == ["a@2x.png", "b.png", "c.pdf"]

    def test_empty_directory(self, tmp_path):
        assert scan_directory(str(tmp_path)) == []


class TestGroupImages:
    """Test grouping of classified files into assets."""

    def test_full_scale_set(self, tmp_path):
        _touch(tmp_path, "icon.png", "icon@2x.png", "icon@3x.png")
        assets = group_images(scan_directory(str(tmp_path)))
        assert len(assets) == 1
        asset = assets[0]
        assert isinstance(asset, PngAsset)
        assert asset.name == "icon"
        assert asset.scales == ["1x", "2x", "3x"]
        assert asset.variants["2x"] == str(tmp_path / "icon@2x.png")

    def test_partial_scale_set(self, tmp_path):
        _touch(tmp_path, "icon@3x.png", "icon@2x.png")
        (asset,) = group_images(scan_directory(str(tmp_path)))
        assert asset.scales == ["2x", "3x"]

    def test_pdfs_first_and_never_merged(self, tmp_path):
        _touch(tmp_path, "alpha.png", "logo.pdf", "logo.png", "badge.pdf")
        assets = group_images(scan_directory(str(tmp_path)))
        assert [(a.kind, a.name) for a in assets] == [
            (PDF, "badge"),
            (PDF, "logo"),
            (PNG, "alpha"),
            (PNG, "logo"),
        ]
        assert isinstance(assets[0], PdfAsset)
        assert assets[1].path == str(tmp_path / "logo.pdf")

    def test_duplicate_scale_last_wins(self):
        images = [
            classify_image("/a/icon@2x.png"),
            classify_image("/b/icon@2x.png"),
        ]
        (asset,) = group_images(images)
        assert asset.variants == {"2x": "/b/icon@2x.png"}

    def test_empty(self):
        assert group_images([]) == []
