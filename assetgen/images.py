"""
Image discovery: filename classification and scale grouping.

Scans a flat directory for .pdf and .png files.  PNG files sharing a
logical name (the filename minus extension and any @2x/@3x marker) are
merged into one multi-scale asset; every PDF stays its own vector asset.
"""

import os


PDF = "pdf"
PNG = "png"

# Emission order for raster variants.
SCALES = ("1x", "2x", "3x")


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

class ImageFile:
    """A classified source file: kind, scale (None for PDF) and logical name."""
    def __init__(self, kind: str, scale: str | None, name: str, path: str):
        self.kind = kind
        self.scale = scale
        self.name = name
        self.path = path

    def __repr__(self) -> str:
        return f"ImageFile({self.kind!r}, {self.scale!r}, {self.name!r}, {self.path!r})"


class PdfAsset:
    """Single-file vector asset."""
    kind = PDF

    def __init__(self, name: str, path: str):
        self.name = name
        self.path = path


class PngAsset:
    """Raster asset with one source file per available scale."""
    kind = PNG

    def __init__(self, name: str):
        self.name = name
        self.variants: dict[str, str] = {}   # scale -> source path

    @property
    def scales(self) -> list[str]:
        """Present scales in 1x, 2x, 3x order."""
        return [s for s in SCALES if s in self.variants]


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def classify_image(path: str) -> ImageFile | None:
    """Classify a file by extension and scale marker.

    'icon@2x.png' -> (png, 2x, 'icon'); 'icon.pdf' -> (pdf, None, 'icon').
    Returns None for anything that is not .pdf or .png.
    """
    filename = os.path.basename(path)
    stem, dot, extension = filename.rpartition(".")
    if not dot or not stem:
        return None
    if extension == PDF:
        return ImageFile(PDF, None, stem, path)
    if extension != PNG:
        return None
    for scale in ("2x", "3x"):
        marker = "@" + scale
        if stem.endswith(marker) and len(stem) > len(marker):
            return ImageFile(PNG, scale, stem[:-len(marker)], path)
    return ImageFile(PNG, "1x", stem, path)


def scan_directory(input_dir: str) -> list[ImageFile]:
    """Classify every regular file in input_dir, in sorted filename order.

    Subdirectories and unsupported extensions are skipped.
    """
    found: list[ImageFile] = []
    for fn in sorted(os.listdir(input_dir)):
        path = os.path.join(input_dir, fn)
        if not os.path.isfile(path):
            continue
        image = classify_image(path)
        if image is not None:
            found.append(image)
    return found


# ---------------------------------------------------------------------------
# Grouping
# ---------------------------------------------------------------------------

def group_images(images: list[ImageFile]) -> list[PdfAsset | PngAsset]:
    """Group classified files into assets: PDFs first, then PNG groups.

    PDFs are never merged, not even with a PNG of the same name.  For a
    repeated (name, scale) PNG pair the later file wins.
    """
    pdfs: list[PdfAsset] = []
    png_groups: dict[str, PngAsset] = {}
    for image in images:
        if image.kind == PDF:
            pdfs.append(PdfAsset(image.name, image.path))
            continue
        asset = png_groups.get(image.name)
        if asset is None:
            asset = png_groups[image.name] = PngAsset(image.name)
        asset.variants[image.scale] = image.path
    return pdfs + list(png_groups.values())
