"""
Asset catalog output: Contents.json documents and .colorset/.imageset writers.

Builds the manifest dicts Xcode expects and writes them, together with
copied image files, under an .xcassets root.  Filesystem errors are not
caught here; they abort the run with whatever sets were already written.
"""

import json
import os
import shutil

from .colors import ColorEntry, convert_hex
from .images import PDF, PdfAsset, PngAsset


CATALOG_INFO = {"author": "xcode", "version": 1}
IDIOM = "universal"
DARK_APPEARANCE = {"appearance": "luminosity", "value": "dark"}


def write_contents_json(set_dir: str, doc: dict) -> str:
    """Write doc as <set_dir>/Contents.json (2-space indent, trailing newline)."""
    path = os.path.join(set_dir, "Contents.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(doc, f, indent=2)
        f.write("\n")
    return path


# ---------------------------------------------------------------------------
# Colorsets
# ---------------------------------------------------------------------------

def _color_definition(hex_value: str) -> dict:
    return {
        "color-space": "srgb",
        "components": convert_hex(hex_value).as_dict(),
    }


def build_colorset_contents(entry: ColorEntry) -> dict:
    """Contents.json for a colorset: default (light) color, then dark."""
    return {
        "colors": [
            {
                "color": _color_definition(entry.light_hex),
                "idiom": IDIOM,
            },
            {
                "color": _color_definition(entry.dark_hex),
                "idiom": IDIOM,
                "appearances": [dict(DARK_APPEARANCE)],
            },
        ],
        "info": dict(CATALOG_INFO),
    }


def write_colorset(output_dir: str, entry: ColorEntry) -> str:
    """Create (or overwrite) <output_dir>/<name>.colorset and return its path."""
    set_dir = os.path.join(output_dir, f"{entry.name}.colorset")
    os.makedirs(set_dir, exist_ok=True)
    write_contents_json(set_dir, build_colorset_contents(entry))
    return set_dir


# ---------------------------------------------------------------------------
# Imagesets
# ---------------------------------------------------------------------------

def scaled_filename(name: str, scale: str) -> str:
    """Catalog filename for a raster variant: name.png, name@2x.png, ..."""
    if scale == "1x":
        return f"{name}.png"
    return f"{name}@{scale}.png"


def build_pdf_contents(name: str) -> dict:
    return {
        "images": [
            {
                "filename": f"{name}.pdf",
                "idiom": IDIOM,
            },
        ],
        "info": dict(CATALOG_INFO),
        "properties": {
            "preserves-vector-representation": True,
        },
    }


def build_png_contents(name: str, scales: list[str]) -> dict:
    """Contents.json for a raster set; only the given scales are listed."""
    return {
        "images": [
            {
                "idiom": IDIOM,
                "filename": scaled_filename(name, scale),
                "scale": scale,
            }
            for scale in scales
        ],
        "info": dict(CATALOG_INFO),
    }


def write_imageset(output_dir: str, asset: PdfAsset | PngAsset) -> str:
    """Copy the asset's file(s) into <output_dir>/<name>.imageset and write its manifest."""
    set_dir = os.path.join(output_dir, f"{asset.name}.imageset")
    os.makedirs(set_dir, exist_ok=True)

    if asset.kind == PDF:
        shutil.copy2(asset.path, os.path.join(set_dir, f"{asset.name}.pdf"))
        write_contents_json(set_dir, build_pdf_contents(asset.name))
        return set_dir

    scales = asset.scales
    for scale in scales:
        dst = os.path.join(set_dir, scaled_filename(asset.name, scale))
        shutil.copy2(asset.variants[scale], dst)
    write_contents_json(set_dir, build_png_contents(asset.name, scales))
    return set_dir
