#!/usr/bin/env python3
"""
generate_images — build an Xcode image asset catalog from a folder of images.

CLI entry point. Scans a flat directory for PDF and PNG files (PNG scale
variants named name@2x.png / name@3x.png) and writes one
<name>.imageset per asset with the copied files and a Contents.json.
"""

import os
import sys

from assetgen.catalog import write_imageset
from assetgen.images import PDF, group_images, scan_directory


DEFAULT_OUTPUT_DIR = "Assets.xcassets"


def _usage() -> None:
    print("Usage: generate-images [OPTIONS] <input-directory>", file=sys.stderr)
    print("  input-directory: folder containing the images", file=sys.stderr)
    print("Options:", file=sys.stderr)
    print(f"  --output DIR   Output asset catalog (default: {DEFAULT_OUTPUT_DIR})", file=sys.stderr)
    print("", file=sys.stderr)
    print("Supported formats:", file=sys.stderr)
    print("  PDF: ImageName.pdf", file=sys.stderr)
    print("  PNG: ImageName.png, ImageName@2x.png, ImageName@3x.png", file=sys.stderr)


def _parse_args(argv: list[str]) -> dict:
    """Parse CLI arguments into a dict of options."""
    opts: dict = {
        "help": False,
        "output_dir": DEFAULT_OUTPUT_DIR,
        "input_dir": None,
    }
    positional = []
    i = 0
    while i < len(argv):
        if argv[i] in ("-h", "--help"):
            opts["help"] = True
        elif argv[i] == "--output":
            if i + 1 >= len(argv):
                print("Error: --output requires a value", file=sys.stderr)
                sys.exit(1)
            i += 1
            opts["output_dir"] = argv[i]
        elif argv[i].startswith("--"):
            print(f"Error: unknown option: {argv[i]}", file=sys.stderr)
            sys.exit(1)
        else:
            positional.append(argv[i])
        i += 1
    if positional:
        opts["input_dir"] = positional[0]
    return opts


def main(argv: list[str] | None = None) -> None:
    opts = _parse_args(sys.argv[1:] if argv is None else argv)
    if opts["help"]:
        _usage()
        sys.exit(0)

    input_dir = opts["input_dir"]
    output_dir = opts["output_dir"]

    if not input_dir:
        print("Error: please provide an input directory with images", file=sys.stderr)
        _usage()
        sys.exit(1)

    if not os.path.isdir(input_dir):
        print(f"Error: input directory not found: {input_dir}", file=sys.stderr)
        _usage()
        sys.exit(1)

    print(f"Input: {input_dir}")
    print(f"Output: {output_dir}")
    print("Scanning input directory...")

    images = scan_directory(input_dir)
    for image in images:
        label = "PDF" if image.kind == PDF else f"PNG ({image.scale})"
        print(f"Found {label}: {os.path.basename(image.path)}")

    assets = group_images(images)
    for asset in assets:
        if asset.kind != PDF:
            print(f"PNG group: {asset.name} (scales: {' '.join(asset.scales)})")

    if not assets:
        print(f"Error: no images found in {input_dir} (supported formats: PDF, PNG)", file=sys.stderr)
        sys.exit(1)

    print(f"Generating {len(assets)} image set(s)...")
    os.makedirs(output_dir, exist_ok=True)
    for asset in assets:
        write_imageset(output_dir, asset)
        if asset.kind == PDF:
            print(f"Generated {asset.name}.imageset (PDF)")
        else:
            print(f"Generated {asset.name}.imageset (PNG - scales: {' '.join(asset.scales)})")

    print(f"Generated {len(assets)} image set(s) in {output_dir}")
    print("To use in Xcode: add the catalog to your target, then Image(\"name\") or UIImage(named: \"name\")")


if __name__ == "__main__":
    main()
