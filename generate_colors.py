#!/usr/bin/env python3
"""
generate_colors — build an Xcode color asset catalog from a colors list.

CLI entry point. Reads `name light_hex dark_hex` lines from a text file and
writes one <name>.colorset/Contents.json per valid line, with a light
(default) and a dark appearance.
"""

import os
import sys

from assetgen.catalog import write_colorset
from assetgen.colors import ColorLineError, read_color_records


DEFAULT_OUTPUT_DIR = "Colors.xcassets"


def _usage() -> None:
    print("Usage: generate-colors [OPTIONS] <colors-file>", file=sys.stderr)
    print("  colors-file: text file with one 'name light_hex dark_hex' per line", file=sys.stderr)
    print("Options:", file=sys.stderr)
    print(f"  --output DIR   Output asset catalog (default: {DEFAULT_OUTPUT_DIR})", file=sys.stderr)
    print("", file=sys.stderr)
    print("Example colors file:", file=sys.stderr)
    print("  primaryColor #3366CC #6699FF", file=sys.stderr)
    print("  secondaryColor #CC4D33 #FF8066", file=sys.stderr)


def _parse_args(argv: list[str]) -> dict:
    """Parse CLI arguments into a dict of options."""
    opts: dict = {
        "help": False,
        "output_dir": DEFAULT_OUTPUT_DIR,
        "input_file": None,
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
        opts["input_file"] = positional[0]
    return opts


def main(argv: list[str] | None = None) -> None:
    opts = _parse_args(sys.argv[1:] if argv is None else argv)
    if opts["help"]:
        _usage()
        sys.exit(0)

    input_file = opts["input_file"]
    output_dir = opts["output_dir"]

    if not input_file:
        print("Error: please provide an input file", file=sys.stderr)
        _usage()
        sys.exit(1)

    if not os.path.isfile(input_file):
        print(f"Error: input file not found: {input_file}", file=sys.stderr)
        _usage()
        sys.exit(1)

    print(f"Reading colors from {input_file}")
    entries = []
    for record in read_color_records(input_file):
        if isinstance(record, ColorLineError):
            print(f"warning: {record.message}", file=sys.stderr)
            continue
        entries.append(record)
        print(f"Added {record.name}: light={record.light_hex} dark={record.dark_hex}")

    if not entries:
        print(f"Error: no valid colors found in {input_file}", file=sys.stderr)
        sys.exit(1)

    print(f"Generating {len(entries)} color set(s)...")
    os.makedirs(output_dir, exist_ok=True)
    for entry in entries:
        write_colorset(output_dir, entry)
        print(f"Generated {entry.name}.colorset")

    print(f"Generated {len(entries)} color set(s) in {output_dir}")
    print("To use in Xcode: add the catalog to your target, then Color(\"name\") or UIColor(named: \"name\")")


if __name__ == "__main__":
    main()
