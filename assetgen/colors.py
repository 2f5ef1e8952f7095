"""
Color list parsing: hex validation, hex -> sRGB component conversion.

Reads `name light_hex dark_hex` records and turns each valid one into a
ColorEntry ready for colorset emission.  Malformed lines are collected as
errors and skipped; they never stop the parse.
"""

import re


HEX_PATTERN = re.compile(r'^#?(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$')

ALPHA = "1.000"


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

class ColorEntry:
    """One named color with its light (default) and dark appearance hex."""
    def __init__(self, name: str, light_hex: str, dark_hex: str):
        self.name = name
        self.light_hex = light_hex
        self.dark_hex = dark_hex

    def __repr__(self) -> str:
        return f"ColorEntry({self.name!r}, {self.light_hex!r}, {self.dark_hex!r})"


class RGBComponents:
    """sRGB components as 3-decimal strings, the way Contents.json stores them."""
    def __init__(self, red: str, green: str, blue: str, alpha: str = ALPHA):
        self.red = red
        self.green = green
        self.blue = blue
        self.alpha = alpha

    def as_dict(self) -> dict:
        return {
            "red": self.red,
            "green": self.green,
            "blue": self.blue,
            "alpha": self.alpha,
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, RGBComponents):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        return f"RGBComponents({self.red}, {self.green}, {self.blue}, {self.alpha})"


class ColorLineError:
    """A rejected input line and why it was rejected."""
    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason

    @property
    def message(self) -> str:
        return f"line {self.line_number}: {self.reason}: {self.line}"


# ---------------------------------------------------------------------------
# Hex helpers
# ---------------------------------------------------------------------------

def is_valid_hex(value: str) -> bool:
    """True for 3- or 6-digit hex, with or without a leading '#'."""
    return HEX_PATTERN.fullmatch(value) is not None


def _format_channel(byte: int) -> str:
    return f"{byte / 255:.3f}"


def convert_hex(value: str) -> RGBComponents:
    """Convert a validated hex color to 0-1 sRGB components.

    Short form duplicates each digit ('#abc' -> '#aabbcc').  The caller
    must validate with is_valid_hex() first.
    """
    digits = value[1:] if value.startswith("#") else value
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    return RGBComponents(_format_channel(r), _format_channel(g), _format_channel(b))


# ---------------------------------------------------------------------------
# Input parsing
# ---------------------------------------------------------------------------

def parse_color_line(line: str) -> ColorEntry | str | None:
    """Parse one record.

    Returns None for empty and comment lines, a ColorEntry for a valid
    record, or the rejection reason as a string.  Only an unindented '#'
    starts a comment; a whitespace-only line is a malformed record.
    """
    if not line or line.startswith("#"):
        return None
    fields = line.split()
    if len(fields) < 3:
        return "invalid format (use: name light_hex dark_hex)"
    if len(fields) > 3:
        return f"invalid format: too many fields ({len(fields)}, use: name light_hex dark_hex)"
    name, light_hex, dark_hex = fields
    if not is_valid_hex(light_hex):
        return f"invalid light hex color {light_hex}"
    if not is_valid_hex(dark_hex):
        return f"invalid dark hex color {dark_hex}"
    return ColorEntry(name, light_hex, dark_hex)


def parse_color_records(lines) -> list[ColorEntry | ColorLineError]:
    """Parse all records into entries and errors, interleaved in input order."""
    records: list[ColorEntry | ColorLineError] = []
    for i, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        result = parse_color_line(line)
        if result is None:
            continue
        if isinstance(result, ColorEntry):
            records.append(result)
        else:
            records.append(ColorLineError(i, line, result))
    return records


def parse_color_lines(lines) -> tuple[list[ColorEntry], list[ColorLineError]]:
    """Parse all records, keeping input order.

    Duplicate names are kept; the later one overwrites the earlier set
    when emitted.
    """
    records = parse_color_records(lines)
    entries = [r for r in records if isinstance(r, ColorEntry)]
    errors = [r for r in records if isinstance(r, ColorLineError)]
    return entries, errors


def read_color_records(path: str) -> list[ColorEntry | ColorLineError]:
    """Read a UTF-8 colors file and parse it into ordered records."""
    with open(path, encoding="utf-8") as f:
        return parse_color_records(f)


def read_color_file(path: str) -> tuple[list[ColorEntry], list[ColorLineError]]:
    """Read a UTF-8 colors file and parse it."""
    with open(path, encoding="utf-8") as f:
        return parse_color_lines(f)
