# attributes/values.py

import colorsys
from dataclasses import dataclass
from typing import Optional, Tuple, Union
from urllib.parse import urljoin, urlsplit

from rich.color import Color, ColorParseError

ALIGNMENTS = ('left', 'center', 'right', 'justify', 'natural')


class AttributeValueError(ValueError):
    """Raised when a value cannot be turned into an attribute value."""


@dataclass(frozen=True)
class FontDescriptor:
    """A named font at a point size."""
    name: str
    size: float
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True)
class Shadow:
    """Drop shadow drawn behind glyphs."""
    offset: Tuple[float, float] = (0.0, 0.0)
    blur_radius: float = 0.0
    color: Optional[Color] = None


@dataclass(frozen=True)
class ParagraphStyle:
    """Paragraph level layout hints."""
    alignment: str = 'natural'
    line_spacing: float = 0.0
    first_line_indent: float = 0.0


def parse_color(value: Union[str, Color]) -> Color:
    """
    Return a rich Color for a color name, hex string or existing Color.

    Raises:
        AttributeValueError: If the value is not a recognized color.
    """
    if isinstance(value, Color):
        return value
    if not isinstance(value, str):
        raise AttributeValueError(f"Expected color name or Color, got {type(value).__name__}")
    try:
        return Color.parse(value)
    except ColorParseError as e:
        raise AttributeValueError(str(e)) from e


def _unit(name: str, component: float) -> float:
    if not 0.0 <= component <= 1.0:
        raise AttributeValueError(f"{name} must be between 0.0 and 1.0, got {component}")
    return component


def _from_unit_rgb(red: float, green: float, blue: float) -> Color:
    return Color.from_rgb(round(red * 255), round(green * 255), round(blue * 255))


def color_from_rgb(red: float, green: float, blue: float) -> Color:
    """Build a color from red, green and blue components in 0.0-1.0."""
    return _from_unit_rgb(_unit('red', red), _unit('green', green), _unit('blue', blue))


def color_from_white(white: float) -> Color:
    """Build a gray color from a grayscale value in 0.0-1.0."""
    level = _unit('white', white)
    return _from_unit_rgb(level, level, level)


def color_from_hsb(hue: float, saturation: float, brightness: float) -> Color:
    """Build a color from hue, saturation and brightness in 0.0-1.0."""
    rgb = colorsys.hsv_to_rgb(
        _unit('hue', hue),
        _unit('saturation', saturation),
        _unit('brightness', brightness),
    )
    return _from_unit_rgb(*rgb)


def make_font(name: str, size: float, bold: bool = False, italic: bool = False) -> FontDescriptor:
    """
    Validate a font name and size.

    Raises:
        AttributeValueError: If the name is blank or the size is not positive.
    """
    if not isinstance(name, str) or not name.strip():
        raise AttributeValueError("Font name must not be empty")
    if isinstance(size, bool) or not isinstance(size, (int, float)):
        raise AttributeValueError(f"Font size must be a number, got {size!r}")
    if size <= 0:
        raise AttributeValueError(f"Font size must be positive, got {size}")
    return FontDescriptor(name=name.strip(), size=float(size), bold=bold, italic=italic)


def make_link(string: str, relative_to: Optional[str] = None) -> str:
    """
    Validate a URL string, optionally resolving it against a base URL.

    Raises:
        AttributeValueError: If the string is empty, contains whitespace,
            or does not resolve to an absolute URL.
    """
    if not string or any(ch.isspace() for ch in string):
        raise AttributeValueError(f"Invalid URL string: {string!r}")
    url = urljoin(relative_to, string) if relative_to else string
    if not urlsplit(url).scheme:
        raise AttributeValueError(f"URL has no scheme: {url!r}")
    return url


def make_paragraph_style(alignment: str = 'natural', line_spacing: float = 0.0,
                         first_line_indent: float = 0.0) -> ParagraphStyle:
    if alignment not in ALIGNMENTS:
        raise AttributeValueError(f"Unknown alignment '{alignment}'")
    return ParagraphStyle(alignment, line_spacing, first_line_indent)
