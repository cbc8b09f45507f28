# attributes/chaining.py

import logging
from numbers import Real
from typing import Callable, Optional, Tuple, Union

from rich.color import Color as RichColor

from . import attribute as attrs
from .values import (
    AttributeValueError, FontDescriptor, ParagraphStyle, Shadow,
    color_from_hsb, color_from_rgb, color_from_white, make_font, make_link,
    make_paragraph_style, parse_color,
)

_logger = logging.getLogger(__name__)

ColorValue = Union[str, RichColor]

def _number(value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise AttributeValueError(f"Expected a number, got {value!r}")
    return value

class AttributeChaining:
    """
    Builder style helpers mixed into StringAttributes.

    Each helper returns a new collection. When the value cannot be
    built the helper logs a warning and returns the collection unchanged,
    so a chain of calls never aborts halfway.
    """
    __slots__ = ()

    def _chain(self, attribute_type, build: Callable, *args, **kwargs):
        try:
            value = build(*args, **kwargs)
        except AttributeValueError as e:
            _logger.warning(f"Ignoring {attribute_type.__name__} attribute: {e}")
            return self
        return self.update(attribute_type(value))

    # Background color

    def background_color(self, value: ColorValue):
        return self._chain(attrs.BackgroundColor, parse_color, value)

    def background_color_rgb(self, red: float, green: float, blue: float):
        return self._chain(attrs.BackgroundColor, color_from_rgb, red, green, blue)

    def background_color_white(self, white: float):
        return self._chain(attrs.BackgroundColor, color_from_white, white)

    def background_color_hsb(self, hue: float, saturation: float, brightness: float):
        return self._chain(attrs.BackgroundColor, color_from_hsb, hue, saturation, brightness)

    def baseline_offset(self, value: float):
        return self._chain(attrs.BaselineOffset, _number, value)

    # Foreground color

    def color(self, value: ColorValue):
        return self._chain(attrs.Color, parse_color, value)

    def color_rgb(self, red: float, green: float, blue: float):
        return self._chain(attrs.Color, color_from_rgb, red, green, blue)

    def color_white(self, white: float):
        return self._chain(attrs.Color, color_from_white, white)

    def color_hsb(self, hue: float, saturation: float, brightness: float):
        return self._chain(attrs.Color, color_from_hsb, hue, saturation, brightness)

    def expansion(self, value: float):
        return self._chain(attrs.Expansion, _number, value)

    def font(self, value: Union[str, FontDescriptor], size: Optional[float] = None,
             bold: bool = False, italic: bool = False):
        """Font from a descriptor, or from a name and size."""
        if isinstance(value, FontDescriptor):
            return self.update(attrs.Font(value))
        if size is None:
            _logger.warning(f"Ignoring Font attribute: no size given for '{value}'")
            return self
        return self._chain(attrs.Font, make_font, value, size, bold=bold, italic=italic)

    def kern(self, value: float):
        return self._chain(attrs.Kern, _number, value)

    def ligature(self, value: int):
        return self._chain(attrs.Ligature, _number, value)

    def link(self, value: str, relative_to: Optional[str] = None):
        return self._chain(attrs.Link, make_link, value, relative_to)

    def obliqueness(self, value: float):
        return self._chain(attrs.Obliqueness, _number, value)

    def paragraph_style(self, value: Optional[ParagraphStyle] = None, **kwargs):
        if value is not None:
            return self.update(attrs.ParagraphStyleAttribute(value))
        return self._chain(attrs.ParagraphStyleAttribute, make_paragraph_style, **kwargs)

    def shadow(self, value: Optional[Shadow] = None, offset: Tuple[float, float] = (0.0, 0.0),
               blur_radius: float = 0.0, color: Optional[ColorValue] = None):
        if value is not None:
            return self.update(attrs.ShadowAttribute(value))

        def build() -> Shadow:
            return Shadow(
                offset=(_number(offset[0]), _number(offset[1])),
                blur_radius=_number(blur_radius),
                color=parse_color(color) if color is not None else None,
            )
        return self._chain(attrs.ShadowAttribute, build)

    # Strikethrough

    def strikethrough_color(self, value: ColorValue):
        return self._chain(attrs.StrikethroughColor, parse_color, value)

    def strikethrough_color_rgb(self, red: float, green: float, blue: float):
        return self._chain(attrs.StrikethroughColor, color_from_rgb, red, green, blue)

    def strikethrough_color_white(self, white: float):
        return self._chain(attrs.StrikethroughColor, color_from_white, white)

    def strikethrough_color_hsb(self, hue: float, saturation: float, brightness: float):
        return self._chain(attrs.StrikethroughColor, color_from_hsb, hue, saturation, brightness)

    def strikethrough_style(self, value: int):
        return self._chain(attrs.StrikethroughStyle, _number, value)

    # Stroke

    def stroke_color(self, value: ColorValue):
        return self._chain(attrs.StrokeColor, parse_color, value)

    def stroke_color_rgb(self, red: float, green: float, blue: float):
        return self._chain(attrs.StrokeColor, color_from_rgb, red, green, blue)

    def stroke_color_white(self, white: float):
        return self._chain(attrs.StrokeColor, color_from_white, white)

    def stroke_color_hsb(self, hue: float, saturation: float, brightness: float):
        return self._chain(attrs.StrokeColor, color_from_hsb, hue, saturation, brightness)

    def stroke_width(self, value: float):
        return self._chain(attrs.StrokeWidth, _number, value)

    def text_effect(self, value: str):
        if not value:
            _logger.warning("Ignoring TextEffect attribute: empty effect name")
            return self
        return self.update(attrs.TextEffect(value))

    # Underline

    def underline_color(self, value: ColorValue):
        return self._chain(attrs.UnderlineColor, parse_color, value)

    def underline_color_rgb(self, red: float, green: float, blue: float):
        return self._chain(attrs.UnderlineColor, color_from_rgb, red, green, blue)

    def underline_color_white(self, white: float):
        return self._chain(attrs.UnderlineColor, color_from_white, white)

    def underline_color_hsb(self, hue: float, saturation: float, brightness: float):
        return self._chain(attrs.UnderlineColor, color_from_hsb, hue, saturation, brightness)

    def underline_style(self, value: int):
        return self._chain(attrs.UnderlineStyle, _number, value)

    def vertical_glyph_form(self, value: int):
        return self._chain(attrs.VerticalGlyphForm, _number, value)
