# attributes/__init__.py

from .attribute import (
    AttributeKind, StringAttribute, BackgroundColor, BaselineOffset, Color,
    Expansion, Font, Kern, Ligature, Link, Obliqueness, ParagraphStyleAttribute,
    ShadowAttribute, StrikethroughColor, StrikethroughStyle, StrokeColor,
    StrokeWidth, TextEffect, UnderlineColor, UnderlineStyle, VerticalGlyphForm,
    attribute_type, make_attribute,
)
from .values import AttributeValueError, FontDescriptor, ParagraphStyle, Shadow
from .adapter import (
    DEFAULT_ADAPTER, DEFAULT_ATTRIBUTE_KEYS, BaseAttributeAdapter,
    DefaultStringAttributeAdapter, StringAttributeAdapter,
)
from .collection import StringAttributes

__all__ = [
    'AttributeKind', 'StringAttribute', 'BackgroundColor', 'BaselineOffset',
    'Color', 'Expansion', 'Font', 'Kern', 'Ligature', 'Link', 'Obliqueness',
    'ParagraphStyleAttribute', 'ShadowAttribute', 'StrikethroughColor',
    'StrikethroughStyle', 'StrokeColor', 'StrokeWidth', 'TextEffect',
    'UnderlineColor', 'UnderlineStyle', 'VerticalGlyphForm',
    'attribute_type', 'make_attribute',
    'AttributeValueError', 'FontDescriptor', 'ParagraphStyle', 'Shadow',
    'DEFAULT_ADAPTER', 'DEFAULT_ATTRIBUTE_KEYS', 'BaseAttributeAdapter',
    'DefaultStringAttributeAdapter', 'StringAttributeAdapter',
    'StringAttributes',
]
