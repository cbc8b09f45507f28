# attributes/attribute.py

from enum import Enum
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Type

class AttributeKind(Enum):
    """Discriminant of a string attribute, independent of its value."""
    BACKGROUND_COLOR = 'background_color'
    BASELINE_OFFSET = 'baseline_offset'
    COLOR = 'color'
    EXPANSION = 'expansion'
    FONT = 'font'
    KERN = 'kern'
    LIGATURE = 'ligature'
    LINK = 'link'
    OBLIQUENESS = 'obliqueness'
    PARAGRAPH_STYLE = 'paragraph_style'
    SHADOW = 'shadow'
    STRIKETHROUGH_COLOR = 'strikethrough_color'
    STRIKETHROUGH_STYLE = 'strikethrough_style'
    STROKE_COLOR = 'stroke_color'
    STROKE_WIDTH = 'stroke_width'
    TEXT_EFFECT = 'text_effect'
    UNDERLINE_COLOR = 'underline_color'
    UNDERLINE_STYLE = 'underline_style'
    VERTICAL_GLYPH_FORM = 'vertical_glyph_form'

_ATTRIBUTE_TYPES: Dict[AttributeKind, Type['StringAttribute']] = {}

@dataclass(frozen=True)
class StringAttribute:
    """
    A single presentation attribute carrying one value.

    Every concrete attribute is a subclass bound to exactly one
    AttributeKind. Equality requires the same kind and an equal value;
    the hash is derived from both.
    """
    value: Any
    kind: ClassVar[AttributeKind]

    def __init_subclass__(cls, kind: AttributeKind, **kwargs):
        super().__init_subclass__(**kwargs)
        if kind in _ATTRIBUTE_TYPES:
            raise ValueError(f"Attribute kind {kind.name} is already bound to {_ATTRIBUTE_TYPES[kind].__name__}")
        cls.kind = kind
        _ATTRIBUTE_TYPES[kind] = cls

    def __new__(cls, *args, **kwargs):
        if cls is StringAttribute:
            raise TypeError("StringAttribute is abstract; use one of its kinds, e.g. Color")
        return super().__new__(cls)

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def is_same_kind(self, other: 'StringAttribute') -> bool:
        """Whether both attributes share a kind. Values are not considered."""
        return self.kind is other.kind


# Colors hold rich.color.Color values, numeric kinds hold int/float.

class BackgroundColor(StringAttribute, kind=AttributeKind.BACKGROUND_COLOR): pass
class BaselineOffset(StringAttribute, kind=AttributeKind.BASELINE_OFFSET): pass
class Color(StringAttribute, kind=AttributeKind.COLOR): pass
class Expansion(StringAttribute, kind=AttributeKind.EXPANSION): pass
class Font(StringAttribute, kind=AttributeKind.FONT): pass
class Kern(StringAttribute, kind=AttributeKind.KERN): pass
class Ligature(StringAttribute, kind=AttributeKind.LIGATURE): pass
class Link(StringAttribute, kind=AttributeKind.LINK): pass
class Obliqueness(StringAttribute, kind=AttributeKind.OBLIQUENESS): pass
class ParagraphStyleAttribute(StringAttribute, kind=AttributeKind.PARAGRAPH_STYLE): pass
class ShadowAttribute(StringAttribute, kind=AttributeKind.SHADOW): pass
class StrikethroughColor(StringAttribute, kind=AttributeKind.STRIKETHROUGH_COLOR): pass
class StrikethroughStyle(StringAttribute, kind=AttributeKind.STRIKETHROUGH_STYLE): pass
class StrokeColor(StringAttribute, kind=AttributeKind.STROKE_COLOR): pass
class StrokeWidth(StringAttribute, kind=AttributeKind.STROKE_WIDTH): pass
class TextEffect(StringAttribute, kind=AttributeKind.TEXT_EFFECT): pass
class UnderlineColor(StringAttribute, kind=AttributeKind.UNDERLINE_COLOR): pass
class UnderlineStyle(StringAttribute, kind=AttributeKind.UNDERLINE_STYLE): pass
class VerticalGlyphForm(StringAttribute, kind=AttributeKind.VERTICAL_GLYPH_FORM): pass


def attribute_type(kind: AttributeKind) -> Type[StringAttribute]:
    """Return the attribute class bound to a kind."""
    return _ATTRIBUTE_TYPES[kind]


def make_attribute(kind: AttributeKind, value: Any) -> StringAttribute:
    """Build the attribute of the given kind holding value."""
    return _ATTRIBUTE_TYPES[kind](value)
