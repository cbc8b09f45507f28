# attributes/adapter.py

from typing import Any, Dict, Iterable, Mapping, Optional, Protocol, runtime_checkable
from .attribute import AttributeKind, StringAttribute

# Keys understood by the rich renderer in stylish.display.render
DEFAULT_ATTRIBUTE_KEYS: Dict[AttributeKind, str] = {
    AttributeKind.BACKGROUND_COLOR: 'background_color',
    AttributeKind.BASELINE_OFFSET: 'baseline_offset',
    AttributeKind.COLOR: 'foreground_color',
    AttributeKind.EXPANSION: 'expansion',
    AttributeKind.FONT: 'font',
    AttributeKind.KERN: 'kern',
    AttributeKind.LIGATURE: 'ligature',
    AttributeKind.LINK: 'link',
    AttributeKind.OBLIQUENESS: 'obliqueness',
    AttributeKind.PARAGRAPH_STYLE: 'paragraph_style',
    AttributeKind.SHADOW: 'shadow',
    AttributeKind.STRIKETHROUGH_COLOR: 'strikethrough_color',
    AttributeKind.STRIKETHROUGH_STYLE: 'strikethrough_style',
    AttributeKind.STROKE_COLOR: 'stroke_color',
    AttributeKind.STROKE_WIDTH: 'stroke_width',
    AttributeKind.TEXT_EFFECT: 'text_effect',
    AttributeKind.UNDERLINE_COLOR: 'underline_color',
    AttributeKind.UNDERLINE_STYLE: 'underline_style',
    AttributeKind.VERTICAL_GLYPH_FORM: 'vertical_glyph_form',
}

@runtime_checkable
class StringAttributeAdapter(Protocol):
    """Protocol for translating string attributes into an attribute dictionary."""
    def key(self, attribute: StringAttribute) -> str: ...
    def value(self, attribute: StringAttribute) -> Any: ...
    def dictionary(self, attributes: Iterable[StringAttribute]) -> Dict[str, Any]: ...

class BaseAttributeAdapter:
    """
    Table driven adapter.

    The key table must cover every AttributeKind; an incomplete table
    fails when the adapter is constructed rather than when an attribute
    of a missing kind is first serialized.
    """
    def __init__(self, keys: Optional[Mapping[AttributeKind, str]] = None):
        keys = dict(DEFAULT_ATTRIBUTE_KEYS if keys is None else keys)
        missing = [kind.name for kind in AttributeKind if not keys.get(kind)]
        if missing:
            raise ValueError(f"{type(self).__name__} has no key for: {', '.join(missing)}")
        self._keys = keys

    @property
    def keys(self) -> Dict[AttributeKind, str]:
        return dict(self._keys)

    def key(self, attribute: StringAttribute) -> str:
        return self._keys[attribute.kind]

    def value(self, attribute: StringAttribute) -> Any:
        return attribute.value

    def dictionary(self, attributes: Iterable[StringAttribute]) -> Dict[str, Any]:
        """Serialize attributes; later entries overwrite earlier ones sharing a key."""
        result: Dict[str, Any] = {}
        for attribute in attributes:
            result[self.key(attribute)] = self.value(attribute)
        return result

class DefaultStringAttributeAdapter(BaseAttributeAdapter):
    """Adapter producing the keys the bundled rich renderer understands."""
    def __init__(self):
        super().__init__(DEFAULT_ATTRIBUTE_KEYS)

    def __eq__(self, other) -> bool:
        return isinstance(other, DefaultStringAttributeAdapter)

    def __hash__(self) -> int:
        return hash(DefaultStringAttributeAdapter)

    def __repr__(self) -> str:
        return 'DefaultStringAttributeAdapter()'

DEFAULT_ADAPTER = DefaultStringAttributeAdapter()
