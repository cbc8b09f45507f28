# __init__.py

from .logger import Logger
from .attributes import (
    AttributeKind, StringAttribute, StringAttributes, StringAttributeAdapter,
    DefaultStringAttributeAdapter, DEFAULT_ADAPTER,
)
from .text import AttributedString, SearchOptions, TextRange
from .styler import style_substring
from .label import Label
from .config import StylishConfig, DEFAULT_CONFIG
from .interface import Interface

__all__ = [
    "Interface", "Label", "Logger", "StylishConfig", "DEFAULT_CONFIG",
    "AttributeKind", "StringAttribute", "StringAttributes",
    "StringAttributeAdapter", "DefaultStringAttributeAdapter", "DEFAULT_ADAPTER",
    "AttributedString", "SearchOptions", "TextRange", "style_substring",
]
