# text/__init__.py

from .range import TextRange, range_after, range_before
from .search import DEFAULT_SEARCH_OPTIONS, SearchOptions, find_range
from .attributed import AttributedString

__all__ = [
    'TextRange', 'range_after', 'range_before',
    'DEFAULT_SEARCH_OPTIONS', 'SearchOptions', 'find_range',
    'AttributedString',
]
