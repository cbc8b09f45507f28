# styler.py

import logging
from typing import Callable, Iterable, Optional, Union

from .attributes import StringAttribute, StringAttributeAdapter, StringAttributes
from .text import AttributedString, DEFAULT_SEARCH_OPTIONS, SearchOptions, find_range

_logger = logging.getLogger(__name__)

AttributesLike = Union[
    StringAttributes,
    StringAttribute,
    Iterable[StringAttribute],
    Callable[[], Union[StringAttributes, StringAttribute, Iterable[StringAttribute]]],
]

def resolve_attributes(attributes: AttributesLike) -> StringAttributes:
    """Accept a collection, one attribute, a list, or a function returning either."""
    if isinstance(attributes, StringAttributes):
        return attributes
    if isinstance(attributes, StringAttribute):
        return StringAttributes.of(attributes)
    if callable(attributes):
        produced = attributes()
        if isinstance(produced, StringAttributes):
            return produced
        return StringAttributes.build(lambda: produced)
    return StringAttributes(attributes)

def style_substring(
    attributed: AttributedString,
    substring: str,
    attributes: AttributesLike,
    search_options: SearchOptions = DEFAULT_SEARCH_OPTIONS,
    adapter: Optional[StringAttributeAdapter] = None,
) -> Optional[AttributedString]:
    """
    Style the first match of substring, keeping everything around it intact.

    Args:
        attributed: Text to style.
        substring: Text to look for.
        attributes: Attributes to apply to the match.
        search_options: How to compare while searching.
        adapter: Serializer for the attributes; defaults to the adapter
            carried by the collection.

    Returns:
        The restyled text, or None when substring does not occur.
    """
    found = find_range(attributed.string, substring, search_options)
    if found is None:
        _logger.debug(f"Substring '{substring}' not found; nothing styled")
        return None

    collection = resolve_attributes(attributes)
    adapter = adapter or collection.adapter
    attribute_dict = adapter.dictionary(collection.values)

    # Style a copy, then stitch the original prefix and suffix back around it
    styled = attributed.adding_attributes(attribute_dict, found).substring(found)

    length = len(attributed)
    before = found.before(length)
    if before is not None:
        styled = attributed.substring(before) + styled

    after = found.after(length)
    if after is not None:
        styled = styled + attributed.substring(after)

    return styled
