# text/search.py

import re
from enum import Flag, auto
from typing import Optional
from .range import TextRange

class SearchOptions(Flag):
    """Comparison options used when locating a substring."""
    NONE = 0
    CASE_INSENSITIVE = auto()
    BACKWARDS = auto()
    ANCHORED = auto()

DEFAULT_SEARCH_OPTIONS = SearchOptions.CASE_INSENSITIVE

def find_range(text: str, substring: str,
               options: SearchOptions = DEFAULT_SEARCH_OPTIONS) -> Optional[TextRange]:
    """
    Locate substring within text.

    Returns the first occurrence, or the last one with BACKWARDS. ANCHORED
    limits the match to the start of text (the end with BACKWARDS).
    Positions always refer to text as given, including for
    case-insensitive matches. An empty substring is never found.
    """
    if not substring or len(substring) > len(text):
        return None

    pattern = re.compile(
        re.escape(substring),
        re.IGNORECASE if SearchOptions.CASE_INSENSITIVE in options else 0
    )
    last_start = len(text) - len(substring)

    if SearchOptions.ANCHORED in options:
        start = last_start if SearchOptions.BACKWARDS in options else 0
        match = pattern.match(text, start)
    elif SearchOptions.BACKWARDS in options:
        match = next(
            (m for m in (pattern.match(text, i) for i in range(last_start, -1, -1)) if m),
            None
        )
    else:
        match = pattern.search(text)

    if match is None:
        return None
    return TextRange.between(match.start(), match.end())
