# text/range.py

from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class TextRange:
    """Half-open span [start, start + length) over a text's code points."""
    start: int
    length: int

    def __post_init__(self):
        if self.start < 0 or self.length < 0:
            raise ValueError(f"Invalid range start={self.start} length={self.length}")

    @classmethod
    def between(cls, start: int, end: int) -> 'TextRange':
        return cls(start, end - start)

    @property
    def end(self) -> int:
        return self.start + self.length

    def contained_in(self, text_length: int) -> bool:
        return self.end <= text_length

    def as_slice(self) -> slice:
        return slice(self.start, self.end)

    def before(self, text_length: int) -> Optional['TextRange']:
        return range_before(self, text_length)

    def after(self, text_length: int) -> Optional['TextRange']:
        return range_after(self, text_length)


def range_before(text_range: TextRange, text_length: int) -> Optional[TextRange]:
    """Range covering the content before text_range, or None at the start."""
    if text_range.start == 0:
        return None
    return TextRange(0, text_range.start)


def range_after(text_range: TextRange, text_length: int) -> Optional[TextRange]:
    """Range covering the content after text_range, or None at the end."""
    if text_range.end == text_length:
        return None
    return TextRange(text_range.end, text_length - text_range.end)
