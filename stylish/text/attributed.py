# text/attributed.py

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple
from .range import TextRange

Run = Tuple[int, Dict[str, Any]]

def _normalize(runs: Iterable[Run]) -> Tuple[Run, ...]:
    """Drop empty runs and merge neighbours carrying identical attributes."""
    merged: List[Run] = []
    for length, attributes in runs:
        if length <= 0:
            continue
        if merged and merged[-1][1] == attributes:
            merged[-1] = (merged[-1][0] + length, merged[-1][1])
        else:
            merged.append((length, attributes))
    return tuple(merged)

class AttributedString:
    """
    Immutable text paired with per-run attribute dictionaries.

    The text is split into consecutive runs; every code point of a run
    shares the same attribute dictionary. Operations return new values
    and never touch the dictionaries held by existing instances.
    """
    __slots__ = ('_string', '_runs')

    def __init__(self, string: str = '', attributes: Optional[Mapping[str, Any]] = None):
        if not isinstance(string, str):
            raise TypeError(f"Expected str, got {type(string).__name__}")
        self._string = string
        self._runs = _normalize([(len(string), dict(attributes or {}))])

    @classmethod
    def _from_runs(cls, string: str, runs: Iterable[Run]) -> 'AttributedString':
        instance = cls.__new__(cls)
        instance._string = string
        instance._runs = _normalize(runs)
        return instance

    @property
    def string(self) -> str:
        return self._string

    def __len__(self) -> int:
        return len(self._string)

    def __str__(self) -> str:
        return self._string

    def runs(self) -> Iterator[Tuple[TextRange, Dict[str, Any]]]:
        """Yield each run's range with a copy of its attributes."""
        offset = 0
        for length, attributes in self._runs:
            yield TextRange(offset, length), dict(attributes)
            offset += length

    def attributes_at(self, index: int) -> Dict[str, Any]:
        if not 0 <= index < len(self._string):
            raise IndexError(f"Index {index} out of range for text of length {len(self._string)}")
        offset = 0
        for length, attributes in self._runs:
            offset += length
            if index < offset:
                return dict(attributes)
        return {}

    def _check_range(self, text_range: TextRange) -> None:
        if not text_range.contained_in(len(self._string)):
            raise IndexError(
                f"Range {text_range.start}..{text_range.end} exceeds text length {len(self._string)}"
            )

    def _slice_runs(self, start: int, end: int) -> List[Run]:
        result = []
        offset = 0
        for length, attributes in self._runs:
            lo, hi = max(start, offset), min(end, offset + length)
            if lo < hi:
                result.append((hi - lo, attributes))
            offset += length
        return result

    def substring(self, text_range: TextRange) -> 'AttributedString':
        """Independent fragment covering text_range, attributes included."""
        self._check_range(text_range)
        return AttributedString._from_runs(
            self._string[text_range.as_slice()],
            self._slice_runs(text_range.start, text_range.end)
        )

    def adding_attributes(self, attributes: Mapping[str, Any],
                          text_range: TextRange) -> 'AttributedString':
        """
        Copy with attributes merged over text_range.

        Keys present in attributes overwrite existing values in the range;
        other keys in the range and everything outside it are kept.
        """
        self._check_range(text_range)
        start, end = text_range.start, text_range.end
        styled = [(length, {**existing, **attributes})
                  for length, existing in self._slice_runs(start, end)]
        return AttributedString._from_runs(
            self._string,
            self._slice_runs(0, start) + styled + self._slice_runs(end, len(self._string))
        )

    def append(self, other: 'AttributedString') -> 'AttributedString':
        """Concatenation keeping each side's attributes."""
        if not isinstance(other, AttributedString):
            raise TypeError(f"Cannot append {type(other).__name__} to AttributedString")
        return AttributedString._from_runs(self._string + other._string, self._runs + other._runs)

    def __add__(self, other):
        if not isinstance(other, AttributedString):
            return NotImplemented
        return self.append(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AttributedString):
            return NotImplemented
        return self._string == other._string and self._runs == other._runs

    __hash__ = None

    def __repr__(self) -> str:
        runs = ', '.join(f"{self._string[r.as_slice()]!r}: {a}" for r, a in self.runs())
        return f"AttributedString({self._string!r}, runs=[{runs}])"
