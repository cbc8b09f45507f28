# attributes/collection.py

from typing import Callable, Dict, Iterable, Iterator, Optional, Tuple, Union

from .adapter import DEFAULT_ADAPTER, StringAttributeAdapter
from .attribute import AttributeKind, StringAttribute
from .chaining import AttributeChaining

AttributeSource = Union[StringAttribute, Iterable[StringAttribute]]

def unique_by_kind(values: Iterable[StringAttribute]) -> Tuple[StringAttribute, ...]:
    """
    Drop all but the last attribute of each kind.

    The survivor keeps the position of its own (last) occurrence.
    """
    values = list(values)
    for value in values:
        if not isinstance(value, StringAttribute):
            raise TypeError(f"Expected StringAttribute, got {type(value).__name__}")
    last_index = {value.kind: index for index, value in enumerate(values)}
    return tuple(value for index, value in enumerate(values)
                 if last_index[value.kind] == index)

class StringAttributes(AttributeChaining):
    """
    Immutable collection holding at most one attribute per kind.

    Every operation that changes the collection returns a new instance.
    Ordering follows insertion but carries no meaning; equality compares
    the kind to value mapping only.
    """
    __slots__ = ('_values', '_adapter')

    def __init__(self, values: Iterable[StringAttribute] = (),
                 adapter: StringAttributeAdapter = DEFAULT_ADAPTER):
        self._values = unique_by_kind(values)
        self._adapter = adapter

    @classmethod
    def of(cls, attribute: StringAttribute,
           adapter: StringAttributeAdapter = DEFAULT_ADAPTER) -> 'StringAttributes':
        """Collection holding a single attribute."""
        return cls([attribute], adapter=adapter)

    @classmethod
    def build(cls, factory: Callable[[], AttributeSource],
              adapter: StringAttributeAdapter = DEFAULT_ADAPTER) -> 'StringAttributes':
        """Collection from a function returning one attribute or a list of them."""
        produced = factory()
        if isinstance(produced, StringAttribute):
            produced = [produced]
        return cls(produced, adapter=adapter)

    @property
    def values(self) -> Tuple[StringAttribute, ...]:
        return self._values

    @property
    def adapter(self) -> StringAttributeAdapter:
        return self._adapter

    def kinds(self) -> Tuple[AttributeKind, ...]:
        return tuple(value.kind for value in self._values)

    def get(self, kind: AttributeKind) -> Optional[StringAttribute]:
        return next((value for value in self._values if value.kind is kind), None)

    def with_adapter(self, adapter: StringAttributeAdapter) -> 'StringAttributes':
        return StringAttributes(self._values, adapter=adapter)

    def update(self, attributes: AttributeSource) -> 'StringAttributes':
        """
        Return a new collection updated with one or more attributes.

        Existing attributes of the same kind are removed and the new ones
        appended, one attribute at a time in the given order.
        """
        if isinstance(attributes, StringAttribute):
            attributes = [attributes]
        values = list(self._values)
        for attribute in attributes:
            values = [value for value in values if not value.is_same_kind(attribute)]
            values.append(attribute)
        return StringAttributes(values, adapter=self._adapter)

    def to_dict(self) -> Dict[str, object]:
        """Attribute dictionary produced by this collection's adapter."""
        return self._adapter.dictionary(self._values)

    def _as_mapping(self) -> Dict[AttributeKind, StringAttribute]:
        return {value.kind: value for value in self._values}

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[StringAttribute]:
        return iter(self._values)

    def __contains__(self, item) -> bool:
        if isinstance(item, AttributeKind):
            return item in self.kinds()
        return item in self._values

    def __eq__(self, other) -> bool:
        if not isinstance(other, StringAttributes):
            return NotImplemented
        return self._as_mapping() == other._as_mapping()

    def __hash__(self) -> int:
        return hash(frozenset(self._values))

    def __repr__(self) -> str:
        return f"StringAttributes({list(self._values)!r})"
