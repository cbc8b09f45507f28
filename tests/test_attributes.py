# test_attributes.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from stylish.attributes import (
    AttributeKind, StringAttribute, Color, Font, Kern, Link, StringAttributes,
    attribute_type, make_attribute,
)


class TestStringAttribute:
    """Kind and value semantics of single attributes."""

    def test_kind_is_bound_per_class(self):
        assert Color("red").kind is AttributeKind.COLOR
        assert Kern(2).kind is AttributeKind.KERN

    def test_same_kind_ignores_value(self):
        assert Color("red").is_same_kind(Color("blue"))
        assert not Color("red").is_same_kind(Kern(2))

    def test_equality_needs_kind_and_value(self):
        assert Color("red") == Color("red")
        assert Color("red") != Color("blue")
        assert Kern(1) != Link(1)

    def test_hash_consistent_with_equality(self):
        assert hash(Kern(2)) == hash(Kern(2))
        assert len({Kern(2), Kern(2), Kern(3), Color(2)}) == 3

    def test_attributes_are_immutable(self):
        kern = Kern(2)
        with pytest.raises(AttributeError):
            kern.value = 3

    def test_base_class_cannot_be_built(self):
        with pytest.raises(TypeError):
            StringAttribute("anything")

    def test_every_kind_has_a_type(self):
        for kind in AttributeKind:
            assert attribute_type(kind).kind is kind
            assert make_attribute(kind, 1).kind is kind

    def test_kind_cannot_be_bound_twice(self):
        with pytest.raises(ValueError):
            class SecondColor(StringAttribute, kind=AttributeKind.COLOR):
                pass


class TestStringAttributes:
    """Deduplication and update semantics of attribute collections."""

    def test_constructor_keeps_last_of_each_kind(self):
        attributes = StringAttributes([Color(1), Kern(2), Color(3)])
        assert attributes.values == (Kern(2), Color(3))

    def test_constructor_last_wins_in_dictionary(self):
        attributes = StringAttributes([Color(1), Color(2)])
        assert attributes.to_dict()["foreground_color"] == 2

    def test_update_replaces_same_kind(self):
        attributes = StringAttributes([Color(1), Kern(2)]).update(Color(3))
        assert attributes.values == (Kern(2), Color(3))

    def test_update_with_list_folds_in_order(self):
        attributes = StringAttributes([Kern(2)]).update([Color(4), Font("x"), Color(5)])
        assert attributes.get(AttributeKind.COLOR) == Color(5)
        assert len(attributes) == 3
        assert attributes.kinds() == (AttributeKind.KERN, AttributeKind.FONT, AttributeKind.COLOR)

    def test_update_is_idempotent(self):
        base = StringAttributes([Kern(2)])
        once = base.update(Color(1))
        twice = base.update(Color(1)).update(Color(1))
        assert once.to_dict() == twice.to_dict()
        assert once == twice

    def test_update_leaves_other_kinds_alone(self):
        attributes = StringAttributes([Color("teal")]).update(Font("Menlo"))
        assert attributes.to_dict()["foreground_color"] == "teal"

    def test_update_returns_new_instance(self):
        base = StringAttributes([Color(1)])
        updated = base.update(Color(2))
        assert base.values == (Color(1),)
        assert updated is not base

    def test_empty_collection_serializes_to_empty_dict(self):
        assert StringAttributes().to_dict() == {}
        assert len(StringAttributes()) == 0

    def test_equality_ignores_order(self):
        assert StringAttributes([Color(1), Kern(2)]) == StringAttributes([Kern(2), Color(1)])
        assert StringAttributes([Color(1)]) != StringAttributes([Color(2)])
        assert hash(StringAttributes([Color(1), Kern(2)])) == hash(StringAttributes([Kern(2), Color(1)]))

    def test_rejects_non_attributes(self):
        with pytest.raises(TypeError):
            StringAttributes(["red"])

    def test_convenience_constructors(self):
        assert StringAttributes.of(Kern(1)).values == (Kern(1),)
        assert StringAttributes.build(lambda: Kern(1)).values == (Kern(1),)
        assert StringAttributes.build(lambda: [Kern(1), Kern(2)]).values == (Kern(2),)

    def test_membership_and_lookup(self):
        attributes = StringAttributes([Color(1)])
        assert AttributeKind.COLOR in attributes
        assert Color(1) in attributes
        assert AttributeKind.KERN not in attributes
        assert attributes.get(AttributeKind.KERN) is None

    def test_adapter_survives_update(self):
        class Marker:
            def dictionary(self, attributes):
                return {"count": len(list(attributes))}

        marker = Marker()
        attributes = StringAttributes([Color(1)], adapter=marker).update(Kern(1))
        assert attributes.adapter is marker
        assert attributes.to_dict() == {"count": 2}
