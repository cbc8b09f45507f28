# test_text.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from stylish.text import (
    AttributedString, SearchOptions, TextRange, find_range, range_after, range_before,
)


class TestTextRange:
    """Before/after resolution around a located range."""

    def test_before_and_after_in_the_middle(self):
        found = TextRange(2, 3)
        assert range_before(found, 10) == TextRange(0, 2)
        assert range_after(found, 10) == TextRange(5, 5)

    def test_no_before_at_start(self):
        assert TextRange(0, 3).before(10) is None

    def test_no_after_at_end(self):
        assert TextRange(7, 3).after(10) is None

    def test_whole_text_has_neither(self):
        whole = TextRange(0, 5)
        assert whole.before(5) is None
        assert whole.after(5) is None

    def test_complement_covers_text(self):
        length = 6
        for start in range(length + 1):
            for size in range(length - start + 1):
                found = TextRange(start, size)
                before, after = found.before(length), found.after(length)
                assert (before is None) == (start == 0)
                assert (after is None) == (start + size == length)
                total = size + (before.length if before else 0) + (after.length if after else 0)
                assert total == length

    def test_negative_values_rejected(self):
        with pytest.raises(ValueError):
            TextRange(-1, 2)
        with pytest.raises(ValueError):
            TextRange(0, -2)

    def test_helpers(self):
        found = TextRange.between(3, 7)
        assert found == TextRange(3, 4)
        assert found.end == 7
        assert found.contained_in(7)
        assert not found.contained_in(6)
        assert "0123456789"[found.as_slice()] == "3456"


class TestFindRange:
    """Substring search under the supported comparison options."""

    def test_case_insensitive_by_default(self):
        assert find_range("Hello World", "world") == TextRange(6, 5)

    def test_case_sensitive(self):
        assert find_range("Hello World", "world", SearchOptions.NONE) is None
        assert find_range("Hello World", "World", SearchOptions.NONE) == TextRange(6, 5)

    def test_first_occurrence_wins(self):
        assert find_range("abcabc", "abc") == TextRange(0, 3)

    def test_backwards_finds_last(self):
        options = SearchOptions.BACKWARDS | SearchOptions.CASE_INSENSITIVE
        assert find_range("abcABC", "abc", options) == TextRange(3, 3)

    def test_anchored(self):
        assert find_range("abcabc", "bc", SearchOptions.ANCHORED) is None
        assert find_range("abcabc", "abc", SearchOptions.ANCHORED) == TextRange(0, 3)
        backwards = SearchOptions.ANCHORED | SearchOptions.BACKWARDS
        assert find_range("abcabc", "abc", backwards) == TextRange(3, 3)
        assert find_range("abcabc", "ab", backwards) is None

    def test_not_found(self):
        assert find_range("Hello", "") is None
        assert find_range("Hi", "Hello") is None
        assert find_range("Hello", "xyz") is None

    def test_regex_characters_are_literal(self):
        assert find_range("cost: $5 (approx.)", "(approx.)") == TextRange(9, 9)


class TestAttributedString:
    """Rich-text primitive operations."""

    def setup_method(self):
        self.plain = AttributedString("Hello World")

    def test_plain_construction(self):
        assert self.plain.string == "Hello World"
        assert len(self.plain) == 11
        assert str(self.plain) == "Hello World"
        assert list(self.plain.runs()) == [(TextRange(0, 11), {})]

    def test_empty(self):
        empty = AttributedString()
        assert len(empty) == 0
        assert list(empty.runs()) == []

    def test_rejects_non_strings(self):
        with pytest.raises(TypeError):
            AttributedString(42)

    def test_adding_attributes_merges_by_key(self):
        base = AttributedString("Hello World", {"color": "teal", "kern": 2})
        styled = base.adding_attributes({"color": "magenta"}, TextRange(0, 5))
        assert styled.attributes_at(0) == {"color": "magenta", "kern": 2}
        assert styled.attributes_at(5) == {"color": "teal", "kern": 2}
        assert base.attributes_at(0) == {"color": "teal", "kern": 2}

    def test_substring_keeps_attributes(self):
        styled = self.plain.adding_attributes({"bold": True}, TextRange(6, 5))
        fragment = styled.substring(TextRange(4, 4))
        assert fragment.string == "o Wo"
        assert [(r, a) for r, a in fragment.runs()] == [
            (TextRange(0, 2), {}),
            (TextRange(2, 2), {"bold": True}),
        ]

    def test_concatenation_keeps_each_side(self):
        left = AttributedString("ab", {"k": 1})
        right = AttributedString("cd", {"k": 2})
        joined = left + right
        assert joined.string == "abcd"
        assert joined.attributes_at(1) == {"k": 1}
        assert joined.attributes_at(2) == {"k": 2}
        assert joined == left.append(right)

    def test_equal_neighbouring_runs_merge(self):
        joined = AttributedString("ab", {"k": 1}) + AttributedString("cd", {"k": 1})
        assert joined == AttributedString("abcd", {"k": 1})
        assert len(list(joined.runs())) == 1

    def test_out_of_range_access(self):
        with pytest.raises(IndexError):
            self.plain.substring(TextRange(8, 5))
        with pytest.raises(IndexError):
            self.plain.adding_attributes({"k": 1}, TextRange(11, 1))
        with pytest.raises(IndexError):
            self.plain.attributes_at(11)

    def test_returned_attributes_are_copies(self):
        base = AttributedString("abc", {"k": 1})
        base.attributes_at(0)["k"] = 99
        for _, attributes in base.runs():
            attributes["k"] = 99
        assert base.attributes_at(0) == {"k": 1}

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(self.plain)

    def test_appending_plain_string_fails(self):
        with pytest.raises(TypeError):
            self.plain.append("suffix")
