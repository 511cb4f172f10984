#!/usr/bin/env python3
"""
Tests for NameCandidateSet ordering and deduplication
"""

import pytest

from streamloop.naming import NameCandidateSet


class TestNameCandidateSet:

    def test_empty(self):
        candidates = NameCandidateSet()
        assert candidates.is_empty()
        assert candidates.ordered() == []
        assert len(candidates) == 0

    def test_best_before_other(self):
        """Best candidates lead regardless of contribution order"""
        candidates = NameCandidateSet()
        candidates.add_other("element")
        candidates.add_best("item")
        assert candidates.ordered() == ["item", "element"]

    def test_insertion_order_within_each_set(self):
        candidates = NameCandidateSet()
        for name in ["c", "a", "b"]:
            candidates.add_other(name)
        for name in ["z", "y"]:
            candidates.add_best(name)
        assert candidates.ordered() == ["z", "y", "c", "a", "b"]

    def test_duplicates_absorbed(self):
        """Re-adding a name keeps its first position"""
        candidates = NameCandidateSet()
        candidates.add_other("a")
        candidates.add_other("b")
        candidates.add_other("a")
        assert candidates.other == ["a", "b"]

    def test_cross_set_duplicate_keeps_best_position(self):
        candidates = NameCandidateSet()
        candidates.add_other("x")
        candidates.add_other("y")
        candidates.add_best("y")
        assert candidates.ordered() == ["y", "x"]
        assert len(candidates) == 2

    def test_extend_other_appends_in_order(self):
        candidates = NameCandidateSet()
        candidates.add_other("name")
        candidates.extend_other(["list", "name", "strings"])
        assert candidates.other == ["name", "list", "strings"]

    def test_repr(self):
        candidates = NameCandidateSet()
        candidates.add_best("a")
        candidates.add_other("b")
        assert repr(candidates) == "['a']|['b']"


if __name__ == "__main__":
    pytest.main([__file__])
