"""Tests for EntryCollector upsert and uniqueness semantics."""

import random

import pytest

from tiffentries.collector import DuplicateTagError, EntryCollector
from tiffentries.entries import TagEntry


class TestAdd:
    def test_add_appends(self):
        c = EntryCollector()
        c.add(TagEntry.short(259, 1))
        c.add(TagEntry.short(262, 2))
        assert c.tags() == [259, 262]

    def test_add_replaces_and_moves_to_end(self):
        c = EntryCollector()
        c.add(TagEntry.short(259, 1))
        c.add(TagEntry.short(262, 2))
        c.add(TagEntry.short(259, 8))
        assert c.tags() == [262, 259]
        assert c.get(259).value == 8

    def test_random_sequence_keeps_last_value(self):
        rng = random.Random(7)
        c = EntryCollector()
        last = {}
        for i in range(200):
            tag = rng.choice([256, 257, 258, 259, 262, 277])
            c.add(TagEntry.long(tag, i))
            last[tag] = i
        tags = c.tags()
        assert len(tags) == len(set(tags))
        assert {e.tag: e.value for e in c} == last


class TestAddUnconditional:
    def test_appends_new_tag(self):
        c = EntryCollector()
        c.add_unconditional(TagEntry.long(256, 100))
        assert c.contains(256)
        assert len(c) == 1

    def test_duplicate_fails_fast(self):
        c = EntryCollector()
        c.add_unconditional(TagEntry.long(256, 100))
        with pytest.raises(DuplicateTagError):
            c.add_unconditional(TagEntry.long(256, 200))
        assert c.get(256).value == 100

    def test_duplicate_error_is_value_error(self):
        assert issubclass(DuplicateTagError, ValueError)


class TestQueries:
    def test_contains(self):
        c = EntryCollector()
        c.add(TagEntry.short(296, 2))
        assert c.contains(296)
        assert 296 in c
        assert not c.contains(282)

    def test_get_missing(self):
        assert EntryCollector().get(256) is None

    def test_snapshot_is_a_copy(self):
        c = EntryCollector()
        c.add(TagEntry.short(296, 2))
        snap = c.snapshot()
        snap.clear()
        assert len(c) == 1

    def test_empty(self):
        c = EntryCollector()
        assert c.snapshot() == []
        assert len(c) == 0
