"""Tests for SubstitutionTable bookkeeping."""

import pytest

from standin.registry import (
    NO_SUBSTITUTE,
    InvalidPositionError,
    Pathway,
    SubstituteExhaustedError,
    SubstitutionEntry,
    SubstitutionTable,
)


class TestSubstitutionEntry:
    def test_default_entry_is_empty(self):
        assert SubstitutionEntry().is_empty()

    def test_singleton_entry(self):
        entry = SubstitutionEntry(singleton="mock")
        assert not entry.is_sequence
        assert entry.positions == []
        assert not entry.is_empty()

    def test_sequence_positions_are_sorted(self):
        entry = SubstitutionEntry(sequence={2: "c", 0: "a"})
        assert entry.is_sequence
        assert entry.positions == [0, 2]

    def test_empty_sequence_is_empty(self):
        assert SubstitutionEntry(sequence={}).is_empty()


class TestSubstitutionTable:
    def test_take_from_empty_table(self):
        table = SubstitutionTable(Pathway.PLAIN)
        assert table.take("T") is NO_SUBSTITUTE

    def test_put_and_take_singleton(self):
        table = SubstitutionTable(Pathway.PLAIN)
        table.put("T", "mock")
        assert table.take("T") == "mock"
        assert table.take("T") == "mock"

    def test_mode(self):
        table = SubstitutionTable(Pathway.PLAIN)
        assert table.mode("T") is None
        table.put("T", "mock")
        assert table.mode("T") == "singleton"
        table.put("T", "mock", 0)
        assert table.mode("T") == "sequence"

    def test_contains_len_and_iter(self):
        table = SubstitutionTable(Pathway.NAMED)
        table.put("A", 1)
        table.put("B", 2, 0)
        assert "A" in table
        assert "C" not in table
        assert len(table) == 2
        assert sorted(table) == ["A", "B"]

    def test_take_sequence_in_order(self):
        table = SubstitutionTable(Pathway.PLAIN)
        table.put("T", "second", 1)
        table.put("T", "first", 0)
        assert [table.take("T"), table.take("T")] == ["first", "second"]
        assert table.consumed("T") == 2
        assert table.remaining("T") == []

    def test_exhausted_error_carries_pathway(self):
        table = SubstitutionTable(Pathway.NAMED)
        table.put("T", "only", 0)
        table.take("T")
        with pytest.raises(SubstituteExhaustedError) as exc_info:
            table.take("T")
        assert exc_info.value.pathway is Pathway.NAMED
        assert exc_info.value.context["pathway"] == "named"
        assert table.consumed("T") == 1

    def test_replacing_position_overwrites_slot(self):
        table = SubstitutionTable(Pathway.PLAIN)
        table.put("T", "old", 0)
        table.put("T", "new", 0)
        assert table.take("T") == "new"

    @pytest.mark.parametrize("position", [-1, 1.5, "0", True])
    def test_invalid_positions_are_rejected(self, position):
        table = SubstitutionTable(Pathway.PLAIN)
        with pytest.raises(InvalidPositionError):
            table.put("T", "mock", position)
        assert "T" not in table

    def test_clear_resets_entries_and_counters(self):
        table = SubstitutionTable(Pathway.PLAIN)
        table.put("T", "a", 0)
        table.take("T")
        table.clear()
        assert len(table) == 0
        assert table.consumed("T") == 0
