"""Tests for full-schematic annotation."""

import pytest

from pyschemaannotate.annotation.annotator import (
    annotate,
    group_by_letters,
    order_value_groups,
    part_buckets,
    value_groups,
)
from pyschemaannotate.annotation.strategies import AnnotateStrategy
from pyschemaannotate.exceptions import UnknownStrategyError
from pyschemaannotate.model.component import SchematicComponent
from pyschemaannotate.model.values import value_to_number


def _comp(reference, value, unit="1"):
    comp = SchematicComponent(
        unit_number=unit, value=value, numeric_value=value_to_number(value)
    )
    comp.set_reference(reference)
    return comp


def _by_value(comps):
    """Map each value to the sorted numbers its components received."""
    result = {}
    for c in comps:
        result.setdefault(c.value, []).append(c.ref_number)
    return {k: sorted(v) for k, v in result.items()}


class TestPartBuckets:
    def test_units_of_one_part_share_a_bucket(self):
        a = _comp("U1", "TL072", "1")
        b = _comp("U1", "TL072", "2")
        c = _comp("U2", "TL072", "1")
        assert part_buckets([a, b, c]) == [[a, b], [c]]

    def test_same_unit_never_shares_a_bucket(self):
        a = _comp("R?", "10k")
        b = _comp("R?", "10k")
        assert part_buckets([a, b]) == [[a], [b]]


class TestValueGroups:
    def test_grouping_keeps_first_seen_order(self):
        comps = [_comp("R1", "10k"), _comp("R2", "1k"), _comp("R3", "10k")]
        groups = value_groups(comps)
        assert [g.value for g in groups] == ["10k", "1k"]
        assert [g.part_count for g in groups] == [2, 1]

    def test_group_by_letters_skips_letterless(self):
        comps = [_comp("R1", "1k"), _comp("42", "1k"), _comp("C1", "1n")]
        assert list(group_by_letters(comps)) == ["R", "C"]

    @pytest.mark.parametrize(
        "strategy, expected",
        [
            (AnnotateStrategy.MOST_COMMON_FIRST, ["100k", "1k", "10k", "DNP"]),
            (AnnotateStrategy.LEAST_COMMON_FIRST, ["10k", "DNP", "1k", "100k"]),
            (AnnotateStrategy.LOWEST_VALUE_FIRST, ["1k", "10k", "100k", "DNP"]),
            (AnnotateStrategy.HIGHEST_VALUE_FIRST, ["100k", "10k", "1k", "DNP"]),
        ],
    )
    def test_ordering(self, strategy, expected):
        comps = [
            _comp("R1", "10k"),
            _comp("R2", "1k"),
            _comp("R3", "100k"),
            _comp("R4", "100k"),
            _comp("R5", "1k"),
            _comp("R6", "100k"),
            _comp("R7", "DNP"),
        ]
        ordered = order_value_groups(value_groups(comps), strategy)
        assert [g.value for g in ordered] == expected


class TestAnnotate:
    def test_least_common_first(self):
        comps = [
            _comp("R1", "100k"),
            _comp("R2", "100k"),
            _comp("R3", "10k"),
            _comp("R4", "100k"),
        ]
        annotate(comps, AnnotateStrategy.LEAST_COMMON_FIRST)
        assert comps[2].reference == "R1"
        assert [c.reference for c in comps] == ["R2", "R3", "R1", "R4"]

    def test_most_common_first(self):
        comps = [_comp("R9", "10k"), _comp("R8", "100k"), _comp("R7", "100k")]
        annotate(comps, AnnotateStrategy.MOST_COMMON_FIRST)
        assert _by_value(comps) == {"100k": [1, 2], "10k": [3]}

    def test_numbering_restarts_per_letters(self):
        comps = [_comp("R5", "1k"), _comp("C9", "1n"), _comp("R7", "2k")]
        annotate(comps, AnnotateStrategy.LOWEST_VALUE_FIRST)
        assert [c.reference for c in comps] == ["R1", "C1", "R2"]

    def test_multi_unit_parts_share_numbers(self):
        comps = [
            _comp("U4", "TL072", "1"),
            _comp("U2", "TL072", "1"),
            _comp("U4", "TL072", "2"),
            _comp("U2", "TL072", "2"),
        ]
        annotate(comps, AnnotateStrategy.MOST_COMMON_FIRST)
        assert [c.reference for c in comps] == ["U1", "U2", "U1", "U2"]

    def test_contiguous_numbers_from_one(self):
        comps = [
            _comp("R3", "1k"),
            _comp("R3", "1k"),
            _comp("R?", "10k"),
            _comp("R?", "10k"),
            _comp("R12", "4k7"),
        ]
        annotate(comps, AnnotateStrategy.HIGHEST_VALUE_FIRST)
        numbers = sorted(c.ref_number for c in comps)
        assert numbers == [1, 2, 3, 4, 5]

    def test_existing_duplicates_are_split(self):
        comps = [_comp("R1", "1k"), _comp("R1", "1k")]
        problems = annotate(comps, AnnotateStrategy.MOST_COMMON_FIRST)
        assert problems == []
        assert sorted(c.reference for c in comps) == ["R1", "R2"]
        assert not any(c.has_conflict for c in comps)

    def test_unknown_strategy_is_noop(self):
        comps = [_comp("R5", "1k")]
        assert annotate(comps, "alphabetical") is None
        assert comps[0].reference == "R5"

    def test_unknown_strategy_strict_raises(self):
        with pytest.raises(UnknownStrategyError):
            annotate([_comp("R5", "1k")], "alphabetical", strict=True)
