"""Tests for duplicate detection and the distinct-components view."""

from pyschemaannotate.analysis.conflicts import (
    count_units,
    distinct_components,
    find_problems,
)
from pyschemaannotate.model.component import SchematicComponent
from pyschemaannotate.model.problem import ProblemKind


def _comp(reference, unit="1", value="10k"):
    comp = SchematicComponent(unit_number=unit, value=value)
    comp.set_reference(reference)
    return comp


class TestFindProblems:
    def test_no_duplicates(self):
        comps = [_comp("R1"), _comp("R2"), _comp("C1")]
        assert find_problems(comps) == []
        assert not any(c.has_conflict for c in comps)

    def test_pair_of_duplicates(self):
        comps = [_comp("R1"), _comp("R2"), _comp("R1")]
        problems = find_problems(comps)
        assert len(problems) == 1
        assert problems[0].kind == ProblemKind.DUPLICATE_DESIGNATOR
        assert problems[0].members == [comps[0], comps[2]]
        assert [c.has_conflict for c in comps] == [True, False, True]

    def test_three_way_duplicate_is_one_problem(self):
        comps = [_comp("R1"), _comp("R1"), _comp("R1")]
        problems = find_problems(comps)
        assert len(problems) == 1
        assert problems[0].canonical is comps[0]
        assert problems[0].duplicates == [comps[1], comps[2]]

    def test_different_units_do_not_conflict(self):
        comps = [_comp("U1", unit="1"), _comp("U1", unit="2")]
        assert find_problems(comps) == []

    def test_same_unit_conflicts(self):
        comps = [_comp("U1", unit="1"), _comp("U1", unit="2"), _comp("U1", unit="2")]
        problems = find_problems(comps)
        assert problems[0].members == [comps[1], comps[2]]
        assert comps[0].has_conflict is False

    def test_unassigned_never_conflict(self):
        comps = [_comp("R?"), _comp("R?"), _comp("R??")]
        assert find_problems(comps) == []
        assert not any(c.has_conflict for c in comps)

    def test_problem_order_follows_first_duplicate(self):
        comps = [_comp("C1"), _comp("R1"), _comp("R1"), _comp("C1")]
        problems = find_problems(comps)
        assert [p.canonical.reference for p in problems] == ["R1", "C1"]

    def test_stale_flags_are_cleared(self):
        comps = [_comp("R1"), _comp("R1")]
        find_problems(comps)
        comps[1].set_ref_number(2)
        assert find_problems(comps) == []
        assert not any(c.has_conflict for c in comps)


class TestDistinctComponents:
    def test_units_collapse(self):
        comps = [_comp("U1", "1"), _comp("R1"), _comp("U1", "2")]
        assert distinct_components(comps) == [comps[0], comps[1]]

    def test_unassigned_are_all_kept(self):
        comps = [_comp("R?"), _comp("R?")]
        assert distinct_components(comps) == comps

    def test_count_units(self):
        comps = [_comp("U1", "1"), _comp("U1", "2"), _comp("R1"), _comp("R?")]
        assert count_units(comps) == {"U1": 2, "R1": 1}


class TestProblemDescribe:
    def test_two_members(self):
        comps = [_comp("R1", value="10k"), _comp("R1", value="1k")]
        (problem,) = find_problems(comps)
        assert problem.describe() == (
            "Duplicate component references: "
            "R1 Unit A (value 10k) and R1 Unit A (value 1k)"
        )

    def test_oxford_comma(self):
        comps = [_comp("R1"), _comp("R1"), _comp("R1")]
        (problem,) = find_problems(comps)
        assert problem.describe().count(",") == 2
        assert ", and R1 Unit A" in problem.describe()
