"""Tests for formulas module."""

from app.models.core import Person, Role, Team
from app.models.voting import Ballot
from helpers import formulas


def person(pid, role=Role.MEMBER, title="Dev"):
    return Person(pid, f"Person {pid}", role, title, Team.DEVELOPMENT)


class TestFindExecutive:
    def test_by_role(self):
        roster = [person("a"), person("x", Role.EXECUTIVE, "Boss")]
        assert formulas.find_executive(roster).id == "x"

    def test_role_wins_over_title(self):
        roster = [person("t", Role.MANAGER, "CIO"), person("x", Role.EXECUTIVE, "Boss")]
        assert formulas.find_executive(roster, "CIO").id == "x"

    def test_title_fallback(self):
        roster = [person("a"), person("t", Role.MANAGER, "CIO")]
        assert formulas.find_executive(roster, "CIO").id == "t"

    def test_none(self):
        assert formulas.find_executive([person("a")], "CIO") is None
        assert formulas.find_executive([]) is None

    def test_first_executive(self):
        roster = [person("x1", Role.EXECUTIVE), person("x2", Role.EXECUTIVE)]
        assert formulas.find_executive(roster).id == "x1"


class TestTally:
    def test_counts_every_pick(self):
        ballots = [Ballot("v1", ("a", "b")), Ballot("v2", ("b",))]
        assert formulas.tally(ballots) == {"a": 1, "b": 2}

    def test_duplicates_count_twice(self):
        assert formulas.tally([Ballot("v1", ("a", "a"))]) == {"a": 2}

    def test_first_seen_order(self):
        ballots = [Ballot("v1", ("c", "a")), Ballot("v2", ("b", "a"))]
        assert list(formulas.tally(ballots)) == ["c", "a", "b"]

    def test_empty(self):
        assert formulas.tally([]) == {}
        assert formulas.tally([Ballot("v1")]) == {}


class TestRank:
    def test_descending(self):
        assert formulas.rank({"a": 1, "b": 3, "c": 2}) == [("b", 3), ("c", 2), ("a", 1)]

    def test_ties_keep_order(self):
        assert formulas.rank({"c": 2, "a": 2, "b": 5}) == [("b", 5), ("c", 2), ("a", 2)]


class TestDistinctVoters:
    def test_counts_each_voter_once(self):
        ballots = [Ballot("v1", ("a", "a")), Ballot("v2", ("a",)), Ballot("v3", ("b",))]
        assert formulas.distinct_voters(ballots, "a") == {"v1", "v2"}


class TestBaseDays:
    def test_table(self):
        assert formulas.base_days(0, False) == 0
        assert formulas.base_days(1, True) == 0
        assert formulas.base_days(2, False) == 1
        assert formulas.base_days(2, True) == 1
        assert formulas.base_days(3, False) == 2
        assert formulas.base_days(3, True) == 3
        assert formulas.base_days(5, True) == 3


class TestTotalPicks:
    def test_sum(self):
        assert formulas.total_picks([Ballot("v1", ("a", "b")), Ballot("v2", ("a",)), Ballot("v3")]) == 3
