"""Tests for the result engine."""

import pytest

from app.models.core import Person, Role, Team
from app.models.voting import Ballot, Nomination, ResultOptions
from app.services.voting import ResultEngine
from helpers.random_picker import SystemRandomPicker

ROSTER = [
    Person("m1", "Manager One", Role.MANAGER, "Head of Dev", Team.DEVELOPMENT),
    Person("m2", "Manager Two", Role.MANAGER, "Head of Infra", Team.OPERATIONS),
    Person("m3", "Manager Three", Role.MANAGER, "PO", Team.GTI),
    Person("x", "The Executive", Role.EXECUTIVE, "CIO", Team.GTI),
] + [Person(f"c{i}", f"Candidate {i}", Role.MEMBER, "Dev", Team.DEVELOPMENT) for i in range(1, 6)]

NOMINATIONS = [Nomination(f"n{i}", f"c{i}", "p1", "Great work", "m1") for i in range(1, 6)]

PLAIN = ResultOptions(discard_one_random_ballot=False, enable_executive_bonus=False)
DISCARD = ResultOptions(discard_one_random_ballot=True, enable_executive_bonus=False)
BONUS = ResultOptions(discard_one_random_ballot=False, enable_executive_bonus=True)

# c1: 3 managers, c2: 2 managers + executive, c3: 2 voters, c4: 1 voter
MIXED = (
    Ballot("m1", ("c1", "c2", "c3")),
    Ballot("m2", ("c1", "c2", "c3")),
    Ballot("m3", ("c1", "c4")),
    Ballot("x", ("c2",)),
)


def rows_by_id(results):
    return {r.candidate_id: r for r in results.rows}


class TestTally:
    def test_total_votes_equals_total_picks(self, picker):
        results = ResultEngine(picker).compute(NOMINATIONS, MIXED, ROSTER, PLAIN)
        assert sum(r.votes for r in results.rows) == sum(len(b.picks) for b in MIXED)
        assert picker.calls == []

    def test_sorted_descending(self, picker):
        results = ResultEngine(picker).compute(NOMINATIONS, MIXED, ROSTER, PLAIN)
        votes = [r.votes for r in results.rows]
        assert votes == sorted(votes, reverse=True)
        assert all(v >= 0 for v in votes)

    def test_ties_keep_first_seen_order(self, picker):
        ballots = (Ballot("m1", ("c3", "c2")), Ballot("m2", ("c1", "c2")))
        results = ResultEngine(picker).compute([], ballots, ROSTER, PLAIN)
        assert [r.candidate_id for r in results.rows] == ["c2", "c3", "c1"]

    def test_duplicate_picks_count_twice(self, picker):
        results = ResultEngine(picker).compute([], (Ballot("m1", ("c1", "c1")),), ROSTER, PLAIN)
        row = results.rows[0]
        assert (row.candidate_id, row.votes, row.days) == ("c1", 2, 0)

    def test_only_candidates_with_votes(self, picker):
        results = ResultEngine(picker).compute(NOMINATIONS, (Ballot("m1", ("c5",)),), ROSTER, PLAIN)
        assert [r.candidate_id for r in results.rows] == ["c5"]

    def test_empty_inputs(self, picker):
        results = ResultEngine(picker).compute([], [], [], PLAIN)
        assert results.rows == ()
        assert results.discarded_voter_id is None

    def test_empty_ballots(self, picker):
        ballots = (Ballot("m1"), Ballot("m2"))
        assert ResultEngine(picker).compute([], ballots, ROSTER, PLAIN).rows == ()

    def test_dangling_ids(self, picker):
        results = ResultEngine(picker).compute([], (Ballot("ghost-voter", ("ghost",)),), ROSTER, PLAIN)
        assert results.rows[0].candidate_id == "ghost"


class TestBaseDays:
    def test_distinct_voter_table(self, picker):
        rows = rows_by_id(ResultEngine(picker).compute(NOMINATIONS, MIXED, ROSTER, PLAIN))
        assert rows["c1"].days == 2  # three managers
        assert rows["c2"].days == 3  # executive among three
        assert rows["c3"].days == 1  # two voters
        assert rows["c4"].days == 0  # outside top three

    def test_only_top_three_earn_days(self, picker):
        ballots = tuple(Ballot(v, ("c1", "c2", "c3")) for v in ("m1", "m2", "m3")) + (
            Ballot("x", ("c4",)),
            Ballot("m1", ("c4",)),
        )
        results = ResultEngine(picker).compute([], ballots, ROSTER, PLAIN)
        assert [r.candidate_id for r in results.rows] == ["c1", "c2", "c3", "c4"]
        assert results.rows[3].votes == 2
        assert results.rows[3].days == 0

    def test_no_executive(self, picker):
        roster = [p for p in ROSTER if p.role is not Role.EXECUTIVE]
        results = ResultEngine(picker, executive_title=None).compute([], MIXED, roster, BONUS)
        assert rows_by_id(results)["c2"].days == 2
        assert picker.calls == []


class TestDiscard:
    @pytest.mark.parametrize("idx", [0, 1, 2, 3])
    def test_excludes_exactly_one(self, make_picker, idx):
        picker = make_picker(idx)
        results = ResultEngine(picker).compute(NOMINATIONS, MIXED, ROSTER, DISCARD)

        assert picker.calls == [(0, 3)]
        assert results.discarded_voter_id == MIXED[idx].voter_id
        expected = sum(len(b.picks) for i, b in enumerate(MIXED) if i != idx)
        assert sum(r.votes for r in results.rows) == expected

    def test_discarded_ballot_not_counted_for_days(self, make_picker):
        results = ResultEngine(make_picker(3)).compute(NOMINATIONS, MIXED, ROSTER, DISCARD)
        assert rows_by_id(results)["c2"].days == 1

    def test_no_ballots(self, picker):
        results = ResultEngine(picker).compute(NOMINATIONS, [], ROSTER, DISCARD)
        assert results.discarded_voter_id is None
        assert picker.calls == []

    def test_real_picker_always_discards_one(self):
        engine = ResultEngine(SystemRandomPicker())
        voters = {b.voter_id for b in MIXED}
        for _ in range(20):
            results = engine.compute(NOMINATIONS, MIXED, ROSTER, DISCARD)
            assert results.discarded_voter_id in voters
            kept = [b for b in MIXED if b.voter_id != results.discarded_voter_id]
            assert sum(r.votes for r in results.rows) == sum(len(b.picks) for b in kept)


class TestExecutiveBonus:
    def test_adds_to_executive_picks(self, make_picker):
        picker = make_picker(3)
        rows = rows_by_id(ResultEngine(picker).compute(NOMINATIONS, MIXED, ROSTER, BONUS))
        assert picker.calls == [(1, 3)]
        assert rows["c2"].days == 6
        assert rows["c1"].days == 2
        assert rows["c3"].days == 1

    def test_reaches_outside_top_three(self, make_picker):
        ballots = tuple(Ballot(v, ("c1", "c2", "c3")) for v in ("m1", "m2", "m3")) + (Ballot("x", ("c5",)),)
        results = ResultEngine(make_picker(2)).compute([], ballots, ROSTER, BONUS)
        assert results.rows[3].candidate_id == "c5"
        assert results.rows[3].days == 2
        assert [r.days for r in results.rows[:3]] == [2, 2, 2]

    def test_one_draw_per_distinct_pick(self, make_picker):
        picker = make_picker(1, 1)
        ResultEngine(picker).compute([], (Ballot("x", ("c1", "c1", "c2")),), ROSTER, BONUS)
        assert picker.calls == [(1, 3), (1, 3)]

    def test_skipped_when_executive_discarded(self, make_picker):
        picker = make_picker(3)
        options = ResultOptions(discard_one_random_ballot=True, enable_executive_bonus=True)
        results = ResultEngine(picker).compute(NOMINATIONS, MIXED, ROSTER, options)
        assert results.discarded_voter_id == "x"
        assert picker.calls == [(0, 3)]

    def test_skipped_without_executive_ballot(self, picker):
        ballots = MIXED[:3]
        ResultEngine(picker).compute(NOMINATIONS, ballots, ROSTER, BONUS)
        assert picker.calls == []

    def test_bonus_in_range_with_real_picker(self):
        engine = ResultEngine(SystemRandomPicker())
        base = rows_by_id(engine.compute(NOMINATIONS, MIXED, ROSTER, PLAIN))
        for _ in range(20):
            rows = rows_by_id(engine.compute(NOMINATIONS, MIXED, ROSTER, BONUS))
            assert 1 <= rows["c2"].days - base["c2"].days <= 3
            assert rows["c1"].days == base["c1"].days

    def test_title_fallback_executive(self, make_picker):
        roster = [p for p in ROSTER if p.role is not Role.EXECUTIVE]
        roster.append(Person("x", "Acting CIO", Role.MANAGER, "CIO", Team.GTI))
        rows = rows_by_id(ResultEngine(make_picker(1)).compute([], MIXED, roster, BONUS))
        assert rows["c2"].days == 4


class TestIdempotence:
    def test_same_output_without_randomness(self):
        engine = ResultEngine(SystemRandomPicker())
        first = engine.compute(NOMINATIONS, MIXED, ROSTER, PLAIN)
        second = engine.compute(NOMINATIONS, MIXED, ROSTER, PLAIN)
        assert first == second

    def test_inputs_untouched(self, make_picker):
        ballots = list(MIXED)
        ResultEngine(make_picker(0)).compute(NOMINATIONS, ballots, ROSTER, DISCARD)
        assert ballots == list(MIXED)
