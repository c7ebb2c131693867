# tests/test_reports.py
import pytest

from steptracker.domain.errors import NotFoundError
from steptracker.domain.models import Group

from conftest import person

# -------------------------------
# Top daily achievers
# -------------------------------

def test_top_daily_achievers(tracker):
    ranked = tracker.top_daily_achievers()
    assert [(r.rank, r.individual.id, r.steps) for r in ranked] == [
        (1, 4, 6000),
        (2, 3, 5300),
        (3, 1, 5200),
    ]

def test_top_achievers_excludes_missed_goal(tracker):
    ids = [r.individual.id for r in tracker.top_daily_achievers(10)]
    assert ids == [4, 3, 1, 7, 6]
    assert 2 not in ids and 5 not in ids

def test_top_achievers_example_from_three_people(empty_tracker):
    empty_tracker.seed([
        person(1, 5000, [5200]),
        person(2, 5200, [5100]),
        person(3, 5000, [5300]),
    ], [])
    assert [r.individual.id for r in empty_tracker.top_daily_achievers(3)] == [3, 1]

def test_top_achievers_ties_keep_index_order(empty_tracker):
    empty_tracker.seed([
        person(9, 1000, [4000]),
        person(2, 1000, [4000]),
        person(5, 1000, [4500]),
    ], [])
    assert [r.individual.id for r in empty_tracker.top_daily_achievers(3)] == [5, 2, 9]

def test_top_achievers_empty(empty_tracker):
    assert empty_tracker.top_daily_achievers() == []

# -------------------------------
# Group totals and achievement
# -------------------------------

def test_group_weekly_total_caches_value(tracker):
    g = tracker.get_group("G1")
    assert tracker.group_weekly_total(g) == 70300
    assert g.total_steps == 70300

def test_group_weekly_total_skips_dangling_members(tracker):
    g = Group(group_id="GX", name="Ghosts", member_ids=[1, 99], goal=1000)
    assert tracker.group_weekly_total(g) == 35200

def test_check_group_achievement_achieved(tracker):
    result = tracker.check_group_achievement("G1")
    assert result.achieved is True
    assert result.deficit == 0
    assert result.total_steps == 70300

def test_check_group_achievement_not_achieved(tracker):
    result = tracker.check_group_achievement("G2")
    assert result.achieved is False
    assert result.total_steps == 65300
    assert result.deficit == 4700

def test_check_group_achievement_examples(empty_tracker):
    empty_tracker.seed(
        [person(1, 5000, [18000, 18000]), person(2, 5000, [15000, 15000])],
        [
            Group(group_id="A", name="Over", member_ids=[1], goal=35000),
            Group(group_id="B", name="Under", member_ids=[2], goal=35000),
        ],
    )
    over = empty_tracker.check_group_achievement("A")
    under = empty_tracker.check_group_achievement("B")
    assert (over.achieved, over.deficit) == (True, 0)
    assert (under.achieved, under.deficit) == (False, 5000)

def test_check_group_achievement_missing(tracker):
    with pytest.raises(NotFoundError):
        tracker.check_group_achievement("G99")

# -------------------------------
# Leaderboard and range report
# -------------------------------

def test_leaderboard(tracker):
    board = tracker.leaderboard()
    assert [(r.rank, r.group.group_id, r.total_steps) for r in board] == [
        (1, "G1", 70300),
        (2, "G2", 65300),
        (3, "G3", 7000),
    ]
    assert tracker.get_group("G3").total_steps == 7000

def test_leaderboard_ties_keep_order(empty_tracker):
    empty_tracker.seed(
        [person(1, 100, [500]), person(2, 100, [500])],
        [
            Group(group_id="B", name="b", member_ids=[1], goal=100),
            Group(group_id="A", name="a", member_ids=[2], goal=100),
        ],
    )
    assert [r.group.group_id for r in empty_tracker.leaderboard()] == ["A", "B"]

def test_leaderboard_empty(empty_tracker):
    assert empty_tracker.leaderboard() == []

def test_range_report_orders(tracker):
    tracker.create_group("G4", "Big", [6, 7], 1000)
    report = tracker.range_report("G2", "G4")
    assert [g.group_id for g in report.groups] == ["G2", "G3", "G4"]
    assert [(r.rank, r.group.group_id, r.total_steps) for r in report.ranked] == [
        (1, "G2", 65300),
        (2, "G4", 56000),
        (3, "G3", 7000),
    ]

def test_range_report_is_lexicographic(tracker):
    tracker.create_group("G10", "Ten", [6], 1000)
    report = tracker.range_report("G1", "G2")
    assert [g.group_id for g in report.groups] == ["G1", "G10", "G2"]

def test_range_report_empty(tracker):
    report = tracker.range_report("H1", "H9")
    assert report.groups == []
    assert report.ranked == []

# -------------------------------
# Rewards
# -------------------------------

def test_check_individual_rewards(tracker):
    first = tracker.check_individual_rewards(4)
    assert (first.rank, first.points_earned, first.total_points) == (1, 100, 100)
    third = tracker.check_individual_rewards(1)
    assert (third.rank, third.points_earned) == (3, 50)
    assert tracker.get_individual(1).points == 50

def test_rewards_are_credited_every_call(tracker):
    tracker.check_individual_rewards(3)
    result = tracker.check_individual_rewards(3)
    assert result.points_earned == 75
    assert result.total_points == 150

def test_rewards_outside_top_three(tracker):
    result = tracker.check_individual_rewards(6)
    assert result.rank is None
    assert result.points_earned == 0
    assert tracker.get_individual(6).points == 0

def test_rewards_missing_individual(tracker):
    with pytest.raises(NotFoundError):
        tracker.check_individual_rewards(99)

def test_award_daily_rewards(tracker):
    results = tracker.award_daily_rewards()
    assert [(r.individual_id, r.points_earned) for r in results] == [(4, 100), (3, 75), (1, 50)]
    assert tracker.get_individual(4).points == 100
    assert tracker.get_individual(7).points == 0
