# tests/conftest.py
import pytest

from steptracker.domain.models import Group, Individual
from steptracker.infrastructure.csv_store import CsvSnapshotStore
from steptracker.services.step_tracker import StepTracker


def person(id, goal, steps, name=None):
    return Individual(
        id=id,
        name=name or f"user{id}",
        age=30,
        daily_step_goal=goal,
        weekly_steps=steps,
    )


# Weekly totals:  1 -> 35200, 2 -> 35100, 3 -> 35300, 4 -> 30000,
#                 5 -> 7000,  6 -> 21000, 7 -> 35000
# Today vs goal:  1 5200/5000 yes, 2 5100/5200 no, 3 5300/5000 yes,
#                 4 6000/4000 yes, 5 1000/8000 no, 6 3000/3000 yes, 7 5000/5000 yes
def make_individuals():
    return [
        person(1, 5000, [5000] * 6 + [5200]),
        person(2, 5200, [5000] * 6 + [5100]),
        person(3, 5000, [5000] * 6 + [5300]),
        person(4, 4000, [4000] * 6 + [6000]),
        person(5, 8000, [1000] * 7),
        person(6, 3000, [3000] * 7),
        person(7, 5000, [5000] * 7),
    ]


# G1 total 70300 (goal 70000), G2 65300 (goal 70000), G3 7000 (goal 5000)
def make_groups():
    return [
        Group(group_id="G1", name="Walkers", member_ids=[1, 2], goal=70000),
        Group(group_id="G2", name="Runners", member_ids=[3, 4], goal=70000),
        Group(group_id="G3", name="Solo", member_ids=[5], goal=5000),
    ]


@pytest.fixture
def store(tmp_path):
    return CsvSnapshotStore(tmp_path / "individuals.csv", tmp_path / "groups.csv")


@pytest.fixture
def tracker(store):
    app = StepTracker(store=store, autosave=True, load=False)
    app.seed(make_individuals(), make_groups())
    return app


@pytest.fixture
def empty_tracker(store):
    return StepTracker(store=store, autosave=True, load=False)
