# steptracker/infrastructure/sample_data.py
"""
Sample data for demos and manual testing.

Creates `count` individuals with deterministic goals and step patterns (names
come from Faker) and five groups G1..G5 covering individuals 1-15. Individuals
16 and up start ungrouped.

Step patterns:
- every 3rd individual meets the goal every day
- every 5th individual (not a multiple of 3) misses it every day
- everyone else alternates above/below the goal
"""
import logging
from typing import List, Optional, Tuple

from faker import Faker

from steptracker.domain.models import Group, Individual
from steptracker.infrastructure.csv_store import CsvSnapshotStore

logger = logging.getLogger(__name__)

SAMPLE_GROUPS = [
    ("G1", "Fitness Fanatics", [1, 2, 3, 4, 5], 35000),
    ("G2", "Step Squad", [6, 7, 8, 9], 30000),
    ("G3", "Trail Blazers", [10, 11, 12], 25000),
    ("G4", "Pace Setters", [13, 14], 20000),
    ("G5", "Solo Stars", [15], 10000),
]


def sample_steps(i: int, daily_goal: int, days: int = 7) -> List[int]:
    steps = []
    for j in range(days):
        if i % 3 == 0:
            s = daily_goal + 100 + j * 50
        elif i % 5 == 0:
            s = daily_goal - 1000 + j * 50
        elif j % 2 == 0:
            s = daily_goal + 200 + j * 50
        else:
            s = daily_goal - 500 + j * 100
        steps.append(s)
    return steps


def build_sample_data(count: int = 20, seed: Optional[int] = None) -> Tuple[List[Individual], List[Group]]:
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)

    individuals = []
    for i in range(1, count + 1):
        goal = 5000 + i * 100
        individuals.append(Individual(
            id=i,
            name=fake.name(),
            age=20 + (i % 30),
            daily_step_goal=goal,
            weekly_steps=sample_steps(i, goal),
        ))

    known = {ind.id for ind in individuals}
    groups = []
    for group_id, name, members, goal in SAMPLE_GROUPS:
        present = [m for m in members if m in known]
        if present:
            groups.append(Group(group_id=group_id, name=name, member_ids=present, goal=goal))
    return individuals, groups


def generate_sample_data(individuals_path, groups_path, count: int = 20, seed: Optional[int] = None) -> bool:
    individuals, groups = build_sample_data(count, seed)
    ok = CsvSnapshotStore(individuals_path, groups_path).save(individuals, groups)
    if ok:
        logger.info(f"Generated sample CSVs '{individuals_path}' and '{groups_path}'")
    return ok
