# steptracker/demo.py
"""
Fixed demonstration run.

Regenerates the sample CSVs, loads them into a StepTracker and exercises every
store and report operation, printing the results.
"""
import logging
from typing import Callable

from steptracker.config.settings import settings
from steptracker.domain.errors import StepTrackerError
from steptracker.infrastructure.sample_data import generate_sample_data
from steptracker.presentation import console
from steptracker.services.step_tracker import StepTracker

logger = logging.getLogger(__name__)


def attempt(action: Callable, *args):
    """Run one tracker operation, reporting business-rule errors instead of raising."""
    try:
        return action(*args)
    except StepTrackerError as e:
        logger.error(f"{action.__name__} failed: {e}")
        return None


def run_demo(individuals_csv: str = None, groups_csv: str = None):
    individuals_csv = individuals_csv or settings.INDIVIDUALS_CSV
    groups_csv = groups_csv or settings.GROUPS_CSV
    generate_sample_data(individuals_csv, groups_csv, seed=settings.SAMPLE_SEED)

    app = StepTracker(individuals_csv, groups_csv)
    print(console.heading("Initial State"))
    print(f"Individuals: {app.individual_repo.count()}")
    print(f"Groups: {app.group_repo.count()}")

    print(console.heading("Add Person"))
    attempt(app.add_person, 21, "NewUser", 28, 5500, [5000, 5600, 5400, 5700, 5300, 5800, 5900])
    attempt(app.add_person, 22, "AnotherUser", 35, 6000, [5500, 5800, 5900, 5700, 5600, 5900, 6100])
    attempt(app.add_person, 21, "DuplicateUser", 20, 4000, [100, 200, 300, 400, 500, 600, 700])

    print(console.heading("Create Group"))
    attempt(app.create_group, "G6", "New Explorers", [16, 17], 20000)
    attempt(app.create_group, "G7", "Mixed Group", [1, 18], 15000)
    attempt(app.create_group, "G8", "Too Many", [19, 20, 21, 22, 1, 2], 40000)

    print(console.format_top_achievers(app.top_daily_achievers()))

    for group_id in ("G1", "G5"):
        result = attempt(app.check_group_achievement, group_id)
        if result:
            print(console.format_achievement(result))

    print(console.format_leaderboard(app.leaderboard()))

    for individual_id in (3, 6, 15):
        result = attempt(app.check_individual_rewards, individual_id)
        if result:
            print(console.format_reward(result))

    print(console.heading("Delete Individual"))
    attempt(app.delete_individual, 1)
    ind = app.get_individual(1)
    print(f"User 1 after deletion: {console.format_individual(ind) if ind else 'Not found'}")
    g1 = app.get_group("G1")
    print(f"Group G1 members after deletion: {g1.member_ids if g1 else 'Group G1 not found'}")

    print(console.heading("Delete Group"))
    attempt(app.delete_group, "G5")
    ind = app.get_individual(15)
    print(f"User 15 after G5 deletion: {console.format_individual(ind) if ind else 'Not found'}")

    print(console.heading("Merge Groups"))
    attempt(app.merge_groups, "G3", "G4", "Merged Titans", 50000)
    for group_id in ("G3", "G4"):
        g = app.get_group(group_id)
        print(f"{group_id} after merge: {console.format_group(g) if g else 'Not found'}")
    for individual_id in (10, 13):
        ind = app.get_individual(individual_id)
        print(f"User {individual_id} group_id after merge: {ind.group_id if ind else 'not found'}")

    report = app.range_report("G1", "G6")
    members = {
        g.group_id: [m for m in (app.get_individual(mid) for mid in g.member_ids) if m]
        for g in report.groups
    }
    print(console.format_range_report(report, members))

    for individual_id in (3, 19, 10, 100):
        suggestion = attempt(app.suggest_goal_update, individual_id)
        if suggestion:
            print(console.format_goal_suggestion(app.get_individual(individual_id).name, suggestion))

    print(console.heading("Final State"))
    print(f"Individuals: {app.individual_repo.count()}")
    print(f"Groups: {app.group_repo.count()}")
    return app


def main():
    logging.basicConfig(level=settings.LOG_LEVEL)
    run_demo()
