# steptracker/services/step_tracker.py
"""
Application facade.

Owns the individual and group indexes, seeds them from the CSV snapshot and
writes the snapshot back after every successful mutation. All cross-entity
changes go through IndividualService and GroupService so a group's member
list and its members' group_id never drift apart.
"""
import logging
from typing import List, Optional

from steptracker.config.settings import settings
from steptracker.domain.models import Group, Individual
from steptracker.infrastructure.csv_store import CsvSnapshotStore
from steptracker.infrastructure.repositories.group_repo import GroupRepo
from steptracker.infrastructure.repositories.individual_repo import IndividualRepo
from steptracker.services.group_service import GroupService
from steptracker.services.individual_service import IndividualService
from steptracker.services.report_service import ReportService

logger = logging.getLogger(__name__)


class StepTracker:
    def __init__(
        self,
        individuals_csv: Optional[str] = None,
        groups_csv: Optional[str] = None,
        store: Optional[CsvSnapshotStore] = None,
        autosave: Optional[bool] = None,
        load: bool = True,
    ):
        self.store = store or CsvSnapshotStore(
            individuals_csv or settings.INDIVIDUALS_CSV,
            groups_csv or settings.GROUPS_CSV,
        )
        self.autosave = settings.AUTOSAVE if autosave is None else autosave

        self.individual_repo = IndividualRepo()
        self.group_repo = GroupRepo()
        self.individuals = IndividualService(self.individual_repo, self.group_repo, self._autosave)
        self.groups = GroupService(self.group_repo, self.individual_repo, self._autosave)
        self.reports = ReportService(self.individual_repo, self.group_repo, self._autosave)

        if load:
            self.load()

    # ----------------------------
    # Persistence
    # ----------------------------

    def _autosave(self):
        if self.autosave:
            self.save()

    def save(self) -> bool:
        return self.store.save(self.individual_repo.list_all(), self.group_repo.list_all())

    def load(self):
        individuals, groups = self.store.load()
        self.seed(individuals, groups)

    def seed(self, individuals: List[Individual], groups: List[Group]):
        """
        Fill the indexes from loaded records.

        Group members that are unknown or already claimed by an earlier group
        are dropped so every member's group_id points back at its group.
        """
        for ind in individuals:
            ind.group_id = None
            if not self.individual_repo.add(ind):
                logger.warning(f"Duplicate individual ID {ind.id} in snapshot. Skipping.")

        for g in groups:
            if self.group_repo.exists(g.group_id):
                logger.warning(f"Duplicate group ID {g.group_id} in snapshot. Skipping.")
                continue
            members = []
            for mid in g.member_ids:
                ind = self.individual_repo.get(mid)
                if not ind:
                    logger.warning(f"Group {g.group_id}: member {mid} not found. Dropping.")
                elif ind.group_id:
                    logger.warning(
                        f"Group {g.group_id}: member {mid} already in group {ind.group_id}. Dropping."
                    )
                else:
                    members.append(mid)
            g.member_ids = members
            self.group_repo.add(g)
            for mid in members:
                self.individual_repo.update_current_group(mid, g.group_id)

    # ----------------------------
    # Store operations
    # ----------------------------

    def add_person(self, id: int, name: str, age: int, daily_step_goal: int, weekly_steps: List[int]) -> Individual:
        return self.individuals.add_person(id, name, age, daily_step_goal, weekly_steps)

    def delete_individual(self, individual_id: int) -> Individual:
        return self.individuals.delete_individual(individual_id)

    def create_group(self, group_id: str, name: str, member_ids: List[int], goal: int) -> Group:
        return self.groups.create_group(group_id, name, member_ids, goal)

    def delete_group(self, group_id: str) -> Group:
        return self.groups.delete_group(group_id)

    def merge_groups(self, group_id_1: str, group_id_2: str, new_name: str, new_goal: int) -> Group:
        return self.groups.merge_groups(group_id_1, group_id_2, new_name, new_goal)

    def get_individual(self, individual_id: int) -> Optional[Individual]:
        return self.individual_repo.get(individual_id)

    def get_group(self, group_id: str) -> Optional[Group]:
        return self.group_repo.get(group_id)

    # ----------------------------
    # Reports
    # ----------------------------

    def top_daily_achievers(self, n: Optional[int] = None):
        return self.reports.top_daily_achievers(n)

    def group_weekly_total(self, group: Group) -> int:
        return self.reports.group_weekly_total(group)

    def check_group_achievement(self, group_id: str):
        return self.reports.check_group_achievement(group_id)

    def leaderboard(self, groups: Optional[List[Group]] = None):
        return self.reports.leaderboard(groups)

    def range_report(self, start_id: str, end_id: str):
        return self.reports.range_report(start_id, end_id)

    def check_individual_rewards(self, individual_id: int):
        return self.reports.check_individual_rewards(individual_id)

    def award_daily_rewards(self):
        return self.reports.award_daily_rewards()

    def suggest_goal_update(self, individual_id: int):
        return self.reports.suggest_goal_update(individual_id)
