import logging
from typing import Callable, List, Optional

from steptracker.domain.errors import DuplicateIdError, NotFoundError
from steptracker.domain.models import Individual
from steptracker.infrastructure.repositories.group_repo import GroupRepo
from steptracker.infrastructure.repositories.individual_repo import IndividualRepo

logger = logging.getLogger(__name__)


class IndividualService:
    def __init__(
        self,
        individual_repo: IndividualRepo = None,
        group_repo: GroupRepo = None,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self.individual_repo = individual_repo or IndividualRepo()
        self.group_repo = group_repo or GroupRepo()
        self.on_change = on_change

    def _changed(self):
        if self.on_change:
            self.on_change()

    def get(self, individual_id: int) -> Individual:
        ind = self.individual_repo.get(individual_id)
        if not ind:
            raise NotFoundError(f"Individual with ID {individual_id} not found")
        return ind

    def add_person(self, id: int, name: str, age: int, daily_step_goal: int, weekly_steps: List[int]) -> Individual:
        """
        Add a new, ungrouped individual with zero points.
        Raises DuplicateIdError if the id is taken.
        """
        if self.individual_repo.exists(id):
            raise DuplicateIdError(f"Individual with ID {id} already exists")
        ind = self.individual_repo.create(id, name, age, daily_step_goal, weekly_steps)
        self._changed()
        logger.info(f"Individual {name} (ID: {id}) added")
        return ind

    def delete_individual(self, individual_id: int) -> Individual:
        """
        Delete an individual, removing them from their group first.
        The group is kept even if it ends up empty.
        """
        ind = self.get(individual_id)
        if ind.group_id:
            if self.group_repo.remove_member(ind.group_id, individual_id):
                logger.info(f"Individual {ind.name} removed from group {ind.group_id}")
            ind.group_id = None
        self.individual_repo.delete(individual_id)
        self._changed()
        logger.info(f"Individual {ind.name} (ID: {individual_id}) deleted")
        return ind
