import logging
from typing import Callable, List, Optional

from steptracker.domain.errors import (
    CapacityExceededError,
    DuplicateGroupIdError,
    InvalidMergeError,
    NoValidMembersError,
    NotFoundError,
)
from steptracker.domain.models import MAX_GROUP_MEMBERS, Group
from steptracker.infrastructure.repositories.group_repo import GroupRepo
from steptracker.infrastructure.repositories.individual_repo import IndividualRepo

logger = logging.getLogger(__name__)


class GroupService:
    def __init__(
        self,
        group_repo: GroupRepo = None,
        individual_repo: IndividualRepo = None,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self.group_repo = group_repo or GroupRepo()
        self.individual_repo = individual_repo or IndividualRepo()
        self.on_change = on_change

    def _changed(self):
        if self.on_change:
            self.on_change()

    def get(self, group_id: str) -> Group:
        g = self.group_repo.get(group_id)
        if not g:
            raise NotFoundError(f"Group with ID {group_id} not found")
        return g

    def _attach(self, group: Group):
        self.group_repo.add(group)
        for mid in group.member_ids:
            self.individual_repo.update_current_group(mid, group.group_id)

    def _detach(self, group: Group):
        for mid in group.member_ids:
            ind = self.individual_repo.update_current_group(mid, None)
            if ind:
                logger.info(f"Individual {ind.name} (ID: {mid}) is now un-grouped")
        self.group_repo.delete(group.group_id)

    def create_group(self, group_id: str, name: str, member_ids: List[int], goal: int) -> Group:
        """
        Create a group from existing, ungrouped individuals.

        The size limit applies to the ids as given, before unknown or already
        grouped individuals are skipped. Skips are logged, not raised.
        """
        if self.group_repo.exists(group_id):
            raise DuplicateGroupIdError(f"Group with ID {group_id} already exists")
        if len(member_ids) > MAX_GROUP_MEMBERS:
            raise CapacityExceededError(
                f"A group cannot have more than {MAX_GROUP_MEMBERS} members (got {len(member_ids)})"
            )

        actual_members = []
        for mid in member_ids:
            ind = self.individual_repo.get(mid)
            if not ind:
                logger.warning(f"Individual with ID {mid} not found. Skipping.")
                continue
            if ind.group_id:
                logger.warning(
                    f"Individual {ind.name} (ID: {mid}) already belongs to group {ind.group_id}. Skipping."
                )
                continue
            actual_members.append(mid)

        if not actual_members:
            raise NoValidMembersError(f"No valid members to create group {group_id}")

        g = Group(group_id=group_id, name=name, member_ids=actual_members, goal=goal)
        self._attach(g)
        self._changed()
        logger.info(f"Group '{name}' (ID: {group_id}) created with members {g.member_ids}")
        return g

    def delete_group(self, group_id: str) -> Group:
        """Delete a group; its members stay, un-grouped."""
        g = self.get(group_id)
        self._detach(g)
        self._changed()
        logger.info(f"Group '{g.name}' (ID: {group_id}) deleted")
        return g

    def merge_groups(self, group_id_1: str, group_id_2: str, new_name: str, new_goal: int) -> Group:
        """
        Merge two groups into a new group that reuses group_id_1.

        Both source groups are removed and group_id_2 disappears. The size
        limit applies to the union of both member sets and is checked before
        anything changes.
        """
        if group_id_1 == group_id_2:
            raise InvalidMergeError(f"Cannot merge group {group_id_1} with itself")
        g1 = self.get(group_id_1)
        g2 = self.get(group_id_2)

        merged_ids = sorted(set(g1.member_ids) | set(g2.member_ids))
        if len(merged_ids) > MAX_GROUP_MEMBERS:
            raise CapacityExceededError(
                f"Merging {group_id_1} and {group_id_2} would give {len(merged_ids)} members, "
                f"more than the maximum of {MAX_GROUP_MEMBERS}"
            )
        merged = Group(group_id=group_id_1, name=new_name, member_ids=merged_ids, goal=new_goal)

        self._detach(g1)
        self._detach(g2)
        self._attach(merged)
        self._changed()
        logger.info(
            f"Groups '{g1.name}' and '{g2.name}' merged into '{new_name}' (ID: {group_id_1})"
        )
        return merged
