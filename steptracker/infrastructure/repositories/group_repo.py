from typing import List, Optional

from steptracker.domain.keyed_index import KeyedIndex
from steptracker.domain.models import Group

class GroupRepo:
    def __init__(self, index: KeyedIndex[Group, str] = None):
        self.index = index if index is not None else KeyedIndex(lambda grp: grp.group_id)

    def add(self, group: Group) -> bool:
        return self.index.insert(group)

    def get(self, group_id: str) -> Optional[Group]:
        return self.index.search(group_id)

    def exists(self, group_id: str) -> bool:
        return group_id in self.index

    def list_all(self) -> List[Group]:
        return self.index.all_values()

    def list_range(self, start_id: str, end_id: str) -> List[Group]:
        return self.index.range(start_id, end_id)

    def delete(self, group_id: str) -> bool:
        return self.index.remove(group_id)

    def remove_member(self, group_id: str, individual_id: int) -> bool:
        g = self.get(group_id)
        if not g or individual_id not in g.member_ids:
            return False
        g.member_ids.remove(individual_id)
        return True

    def count(self) -> int:
        return self.index.size()
