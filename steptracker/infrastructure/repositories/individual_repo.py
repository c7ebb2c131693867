from typing import List, Optional

from steptracker.domain.keyed_index import KeyedIndex
from steptracker.domain.models import Individual

class IndividualRepo:
    def __init__(self, index: KeyedIndex[Individual, int] = None):
        self.index = index if index is not None else KeyedIndex(lambda ind: ind.id)

    def create(self, id: int, name: str, age: int, daily_step_goal: int, weekly_steps: List[int]) -> Individual:
        ind = Individual(
            id=id,
            name=name,
            age=age,
            daily_step_goal=daily_step_goal,
            weekly_steps=list(weekly_steps),
        )
        self.index.insert(ind)
        return ind

    def add(self, individual: Individual) -> bool:
        return self.index.insert(individual)

    def get(self, individual_id: int) -> Optional[Individual]:
        return self.index.search(individual_id)

    def exists(self, individual_id: int) -> bool:
        return individual_id in self.index

    def list_all(self) -> List[Individual]:
        return self.index.all_values()

    def delete(self, individual_id: int) -> bool:
        return self.index.remove(individual_id)

    def update_current_group(self, individual_id: int, group_id: Optional[str]):
        ind = self.get(individual_id)
        if ind:
            ind.group_id = group_id
        return ind

    def count(self) -> int:
        return self.index.size()
