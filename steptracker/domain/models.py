from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from steptracker.config.settings import settings

MAX_GROUP_MEMBERS = settings.GROUP_MAX_MEMBERS


class Individual(BaseModel):
    id: int = Field(frozen=True)
    name: str
    age: int
    daily_step_goal: int = Field(gt=0)
    weekly_steps: List[int] = Field(min_length=1)
    group_id: Optional[str] = None
    points: int = Field(default=0, ge=0)

    @field_validator("weekly_steps")
    @classmethod
    def steps_not_negative(cls, v: List[int]) -> List[int]:
        if any(s < 0 for s in v):
            raise ValueError("step counts cannot be negative")
        return v

    @property
    def todays_steps(self) -> int:
        return self.weekly_steps[-1]

    @property
    def is_grouped(self) -> bool:
        return bool(self.group_id)


class Group(BaseModel):
    group_id: str = Field(frozen=True, min_length=1)
    name: str
    member_ids: List[int] = Field(default_factory=list)
    goal: int = Field(gt=0)
    total_steps: int = 0

    @field_validator("member_ids")
    @classmethod
    def unique_members(cls, v: List[int]) -> List[int]:
        members = sorted(set(v))
        if len(members) > MAX_GROUP_MEMBERS:
            raise ValueError(f"a group cannot have more than {MAX_GROUP_MEMBERS} members")
        return members


# ----------------------------
# Report DTOs
# ----------------------------

class RankedIndividual(BaseModel):
    rank: int
    individual: Individual
    steps: int


class RankedGroup(BaseModel):
    rank: int
    group: Group
    total_steps: int


class AchievementResult(BaseModel):
    group_id: str
    name: str
    goal: int
    total_steps: int
    achieved: bool
    deficit: int = 0


class RangeReport(BaseModel):
    start_id: str
    end_id: str
    groups: List[Group] = Field(default_factory=list)
    ranked: List[RankedGroup] = Field(default_factory=list)


class RewardResult(BaseModel):
    individual_id: int
    name: str
    rank: Optional[int] = None
    points_earned: int = 0
    total_points: int


class GoalVerdict(str, Enum):
    RAISE = "raise"
    KEEP = "keep"
    LOWER = "lower"
    REVIEW = "review"
    MIXED = "mixed"


class GoalSuggestion(BaseModel):
    individual_id: int
    current_goal: int
    suggested_goal: Optional[int] = None
    verdict: GoalVerdict
    message: str
    achieved_days: int
    average: float
