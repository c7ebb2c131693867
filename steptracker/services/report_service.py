# steptracker/services/report_service.py
"""
Rankings, group achievement, rewards and goal suggestions.

Reads both repositories and writes back only derived fields: cached group
totals and reward points.
"""
import logging
from typing import Callable, List, Optional

from steptracker.config.settings import settings
from steptracker.domain import step_logic as domain
from steptracker.domain.errors import NotFoundError
from steptracker.domain.models import (
    AchievementResult,
    GoalSuggestion,
    Group,
    RangeReport,
    RankedGroup,
    RankedIndividual,
    RewardResult,
)
from steptracker.infrastructure.repositories.group_repo import GroupRepo
from steptracker.infrastructure.repositories.individual_repo import IndividualRepo

logger = logging.getLogger(__name__)


class ReportService:
    def __init__(
        self,
        individual_repo: IndividualRepo = None,
        group_repo: GroupRepo = None,
        on_change: Optional[Callable[[], None]] = None,
        reward_points: Optional[List[int]] = None,
    ):
        self.individual_repo = individual_repo or IndividualRepo()
        self.group_repo = group_repo or GroupRepo()
        self.on_change = on_change
        self.reward_points = reward_points or list(settings.REWARD_POINTS)

    def _changed(self):
        if self.on_change:
            self.on_change()

    # ----------------------------
    # Individuals
    # ----------------------------

    def top_daily_achievers(self, n: Optional[int] = None) -> List[RankedIndividual]:
        """Individuals who met today's goal, most steps today first."""
        n = settings.TOP_ACHIEVERS if n is None else n
        return domain.rank_daily_achievers(self.individual_repo.list_all(), n)

    def check_individual_rewards(self, individual_id: int) -> RewardResult:
        """
        Credit points if the individual is currently in the rewarded places.
        Every call credits again.
        """
        ind = self.individual_repo.get(individual_id)
        if not ind:
            raise NotFoundError(f"Individual with ID {individual_id} not found")

        top = self.top_daily_achievers(len(self.reward_points))
        rank = next((r.rank for r in top if r.individual.id == individual_id), None)
        if rank is None:
            return RewardResult(individual_id=ind.id, name=ind.name, total_points=ind.points)

        earned = domain.reward_for_rank(rank, self.reward_points)
        ind.points += earned
        self._changed()
        logger.info(f"Individual {ind.name} (ID: {ind.id}) ranked {rank}, earned {earned} points")
        return RewardResult(
            individual_id=ind.id,
            name=ind.name,
            rank=rank,
            points_earned=earned,
            total_points=ind.points,
        )

    def award_daily_rewards(self) -> List[RewardResult]:
        """Credit every individual in the rewarded places at once."""
        results = []
        for ranked in self.top_daily_achievers(len(self.reward_points)):
            ind = ranked.individual
            earned = domain.reward_for_rank(ranked.rank, self.reward_points)
            ind.points += earned
            results.append(RewardResult(
                individual_id=ind.id,
                name=ind.name,
                rank=ranked.rank,
                points_earned=earned,
                total_points=ind.points,
            ))
        if results:
            self._changed()
        return results

    def suggest_goal_update(self, individual_id: int) -> GoalSuggestion:
        ind = self.individual_repo.get(individual_id)
        if not ind:
            raise NotFoundError(f"Individual with ID {individual_id} not found")
        return domain.suggest_goal(ind, settings.GOAL_HISTORY_DAYS)

    # ----------------------------
    # Groups
    # ----------------------------

    def group_weekly_total(self, group: Group) -> int:
        """Sum of all recorded steps of resolvable members. Cached on the group."""
        members = (self.individual_repo.get(mid) for mid in group.member_ids)
        total = domain.weekly_steps_total(m.weekly_steps for m in members if m)
        group.total_steps = total
        return total

    def check_group_achievement(self, group_id: str) -> AchievementResult:
        g = self.group_repo.get(group_id)
        if not g:
            raise NotFoundError(f"Group with ID {group_id} not found")
        total = self.group_weekly_total(g)
        self._changed()
        achieved = total >= g.goal
        return AchievementResult(
            group_id=g.group_id,
            name=g.name,
            goal=g.goal,
            total_steps=total,
            achieved=achieved,
            deficit=0 if achieved else g.goal - total,
        )

    def leaderboard(self, groups: Optional[List[Group]] = None) -> List[RankedGroup]:
        """All groups ranked by weekly total, highest first."""
        if groups is None:
            groups = self.group_repo.list_all()
        return domain.rank_by_total((g, self.group_weekly_total(g)) for g in groups)

    def range_report(self, start_id: str, end_id: str) -> RangeReport:
        """
        Groups whose id lies in [start_id, end_id], listed by id, plus their
        rank by weekly total within that range.
        """
        groups = sorted(self.group_repo.list_range(start_id, end_id), key=lambda g: g.group_id)
        return RangeReport(
            start_id=start_id,
            end_id=end_id,
            groups=groups,
            ranked=self.leaderboard(groups),
        )
