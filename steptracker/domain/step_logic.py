# steptracker/domain/step_logic.py
"""
Pure domain logic for step tracking.

This module contains only pure functions operating on models and plain Python
data. Service-layer code looks entities up in the indexes and calls these
functions with what it found.

Functions included:
- rank_daily_achievers
- weekly_steps_total
- rank_by_total
- reward_for_rank
- suggest_goal

Sorting is always stable, so ties keep the order the caller passed in.
"""
from typing import Iterable, List, Sequence, Tuple

from steptracker.domain.errors import InsufficientDataError
from steptracker.domain.models import (
    GoalSuggestion,
    GoalVerdict,
    Group,
    Individual,
    RankedGroup,
    RankedIndividual,
)


def rank_daily_achievers(individuals: Iterable[Individual], n: int = 3) -> List[RankedIndividual]:
    """
    Rank individuals whose most recent day met their daily goal.
    Highest step count for today first, at most n entries.

    Example:
    >>> a = Individual(id=1, name="A", age=30, daily_step_goal=5000, weekly_steps=[5200])
    >>> b = Individual(id=2, name="B", age=30, daily_step_goal=5200, weekly_steps=[5100])
    >>> [r.individual.id for r in rank_daily_achievers([a, b])]
    [1]
    """
    eligible = [
        ind for ind in individuals
        if ind.weekly_steps and ind.todays_steps >= ind.daily_step_goal
    ]
    eligible.sort(key=lambda ind: ind.todays_steps, reverse=True)
    return [
        RankedIndividual(rank=i, individual=ind, steps=ind.todays_steps)
        for i, ind in enumerate(eligible[:n], start=1)
    ]


def weekly_steps_total(step_lists: Iterable[Sequence[int]]) -> int:
    """
    Sum every recorded day of every member.

    Example:
    >>> weekly_steps_total([[1000, 2000], [500]])
    3500
    """
    return sum(sum(steps) for steps in step_lists)


def rank_by_total(groups_with_totals: Iterable[Tuple[Group, int]]) -> List[RankedGroup]:
    """
    Rank (group, total) pairs by total descending. No truncation.
    """
    ordered = sorted(groups_with_totals, key=lambda gt: gt[1], reverse=True)
    return [
        RankedGroup(rank=i, group=group, total_steps=total)
        for i, (group, total) in enumerate(ordered, start=1)
    ]


def reward_for_rank(rank: int, reward_points: Sequence[int]) -> int:
    """
    Points for a 1-based rank; 0 outside the rewarded places.

    Example:
    >>> reward_for_rank(2, [100, 75, 50])
    75
    >>> reward_for_rank(4, [100, 75, 50])
    0
    """
    if 1 <= rank <= len(reward_points):
        return reward_points[rank - 1]
    return 0


def suggest_goal(individual: Individual, min_days: int = 7) -> GoalSuggestion:
    """
    Suggest a new daily goal from the recorded week.

    - 6+ days achieved and average above 120% of goal: raise by 10%
    - 6+ days achieved otherwise: keep
    - 2 or fewer days achieved and average below 80% of goal: lower by 10%
    - 2 or fewer days achieved otherwise: keep, review the pattern
    - 3 to 5 days achieved: keep, mixed performance

    New goals use round(), so an exact .5 goes to the even neighbour
    (goal 15 raises to 16, goal 25 lowers to 22).

    Advisory only, the individual is not modified.
    Raises InsufficientDataError with fewer than min_days entries.

    Example:
    >>> ind = Individual(id=1, name="A", age=30, daily_step_goal=5000,
    ...                  weekly_steps=[5100, 5200, 5300, 6200, 6500, 6800, 7000])
    >>> suggest_goal(ind).suggested_goal
    5500
    """
    steps = individual.weekly_steps
    goal = individual.daily_step_goal
    if len(steps) < min_days:
        raise InsufficientDataError(
            f"Not enough weekly data for individual {individual.id}: "
            f"need {min_days} days, have {len(steps)}"
        )

    achieved_days = sum(1 for s in steps if s >= goal)
    average = sum(steps) / len(steps)
    suggested = None

    if achieved_days >= 6:
        if average > goal * 1.2:
            suggested = round(goal * 1.1)
            verdict = GoalVerdict.RAISE
            message = (
                "You consistently achieve your daily goal and often exceed it! "
                f"Consider increasing your daily goal to {suggested} steps."
            )
        else:
            verdict = GoalVerdict.KEEP
            message = (
                "You consistently achieve your daily goal. Keep up the great work! "
                f"Current goal of {goal} steps seems appropriate."
            )
    elif achieved_days <= 2:
        if average < goal * 0.8:
            suggested = round(goal * 0.9)
            verdict = GoalVerdict.LOWER
            message = (
                "You are consistently missing your daily goal. "
                f"Consider lowering your daily goal to {suggested} steps to build consistency."
            )
        else:
            verdict = GoalVerdict.REVIEW
            message = (
                "You sometimes miss your daily goal. Review your activity patterns. "
                f"Current goal of {goal} steps might be achievable with slight adjustments."
            )
    else:
        verdict = GoalVerdict.MIXED
        message = (
            f"Your performance is mixed. Current goal of {goal} steps is a good target. "
            "Focus on consistency."
        )

    return GoalSuggestion(
        individual_id=individual.id,
        current_goal=goal,
        suggested_goal=suggested,
        verdict=verdict,
        message=message,
        achieved_days=achieved_days,
        average=average,
    )
