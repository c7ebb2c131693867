# steptracker/presentation/console.py
"""Plain-text rendering of models and report results for the console."""
from typing import List

from steptracker.domain.models import (
    AchievementResult,
    GoalSuggestion,
    Group,
    Individual,
    RangeReport,
    RankedGroup,
    RankedIndividual,
    RewardResult,
)


def heading(title: str) -> str:
    return f"\n--- {title} ---"


def format_individual(ind: Individual) -> str:
    steps = ",".join(str(s) for s in ind.weekly_steps)
    return (
        f"Individual(ID={ind.id}, Name={ind.name}, Age={ind.age}, DailyGoal={ind.daily_step_goal}, "
        f"WeeklySteps=[{steps}], Group={ind.group_id or 'None'}, Points={ind.points})"
    )


def format_group(group: Group) -> str:
    members = ",".join(str(m) for m in group.member_ids)
    return (
        f"Group(ID={group.group_id}, Name={group.name}, Members=[{members}], "
        f"Goal={group.goal}, TotalSteps={group.total_steps})"
    )


def format_top_achievers(ranked: List[RankedIndividual]) -> str:
    lines = [heading("Top Individuals (Daily Goal Achievers)")]
    if not ranked:
        lines.append("No individuals met their daily goal today.")
    for r in ranked:
        lines.append(f"Rank {r.rank}: {r.individual.name} (ID: {r.individual.id}) - Steps: {r.steps}")
    return "\n".join(lines)


def format_achievement(result: AchievementResult) -> str:
    lines = [
        heading(f"Group Achievement for '{result.name}' (ID: {result.group_id})"),
        f"Weekly Group Goal: {result.goal} steps",
        f"Total Steps Completed by Group: {result.total_steps} steps",
    ]
    if result.achieved:
        lines.append(f"Result: Congratulations! Group '{result.name}' has achieved its weekly goal!")
    else:
        lines.append(
            f"Result: Group '{result.name}' has not yet achieved its weekly goal. "
            f"Needs {result.deficit} more steps."
        )
    return "\n".join(lines)


def format_leaderboard(ranked: List[RankedGroup]) -> str:
    lines = [heading("Group Leaderboard")]
    if not ranked:
        lines.append("No groups available to generate a leaderboard.")
    for r in ranked:
        lines.append(
            f"Rank {r.rank}: Group '{r.group.name}' (ID: {r.group.group_id}) - "
            f"Total Weekly Steps: {r.total_steps}"
        )
    return "\n".join(lines)


def format_reward(result: RewardResult) -> str:
    lines = [heading(f"Rewards for {result.name} (ID: {result.individual_id})")]
    if result.rank is None:
        lines.append("This individual is not in the top 3 daily goal achievers today.")
    else:
        lines.append(
            f"Congratulations! You are Rank {result.rank} and earned {result.points_earned} points!"
        )
    lines.append(f"Total points: {result.total_points}")
    return "\n".join(lines)


def format_range_report(report: RangeReport, members: dict) -> str:
    """
    members maps group_id to the member individuals to list for that group.
    """
    lines = [heading(f"Group Information in Range: {report.start_id} to {report.end_id}")]
    if not report.groups:
        lines.append("No groups found in the specified range.")
        return "\n".join(lines)
    lines.append("Groups: " + ", ".join(g.group_id for g in report.groups))
    for r in report.ranked:
        names = [f"{m.name} (ID: {m.id})" for m in members.get(r.group.group_id, [])]
        lines += [
            f"\nRank {r.rank} in Range:",
            f"  Group ID: {r.group.group_id}",
            f"  Group Name: {r.group.name}",
            f"  Weekly Group Goal: {r.group.goal}",
            f"  Total Weekly Steps: {r.total_steps}",
            f"  Members: {', '.join(names) if names else 'None'}",
        ]
    return "\n".join(lines)


def format_goal_suggestion(name: str, suggestion: GoalSuggestion) -> str:
    lines = [
        heading(f"Goal Suggestion for {name} (ID: {suggestion.individual_id})"),
        f"Current Daily Goal: {suggestion.current_goal}",
        suggestion.message,
    ]
    if suggestion.suggested_goal is not None:
        lines.append(f"Suggested New Daily Goal: {suggestion.suggested_goal}")
    return "\n".join(lines)
