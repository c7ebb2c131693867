# steptracker/infrastructure/csv_store.py
"""
Flat-file snapshots of individuals and groups.

Individuals: ID,Name,Age,DailyStepGoal,WeeklyStepCount1..7
Groups:      GroupID,GroupName,MemberIDs,WeeklyGroupGoal  (member ids ';'-joined)

Every save rewrites both files completely. Points and cached group totals are
not part of the snapshot.
"""
import csv
import logging
from pathlib import Path
from typing import Iterable, List, Tuple

from pydantic import ValidationError

from steptracker.domain.models import Group, Individual

logger = logging.getLogger(__name__)

INDIVIDUAL_HEADER = ["ID", "Name", "Age", "DailyStepGoal"] + [
    f"WeeklyStepCount{i}" for i in range(1, 8)
]
GROUP_HEADER = ["GroupID", "GroupName", "MemberIDs", "WeeklyGroupGoal"]
MEMBER_SEPARATOR = ";"


def parse_individual_row(row: List[str]) -> Individual:
    if len(row) < 5:
        raise ValueError(f"expected at least 5 fields, got {len(row)}")
    return Individual(
        id=int(row[0]),
        name=row[1],
        age=int(row[2]),
        daily_step_goal=int(row[3]),
        weekly_steps=[int(s) for s in row[4:]],
    )


def parse_group_row(row: List[str]) -> Group:
    if len(row) < 4:
        raise ValueError(f"expected 4 fields, got {len(row)}")
    members = [int(m) for m in row[2].split(MEMBER_SEPARATOR) if m.strip()]
    return Group(group_id=row[0], name=row[1], member_ids=members, goal=int(row[3]))


def individual_row(ind: Individual) -> List:
    return [ind.id, ind.name, ind.age, ind.daily_step_goal, *ind.weekly_steps]


def group_row(group: Group) -> List:
    members = MEMBER_SEPARATOR.join(str(m) for m in group.member_ids)
    return [group.group_id, group.name, members, group.goal]


class CsvSnapshotStore:
    def __init__(self, individuals_path, groups_path):
        self.individuals_path = Path(individuals_path)
        self.groups_path = Path(groups_path)

    def _read_rows(self, path: Path, parse, kind: str) -> list:
        if not path.exists():
            logger.warning(f"{kind} CSV file '{path}' not found. Starting with empty {kind} data.")
            return []
        records = []
        try:
            # undecodable bytes are read as U+FFFD
            with path.open(newline="", encoding="utf-8", errors="replace") as fh:
                reader = csv.reader(fh)
                next(reader, None)  # header
                for line_no, row in enumerate(reader, start=2):
                    if not row:
                        continue
                    try:
                        records.append(parse(row))
                    except (ValueError, ValidationError) as e:
                        logger.warning(f"Skipping malformed {kind} row {line_no} in '{path}': {row} ({e})")
        except csv.Error as e:
            logger.warning(f"Stopped reading {kind} CSV file '{path}' early: {e}")
        except OSError as e:
            logger.error(f"Could not read {kind} CSV file '{path}': {e}")
        return records

    def load(self) -> Tuple[List[Individual], List[Group]]:
        individuals = self._read_rows(self.individuals_path, parse_individual_row, "individual")
        groups = self._read_rows(self.groups_path, parse_group_row, "group")
        logger.info(f"Loaded data. Individuals: {len(individuals)}, Groups: {len(groups)}")
        return individuals, groups

    def save(self, individuals: Iterable[Individual], groups: Iterable[Group]) -> bool:
        try:
            with self.individuals_path.open("w", newline="", encoding="utf-8") as fh:
                writer = csv.writer(fh)
                writer.writerow(INDIVIDUAL_HEADER)
                writer.writerows(individual_row(ind) for ind in individuals)
        except OSError as e:
            logger.error(f"Could not write individuals CSV file '{self.individuals_path}': {e}")
            return False

        try:
            with self.groups_path.open("w", newline="", encoding="utf-8") as fh:
                writer = csv.writer(fh)
                writer.writerow(GROUP_HEADER)
                writer.writerows(group_row(g) for g in groups)
        except OSError as e:
            logger.error(f"Could not write groups CSV file '{self.groups_path}': {e}")
            return False

        logger.debug("Data saved to CSV files.")
        return True
