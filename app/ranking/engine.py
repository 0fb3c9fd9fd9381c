"""
Unit leaderboard: rank users by how quickly they complete assignments.

Latency of one completion = completed_at - assignment.created_at, in integer
milliseconds. A user's score is the exact average latency over all their
completions in the unit (Fraction, no float drift). Lower is better.

Pure functions over records already loaded by the caller; no database access.
Ties on average latency are broken by ascending user_id so output is stable.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from fractions import Fraction
from typing import Iterable

from app.utils.duration import format_duration

logger = logging.getLogger(__name__)

RECENT_COMPLETIONS_LIMIT = 3

_ONE_MS = timedelta(milliseconds=1)


@dataclass(frozen=True)
class AssignmentRecord:
    id: str
    created_at: datetime
    title: str


@dataclass(frozen=True)
class CompletionRecord:
    user_id: str
    user_name: str
    user_avatar: str | None
    assignment_id: str
    completed_at: datetime


@dataclass(frozen=True)
class RecentCompletion:
    assignment_id: str
    title: str
    completed_at: datetime
    latency_ms: int

    @property
    def completion_time(self) -> str:
        return format_duration(self.latency_ms)


@dataclass
class RankingEntry:
    user_id: str
    name: str
    profile_image_url: str | None
    completed_assignments: int
    total_latency_ms: int
    recent_completions: list[RecentCompletion]
    position: int = 0

    @property
    def average_latency_ms(self) -> Fraction:
        return Fraction(self.total_latency_ms, self.completed_assignments)

    @property
    def average_completion_time(self) -> str:
        return format_duration(self.average_latency_ms)


@dataclass
class _UserAccumulator:
    """Completions of one user, resolved against their assignments."""
    user_id: str
    name: str
    profile_image_url: str | None
    completions: list[RecentCompletion] = field(default_factory=list)
    running_sum_ms: int = 0

    def add(self, assignment: AssignmentRecord, completed_at: datetime) -> None:
        latency_ms = (completed_at - assignment.created_at) // _ONE_MS
        self.completions.append(
            RecentCompletion(
                assignment_id=assignment.id,
                title=assignment.title,
                completed_at=completed_at,
                latency_ms=latency_ms,
            )
        )
        self.running_sum_ms += latency_ms

    def to_entry(self, recent_limit: int) -> RankingEntry:
        recent = sorted(self.completions, key=lambda c: c.completed_at, reverse=True)[:recent_limit]
        return RankingEntry(
            user_id=self.user_id,
            name=self.name,
            profile_image_url=self.profile_image_url,
            completed_assignments=len(self.completions),
            total_latency_ms=self.running_sum_ms,
            recent_completions=recent,
        )


def compute_unit_rankings(
    assignments: Iterable[AssignmentRecord],
    completions: Iterable[CompletionRecord],
    recent_limit: int = RECENT_COMPLETIONS_LIMIT,
) -> list[RankingEntry]:
    """
    Build the leaderboard for one unit.

    `assignments` are all assignments of the unit; `completions` are the
    completions of those assignments joined with user name/avatar.
    Completions pointing at an assignment not in `assignments` are skipped
    and logged. Returns entries sorted by average latency with position 1..N.
    """
    by_id = {a.id: a for a in assignments}
    if not by_id:
        return []

    groups: dict[str, _UserAccumulator] = {}
    dropped = 0
    for c in completions:
        assignment = by_id.get(c.assignment_id)
        if assignment is None:
            dropped += 1
            continue
        acc = groups.get(c.user_id)
        if acc is None:
            acc = _UserAccumulator(user_id=c.user_id, name=c.user_name, profile_image_url=c.user_avatar)
            groups[c.user_id] = acc
        acc.add(assignment, c.completed_at)

    if dropped:
        logger.warning("Skipped %s completion(s) referencing unknown assignments", dropped)

    entries = [acc.to_entry(recent_limit) for acc in groups.values()]
    entries.sort(key=lambda e: (e.average_latency_ms, e.user_id))
    for idx, entry in enumerate(entries):
        entry.position = idx + 1
    return entries


def compute_overall_rankings(
    assignments: Iterable[AssignmentRecord],
    completions: Iterable[CompletionRecord],
    recent_limit: int = RECENT_COMPLETIONS_LIMIT,
) -> list[RankingEntry]:
    """Cross-unit leaderboard: same scoring over every assignment of every unit."""
    return compute_unit_rankings(assignments, completions, recent_limit)
