"""
Plain-data views of the trainer state for the UI.

These functions only read the state; the UI renders what they return.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.motivation import compute_stats, current_level, next_level, percent
from core.schemas import TrainerState


DAILY_GOAL_OFF_LABEL = "Daily goal off"
GOAL_COMPLETE_LABEL = "Goal complete"


@dataclass(frozen=True)
class HudView:
    """Header numbers: level, streak, XP and the daily goal ring."""
    level_name: str
    subtitle: str
    streak: int
    daily_xp: int
    daily_goal_xp: int
    total_xp: int
    due: int
    ring_pct: Optional[int]
    ring_label: str

    @property
    def goal_enabled(self) -> bool:
        return self.ring_pct is not None


@dataclass(frozen=True)
class StatsView:
    """Progress panel: mastery breakdown, session XP and level target."""
    breakdown_line: str
    progress_line: str
    learned_pct: int
    mastered_pct: int
    session_line: str
    session_pct: int
    level_line: str
    level_name: str
    next_level_name: Optional[str]
    learned_to_go: int


def build_hud_view(state: TrainerState, now_ms: int) -> HudView:
    """
    Build the header view.

    Daily XP is shown as stored; callers reset it for a new day first.
    """
    meta = state.meta
    stats = compute_stats(state, now_ms)
    level = current_level(stats.learned_total)

    goal = meta.daily_goal_xp
    if goal > 0:
        ring_pct = percent(meta.daily_xp, goal)
        ring_label = GOAL_COMPLETE_LABEL if ring_pct >= 100 else f"{max(0, goal - meta.daily_xp)} XP to go"
    else:
        ring_pct = None
        ring_label = DAILY_GOAL_OFF_LABEL

    return HudView(
        level_name=level.name,
        subtitle=f"{stats.learned_total} learned • {stats.mastered_count} mastered",
        streak=meta.streak,
        daily_xp=meta.daily_xp,
        daily_goal_xp=goal,
        total_xp=meta.total_xp,
        due=stats.due,
        ring_pct=ring_pct,
        ring_label=ring_label,
    )


def build_stats_view(state: TrainerState, now_ms: int) -> StatsView:
    meta = state.meta
    stats = compute_stats(state, now_ms)
    level = current_level(stats.learned_total)
    upcoming = next_level(stats.learned_total)

    if upcoming is None:
        level_line = f"Level: {level.name} (max) — Learned: {stats.learned_total}"
        to_go = 0
    else:
        to_go = upcoming.learned - stats.learned_total
        level_line = (
            f"Level: {level.name} → Next: {upcoming.name} in {to_go} learned "
            f"({percent(stats.learned_total, upcoming.learned)}% of target)"
        )

    return StatsView(
        breakdown_line=(
            f"New: {stats.new_count} — Seen: {stats.seen_count} — "
            f"Learned: {stats.learned_count} — Mastered: {stats.mastered_count}"
        ),
        progress_line=f"Progress: {stats.learned_pct}% learned • {stats.mastered_pct}% mastered",
        learned_pct=stats.learned_pct,
        mastered_pct=stats.mastered_pct,
        session_line=f"Session XP: {meta.session_xp} / {meta.session_goal_xp}",
        session_pct=percent(meta.session_xp, meta.session_goal_xp),
        level_line=level_line,
        level_name=level.name,
        next_level_name=upcoming.name if upcoming else None,
        learned_to_go=to_go,
    )
