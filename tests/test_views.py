"""
Tests for the HUD and progress panel views.
"""

from core.views import build_hud_view, build_stats_view
from tests.conftest import make_item, make_state

NOW = 1_700_000_000_000


class TestHudView:

    def test_goal_in_progress(self, state):
        state.meta.daily_xp = 30
        state.meta.total_xp = 130
        hud = build_hud_view(state, NOW)
        assert hud.ring_pct == 38
        assert hud.ring_label == "50 XP to go"
        assert hud.goal_enabled
        assert hud.total_xp == 130
        assert hud.level_name == "A0"
        assert hud.subtitle == "0 learned • 0 mastered"

    def test_goal_complete(self, state):
        state.meta.daily_xp = 90
        assert build_hud_view(state, NOW).ring_label == "Goal complete"

    def test_goal_off(self, state):
        state.meta.daily_goal_xp = 0
        hud = build_hud_view(state, NOW)
        assert hud.ring_pct is None
        assert hud.ring_label == "Daily goal off"
        assert not hud.goal_enabled

    def test_due_count(self):
        state = make_state([make_item(0, reps=1, due_at=NOW - 1), make_item(1)])
        assert build_hud_view(state, NOW).due == 1


class TestStatsView:

    def test_fresh_corpus(self, state):
        stats = build_stats_view(state, NOW)
        assert stats.breakdown_line == "New: 4 — Seen: 0 — Learned: 0 — Mastered: 0"
        assert stats.progress_line == "Progress: 0% learned • 0% mastered"
        assert stats.session_line == "Session XP: 0 / 40"
        assert stats.level_line == "Level: A0 → Next: A1 in 250 learned (0% of target)"
        assert stats.learned_to_go == 250

    def test_session_percent(self, state):
        state.meta.session_xp = 30
        assert build_stats_view(state, NOW).session_pct == 75

    def test_mixed_progress(self):
        state = make_state([
            make_item(0, reps=1, due_at=NOW + 1, correct_streak=1),
            make_item(1, reps=3, due_at=NOW + 1, correct_streak=3),
            make_item(2),
        ])
        stats = build_stats_view(state, NOW)
        assert stats.breakdown_line == "New: 1 — Seen: 0 — Learned: 1 — Mastered: 1"
        assert stats.progress_line == "Progress: 67% learned • 33% mastered"
        assert stats.level_line == "Level: A0 → Next: A1 in 248 learned (1% of target)"
