"""
Lesson Session - request/response controller for one study session.

Owns the trainer state for the UI: starts lessons, routes tile clicks to the
current exercise, grades submissions and applies their effects (scheduling,
XP, streak, level), and saves the whole document after every mutation.

Flow per exercise:
1. start() picks the lesson and prepares the first exercise
2. choose_tile() / remove_tile() / undo() / clear() edit the answer line
3. submit() grades and returns a SubmissionOutcome for the UI to render
4. advance() moves on (or reports the lesson complete)
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Literal, Optional

from core.clock import Clock, SystemClock
from core.corpus import ImportSummary, import_text
from core.exercise import Exercise
from core.grader import GradeResult, grade_order_flexible
from core.motivation import (
    StreakChange,
    award_xp,
    bump_streak_if_needed,
    compute_stats,
    daily_goal_just_completed,
    mastery_state,
    maybe_level_up,
    reset_daily_if_needed,
    set_daily_goal,
    start_session,
    xp_for_quality,
)
from core.schemas import Item, MasteryState, TrainerState, default_state
from core.session_builders import choose_lesson_items
from core.session_requests import LessonRequest, normalize_lesson_request
from core.srs import Quality, process_review
from core.store import StateStore, load_state_or_default
from core.views import HudView, StatsView, build_hud_view, build_stats_view
from core.word_bank import global_distractor_pool

logger = logging.getLogger(__name__)

Tone = Literal["good", "warn", "bad"]
Sound = Literal["good", "bad", "level"]

STATUS_NO_ITEMS = "No items available. Import sentences first."
STATUS_COMPLETE = "Lesson complete."
STATUS_RESET = "Progress reset."
TOAST_DAILY_GOAL = "✨ Daily goal complete!"


@dataclass(frozen=True)
class SubmissionOutcome:
    """
    Everything the UI needs after a submission.

    feedback_lines are shown in order; toasts are transient pop-ups;
    speak_text (when set) should be read aloud; sound names the cue to play.
    """
    grade: GradeResult
    xp_earned: int
    feedback_lines: list[str]
    tone: Tone
    sound: Sound
    speak_text: Optional[str] = None
    streak_change: Optional[StreakChange] = None
    level_up: Optional[str] = None
    became_learned: bool = False
    became_mastered: bool = False
    daily_goal_completed: bool = False
    toasts: list[str] = field(default_factory=list)

    @property
    def feedback_text(self) -> str:
        return "\n".join(self.feedback_lines)


def goal_message(goal: int) -> str:
    if goal == 0:
        return "Daily goal turned off."
    return f"Daily goal set to {goal} XP."


class LessonSession:
    """
    One user's study session over a persisted TrainerState.

    Args:
        store: Where the state document is loaded from and saved to
        clock: Time source (defaults to SystemClock)
        rng: Random source for lesson order and word banks
        state: Preloaded state (loaded from store when omitted)
    """

    def __init__(
        self,
        store: StateStore,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
        state: Optional[TrainerState] = None
    ):
        self.store = store
        self.clock = clock or SystemClock()
        self.rng = rng or random.Random()
        self.state = state if state is not None else load_state_or_default(store)

        self.items: list[Item] = []
        self.index = 0
        self.exercise: Optional[Exercise] = None
        self.last_outcome: Optional[SubmissionOutcome] = None
        self.status = ""

    # ---- Persistence ----

    def save(self) -> None:
        self.store.save(self.state)

    # ---- Lesson lifecycle ----

    @property
    def current(self) -> Optional[Exercise]:
        return self.exercise

    @property
    def position(self) -> int:
        """1-based position of the current exercise (0 when idle)."""
        return self.index + 1 if self.exercise is not None else 0

    @property
    def total(self) -> int:
        return len(self.items)

    def start(self, request: Optional[LessonRequest] = None) -> int:
        """
        Start a new lesson.

        Resets the session XP counters and saves. With nothing to study the
        session stays idle and nothing is saved.

        Returns:
            Number of items in the lesson (0 if none are available)
        """
        request = normalize_lesson_request(request)
        chosen = choose_lesson_items(
            self.state,
            request.lesson_size,
            request.new_per_lesson,
            self.clock.now_ms(),
            self.rng,
        )
        if not chosen:
            self.items = []
            self.exercise = None
            self.status = STATUS_NO_ITEMS
            return 0

        start_session(self.state.meta)
        self.save()

        self.items = chosen
        self.index = 0
        self.status = f"Lesson items: {len(chosen)}"
        self._load_current()
        logger.info("Lesson started with %d items", len(chosen))
        return len(chosen)

    def _load_current(self) -> None:
        item = self.items[self.index]
        self.exercise = Exercise.for_item(item, global_distractor_pool(self.state), self.rng)
        self.last_outcome = None

    def advance(self) -> bool:
        """
        Move to the next exercise.

        Returns:
            False when the lesson is complete (the session becomes idle)
        """
        if self.index + 1 >= len(self.items):
            self.exercise = None
            self.status = STATUS_COMPLETE
            return False
        self.index += 1
        self._load_current()
        return True

    # ---- Answer line ----

    def _require_exercise(self) -> Exercise:
        if self.exercise is None:
            raise RuntimeError("No active exercise; start a lesson first")
        return self.exercise

    def choose_tile(self, bank_index: int) -> bool:
        return self._require_exercise().choose_index(bank_index)

    def remove_tile(self, index: int) -> Optional[str]:
        return self._require_exercise().remove_at(index)

    def undo(self) -> Optional[str]:
        return self._require_exercise().undo()

    def clear(self) -> None:
        self._require_exercise().clear()

    def speak_text(self) -> Optional[str]:
        """Canonical sentence of the current exercise, for replaying audio."""
        return self.exercise.canonical_text if self.exercise else None

    # ---- Grading ----

    def submit(self) -> SubmissionOutcome:
        """
        Grade the current answer and apply its effects.

        A failed grade schedules the item as a miss and awards nothing.
        A passing grade awards XP, counts the study day, schedules the item
        and may level up. Submitting twice returns the first outcome.

        Raises:
            RuntimeError: if no exercise is active
        """
        exercise = self._require_exercise()
        if exercise.submitted and self.last_outcome is not None:
            return self.last_outcome
        exercise.submitted = True

        item = exercise.item
        meta = self.state.meta
        now_ms = self.clock.now_ms()
        today = self.clock.today()
        before_mastery = mastery_state(item.progress)

        result = grade_order_flexible(exercise.chosen, item.target_tokens)

        if not result.ok:
            process_review(item.progress, result.schedule_quality, now_ms)
            outcome = SubmissionOutcome(
                grade=result,
                xp_earned=0,
                feedback_lines=[
                    f"❌ Incorrect — {result.reason}",
                    f"Correct: {item.target_text}",
                ],
                tone="bad",
                sound="bad",
            )
            self.save()
            self.last_outcome = outcome
            return outcome

        xp_earned = xp_for_quality(result.quality)
        award_xp(meta, xp_earned, today)
        streak_change = bump_streak_if_needed(meta, today)
        process_review(item.progress, result.schedule_quality, now_ms)

        stats = compute_stats(self.state, now_ms)
        level_up = maybe_level_up(meta, stats.learned_total)
        after_mastery = mastery_state(item.progress)

        became_learned = before_mastery != MasteryState.LEARNED and after_mastery == MasteryState.LEARNED
        became_mastered = before_mastery != MasteryState.MASTERED and after_mastery == MasteryState.MASTERED

        lines = [
            f"✅ Correct — {result.note}",
            f"+{xp_earned} XP",
            f"Canonical: {item.target_text}",
        ]
        if became_learned:
            lines.append("✨ Sentence moved to Learned.")
        if became_mastered:
            lines.append("🏆 Sentence Mastered!")
        if streak_change.changed:
            if streak_change.broke:
                lines.append(f"🔥 Streak restarted: {meta.streak}")
            else:
                lines.append(f"🔥 Streak: {meta.streak}")

        toasts = []
        if level_up:
            toasts.append(f"🎉 Level up — {level_up}!")
        goal_done = daily_goal_just_completed(meta, xp_earned)
        if goal_done:
            toasts.append(TOAST_DAILY_GOAL)

        outcome = SubmissionOutcome(
            grade=result,
            xp_earned=xp_earned,
            feedback_lines=lines,
            tone="warn" if result.quality == Quality.HARD else "good",
            sound="level" if level_up else "good",
            speak_text=item.target_text,
            streak_change=streak_change,
            level_up=level_up,
            became_learned=became_learned,
            became_mastered=became_mastered,
            daily_goal_completed=goal_done,
            toasts=toasts,
        )
        self.save()
        self.last_outcome = outcome
        return outcome

    # ---- Data and settings ----

    def import_corpus(self, text: str) -> ImportSummary:
        """Merge corpus text into the state; saves only when lines were imported."""
        summary = import_text(self.state, text, self.clock.now_ms())
        if summary.ok:
            self.save()
        return summary

    def set_daily_goal(self, value: object) -> str:
        goal = set_daily_goal(self.state.meta, value)
        self.save()
        return goal_message(goal)

    def reset(self) -> str:
        """Forget all progress and the corpus, and end any lesson."""
        self.store.clear()
        self.state = default_state()
        self.items = []
        self.index = 0
        self.exercise = None
        self.last_outcome = None
        self.status = ""
        logger.warning("Trainer state reset")
        return STATUS_RESET

    # ---- Views ----

    def hud(self) -> HudView:
        """Header view; rolls daily XP over to a new day first."""
        reset_daily_if_needed(self.state.meta, self.clock.today())
        return build_hud_view(self.state, self.clock.now_ms())

    def stats(self) -> StatsView:
        return build_stats_view(self.state, self.clock.now_ms())
