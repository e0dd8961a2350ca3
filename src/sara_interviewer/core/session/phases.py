"""Interview phase bands and pacing configuration."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class InterviewPhase(str, Enum):
    """Coarse time-based stage of the interview, in session order."""
    INTRODUCTION = "introduction"
    MAIN_QUESTIONS = "main_questions"
    WRAPPING_UP = "wrapping_up"
    CONCLUSION = "conclusion"

    @property
    def order(self) -> int:
        return list(InterviewPhase).index(self)


class Urgency(str, Enum):
    """Pacing severity, paired one to one with a phase."""
    RELAXED = "relaxed"
    NORMAL = "normal"
    ELEVATED = "elevated"
    CRITICAL = "critical"


@dataclass(frozen=True)
class PhaseBand:
    """A progress range (upper bound exclusive) mapped to a phase."""
    phase: InterviewPhase
    urgency: Urgency
    upper_percent: float
    recommendation: str


DEFAULT_BANDS: Tuple[PhaseBand, ...] = (
    PhaseBand(
        phase=InterviewPhase.INTRODUCTION,
        urgency=Urgency.RELAXED,
        upper_percent=15,
        recommendation=(
            "Take time for a warm introduction and confirm audio quality. "
            "You have plenty of time."
        ),
    ),
    PhaseBand(
        phase=InterviewPhase.MAIN_QUESTIONS,
        urgency=Urgency.NORMAL,
        upper_percent=75,
        recommendation=(
            "You're in the main questioning phase. "
            "Aim to cover {questions_remaining} more questions. "
            "Balance depth with breadth."
        ),
    ),
    PhaseBand(
        phase=InterviewPhase.WRAPPING_UP,
        urgency=Urgency.ELEVATED,
        upper_percent=90,
        recommendation=(
            "Time is running short. Focus on remaining key questions. "
            "Limit follow-ups to critical gaps only."
        ),
    ),
    PhaseBand(
        phase=InterviewPhase.CONCLUSION,
        urgency=Urgency.CRITICAL,
        upper_percent=math.inf,
        recommendation=(
            "Interview time is nearly complete. Wrap up current question "
            "and proceed to closing remarks. Thank the candidate and "
            "explain next steps."
        ),
    ),
)


@dataclass(frozen=True)
class PacingConfig:
    """Fixed pacing parameters for one interview format."""
    total_duration_minutes: int = 60
    total_questions: int = 10
    bands: Tuple[PhaseBand, ...] = field(default=DEFAULT_BANDS)

    def __post_init__(self):
        if self.total_duration_minutes <= 0:
            raise ValueError("total_duration_minutes must be positive")
        if self.total_questions <= 0:
            raise ValueError("total_questions must be positive")
        if not self.bands or not math.isinf(self.bands[-1].upper_percent):
            raise ValueError("the last phase band must be open-ended")

    @property
    def minutes_per_question(self) -> float:
        """Nominal time budget for one question, follow-ups included."""
        return self.total_duration_minutes / self.total_questions

    def band_for(self, progress_percent: float) -> PhaseBand:
        """Get the band containing the (unrounded) progress value."""
        for band in self.bands:
            if progress_percent < band.upper_percent:
                return band
        return self.bands[-1]

    def questions_remaining(self, progress_percent: float) -> int:
        """Rough count of questions that still fit in the remaining time."""
        # Each question nominally takes 100 / total_questions percent of the time.
        return math.ceil((100 - progress_percent) * self.total_questions / 100)

    def recommendation_for(
        self,
        band: PhaseBand,
        progress_percent: float
    ) -> Tuple[str, Optional[int]]:
        """Render the band's recommendation; returns (text, questions_remaining)."""
        if band.phase is InterviewPhase.MAIN_QUESTIONS:
            remaining = self.questions_remaining(progress_percent)
            return band.recommendation.format(questions_remaining=remaining), remaining
        return band.recommendation, None
