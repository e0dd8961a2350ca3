"""Session timing and pacing."""

from .phases import InterviewPhase, Urgency, PhaseBand, PacingConfig
from .timing import PacingTracker, PacingStatus

__all__ = [
    "InterviewPhase",
    "Urgency",
    "PhaseBand",
    "PacingConfig",
    "PacingTracker",
    "PacingStatus",
]
