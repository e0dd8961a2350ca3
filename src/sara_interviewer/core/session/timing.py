"""Session pacing: elapsed time, phase and recommendation tracking."""

import json
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Callable, Dict, Any

from .phases import InterviewPhase, Urgency, PacingConfig

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """ISO-8601 with millisecond precision and a trailing Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _round_half_up(value: float) -> int:
    # Non-negative input only; round() would round halves to even.
    return int(value + 0.5)


def _whole_minutes_between(start: datetime, now: datetime) -> int:
    # Clamped at 0 when the clock reads earlier than the start instant.
    return max(0, int((now - start).total_seconds() // 60))


@dataclass(frozen=True)
class PacingStatus:
    """Snapshot of interview timing at a single instant."""
    elapsed_minutes: int
    remaining_minutes: int
    progress_percent: int
    phase: InterviewPhase
    urgency: Urgency
    recommendation: str
    current_time: datetime
    questions_remaining: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Flat record as handed to the LLM and published to the room."""
        return {
            "elapsedMinutes": self.elapsed_minutes,
            "remainingMinutes": self.remaining_minutes,
            "progressPercent": self.progress_percent,
            "phase": self.phase.value,
            "urgency": self.urgency.value,
            "recommendation": self.recommendation,
            "currentTime": format_timestamp(self.current_time),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


class PacingTracker:
    """
    Tracks elapsed interview time and recommends pacing behaviour.

    Holds one piece of state, the session start instant. Everything else
    is recomputed from the clock on each `get_status()` call, so the
    phase only moves forward until `mark_session_start()` resets it.

    Args:
        config: Duration, question count and phase bands
        agent_name: Prefix for log lines
        clock: Returns the current aware datetime (injectable for tests)
    """

    def __init__(
        self,
        config: Optional[PacingConfig] = None,
        agent_name: str = "Agent",
        clock: Callable[[], datetime] = utc_now
    ):
        self.config = config or PacingConfig()
        self.agent_name = agent_name
        self._clock = clock
        self._start_time: Optional[datetime] = None
        self._lock = threading.Lock()

    @property
    def start_time(self) -> Optional[datetime]:
        """When the current session started, or None before it starts."""
        with self._lock:
            return self._start_time

    @property
    def is_started(self) -> bool:
        return self.start_time is not None

    def mark_session_start(self) -> None:
        """Start (or restart) the session clock at the current instant."""
        now = self._clock()
        with self._lock:
            self._start_time = now
        self._log(
            logging.INFO,
            f"{self.agent_name}: Interview session started at {format_timestamp(now)}"
        )

    def elapsed_minutes(self, now: Optional[datetime] = None) -> int:
        """Whole minutes since the session started (0 if not started)."""
        with self._lock:
            start = self._start_time
        if start is None:
            return 0
        if now is None:
            now = self._clock()
        return _whole_minutes_between(start, now)

    def get_status(self) -> PacingStatus:
        """
        Compute the current pacing snapshot.

        Starts the clock implicitly if `mark_session_start()` was never
        called, so the first status of an unstarted tracker is always
        zero minutes into the introduction.

        Returns:
            PacingStatus for the current instant
        """
        now = self._clock()
        with self._lock:
            if self._start_time is None:
                self._start_time = now
            start = self._start_time

        config = self.config
        elapsed = _whole_minutes_between(start, now)
        remaining = max(0, config.total_duration_minutes - elapsed)

        # Multiply first so whole-percent boundaries (15, 75, 90) are exact.
        # Classify on the unrounded value; only the reported percent is rounded.
        progress = elapsed * 100 / config.total_duration_minutes
        band = config.band_for(progress)
        recommendation, questions_remaining = config.recommendation_for(band, progress)

        status = PacingStatus(
            elapsed_minutes=elapsed,
            remaining_minutes=remaining,
            progress_percent=_round_half_up(progress),
            phase=band.phase,
            urgency=band.urgency,
            recommendation=recommendation,
            current_time=now,
            questions_remaining=questions_remaining,
        )

        self._log(
            logging.INFO,
            f"[Interview Time Status] Elapsed: {elapsed}m, "
            f"Remaining: {remaining}m, Phase: {band.phase.value}"
        )
        return status

    def _log(self, level: int, message: str) -> None:
        # Logging is best-effort and must never break a status query.
        try:
            logger.log(level, message)
        except Exception:
            pass
