from datetime import datetime, timedelta, timezone

import pytest

from sara_interviewer.core.session.phases import PacingConfig
from sara_interviewer.core.session.timing import PacingTracker


class FakeClock:
    """Manually advanced wall clock."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, minutes: float = 0, seconds: float = 0) -> None:
        self.now += timedelta(minutes=minutes, seconds=seconds)


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 11, 11, 10, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def config():
    return PacingConfig(total_duration_minutes=60, total_questions=10)


@pytest.fixture
def tracker(config, clock):
    return PacingTracker(config, agent_name="Test", clock=clock)
