import json

from sara_interviewer.core.agents.base import AgentMetadata
from sara_interviewer.core.agents.mixins import TimingMixin
from sara_interviewer.core.session.phases import InterviewPhase, PacingConfig
from sara_interviewer.core.session.timing import PacingTracker


class Host:
    @property
    def metadata(self):
        return AgentMetadata(
            name="Host",
            version="0.1.0",
            description="timing host",
            supported_languages=["en"],
            capabilities=[],
        )


class TimedHost(TimingMixin, Host):
    def __init__(self, clock):
        super().__init__()
        self._pacing = PacingTracker(self.get_pacing_config(), "Host", clock=clock)
        self.events = []

    def get_pacing_config(self):
        return PacingConfig(total_duration_minutes=60, total_questions=10)

    async def _publish_session_event(self, event_type, status, reason=None, metadata=None):
        self.events.append({"type": event_type, "status": status, "metadata": metadata})
        return True


def test_tracker_is_created_from_pacing_config(clock):
    host = TimedHost(clock)

    assert host.pacing.config.total_duration_minutes == 60
    assert host.final_time_status() is None


def test_init_timing_starts_the_clock(clock):
    host = TimedHost(clock)

    host._init_timing()
    clock.advance(minutes=46)

    status = host.current_time_status()
    assert status.elapsed_minutes == 46
    assert status.phase is InterviewPhase.WRAPPING_UP


async def test_time_status_is_published_to_frontend(clock):
    host = TimedHost(clock)
    host._init_timing()
    clock.advance(minutes=20)
    status = host.current_time_status()

    await host._on_time_status(status)

    assert host.events == [{
        "type": "time_status",
        "status": "main_questions",
        "metadata": status.to_dict(),
    }]
    assert json.loads(status.to_json())["elapsedMinutes"] == 20


def test_final_status_after_start(clock):
    host = TimedHost(clock)
    host._init_timing()
    clock.advance(minutes=61)

    status = host.final_time_status()

    assert status.phase is InterviewPhase.CONCLUSION
    assert status.remaining_minutes == 0
