"""Timing mixin for agents that pace a session against a fixed duration."""

import logging
from typing import Optional
from abc import ABC, abstractmethod

from livekit.agents import function_tool

from ...session.phases import PacingConfig
from ...session.timing import PacingTracker, PacingStatus

logger = logging.getLogger(__name__)

TIME_STATUS_TOOL_DESCRIPTION = (
    "Use this tool after each question to check the interview timing status. "
    "It provides elapsed time, remaining time, pacing recommendations, and "
    "urgency level. You MUST call this after asking each question to maintain "
    "proper interview pacing."
)


class TimingMixin(ABC):
    """Mixin giving an agent a pacing tracker and a time-status tool."""

    def __init__(self, *args, **kwargs):
        # Created before Agent.__init__ scans the instance for function tools.
        agent_name = self.metadata.name if hasattr(self, 'metadata') else 'Agent'
        self._pacing = PacingTracker(self.get_pacing_config(), agent_name)
        super().__init__(*args, **kwargs)

    @abstractmethod
    def get_pacing_config(self) -> PacingConfig:
        """Get the pacing configuration for this agent."""
        pass

    @property
    def pacing(self) -> PacingTracker:
        return self._pacing

    def _init_timing(self) -> None:
        """Start the session clock. Calling it again restarts the clock."""
        self._pacing.mark_session_start()
        config = self._pacing.config
        logger.info(
            f"{self._pacing.agent_name}: Timing initialized for "
            f"{config.total_duration_minutes} minutes, {config.total_questions} questions"
        )

    def current_time_status(self) -> PacingStatus:
        """Get the pacing snapshot for the current instant."""
        return self._pacing.get_status()

    @function_tool(description=TIME_STATUS_TOOL_DESCRIPTION)
    async def get_time_status(self) -> str:
        """Report elapsed and remaining interview time with pacing guidance."""
        status = self.current_time_status()
        await self._on_time_status(status)
        return status.to_json()

    async def _on_time_status(self, status: PacingStatus) -> None:
        """Forward a snapshot to the frontend when the agent can publish events."""
        publish = getattr(self, '_publish_session_event', None)
        if publish is None:
            return
        await publish(
            event_type="time_status",
            status=status.phase.value,
            metadata=status.to_dict()
        )

    def final_time_status(self) -> Optional[PacingStatus]:
        """Snapshot for end-of-session logging, or None if never started."""
        if not self._pacing.is_started:
            return None
        return self._pacing.get_status()
