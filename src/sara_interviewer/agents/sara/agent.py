"""Sara interviewer agent implementation."""

import logging

from sara_interviewer.core.agents.base import BaseAgent, AgentMetadata
from sara_interviewer.core.agents.mixins import TimingMixin
from sara_interviewer.core.prompts.base import BasePromptBuilder
from sara_interviewer.core.session.phases import PacingConfig
from .config import DEFAULT_JOB_TITLE, GREETING, PACING_CONFIG
from .context import InterviewContext
from .prompt_builder import InterviewerPromptBuilder

logger = logging.getLogger(__name__)


class SaraInterviewerAgent(TimingMixin, BaseAgent[InterviewContext]):
    """Timed technical interviewer that paces itself with `get_time_status`."""

    @property
    def metadata(self) -> AgentMetadata:
        """Get metadata about this agent."""
        return AgentMetadata(
            name="Sara Interviewer",
            version="1.0.0",
            description="Timed voice interviewer for senior data science / ML roles",
            supported_languages=["en"],
            capabilities=[
                "technical_interviews",
                "follow_up_probing",
                "interview_feedback",
                "time_pacing"
            ]
        )

    def _create_default_prompt_builder(self) -> BasePromptBuilder:
        """Create the default prompt builder for Sara."""
        return InterviewerPromptBuilder(self.get_pacing_config())

    def get_pacing_config(self) -> PacingConfig:
        """Get pacing configuration from config file."""
        return PACING_CONFIG

    def greeting(self) -> str:
        """Opening line, spoken before the first question."""
        job_title = self.context.job_title if self.context else DEFAULT_JOB_TITLE
        return GREETING.format(job_title=job_title)

    async def on_enter(self) -> None:
        """Called when agent becomes active in the session."""
        # The clock starts when the conversation does, not at process boot.
        self._init_timing()

        if self.context and self.context.candidate_name:
            logger.info(f"Interview session started for candidate: {self.context.candidate_name}")

        try:
            self.session.say(self.greeting(), allow_interruptions=True)
        except Exception as e:
            logger.error(f"Failed to send greeting: {e}", exc_info=True)

    async def on_exit(self) -> None:
        """Log where the interview stood in time when the agent leaves."""
        status = self.final_time_status()
        if status:
            logger.info(
                f"Interview ended after {status.elapsed_minutes}m "
                f"in phase {status.phase.value}"
            )
