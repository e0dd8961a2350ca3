"""Sara interviewer agent configuration."""

import os
from dataclasses import dataclass

from sara_interviewer.core.session.phases import PacingConfig

AGENT_NAME = "sara-interviewer"
REGISTRATION_NAME = "sara_interviewer"

INTERVIEW_DURATION_MINUTES = 60
TOTAL_QUESTIONS = 10

PACING_CONFIG = PacingConfig(
    total_duration_minutes=INTERVIEW_DURATION_MINUTES,
    total_questions=TOTAL_QUESTIONS,
)

DEFAULT_JOB_TITLE = "Senior Data Scientist / Machine Learning Engineer"

GREETING = (
    "Hi there! I'm Sara, and I'll be conducting your interview today for the "
    "{job_title} position. Can you hear me clearly?"
)


@dataclass(frozen=True)
class VoicePipelineConfig:
    """Models used by the voice pipeline session."""
    stt_model: str = "deepgram/nova-3"
    stt_language: str = "en"
    llm_model: str = "gpt-4o-mini"
    tts_model: str = "cartesia/sonic-3"
    tts_voice: str = "9626c31c-bec5-4cca-baa8-f8ba9e84c8bc"  # Jacqueline

    @classmethod
    def from_env(cls) -> 'VoicePipelineConfig':
        """Defaults overridden by SARA_* environment variables."""
        defaults = cls()
        return cls(
            stt_model=os.getenv("SARA_STT_MODEL", defaults.stt_model),
            stt_language=os.getenv("SARA_STT_LANGUAGE", defaults.stt_language),
            llm_model=os.getenv("SARA_LLM_MODEL", defaults.llm_model),
            tts_model=os.getenv("SARA_TTS_MODEL", defaults.tts_model),
            tts_voice=os.getenv("SARA_TTS_VOICE", defaults.tts_voice),
        )
