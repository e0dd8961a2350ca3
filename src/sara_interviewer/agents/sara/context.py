"""
Context definition for the Sara interviewer agent.

All fields are optional; the interview format itself is fixed.
"""

import logging
from typing import Optional
from dataclasses import dataclass

from sara_interviewer.core.context.base import BaseContext
from .config import DEFAULT_JOB_TITLE, REGISTRATION_NAME

logger = logging.getLogger(__name__)


@dataclass
class InterviewContext(BaseContext):
    """
    Context data for the Sara interviewer.

    The frontend may send this via room metadata, e.g.
    {"agentType": "sara_interviewer", "candidateName": "Ada"}.
    """
    agent_type: str = REGISTRATION_NAME
    candidate_name: Optional[str] = None
    job_title: str = DEFAULT_JOB_TITLE
    version: Optional[str] = None  # prompt template version, e.g. "v1"

    @classmethod
    def from_room_metadata(cls, metadata_str: Optional[str]) -> 'InterviewContext':
        """Parse the raw room metadata, falling back to defaults on bad input."""
        metadata = cls.parse_room_metadata(metadata_str)
        logger.info(f"Metadata keys: {list(metadata.keys())}")
        try:
            return cls.from_metadata(metadata)
        except (TypeError, ValueError) as e:
            logger.warning(f"Invalid interview context, using defaults: {e}")
            return cls()

    def validate(self) -> None:
        """Validate the context data."""
        super().validate()
        if not self.job_title or not self.job_title.strip():
            raise ValueError("job_title must not be empty")
