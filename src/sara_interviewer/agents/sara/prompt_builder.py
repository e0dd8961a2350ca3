"""
Sara interviewer prompt builder.

Renders the interviewer instructions from Jinja2 templates in the
`prompts/` directory. The question bank and the pacing configuration are
injected so the spoken protocol always matches the pacing tool.
"""

import logging
from typing import Dict, Any, Optional
from pathlib import Path
from jinja2 import Environment, FileSystemLoader

from sara_interviewer.core.context.base import BaseContext
from sara_interviewer.core.prompts.base import BasePromptBuilder
from sara_interviewer.core.session.phases import PacingConfig
from .config import DEFAULT_JOB_TITLE, PACING_CONFIG
from .context import InterviewContext
from .question_bank import QUESTION_BANK, SKILLS_TO_ASSESS

logger = logging.getLogger(__name__)

TIME_STATUS_TOOL_NAME = "get_time_status"
DEFAULT_TEMPLATE = "default.md"


class InterviewerPromptBuilder(BasePromptBuilder):
    """
    Prompt builder for the Sara interviewer.

    Uses `default.md` unless the context names a template version with a
    matching `<version>.md` in the prompts directory.
    """

    # Class-level cached Jinja2 environment (reusable across sessions)
    _jinja_env: Optional[Environment] = None

    def __init__(self, pacing_config: Optional[PacingConfig] = None):
        self.pacing_config = pacing_config or PACING_CONFIG

    @staticmethod
    def _get_prompts_dir() -> Path:
        """Get the prompts directory path."""
        return Path(__file__).parent / "prompts"

    @classmethod
    def _get_jinja_env(cls) -> Environment:
        """Get or create the shared Jinja2 environment."""
        if cls._jinja_env is None:
            cls._jinja_env = Environment(
                loader=FileSystemLoader(str(cls._get_prompts_dir())),
                trim_blocks=True,
                lstrip_blocks=True,
                keep_trailing_newline=False,
            )
        return cls._jinja_env

    def _template_name(self, variables: Dict[str, Any]) -> str:
        """Template for the requested version, or default.md if it doesn't exist."""
        version = variables.get("version")
        if not version:
            return DEFAULT_TEMPLATE

        template_name = f"{version}.md"
        prompts_dir = self._get_prompts_dir()
        template_path = prompts_dir / template_name
        if template_path.parent != prompts_dir or not template_path.is_file():
            logger.warning(
                f"Interviewer prompt template '{template_name}' not found in {prompts_dir}, "
                f"falling back to {DEFAULT_TEMPLATE}"
            )
            return DEFAULT_TEMPLATE

        logger.info(f"Using version-based template: {template_name}")
        return template_name

    def _render(self, variables: Dict[str, Any]) -> str:
        """Render the instructions template."""
        template = self._get_jinja_env().get_template(self._template_name(variables))
        instructions = template.render(**variables)
        logger.info(f"Built instructions successfully. Length: {len(instructions)} chars")
        return instructions

    def _extract_variables(self, context: BaseContext) -> Dict[str, Any]:
        """Merge context fields with the question bank and pacing settings."""
        config = self.pacing_config
        variables: Dict[str, Any] = {
            "job_title": DEFAULT_JOB_TITLE,
            "candidate_name": None,
            "version": None,
        }
        if isinstance(context, InterviewContext):
            variables.update(
                {k: v for k, v in context.to_dict().items() if v is not None}
            )
        variables.update({
            "duration_minutes": config.total_duration_minutes,
            "total_questions": config.total_questions,
            "minutes_per_question": round(config.minutes_per_question),
            "phase_bands": config.bands,
            "questions": QUESTION_BANK,
            "skills": SKILLS_TO_ASSESS,
            "time_status_tool": TIME_STATUS_TOOL_NAME,
        })
        return variables

    def build_default(self) -> str:
        """Build instructions for a session without room metadata."""
        return self.build(InterviewContext())
