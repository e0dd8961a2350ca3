"""
Base agent abstract class for all AI agents in the system.

Provides common functionality for all agents including:
- Context and prompt builder integration
- Agent metadata
- Session events published to the frontend over the data channel
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, TypeVar, Generic
from dataclasses import dataclass
import logging
import json

from livekit.agents import Agent
from livekit.agents.job import get_job_context
from ..context.base import BaseContext
from ..prompts.base import BasePromptBuilder
from ..session.timing import format_timestamp, utc_now


logger = logging.getLogger(__name__)

# Type variable for context types
TContext = TypeVar('TContext', bound=BaseContext)


@dataclass
class AgentMetadata:
    """Metadata about an agent type."""
    name: str
    version: str
    description: str
    supported_languages: list[str]
    capabilities: list[str]

    def to_dict(self) -> Dict[str, Any]:
        """Convert metadata to dictionary."""
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "supported_languages": self.supported_languages,
            "capabilities": self.capabilities
        }


class BaseAgent(ABC, Agent, Generic[TContext]):
    """
    Abstract base class for all agents in the system.

    Attributes:
        context: Agent-specific context data from room metadata
        prompt_builder: Builds instructions from context
        metadata: Agent metadata (name, version, capabilities)
    """

    def __init__(
        self,
        context: Optional[TContext] = None,
        prompt_builder: Optional[BasePromptBuilder] = None,
        **kwargs
    ):
        """
        Initialize the base agent.

        Args:
            context: Optional context specific to this agent type
            prompt_builder: Optional prompt builder for custom instructions
            **kwargs: Additional arguments passed to parent Agent class
        """
        self._context = context
        self._prompt_builder = prompt_builder or self._create_default_prompt_builder()

        instructions = self._build_instructions()
        super().__init__(instructions=instructions, **kwargs)

        logger.info(f"Initialized {self.__class__.__name__} with context: {context}")

    @property
    @abstractmethod
    def metadata(self) -> AgentMetadata:
        """Get metadata about this agent type."""
        pass

    @property
    def context(self) -> Optional[TContext]:
        """Get the current context."""
        return self._context

    @property
    def prompt_builder(self) -> BasePromptBuilder:
        """Get the prompt builder."""
        return self._prompt_builder

    @abstractmethod
    def _create_default_prompt_builder(self) -> BasePromptBuilder:
        """Create the default prompt builder for this agent type."""
        pass

    def _build_instructions(self) -> str:
        """
        Build the instruction prompt for the agent.

        Returns:
            The complete instruction string
        """
        if self._context:
            return self._prompt_builder.build(self._context)
        return self._prompt_builder.build_default()

    @abstractmethod
    async def on_enter(self) -> None:
        """
        Called when the agent becomes the active agent in a session.

        This is a LiveKit lifecycle method. Use it for initialization
        logic like starting timers and sending the greeting.
        """
        pass

    async def _publish_session_event(
        self,
        event_type: str,
        status: str,
        reason: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> bool:
        """
        Publish a session event to the frontend via LiveKit data channel.

        Delivery is best-effort: failures are logged, never raised.

        Args:
            event_type: Type of event (e.g., "time_status")
            status: Status value (e.g., the current interview phase)
            reason: Optional reason for the event
            metadata: Optional additional metadata to include in the event

        Returns:
            True if the event was handed to the room

        Example event structure:
            {
                "type": "time_status",
                "status": "main_questions",
                "timestamp": "2025-11-11T10:30:00.000Z",
                "metadata": {...}
            }
        """
        try:
            room = get_job_context().room
        except RuntimeError as e:
            logger.debug(f"Cannot publish event {event_type}: {e}")
            return False

        if not room:
            logger.warning(f"Cannot publish event {event_type}: No active room")
            return False

        event_data = {
            "type": event_type,
            "status": status,
            "timestamp": format_timestamp(utc_now())
        }

        if reason:
            event_data["reason"] = reason

        if metadata:
            event_data["metadata"] = metadata

        try:
            message_json = json.dumps(event_data)
            await room.local_participant.publish_data(
                message_json.encode('utf-8'),
                reliable=True
            )
            logger.info(f"Published session event: {event_type} - {status}")
            return True
        except Exception as e:
            logger.error(f"Failed to publish session event: {e}")
            return False

    def __repr__(self) -> str:
        """String representation of the agent."""
        return (
            f"<{self.__class__.__name__} "
            f"name='{self.metadata.name}' "
            f"version='{self.metadata.version}' "
            f"has_context={self._context is not None}>"
        )
