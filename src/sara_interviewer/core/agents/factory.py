"""
Agent factory for creating agent instances.

Handles:
- Agent selection from registry
- Agent instantiation with context
"""

from typing import Optional
import logging

from .base import BaseAgent
from .registry import AgentRegistry, registry
from ..context.base import BaseContext

logger = logging.getLogger(__name__)


class AgentFactory:
    """Creates a fresh, configured agent instance per session."""

    def __init__(
        self,
        registry_instance: Optional[AgentRegistry] = None
    ):
        """
        Initialize the factory.

        Args:
            registry_instance: Optional registry instance (defaults to global)
        """
        self.registry = registry_instance or registry

    def create(
        self,
        agent_type: Optional[str],
        context: Optional[BaseContext] = None,
        **kwargs
    ) -> Optional[BaseAgent]:
        """
        Create an agent instance.

        Args:
            agent_type: Type of agent to create (default agent if None)
            context: Optional context for the agent
            **kwargs: Additional arguments for agent constructor

        Returns:
            Configured agent instance or None if creation fails
        """
        agent_type = agent_type or self.registry.default_agent_name
        logger.info(f"Creating agent of type: {agent_type}")

        registration = self.registry.get(agent_type) if agent_type else None
        if not registration:
            logger.error(f"Agent type '{agent_type}' not found in registry")
            return None

        try:
            if context:
                kwargs['context'] = context

            agent = registration.create_instance(**kwargs)

            logger.info(
                f"Successfully created agent: {agent_type} "
                f"(class={agent.__class__.__name__})"
            )
            return agent

        except Exception as e:
            logger.error(f"Failed to create agent '{agent_type}': {e}", exc_info=True)
            return None
