"""
Agent registry for managing and discovering available agents.

Maps agent names (the `agent_type` sent in room metadata) to their
implementation classes.
"""

from typing import Dict, Type, Optional, List
from dataclasses import dataclass
import logging

from .base import BaseAgent, AgentMetadata

logger = logging.getLogger(__name__)


@dataclass
class AgentRegistration:
    """Information about a registered agent."""
    agent_class: Type[BaseAgent]
    metadata: AgentMetadata
    is_default: bool = False

    def create_instance(self, **kwargs) -> BaseAgent:
        """
        Create an instance of this agent.

        Args:
            **kwargs: Arguments to pass to the agent constructor

        Returns:
            Agent instance
        """
        return self.agent_class(**kwargs)


class AgentRegistry:
    """Registry of all available agent types."""

    def __init__(self):
        self._agents: Dict[str, AgentRegistration] = {}
        self._default_agent: Optional[str] = None

    def register(
        self,
        name: str,
        agent_class: Type[BaseAgent],
        is_default: bool = False
    ) -> None:
        """
        Register an agent with the registry.

        Args:
            name: Unique name for the agent
            agent_class: The agent class
            is_default: Whether this should be the default agent

        Raises:
            ValueError: If agent with name already exists
        """
        if name in self._agents:
            raise ValueError(f"Agent '{name}' is already registered")

        try:
            # Metadata is an instance property; build a throwaway instance.
            metadata = agent_class().metadata
        except Exception as e:
            logger.warning(f"Could not get metadata for {name}: {e}")
            metadata = AgentMetadata(
                name=name,
                version="1.0.0",
                description=f"{name} agent",
                supported_languages=["en"],
                capabilities=[]
            )

        self._agents[name] = AgentRegistration(
            agent_class=agent_class,
            metadata=metadata,
            is_default=is_default
        )

        if is_default:
            self._default_agent = name

        logger.info(f"Registered agent '{name}' (default={is_default})")

    def get(self, name: str) -> Optional[AgentRegistration]:
        """Get an agent registration by name, or None if not found."""
        return self._agents.get(name)

    @property
    def default_agent_name(self) -> Optional[str]:
        """Name of the default agent, falling back to the first registered."""
        if self._default_agent:
            return self._default_agent
        return next(iter(self._agents), None)

    def list_agents(self) -> List[str]:
        """List all registered agent names."""
        return list(self._agents.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._agents

    def __len__(self) -> int:
        return len(self._agents)


# Global registry instance
registry = AgentRegistry()
