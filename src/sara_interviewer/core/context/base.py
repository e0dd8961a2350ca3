"""
Base context classes for agent context management.

Provides the abstract base class for agent-specific context handling:
- Context data validation
- Serialization to/from dictionaries
- Parsing from LiveKit room metadata
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, TypeVar, Type
from dataclasses import dataclass, asdict, fields
import json
import logging

from ...utils.helpers import snake_case_keys

logger = logging.getLogger(__name__)

# Type variable for self-referencing in base class
TContext = TypeVar('TContext', bound='BaseContext')


@dataclass
class BaseContext(ABC):
    """
    Abstract base class for all agent contexts.

    Each agent type extends this to add its specific fields.
    """

    agent_type: str

    def __post_init__(self):
        """Post-initialization validation."""
        self.validate()

    @abstractmethod
    def validate(self) -> None:
        """
        Validate the context data.

        Raises:
            ValueError: If the context data is invalid
        """
        if not self.agent_type:
            raise ValueError("agent_type is required")

    def to_dict(self) -> Dict[str, Any]:
        """Convert context to a dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls: Type[TContext], data: Dict[str, Any]) -> TContext:
        """
        Create context from a dictionary, ignoring unknown keys.

        Args:
            data: Dictionary containing context data

        Returns:
            Context instance
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(k for k in data if k not in known)
        if unknown:
            logger.debug(f"Ignoring unknown context fields: {unknown}")
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_metadata(
        cls: Type[TContext],
        metadata: Optional[Dict[str, Any]]
    ) -> TContext:
        """
        Parse context from room metadata sent by the frontend.

        Keys may be camelCase; agent-specific fields may sit at the top
        level or under a nested "context" object.

        Args:
            metadata: Room metadata dictionary

        Returns:
            Context instance
        """
        data = snake_case_keys(metadata or {})
        nested = data.pop("context", None)
        if isinstance(nested, dict):
            data.update(snake_case_keys(nested))
        data.pop("agent_type", None)
        return cls.from_dict(data)

    @staticmethod
    def parse_room_metadata(metadata_str: Optional[str]) -> Dict[str, Any]:
        """
        Decode the room metadata JSON string.

        Malformed or non-object metadata is logged and treated as empty.
        """
        if not metadata_str:
            return {}
        try:
            metadata = json.loads(metadata_str)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse room metadata: {e}")
            return {}
        if not isinstance(metadata, dict):
            logger.warning(f"Room metadata is not an object: {type(metadata).__name__}")
            return {}
        return metadata

    def __repr__(self) -> str:
        """String representation of the context."""
        return f"<{self.__class__.__name__} agent_type='{self.agent_type}'>"
