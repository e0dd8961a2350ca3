"""
Base prompt builder classes for constructing agent instructions.

Each agent type implements its own prompt builder to turn its context
into the instruction text handed to the LLM.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any
import logging

from ..context.base import BaseContext

logger = logging.getLogger(__name__)


class BasePromptBuilder(ABC):
    """
    Abstract base class for all prompt builders.

    Subclasses provide the variables and the rendering.
    """

    def build(self, context: BaseContext) -> str:
        """
        Build the complete prompt from the context.

        Args:
            context: The context to build the prompt from

        Returns:
            The complete prompt string
        """
        variables = self._extract_variables(context)
        return self._render(variables).strip()

    @abstractmethod
    def build_default(self) -> str:
        """
        Build a default prompt when no context is available.

        Returns:
            Default prompt string
        """
        pass

    @abstractmethod
    def _extract_variables(self, context: BaseContext) -> Dict[str, Any]:
        """
        Extract variables from the context for template rendering.

        Args:
            context: The context object

        Returns:
            Dictionary of variables for template substitution
        """
        pass

    @abstractmethod
    def _render(self, variables: Dict[str, Any]) -> str:
        """Render the prompt text from extracted variables."""
        pass
