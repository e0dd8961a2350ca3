"""Agent behavior mixins for composable functionality."""

from .timing import TimingMixin

__all__ = ["TimingMixin"]
