"""Sara: a timed voice interviewer built on LiveKit Agents."""

__version__ = "1.0.0"
