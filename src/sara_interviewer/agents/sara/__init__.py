"""Sara, the timed technical interviewer."""
