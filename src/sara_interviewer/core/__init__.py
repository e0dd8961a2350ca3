"""Reusable agent infrastructure: sessions, agents, contexts and prompts."""
