"""Agents that play through the gymnasium environment."""
