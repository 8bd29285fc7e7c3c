"""Falling-block puzzle engine, pygame driver and gymnasium environment."""

__version__ = "0.1.0"
