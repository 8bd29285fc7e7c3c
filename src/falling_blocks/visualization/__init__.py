"""Pygame renderer and keyboard driver for the game engine."""
