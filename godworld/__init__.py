"""Headless entity-component core for a low-poly solar-system god game."""

__version__ = "0.1.0"