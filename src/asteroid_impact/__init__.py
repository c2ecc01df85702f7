"""Asteroid impact consequence estimation."""

__version__ = "0.1.0"
