"""Fog of Chess — chess rules engine with a fog-of-war visibility layer."""

__version__ = "0.1.0"
