"""Keyword-based query routing for the LandComp specialist agents."""

__version__ = "0.1.0"
