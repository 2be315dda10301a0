"""Resolve technology names to devicon identifiers, asset URLs and display names."""

__version__ = "0.1.0"
