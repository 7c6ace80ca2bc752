"""Wint - language tag resolution and URL building for web apps."""

__version__ = "0.1.0"
