"""ABOUTME: Pokemon type analyzer package.
ABOUTME: Looks up a Pokemon's types and reports its weaknesses and resistances."""

__version__ = "0.1.0"
