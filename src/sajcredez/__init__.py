"""Sajcredez — rules core for a 7x7 chess variant with enhancement charges."""

__version__ = "0.1.0"
