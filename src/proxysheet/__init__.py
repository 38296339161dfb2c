"""Proxy Sheet: look up cards on Scryfall and print them as proxy sheets."""

__version__ = "1.0.0"
