"""Weapon stat comparison and DPS ranking."""

__version__ = "0.1.0"
