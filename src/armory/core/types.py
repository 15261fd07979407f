"""Shared type aliases for the core and domain layers."""
from typing import Literal, Union

Zone = Literal["none", "head", "torso", "limb"]
StatValue = Union[int, float, str, bool]

ZONES: tuple[Zone, ...] = ("none", "head", "torso", "limb")

__all__ = ["StatValue", "Zone", "ZONES"]
