"""Shared helpers: whole-millimetre rounding and logging setup."""

from .rounding import clamp, round_clamp, round_half_up, within
from .logging_config import RoofLayoutLogger, get_logger

__all__ = [
    "clamp",
    "round_clamp",
    "round_half_up",
    "within",
    "RoofLayoutLogger",
    "get_logger",
]
