"""
Shared compute infrastructure for pyrref.

Submodules:
    timing: Execution timing utilities
    tolerances: Zero thresholds and comparison tolerances
"""

from pyrref.core.compute.timing import Timer
from pyrref.core.compute.tolerances import (
    ToleranceTier,
    DEFAULT,
    STRICT,
    LOOSE,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "DEFAULT",
    "STRICT",
    "LOOSE",
    "select_tolerance",
]
