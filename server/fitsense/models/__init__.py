"""
Request and response schemas
"""

from .fitness import (
    FALLBACK_SUGGESTIONS,
    AdviceResult,
    FitnessFormOptions,
    FitnessMetrics,
    FitnessRequest,
    FitnessResult,
    FormOption,
)
from .preferences import ThemePreference

__all__ = [
    "FALLBACK_SUGGESTIONS",
    "AdviceResult",
    "FitnessFormOptions",
    "FitnessMetrics",
    "FitnessRequest",
    "FitnessResult",
    "FormOption",
    "ThemePreference",
]
