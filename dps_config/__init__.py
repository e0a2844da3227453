"""
DPS Config - Configuration management for the DPS ecosystem

This package provides the DpsConfig container used by Python components:
- Optional values loaded from DPS_* environment variables
- Sensible development defaults exposed by getters
- Computed getters for derived values (API domain, auth API URL)

Environment variable conventions:
- Boolean true is represented as the string "Y"
- Omitted or empty environment variables are treated as unset
- Malformed numbers are treated as unset
"""

from .config import DpsConfig

__version__ = "1.0.0"

__all__ = [
    "DpsConfig",
]
