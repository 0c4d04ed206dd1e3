"""
Utilities module for the lobby control plane.
"""

from .logging_config import configure_logging, LOG_PRESETS

__all__ = [
    'configure_logging',
    'LOG_PRESETS'
]
