"""
Inspection utilities for petrix processes
"""

from .display import (
    NO_TRANSITION,
    channel_label,
    format_cell,
    format_relation,
)

__all__ = [
    'NO_TRANSITION',
    'channel_label',
    'format_cell',
    'format_relation',
]

__version__ = '0.1.0'
