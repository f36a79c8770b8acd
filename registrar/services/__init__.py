"""
Services module containing the college registry.
"""

from .college import College

__all__ = [
    "College",
]
