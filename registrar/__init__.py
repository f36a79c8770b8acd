"""
Registrar: an in-memory college directory.

Tracks courses and people (students, teachers and PhD students who are both),
enforces uniqueness and activity rules, and answers glob-pattern lookups.
"""

__version__ = "1.0.0"
__author__ = "Registrar Development Team"
__description__ = "In-memory college directory of courses and people"

from .config import CollegeConfig, configure_logging, load_config
from .core import *
from .services import College
