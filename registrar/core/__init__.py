"""
Core module containing the object model, pattern matcher and exceptions.
"""

from .entities import *
from .exceptions import *
from .enums import *
from .pattern import matches, filter_matching

__all__ = [
    # Entities
    "AbstractEntity",
    "Course",
    "CourseRole",
    "StudentRole",
    "TeacherRole",
    "Person",

    # Enums
    "EntityStatus",
    "PersonType",
    "Role",
    "roles_for",

    # Pattern matching
    "matches",
    "filter_matching",

    # Exceptions
    "RegistrarException",
    "ConfigurationError",
    "DuplicateEntityError",
    "DuplicateCourseError",
    "DuplicatePersonError",
    "ResourceNotFoundError",
    "PersonNotFoundError",
    "CourseNotFoundError",
    "AssignmentError",
    "InactiveCourseError",
    "InactiveStudentError",
    "RoleMismatchError",
]
