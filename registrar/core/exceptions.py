"""
Custom exceptions for the registrar.
"""

from typing import Optional, Any, Dict


class RegistrarException(Exception):
    """Base exception for all registrar errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ConfigurationError(RegistrarException):
    """Raised when configuration is invalid."""
    pass


class DuplicateEntityError(RegistrarException):
    """Raised when attempting to create a duplicate entity."""
    pass


class DuplicateCourseError(DuplicateEntityError):
    """Raised when a course name is already taken."""

    def __init__(self, name: str):
        super().__init__(
            f"Course '{name}' already exists.",
            error_code="duplicate_course",
            details={'name': name}
        )


class DuplicatePersonError(DuplicateEntityError):
    """Raised when a (name, surname) pair is already registered."""

    def __init__(self, name: str, surname: str):
        super().__init__(
            f"Person '{name} {surname}' already exists.",
            error_code="duplicate_person",
            details={'name': name, 'surname': surname}
        )


class ResourceNotFoundError(RegistrarException):
    """Raised when a requested resource is not found."""
    pass


class PersonNotFoundError(ResourceNotFoundError):
    """Raised when a person is not registered in the college."""

    def __init__(self, message: str = "Non-existing person.", **kwargs):
        kwargs.setdefault('error_code', "person_not_found")
        super().__init__(message, **kwargs)


class CourseNotFoundError(ResourceNotFoundError):
    """Raised when a course is not registered in the college."""

    def __init__(self, message: str = "Non-existing course.", **kwargs):
        kwargs.setdefault('error_code', "course_not_found")
        super().__init__(message, **kwargs)


class AssignmentError(RegistrarException):
    """Raised when a course assignment is rejected."""
    pass


class InactiveCourseError(AssignmentError):
    """Raised when assigning an inactive course."""

    def __init__(self, message: str = "Incorrect operation on an inactive course.", **kwargs):
        kwargs.setdefault('error_code', "inactive_course")
        super().__init__(message, **kwargs)


class InactiveStudentError(AssignmentError):
    """Raised when enrolling an inactive student."""

    def __init__(self, message: str = "Incorrect operation for an inactive student.", **kwargs):
        kwargs.setdefault('error_code', "inactive_student")
        super().__init__(message, **kwargs)


class RoleMismatchError(RegistrarException):
    """Raised when an operation needs a role the person does not carry."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('error_code', "role_mismatch")
        super().__init__(message, **kwargs)
