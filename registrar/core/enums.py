"""
Enumerations and constants for the registrar.
"""

from enum import Enum, Flag, auto


class EntityStatus(Enum):
    """Status of an entity in the registry."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class PersonType(Enum):
    """Kinds of persons the registry can create."""
    STUDENT = "student"
    TEACHER = "teacher"
    PHD_STUDENT = "phd_student"


class Role(Flag):
    """Capabilities a person can carry.

    Roles combine: ``Role.STUDENT | Role.TEACHER`` is what a PhD student
    holds, and is also usable as a lookup filter for PhD students only.
    """
    STUDENT = auto()
    TEACHER = auto()


def roles_for(kind: PersonType) -> Role:
    """Return the roles attached to a newly created person of ``kind``."""
    if kind is PersonType.STUDENT:
        return Role.STUDENT
    if kind is PersonType.TEACHER:
        return Role.TEACHER
    if kind is PersonType.PHD_STUDENT:
        return Role.STUDENT | Role.TEACHER
    raise ValueError(f"Unknown person type: {kind!r}")
