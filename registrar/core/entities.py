"""
Core entities for the registrar: courses, people and their roles.

A person is one identity record with optional role components attached to it.
A PhD student is simply a person carrying both a student and a teacher role,
so there is exactly one object per (name, surname) pair.
"""

import uuid
from abc import ABC
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .enums import EntityStatus, PersonType, Role, roles_for
from .exceptions import RoleMismatchError


class AbstractEntity(ABC):
    """Base abstract entity with universal ID, lifecycle, and versioning."""

    def __init__(self, entity_id: Optional[str] = None):
        self._id = entity_id or str(uuid.uuid4())
        self._created_at = datetime.now(timezone.utc)
        self._updated_at = self._created_at
        self._version = 1
        self._status = EntityStatus.ACTIVE

    @property
    def id(self) -> str:
        """Get the entity ID."""
        return self._id

    @property
    def created_at(self) -> datetime:
        """Get creation timestamp."""
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        """Get last update timestamp."""
        return self._updated_at

    @property
    def version(self) -> int:
        """Get current version."""
        return self._version

    @property
    def status(self) -> EntityStatus:
        """Get entity status."""
        return self._status

    def touch(self) -> None:
        """Record a mutation."""
        self._updated_at = datetime.now(timezone.utc)
        self._version += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {
            'id': self._id,
            'created_at': self._created_at.isoformat(),
            'updated_at': self._updated_at.isoformat(),
            'version': self._version,
            'status': self._status.value,
        }

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"


def _by_name(courses: Iterable['Course']) -> List['Course']:
    return sorted(courses, key=lambda course: course.name)


class Course(AbstractEntity):
    """Course entity; the name is its key within a college."""

    def __init__(self, name: str, active: bool = True, **kwargs):
        super().__init__(**kwargs)
        self._name = name
        self._status = EntityStatus.ACTIVE if active else EntityStatus.INACTIVE

    @property
    def name(self) -> str:
        return self._name

    def is_active(self) -> bool:
        return self._status is EntityStatus.ACTIVE

    def set_active(self, active: bool) -> None:
        """Activate or deactivate the course."""
        self._status = EntityStatus.ACTIVE if active else EntityStatus.INACTIVE
        self.touch()

    def to_dict(self) -> Dict[str, Any]:
        """Convert course to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'name': self._name,
            'active': self.is_active(),
        })
        return base_dict

    def __repr__(self) -> str:
        return f"Course(name={self._name!r}, active={self.is_active()})"


class CourseRole:
    """A role component owning one set of course references.

    The set is keyed by course name: a role holds at most one course of a
    given name. Membership checks still compare the exact course object.
    """

    def __init__(self):
        self._courses: Dict[str, Course] = {}

    @property
    def courses(self) -> List[Course]:
        return _by_name(self._courses.values())

    def holds(self, course: Course) -> bool:
        return self._courses.get(course.name) is course

    def add(self, course: Course) -> bool:
        """Add a course; returns False if one of that name is already held."""
        if course.name in self._courses:
            return False
        self._courses[course.name] = course
        return True


class StudentRole(CourseRole):
    """Student capability: an activity flag and the set of attended courses."""

    def __init__(self, active: bool = True):
        super().__init__()
        self.active = active


class TeacherRole(CourseRole):
    """Teacher capability: the set of handled courses."""


class Person(AbstractEntity):
    """A person in the college with optional student and teacher roles."""

    def __init__(self, name: str, surname: str, student: Optional[StudentRole] = None,
                 teacher: Optional[TeacherRole] = None, **kwargs):
        super().__init__(**kwargs)
        self._name = name
        self._surname = surname
        self._student = student
        self._teacher = teacher

    @classmethod
    def of_type(cls, kind: PersonType, name: str, surname: str, active: bool = True) -> 'Person':
        """Build a person carrying the roles ``kind`` implies.

        ``active`` is the student activity flag and is ignored for teachers.
        """
        roles = roles_for(kind)
        student = StudentRole(active) if Role.STUDENT in roles else None
        teacher = TeacherRole() if Role.TEACHER in roles else None
        return cls(name, surname, student=student, teacher=teacher)

    @property
    def name(self) -> str:
        return self._name

    @property
    def surname(self) -> str:
        return self._surname

    @property
    def full_name(self) -> str:
        return f"{self._name} {self._surname}"

    @property
    def identity(self) -> Tuple[str, str]:
        return self._name, self._surname

    @property
    def roles(self) -> Role:
        roles = Role(0)
        if self._student is not None:
            roles |= Role.STUDENT
        if self._teacher is not None:
            roles |= Role.TEACHER
        return roles

    @property
    def person_type(self) -> PersonType:
        if self._student is not None and self._teacher is not None:
            return PersonType.PHD_STUDENT
        if self._student is not None:
            return PersonType.STUDENT
        return PersonType.TEACHER

    def has_role(self, role: Role) -> bool:
        """Check if the person carries every role in ``role``."""
        return role in self.roles

    def has_student_role(self) -> bool:
        return self._student is not None

    def has_teacher_role(self) -> bool:
        return self._teacher is not None

    def _student_role(self) -> StudentRole:
        if self._student is None:
            raise RoleMismatchError(
                f"{self.full_name} is not a student.",
                details={'name': self._name, 'surname': self._surname, 'role': 'student'}
            )
        return self._student

    def _teacher_role(self) -> TeacherRole:
        if self._teacher is None:
            raise RoleMismatchError(
                f"{self.full_name} is not a teacher.",
                details={'name': self._name, 'surname': self._surname, 'role': 'teacher'}
            )
        return self._teacher

    def is_student_active(self) -> bool:
        return self._student_role().active

    def set_student_active(self, active: bool) -> None:
        """Change the student activity flag."""
        self._student_role().active = active
        self.touch()

    def student_enroll(self, course: Course) -> bool:
        """Enroll in a course; returns False if already enrolled."""
        added = self._student_role().add(course)
        if added:
            self.touch()
        return added

    def student_courses(self) -> List[Course]:
        """Get attended courses ordered by name."""
        return self._student_role().courses

    def teacher_assign(self, course: Course) -> bool:
        """Take a course to teach; returns False if already taught."""
        added = self._teacher_role().add(course)
        if added:
            self.touch()
        return added

    def teacher_courses(self) -> List[Course]:
        """Get handled courses ordered by name."""
        return self._teacher_role().courses

    def holds_course(self, role: Optional[Role], course: Course) -> bool:
        """Check if ``course`` is in the course set of ``role``.

        A combined role needs the course in every one of its sets. None or an
        empty ``Role(0)`` accepts the course in any set the person has.
        """
        components = ((Role.STUDENT, self._student), (Role.TEACHER, self._teacher))
        if not role:
            return any(part is not None and part.holds(course) for _, part in components)
        return all(
            part is not None and part.holds(course)
            for single, part in components if single in role
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert person to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'name': self._name,
            'surname': self._surname,
            'person_type': self.person_type.value,
        })
        if self._student is not None:
            base_dict['student'] = {
                'active': self._student.active,
                'courses': [course.name for course in self._student.courses],
            }
        if self._teacher is not None:
            base_dict['teacher'] = {
                'courses': [course.name for course in self._teacher.courses],
            }
        return base_dict

    def __repr__(self) -> str:
        return f"Person(name={self._name!r}, surname={self._surname!r}, type={self.person_type.value})"
