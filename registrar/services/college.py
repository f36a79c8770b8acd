"""
College registry: owns every course and person and keeps their indices.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from ..config import CollegeConfig, load_config
from ..core.entities import Course, Person
from ..core.enums import PersonType, Role
from ..core.exceptions import (
    CourseNotFoundError, DuplicateCourseError, DuplicatePersonError,
    InactiveCourseError, InactiveStudentError, PersonNotFoundError,
    RoleMismatchError
)
from ..core.pattern import filter_matching

logger = logging.getLogger(__name__)


def _by_surname(people: Iterable[Person]) -> List[Person]:
    return sorted(people, key=lambda person: (person.surname, person.name))


def _by_given_name(people: Iterable[Person]) -> List[Person]:
    return sorted(people, key=lambda person: (person.name, person.surname))


class College:
    """In-memory directory of courses and people.

    Courses are keyed by name and people by (name, surname); both keys are
    unique. Whether a given object belongs to this college is decided by
    identity, not by its key, so an equally named course from another
    college is never mistaken for one of ours.
    """

    def __init__(self, config: Union[CollegeConfig, Dict[str, Any], None] = None):
        self._config = load_config(config)
        self._courses: Dict[str, Course] = {}
        self._people: Dict[Tuple[str, str], Person] = {}

    @property
    def config(self) -> CollegeConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def courses(self) -> List[Course]:
        """All courses ordered by name."""
        return [self._courses[name] for name in sorted(self._courses)]

    @property
    def people(self) -> List[Person]:
        """All people ordered by surname, then name."""
        return _by_surname(self._people.values())

    # Courses

    def create_course(self, name: str, active: Optional[bool] = None) -> Course:
        """Create a course and return it.

        Raises DuplicateCourseError if the name is taken.
        """
        if name in self._courses:
            raise DuplicateCourseError(name)
        if active is None:
            active = self._config.default_course_active

        course = Course(name, active)
        self._courses[name] = course
        logger.debug("%s: added course %r (active=%s)", self.name, name, active)
        return course

    def add_course(self, name: str, active: Optional[bool] = None) -> bool:
        """Add a course unless one with the same name already exists."""
        try:
            self.create_course(name, active)
        except DuplicateCourseError:
            return False
        return True

    def get_course(self, name: str) -> Optional[Course]:
        return self._courses.get(name)

    def has_course(self, course: Course) -> bool:
        """Check if this exact course object is owned by the college."""
        return self._courses.get(course.name) is course

    def set_course_active(self, course: Course, active: bool) -> bool:
        if not self.has_course(course):
            return False
        course.set_active(active)
        logger.debug("%s: course %r active=%s", self.name, course.name, active)
        return True

    def remove_course(self, course: Course) -> bool:
        """Remove a course from the college.

        The course is deactivated first since people may still reference it;
        those references are left in place.
        """
        if not self.has_course(course):
            return False
        del self._courses[course.name]
        course.set_active(False)
        logger.info("%s: removed course %r", self.name, course.name)
        return True

    def find_courses(self, pattern: str = "*") -> List[Course]:
        """Find courses whose name satisfies ``pattern``, ordered by name."""
        return list(filter_matching(self.courses, pattern, key=lambda course: course.name))

    # People

    def create_person(self, kind: PersonType, name: str, surname: str,
                      active: Optional[bool] = None) -> Person:
        """Create a person of the given kind and return it.

        ``active`` is the student activity flag; teachers ignore it.
        Raises DuplicatePersonError if (name, surname) is taken.
        """
        if (name, surname) in self._people:
            raise DuplicatePersonError(name, surname)
        if active is None:
            active = self._config.default_student_active

        person = Person.of_type(kind, name, surname, active)
        self._people[person.identity] = person
        logger.debug("%s: added %s %s", self.name, kind.value, person.full_name)
        return person

    def add_person(self, kind: PersonType, name: str, surname: str,
                   active: Optional[bool] = None) -> bool:
        """Add a person unless (name, surname) is already registered."""
        try:
            self.create_person(kind, name, surname, active)
        except DuplicatePersonError:
            return False
        return True

    def get_person(self, name: str, surname: str) -> Optional[Person]:
        return self._people.get((name, surname))

    def has_person(self, person: Person) -> bool:
        """Check if this exact person object is registered in the college."""
        return self._people.get(person.identity) is person

    def set_student_active(self, person: Person, active: bool) -> bool:
        """Change a student's activity.

        Returns False if the person is not registered here; raises
        RoleMismatchError if the person has no student role.
        """
        if not self.has_person(person):
            return False
        person.set_student_active(active)
        logger.debug("%s: student %s active=%s", self.name, person.full_name, active)
        return True

    def find_people(self, role: Optional[Role] = None, name_pattern: str = "*",
                    surname_pattern: str = "*") -> List[Person]:
        """Find people carrying ``role`` whose name and surname match.

        ``role=None`` (or the empty ``Role(0)``) matches everyone;
        ``Role.STUDENT | Role.TEACHER`` matches PhD students only. Ordered by
        surname, then name.
        """
        found = (
            person for person in self._people.values()
            if not role or person.has_role(role)
        )
        found = filter_matching(found, name_pattern, key=lambda person: person.name)
        found = filter_matching(found, surname_pattern, key=lambda person: person.surname)
        return _by_surname(found)

    def find_people_by_course(self, role: Optional[Role], course: Course) -> List[Person]:
        """Find people holding ``course`` in their ``role`` course set.

        A combined role lists people holding the course in every one of its
        sets; None or ``Role(0)`` lists holders in any set. Ordered by name,
        then surname.
        """
        return _by_given_name(
            person for person in self._people.values()
            if person.holds_course(role, course)
        )

    # Assignment

    def _resolve_role(self, person: Person, role: Optional[Role]) -> Role:
        if role is None:
            if person.roles in (Role.STUDENT, Role.TEACHER):
                return person.roles
            raise RoleMismatchError(
                f"{person.full_name} is both a student and a teacher; a role must be given.",
                details={'name': person.name, 'surname': person.surname}
            )
        if role not in (Role.STUDENT, Role.TEACHER):
            raise RoleMismatchError(
                f"Courses are assigned in a single role, got {role!r}.",
                details={'role': repr(role)}
            )
        if not person.has_role(role):
            raise RoleMismatchError(
                f"{person.full_name} does not have the {role.name.lower()} role.",
                details={'name': person.name, 'surname': person.surname, 'role': role.name.lower()}
            )
        return role

    def assign_course(self, person: Person, course: Course, role: Optional[Role] = None) -> bool:
        """Assign ``course`` to ``person`` in the given role.

        Students attend courses, teachers handle them. ``role`` may be left
        out for people with a single role and is required for PhD students.

        Returns False if the course is already assigned in that role.
        Raises PersonNotFoundError, CourseNotFoundError, InactiveCourseError,
        RoleMismatchError or InactiveStudentError.
        """
        if not self.has_person(person):
            raise PersonNotFoundError(details={'name': person.name, 'surname': person.surname})
        if not self.has_course(course):
            raise CourseNotFoundError(details={'name': course.name})
        if not course.is_active():
            logger.info("%s: rejected assignment of inactive course %r", self.name, course.name)
            raise InactiveCourseError(details={'name': course.name})

        role = self._resolve_role(person, role)

        if role is Role.STUDENT:
            if not person.is_student_active():
                logger.info("%s: rejected enrollment of inactive student %s", self.name, person.full_name)
                raise InactiveStudentError(details={'name': person.name, 'surname': person.surname})
            assigned = person.student_enroll(course)
        else:
            assigned = person.teacher_assign(course)

        if assigned:
            logger.debug("%s: assigned %r to %s as %s", self.name, course.name,
                         person.full_name, role.name.lower())
        return assigned

    def get_statistics(self) -> Dict[str, Any]:
        """Get registry statistics."""
        people = list(self._people.values())
        students = [person for person in people if person.has_student_role()]
        return {
            'total_courses': len(self._courses),
            'active_courses': sum(1 for course in self._courses.values() if course.is_active()),
            'total_people': len(people),
            'students': len(students),
            'teachers': sum(1 for person in people if person.has_teacher_role()),
            'phd_students': sum(1 for person in people if person.person_type is PersonType.PHD_STUDENT),
            'active_students': sum(1 for person in students if person.is_student_active()),
        }
