"""
Shared fixtures for the registrar tests.
"""
import pytest

from registrar import College, PersonType


@pytest.fixture
def college():
    return College({'name': "test-college"})


@pytest.fixture
def stocked(college):
    """A college with a few courses and one person of every kind."""
    for name in ("Biology", "Chemistry", "Math", "Physics"):
        college.add_course(name)
    college.add_person(PersonType.STUDENT, "Anna", "Nowak")
    college.add_person(PersonType.STUDENT, "Jan", "Kowalski")
    college.add_person(PersonType.TEACHER, "Ewa", "Zielinska")
    college.add_person(PersonType.PHD_STUDENT, "Piotr", "Wisniewski")
    return college
