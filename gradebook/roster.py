# gradebook/roster.py
"""Конфигурация начального списка пользователей и сборка Directory."""
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List

from .directory import Directory
from .errors import StudentNotFoundError
from .models import Parent, Student, Teacher

logger = logging.getLogger(__name__)


@dataclass
class StudentEntry:
    login: str
    password: str
    grades: List[int] = field(default_factory=list)


@dataclass
class TeacherEntry:
    login: str
    password: str
    # Логины студентов
    students: List[str] = field(default_factory=list)


@dataclass
class ParentEntry:
    login: str
    password: str
    # Логин ребёнка
    child: str


@dataclass
class RosterConfig:
    """Описание всех пользователей системы, из которого собирается Directory."""
    students: List[StudentEntry] = field(default_factory=list)
    teachers: List[TeacherEntry] = field(default_factory=list)
    parents: List[ParentEntry] = field(default_factory=list)
    first_match_only: bool = False

    def build(self) -> Directory:
        """Создаёт студентов один раз и раздаёт общие ссылки учителям и родителям.

        Регистрирует сначала студентов, затем учителей, затем родителей.
        Бросает StudentNotFoundError, если запись ссылается на неизвестного студента.
        """
        students: List[Student] = []
        by_login: Dict[str, Student] = {}
        for entry in self.students:
            student = Student(entry.login, entry.password, entry.grades)
            students.append(student)
            by_login.setdefault(entry.login, student)

        teachers = [
            Teacher(entry.login, entry.password,
                    [_lookup(by_login, login, entry.login) for login in entry.students])
            for entry in self.teachers
        ]
        parents = [
            Parent(entry.login, entry.password, _lookup(by_login, entry.child, entry.login))
            for entry in self.parents
        ]

        users = students + teachers + parents
        duplicates = [login for login, count in Counter(u.login for u in users).items() if count > 1]
        if duplicates:
            logger.warning(f"Duplicate logins in roster: {', '.join(sorted(duplicates))}")

        return Directory(users, first_match_only=self.first_match_only)


def _lookup(by_login: Dict[str, Student], login: str, owner: str) -> Student:
    try:
        return by_login[login]
    except KeyError:
        raise StudentNotFoundError(f"Student '{login}' referenced by '{owner}' does not exist.") from None


def default_roster() -> RosterConfig:
    """Фиксированный набор: два студента, учитель обоих и родитель alice."""
    return RosterConfig(
        students=[
            StudentEntry("alice", "123", [4, 5, 3]),
            StudentEntry("bob", "123", [5, 4, 4]),
        ],
        teachers=[TeacherEntry("tina", "teach", ["alice", "bob"])],
        parents=[ParentEntry("paul", "parent", "alice")],
    )
