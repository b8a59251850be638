# gradebook/models.py
"""Модуль, определяющий основные модели данных: оценки, роли и пользователей.

Каждый пользователь (Student, Teacher, Parent) хранит логин/пароль и
реализует своё интерактивное меню через метод interact().
"""
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from . import io_utils, processing

logger = logging.getLogger(__name__)

GRADE_MIN = 1
GRADE_MAX = 5


class GradeSet:
    """Упорядоченный набор оценок студента (целые числа от 1 до 5)."""
    def __init__(self, grades: Iterable[int] = ()):
        self._grades: List[int] = []
        for grade in grades:
            self.add(grade)

    def add(self, value: int):
        """Добавляет оценку. Значения вне диапазона 1-5 молча отбрасываются."""
        # bool является подклассом int, но оценкой не является
        if isinstance(value, bool) or not isinstance(value, int) or not GRADE_MIN <= value <= GRADE_MAX:
            logger.debug(f"Rejected grade {value!r}: allowed range is {GRADE_MIN}-{GRADE_MAX}")
            return
        self._grades.append(value)

    @property
    def grades(self) -> Tuple[int, ...]:
        return tuple(self._grades)

    def average(self) -> float:
        """Рассчитывает средний балл. Возвращает 0.0, если оценок нет."""
        if not self._grades:
            return 0.0
        return sum(self._grades) / len(self._grades)

    def min(self) -> Optional[int]:
        return min(self._grades) if self._grades else None

    def max(self) -> Optional[int]:
        return max(self._grades) if self._grades else None

    def __len__(self) -> int:
        return len(self._grades)

    def __iter__(self) -> Iterator[int]:
        return iter(self._grades)

    def __repr__(self) -> str:
        return f"GradeSet({self._grades})"


class Role(Enum):
    """Роль пользователя."""
    STUDENT = "student"
    TEACHER = "teacher"
    PARENT = "parent"


class User(ABC):
    """Базовый класс: логин, пароль, роль и интерактивное меню."""
    def __init__(self, login: str, password: str, role: Role):
        self._login = login
        self._password = password
        self._role = role

    @property
    def login(self) -> str:
        return self._login

    @property
    def role(self) -> Role:
        return self._role

    def authenticate(self, login: str, password: str) -> bool:
        """Проверяет точное (с учётом регистра) совпадение логина и пароля."""
        return login == self._login and password == self._password

    @abstractmethod
    def interact(self):
        """Запускает меню пользователя. Возвращает управление после выбора 0."""

    def _menu_loop(self, title: str, options: str, actions: Dict[int, Callable[[], None]]):
        while True:
            io_utils.print_menu(title, self._login, options)
            choice = io_utils.read_number()
            if choice == 0:
                logger.info(f"{self._login} logged out")
                break
            action = actions.get(choice)
            if action is None:
                logger.debug(f"{self._login}: unknown menu selection {choice!r}")
                continue
            action()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(login='{self._login}')"


class Student(User):
    """Студент: владеет набором оценок и видит только свою статистику."""
    def __init__(self, login: str, password: str, grades: Iterable[int] = ()):
        super().__init__(login, password, Role.STUDENT)
        self._grade_set = GradeSet(grades)

    @property
    def grades(self) -> Tuple[int, ...]:
        return self._grade_set.grades

    def add_grade(self, value: int):
        """Добавляет оценку (значения вне диапазона 1-5 игнорируются)."""
        self._grade_set.add(value)

    def average(self) -> float:
        return self._grade_set.average()

    def min(self) -> Optional[int]:
        return self._grade_set.min()

    def max(self) -> Optional[int]:
        return self._grade_set.max()

    def interact(self):
        self._menu_loop("Student", "1) Grades  2) Stats  3) Add grade  0) Logout", {
            1: self._show_grades,
            2: self._show_stats,
            3: self._add_grade,
        })

    def _show_grades(self):
        print(f"Grades: {processing.format_grades(self.grades)}")
        io_utils.pause()

    def _show_stats(self):
        print(processing.format_stats(self))
        io_utils.pause()

    def _add_grade(self):
        value = io_utils.read_number("Grade: ")
        if value is not None:
            self.add_grade(value)
        io_utils.pause()


class Teacher(User):
    """Учитель: видит статистику всех своих студентов (студентами не владеет)."""
    def __init__(self, login: str, password: str, students: Sequence[Student] = ()):
        super().__init__(login, password, Role.TEACHER)
        self._students: Tuple[Student, ...] = tuple(students)

    @property
    def students(self) -> Tuple[Student, ...]:
        return self._students

    def class_average(self) -> float:
        """Среднее из средних баллов студентов (0.0, если студентов нет)."""
        return processing.class_average(self._students)

    def interact(self):
        self._menu_loop("Teacher", "1) Per-student  2) Class avg  0) Logout", {
            1: self._show_student_stats,
            2: self._show_class_average,
        })

    def _show_student_stats(self):
        for idx, student in enumerate(self._students, start=1):
            print(f"{idx}) {student.login}")
        idx = io_utils.read_number("Pick:")
        # Неверный номер: ничего не выводим
        if idx is not None and 1 <= idx <= len(self._students):
            print(processing.format_stats(self._students[idx - 1]))
        io_utils.pause()

    def _show_class_average(self):
        print(f"Class average:{processing.format_number(self.class_average())}")
        io_utils.pause()


class Parent(User):
    """Родитель: доступен только просмотр оценок и статистики ребёнка."""
    def __init__(self, login: str, password: str, child: Student):
        super().__init__(login, password, Role.PARENT)
        self._child = child

    @property
    def child(self) -> Student:
        return self._child

    def interact(self):
        self._menu_loop("Parent", "1) Child grades  2) Child stats  0) Logout", {
            1: self._show_child_grades,
            2: self._show_child_stats,
        })

    def _show_child_grades(self):
        print(f"Grades: {processing.format_grades(self._child.grades)}")
        io_utils.pause()

    def _show_child_stats(self):
        print(processing.format_stats(self._child))
        io_utils.pause()
