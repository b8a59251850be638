# tests/conftest.py
import pytest
from typing import List
from gradebook.models import Student, Teacher, Parent
from gradebook.directory import Directory

@pytest.fixture
def sample_students() -> List[Student]:
    """Фикстура, предоставляющая тестовый набор студентов."""
    return [
        Student("alice", "123", [4, 5, 3]),
        Student("bob", "123", [5, 4, 4]),
    ]

@pytest.fixture
def sample_directory(sample_students) -> Directory:
    """Directory с тем же составом, что и в default_roster()."""
    alice, bob = sample_students
    return Directory([
        alice,
        bob,
        Teacher("tina", "teach", [alice, bob]),
        Parent("paul", "parent", alice),
    ])

@pytest.fixture
def scripted_input(monkeypatch):
    """Подменяет input() заданной последовательностью ответов.

    Приглашение печатается в stdout, как это делает настоящий input().
    Когда ответы заканчиваются, бросается EOFError, чтобы тест не завис.
    """
    def install(answers):
        sequence = iter(answers)

        def mock_input(prompt=""):
            print(prompt, end="")
            try:
                return next(sequence)
            except StopIteration:
                raise EOFError("scripted input exhausted")

        monkeypatch.setattr('builtins.input', mock_input)

    return install
