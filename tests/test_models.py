# tests/test_models.py
import pytest
from gradebook.models import GradeSet, Role, Student, Teacher, Parent

@pytest.mark.parametrize("grades", [[5], [1, 2, 3, 4, 5], [3, 3, 4], [2, 5, 5, 1]])
def test_average_is_arithmetic_mean(grades):
    gs = GradeSet(grades)
    assert gs.average() == pytest.approx(sum(grades) / len(grades))
    assert all(gs.min() <= g <= gs.max() for g in grades)

def test_grade_set_stats():
    gs = GradeSet([5, 4, 3])
    assert gs.average() == 4.0
    assert gs.min() == 3
    assert gs.max() == 5

def test_empty_grade_set():
    gs = GradeSet()
    assert gs.average() == 0.0
    assert gs.min() is None
    assert gs.max() is None
    assert len(gs) == 0

@pytest.mark.parametrize("value", [0, 6, -1, 100, True, 4.5, "4"])
def test_out_of_range_grade_rejected(value):
    gs = GradeSet([4, 5])
    gs.add(value)
    gs.add(value)
    assert gs.grades == (4, 5)

def test_initial_grades_are_filtered():
    gs = GradeSet([0, 3, 7, 5])
    assert gs.grades == (3, 5)

def test_grades_cannot_be_modified_from_outside():
    s = Student("x", "x", [5])
    assert isinstance(s.grades, tuple)
    s.add_grade(4)
    assert s.grades == (5, 4)

def test_authenticate_is_exact_and_case_sensitive():
    s = Student("alice", "Secret")
    assert s.authenticate("alice", "Secret")
    assert not s.authenticate("Alice", "Secret")
    assert not s.authenticate("alice", "secret")
    assert not s.authenticate("alice ", "Secret")
    assert not s.authenticate("", "")

def test_roles(sample_students):
    alice, bob = sample_students
    assert alice.role is Role.STUDENT
    assert Teacher("t", "t", [alice]).role is Role.TEACHER
    assert Parent("p", "p", alice).role is Role.PARENT

def test_identity_is_read_only():
    s = Student("alice", "123")
    with pytest.raises(AttributeError):
        s.login = "mallory"

def test_teacher_class_average(sample_students):
    alice, _ = sample_students
    other = Student("carol", "1", [5, 4, 4])
    teacher = Teacher("tina", "teach", [alice, other])
    assert teacher.class_average() == pytest.approx((4.0 + 13 / 3) / 2)

def test_teacher_without_students():
    assert Teacher("tina", "teach", []).class_average() == 0.0

def test_teacher_and_parent_share_student(sample_students):
    alice, bob = sample_students
    teacher = Teacher("tina", "teach", [alice, bob])
    parent = Parent("paul", "parent", alice)
    alice.add_grade(5)
    assert teacher.students[0] is alice
    assert parent.child.grades == (4, 5, 3, 5)
