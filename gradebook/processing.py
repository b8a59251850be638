# gradebook/processing.py
"""Модуль для обработки данных: статистика по оценкам и её форматирование."""
from typing import Iterable, Optional, Sequence

def format_number(value: float) -> str:
    """Форматирует число как поток вывода по умолчанию: 4.0 -> '4', 4.1666.. -> '4.16667'."""
    return f"{value:g}"

def format_optional(value: Optional[int]) -> str:
    """Возвращает '-' для отсутствующего значения."""
    return "-" if value is None else str(value)

def format_grades(grades: Iterable[int]) -> str:
    return " ".join(map(str, grades))

def format_stats(student) -> str:
    """Строка статистики студента: средний балл, минимум и максимум."""
    return (f"Avg:{format_number(student.average())}"
            f" Min:{format_optional(student.min())}"
            f" Max:{format_optional(student.max())}")

def class_average(students: Sequence) -> float:
    """Среднее арифметическое средних баллов студентов. Возвращает 0.0, если список пуст."""
    if not students:
        return 0.0
    return sum(s.average() for s in students) / len(students)
