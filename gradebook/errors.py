# gradebook/errors.py
"""Модуль для определения пользовательских исключений приложения."""

class GradebookError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass

class RosterError(GradebookError):
    """Исключение, связанное с некорректной конфигурацией списка пользователей."""
    pass

class StudentNotFoundError(RosterError):
    """Исключение, когда студент с заданным логином не найден в списке."""
    pass
