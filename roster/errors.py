# roster/errors.py
"""Модуль для определения пользовательских исключений приложения."""
from enum import Enum


class Field(str, Enum):
    """Поле записи студента, которое не прошло проверку."""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    PRELIM = "prelim_grade"
    MIDTERM = "midterm_grade"
    FINAL = "final_grade"


class Rule(str, Enum):
    """Нарушенное правило проверки."""
    REQUIRED = "required"
    CHARSET = "charset"
    MIN_LENGTH = "min_length"
    FORMAT = "format"
    RANGE = "range"


class StudentAppError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass


class ValidationError(StudentAppError, ValueError):
    """Поле записи не удовлетворяет своему ограничению."""

    def __init__(self, message: str, field: Field, rule: Rule):
        super().__init__(message)
        self.message = message
        self.field = field
        self.rule = rule


class FormatError(StudentAppError, ValueError):
    """Строку файла данных не удалось разобрать."""
    pass


class FileProcessingError(StudentAppError):
    """Исключение, связанное с ошибками файловых операций."""
    pass


class DuplicateKeyError(StudentAppError):
    """Исключение при попытке добавить студента с уже существующим ID."""
    pass


class InvalidArgumentError(StudentAppError, ValueError):
    """Пустой или отсутствующий обязательный аргумент (например, ID)."""
    pass
