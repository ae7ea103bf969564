# roster/models.py
"""Модуль, определяющий основную модель данных Student и её строковый формат."""
from __future__ import annotations

import re
from typing import Optional

from .errors import Field, FormatError, Rule, ValidationError

DELIMITER = "|"
FIELD_COUNT = 6

ID_PATTERN = re.compile(r"^[A-Za-z0-9-]+$")
EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
MIN_NAME_LENGTH = 2


class Student:
    """Представляет студента: ID, имя, email и три оценки (prelim, midterm, final).

    После создания объект не изменяется: обновление записи в репозитории
    заменяет её целиком.
    """

    def __init__(self, student_id: str, name: str, email: str,
                 prelim_grade: float, midterm_grade: float, final_grade: float):
        # Порядок проверок важен: пользователь видит только первую ошибку.
        self._id = self._validate_id(student_id)
        self._name = self._validate_name(name)
        self._email = self._validate_email(email)
        self._prelim_grade = self._validate_grade(prelim_grade, "Prelim", Field.PRELIM)
        self._midterm_grade = self._validate_grade(midterm_grade, "Midterm", Field.MIDTERM)
        self._final_grade = self._validate_grade(final_grade, "Final", Field.FINAL)

    @classmethod
    def build(cls, student_id: str, name: str, email: str,
              prelim_grade: float, midterm_grade: float, final_grade: float) -> Outcome:
        """Создаёт студента без исключений: возвращает Outcome с записью или ошибкой."""
        try:
            student = cls(student_id, name, email, prelim_grade, midterm_grade, final_grade)
        except ValidationError as e:
            return Outcome.fail(e)
        return Outcome.succeed(student)

    # --- свойства ---

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def prelim_grade(self) -> float:
        return self._prelim_grade

    @property
    def midterm_grade(self) -> float:
        return self._midterm_grade

    @property
    def final_grade(self) -> float:
        return self._final_grade

    @property
    def average(self) -> float:
        """Средний балл по трём оценкам. Вычисляется при каждом обращении."""
        return (self._prelim_grade + self._midterm_grade + self._final_grade) / 3

    # --- строковый формат файла ---

    def to_line(self) -> str:
        """Строка для файла данных: ID|Name|Email|Prelim|Midterm|Final.

        Символ '|' внутри полей не экранируется.
        """
        return DELIMITER.join([
            self._id,
            self._name,
            self._email,
            f"{self._prelim_grade:.2f}",
            f"{self._midterm_grade:.2f}",
            f"{self._final_grade:.2f}",
        ])

    @classmethod
    def from_line(cls, line: str) -> Student:
        """Разбирает строку файла данных. Ошибки полей приходят из конструктора."""
        if line is None or not line.strip():
            raise FormatError("Invalid file line")

        parts = line.split(DELIMITER)
        if len(parts) != FIELD_COUNT:
            raise FormatError(f"Invalid file format - expected {FIELD_COUNT} fields")

        grades = [_parse_grade(part) for part in parts[3:]]

        return cls(parts[0], parts[1], parts[2], *grades)

    # --- проверки полей ---

    @staticmethod
    def _validate_id(student_id: str) -> str:
        if not isinstance(student_id, str) or not student_id.strip():
            raise ValidationError("Student ID cannot be empty", Field.ID, Rule.REQUIRED)
        # Шаблон проверяется по исходной строке: пробелы вокруг ID недопустимы.
        if not ID_PATTERN.fullmatch(student_id):
            raise ValidationError(
                "Student ID can only contain letters, numbers, and hyphens",
                Field.ID, Rule.CHARSET,
            )
        return student_id.strip()

    @staticmethod
    def _validate_name(name: str) -> str:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Student name cannot be empty", Field.NAME, Rule.REQUIRED)
        name = name.strip()
        if len(name) < MIN_NAME_LENGTH:
            raise ValidationError(
                f"Student name must be at least {MIN_NAME_LENGTH} characters",
                Field.NAME, Rule.MIN_LENGTH,
            )
        return name

    @staticmethod
    def _validate_email(email: str) -> str:
        if not isinstance(email, str) or not email.strip():
            raise ValidationError("Email cannot be empty", Field.EMAIL, Rule.REQUIRED)
        if not EMAIL_PATTERN.fullmatch(email):
            raise ValidationError("Invalid email format", Field.EMAIL, Rule.FORMAT)
        return email.strip().lower()

    @staticmethod
    def _validate_grade(grade: float, label: str, field: Field) -> float:
        # bool - подкласс int, но оценкой не является; NaN не проходит сравнение.
        if (isinstance(grade, bool) or not isinstance(grade, (int, float))
                or not 0 <= grade <= 100):
            raise ValidationError(f"{label} grade must be between 0 and 100", field, Rule.RANGE)
        return float(grade)

    # --- сравнение и представление ---

    def __eq__(self, other: object) -> bool:
        """Студенты равны, если их ID совпадают с учётом регистра."""
        if not isinstance(other, Student):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return f"Student(id='{self._id}', name='{self._name}', average={self.average:.2f})"

    def __str__(self) -> str:
        """Возвращает удобное для пользователя строковое представление объекта."""
        return (f"ID: {self._id} | Name: {self._name} | Email: {self._email} | "
                f"Prelim: {self._prelim_grade:.2f} | Midterm: {self._midterm_grade:.2f} | "
                f"Final: {self._final_grade:.2f} | Average: {self.average:.2f}")


def name_key(student: Student) -> str:
    """Ключ естественного порядка: имя без учёта регистра."""
    return student.name.lower()


def average_key(student: Student) -> float:
    return student.average


def _parse_grade(text: str) -> float:
    # float() понимает "1_0", в файле данных такая запись считается ошибкой.
    if "_" in text:
        raise FormatError("Invalid grade format")
    try:
        return float(text)
    except ValueError:
        raise FormatError("Invalid grade format")


class Outcome:
    """Результат создания записи: либо студент, либо ошибка проверки.

    Позволяет интерфейсу ветвиться по полю и правилу, не перехватывая исключения.
    """

    def __init__(self, student: Optional[Student] = None,
                 error: Optional[ValidationError] = None):
        self._student = student
        self._error = error

    @classmethod
    def succeed(cls, student: Student) -> Outcome:
        return cls(student=student)

    @classmethod
    def fail(cls, error: ValidationError) -> Outcome:
        return cls(error=error)

    @property
    def success(self) -> bool:
        return self._error is None

    @property
    def student(self) -> Optional[Student]:
        return self._student

    @property
    def error(self) -> Optional[ValidationError]:
        return self._error

    @property
    def detail(self) -> Optional[str]:
        return self._error.message if self._error else None

    @property
    def field(self) -> Optional[Field]:
        return self._error.field if self._error else None

    @property
    def rule(self) -> Optional[Rule]:
        return self._error.rule if self._error else None

    def __str__(self) -> str:
        if self.success:
            return f"Success: {self._student.id}"
        return f"Error: {self._error.message}"
