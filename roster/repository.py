# roster/repository.py
"""Хранилище студентов в памяти с сохранением в файл после каждого изменения."""
import logging
import os
from typing import Any, Dict, List, Optional

from . import io_utils, processing
from .config import resolve_paths
from .errors import DuplicateKeyError, FileProcessingError, InvalidArgumentError
from .models import Student

logger = logging.getLogger(__name__)


def _normalize_key(student_id: Optional[str]) -> str:
    return student_id.strip().lower() if student_id else ""


class StudentRepository:
    """Упорядоченный список студентов и его файл данных.

    Порядок списка - порядок добавления; обновление заменяет запись на её месте.
    ID уникальны без учёта регистра.
    """

    def __init__(self, data_file: Optional[str] = None, backup_file: Optional[str] = None):
        self.data_file, self.backup_file = resolve_paths(data_file, backup_file)
        self._students: List[Student] = []
        self.load_errors: List[io_utils.LineError] = []
        self.load()

    # --- сохранение и загрузка ---

    def load(self) -> int:
        """Загружает студентов из файла данных. Никогда не выбрасывает исключений."""
        self._students = []
        self.load_errors = []
        if not os.path.exists(self.data_file):
            logger.info("No existing data file found at %s. Starting with empty database.",
                        self.data_file)
            return 0

        try:
            students, errors = io_utils.read_students_file(self.data_file)
        except FileProcessingError as e:
            logger.error("%s", e)
            return 0

        for line_num, message in errors:
            logger.warning("Error parsing line %d: %s", line_num, message)

        self._students = students
        self.load_errors = errors
        logger.info("Loaded %d students from file.", len(students))
        return len(students)

    def save(self) -> bool:
        """Сохраняет всех студентов, предварительно скопировав прошлый файл в резервный.

        Ошибка записи не трогает данные в памяти: возвращается False.
        """
        try:
            io_utils.backup_file(self.data_file, self.backup_file)
            io_utils.write_students_file(self.data_file, self._students)
        except FileProcessingError as e:
            logger.error("%s", e)
            return False
        logger.debug("Saved %d students to %s", len(self._students), self.data_file)
        return True

    # --- изменение данных ---

    def add(self, student: Student) -> bool:
        """Добавляет студента в конец списка и сохраняет файл."""
        if student is None:
            raise InvalidArgumentError("Student cannot be empty")
        if self.find_by_id(student.id) is not None:
            raise DuplicateKeyError(f"Student with ID {student.id} already exists")

        self._students.append(student)
        return self.save()

    def delete(self, student_id: str) -> bool:
        """Удаляет всех студентов с этим ID (без учёта регистра). True, если кто-то удалён."""
        key = _normalize_key(student_id)
        if not key:
            raise InvalidArgumentError("Student ID cannot be empty")

        remaining = [s for s in self._students if s.id.lower() != key]
        removed = len(remaining) != len(self._students)
        if removed:
            self._students = remaining
            self.save()
        return removed

    def update(self, student_id: str, student: Student) -> bool:
        """Заменяет первую запись с этим ID на новую, сохраняя её позицию.

        ID новой записи не обязан совпадать с ключом поиска.
        """
        key = _normalize_key(student_id)
        if not key:
            raise InvalidArgumentError("Student ID cannot be empty")
        if student is None:
            raise InvalidArgumentError("Updated student data cannot be empty")

        for i, s in enumerate(self._students):
            if s.id.lower() == key:
                self._students[i] = student
                return self.save()
        return False

    # --- запросы ---

    def find_by_id(self, student_id: Optional[str]) -> Optional[Student]:
        key = _normalize_key(student_id)
        if not key:
            return None
        return next((s for s in self._students if s.id.lower() == key), None)

    def search_by_name(self, text: Optional[str]) -> List[Student]:
        return processing.search_by_name(self._students, text)

    def get_all(self) -> List[Student]:
        return list(self._students)

    def sorted_by_name(self) -> List[Student]:
        return processing.sort_students(self._students, 'name')

    def sorted_by_grade(self) -> List[Student]:
        """Копия списка по убыванию среднего балла."""
        return processing.sort_students(self._students, 'avg')

    def count(self) -> int:
        return len(self._students)

    def average_grade(self) -> float:
        return processing.overall_average(self._students)

    def statistics(self) -> Optional[Dict[str, Any]]:
        stats = processing.get_group_statistics(self._students)
        if stats is None:
            return None
        stats["data_file"] = self.data_file
        stats["backup_file"] = self.backup_file
        return stats

    def __len__(self) -> int:
        return len(self._students)
