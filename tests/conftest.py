# tests/conftest.py
import pytest
from typing import List
from roster.models import Student
from roster.repository import StudentRepository


@pytest.fixture
def sample_students() -> List[Student]:
    """Фикстура, предоставляющая тестовый набор студентов."""
    return [
        Student("S-001", "Bob Stone", "bob@example.com", 70, 70, 70),
        Student("S-002", "alice Moore", "alice@example.com", 90, 90, 90),
        Student("S-003", "Charlie Day", "charlie@example.com", 80, 80, 80),
    ]


@pytest.fixture
def data_paths(tmp_path):
    return str(tmp_path / "students.txt"), str(tmp_path / "students_backup.txt")


@pytest.fixture
def repository(data_paths) -> StudentRepository:
    """Пустой репозиторий, файлы которого лежат во временной папке."""
    data_file, backup_file = data_paths
    return StudentRepository(data_file, backup_file)


@pytest.fixture
def filled_repository(repository, sample_students) -> StudentRepository:
    for s in sample_students:
        repository.add(s)
    return repository
