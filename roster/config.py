# roster/config.py
"""Пути к файлу данных и резервной копии."""
import os
from typing import Optional, Tuple

DEFAULT_DATA_FILE = "students.txt"
DEFAULT_BACKUP_FILE = "students_backup.txt"

DATA_FILE_ENV = "STUDENT_ROSTER_DATA_FILE"
BACKUP_FILE_ENV = "STUDENT_ROSTER_BACKUP_FILE"


def resolve_paths(data_file: Optional[str] = None,
                  backup_file: Optional[str] = None) -> Tuple[str, str]:
    """Явно переданный путь важнее переменной окружения, переменная важнее значения по умолчанию."""
    data_file = data_file or os.environ.get(DATA_FILE_ENV) or DEFAULT_DATA_FILE
    backup_file = backup_file or os.environ.get(BACKUP_FILE_ENV) or DEFAULT_BACKUP_FILE
    return os.path.expanduser(data_file), os.path.expanduser(backup_file)
