# roster/io_utils.py
"""Модуль для операций ввода/вывода: файл данных со строками ID|Name|Email|... и его резервная копия."""
import logging
import os
import shutil
from datetime import datetime
from typing import Iterable, List, Tuple, Union

from .models import Student
from .errors import FileProcessingError, FormatError, ValidationError

logger = logging.getLogger(__name__)

HEADER_TITLE = "# Student Management System Data File"
HEADER_FORMAT = "# Format: ID|Name|Email|PrelimGrade|MidtermGrade|FinalGrade"
COMMENT_PREFIX = "#"
ENCODING = "utf-8"

LineError = Tuple[int, str]


def parse_student_lines(lines: Iterable[Union[str, bytes]]) -> Tuple[List[Student], List[LineError]]:
    """Разбирает строки файла данных.

    Пустые строки и комментарии пропускаются. Строки с ошибками (в том числе
    байтовые строки не в UTF-8) не прерывают разбор: они возвращаются вторым
    элементом как пары (номер строки, сообщение).
    """
    students = []
    errors = []
    for line_num, raw in enumerate(lines, start=1):
        if isinstance(raw, bytes):
            try:
                raw = raw.decode(ENCODING)
            except UnicodeDecodeError:
                errors.append((line_num, "Invalid file line encoding"))
                continue
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue

        try:
            students.append(Student.from_line(line))
        except (FormatError, ValidationError) as e:
            errors.append((line_num, str(e)))

    return students, errors


def read_students_file(filepath: str) -> Tuple[List[Student], List[LineError]]:
    """Читает данные о студентах из файла данных.

    Файл читается байтами: каждая строка декодируется отдельно, чтобы один
    испорченный байт не обрывал загрузку остальных строк.
    """
    try:
        with open(filepath, mode='rb') as file:
            return parse_student_lines(file)
    except FileNotFoundError:
        raise FileProcessingError(f"File not found: {filepath}")
    except OSError as e:
        raise FileProcessingError(f"Error reading file {filepath}: {e}")


def backup_file(filepath: str, backup_path: str) -> bool:
    """Копирует файл данных в резервный, перезаписывая прошлую копию.

    Возвращает False, если копировать нечего.
    """
    if not os.path.exists(filepath):
        return False
    try:
        shutil.copyfile(filepath, backup_path)
    except OSError as e:
        raise FileProcessingError(f"Error creating backup {backup_path}: {e}")
    logger.debug("Backup written to %s", backup_path)
    return True


def format_header(updated_at: datetime) -> List[str]:
    return [
        HEADER_TITLE,
        HEADER_FORMAT,
        f"# Last updated: {updated_at:%a %b %d %H:%M:%S %Y}",
    ]


def write_students_file(filepath: str, students: List[Student]):
    """Записывает заголовок и по одной строке на студента в порядке списка."""
    try:
        with open(filepath, mode='w', encoding=ENCODING, newline='\n') as file:
            for line in format_header(datetime.now()):
                file.write(line + "\n")
            for s in students:
                file.write(s.to_line() + "\n")
    except OSError as e:
        raise FileProcessingError(f"Error saving to file {filepath}: {e}")
