# roster/processing.py
"""Модуль для обработки данных: сортировка и статистика по списку студентов."""
from typing import Any, Callable, Dict, List, Optional, Tuple

from .models import Student, average_key, name_key

# Ключ сортировки -> (функция ключа, по убыванию)
SORT_ORDERS: Dict[str, Tuple[Callable[[Student], Any], bool]] = {
    'name': (name_key, False),
    'avg': (average_key, True),
}


def sort_students(students: List[Student], by: str) -> List[Student]:
    """Возвращает отсортированную копию списка. Исходный порядок не меняется.

    Сортировка устойчивая: при равных ключах сохраняется прежний порядок.
    """
    try:
        key, descending = SORT_ORDERS[by]
    except KeyError:
        raise ValueError("Invalid sort key. Available: " + ", ".join(SORT_ORDERS))
    return sorted(students, key=key, reverse=descending)


def overall_average(students: List[Student]) -> float:
    """Среднее из средних баллов студентов. Для пустого списка 0.0."""
    if not students:
        return 0.0
    return sum(s.average for s in students) / len(students)


def search_by_name(students: List[Student], text: Optional[str]) -> List[Student]:
    """Поиск по подстроке имени без учёта регистра. Пустой запрос ничего не находит."""
    if not text or not text.strip():
        return []
    term = text.strip().lower()
    return [s for s in students if term in s.name.lower()]


def get_group_statistics(students: List[Student]) -> Optional[Dict[str, Any]]:
    """Рассчитывает статистику по группе студентов."""
    if not students:
        return None

    # max/min возвращают первого из равных, как и устойчивая сортировка
    best_student = max(students, key=average_key)
    worst_student = min(students, key=average_key)

    return {
        "total_students": len(students),
        "overall_average": overall_average(students),
        "best_student": best_student,
        "worst_student": worst_student,
    }
