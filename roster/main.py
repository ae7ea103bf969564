# roster/main.py
"""Главный модуль, реализующий консольный интерфейс (CLI) для управления студентами."""
import argparse
import logging
import sys
import traceback
from typing import List, Optional

from . import errors
from .models import Student
from .repository import StudentRepository

GRADE_LABELS = ["Prelim", "Midterm", "Final"]


def print_menu(repository: StudentRepository):
    """Выводит на экран главное меню."""
    print("\n" + "="*40)
    print("      STUDENT MANAGEMENT SYSTEM")
    print("="*40)
    print("1. Add new student")
    print("2. Delete student")
    print("3. Update student information")
    print("4. Search student by ID")
    print("5. Search students by name")
    print("6. View all students")
    print("7. Sort students by name")
    print("8. Sort students by grade")
    print("9. View statistics")
    print("0. Exit")
    print("="*40)
    print(f"Total students: {repository.count()}")


def print_students(title: str, students: List[Student]):
    if not students:
        print("ℹ️ No students in the database.")
        return
    print(f"\n--- {title} ---")
    for i, s in enumerate(students, start=1):
        print(f"{i}. {s}")


def prompt(label: str, current: Optional[str] = None) -> str:
    """Запрашивает значение; при обновлении пустой ввод оставляет текущее."""
    if current is None:
        return input(f"{label}: ")
    value = input(f"{label} [{current}]: ")
    return value if value.strip() else current


def read_student(student_id: Optional[str] = None, current: Optional[Student] = None) -> Optional[Student]:
    """Собирает поля студента из ввода. Печатает причину отказа и возвращает None."""
    if student_id is None:
        student_id = prompt("Student ID")
    name = prompt("Name", current.name if current else None)
    email = prompt("Email", current.email if current else None)

    existing = ([current.prelim_grade, current.midterm_grade, current.final_grade]
                if current else [None] * 3)
    grades = []
    for label, value in zip(GRADE_LABELS, existing):
        text = prompt(f"{label} grade (0-100)", f"{value:.2f}" if value is not None else None)
        try:
            grades.append(float(text))
        except ValueError:
            print(f"❌ {label} grade must be a number.")
            return None

    outcome = Student.build(student_id, name, email, *grades)
    if not outcome.success:
        print(f"❌ Validation error: {outcome.detail}")
        return None
    return outcome.student


def report_saved(saved: bool, message: str):
    if saved:
        print(f"✅ {message}")
    else:
        print(f"⚠️ {message}, but the data file could not be written. Changes are kept in memory.")


def add_student(repository: StudentRepository):
    student = read_student()
    if student is None:
        return
    report_saved(repository.add(student), f"Student {student.name} added")


def delete_student(repository: StudentRepository):
    student_id = prompt("Student ID to delete")
    student = repository.find_by_id(student_id)
    if student is None:
        print(f"❌ Student with ID '{student_id}' not found.")
        return
    print(student)
    if input("Delete this student? (y/n): ").strip().lower() != 'y':
        print("ℹ️ Deletion cancelled.")
        return
    if repository.delete(student_id):
        print(f"✅ Student with ID {student.id} deleted.")


def update_student(repository: StudentRepository):
    student_id = prompt("Student ID to update")
    current = repository.find_by_id(student_id)
    if current is None:
        print(f"❌ Student with ID '{student_id}' not found.")
        return
    print(current)
    print("Press Enter to keep the current value.")
    student = read_student(current.id, current)
    if student is None:
        return
    report_saved(repository.update(current.id, student), f"Student {student.id} updated")


def find_student(repository: StudentRepository):
    student_id = prompt("Student ID")
    student = repository.find_by_id(student_id)
    if student is None:
        print(f"❌ Student with ID '{student_id}' not found.")
    else:
        print(student)


def search_students(repository: StudentRepository):
    text = prompt("Name contains")
    found = repository.search_by_name(text)
    if not found:
        print("ℹ️ No matching students.")
    else:
        print_students(f"Students matching '{text.strip()}'", found)


def show_statistics(repository: StudentRepository):
    stats = repository.statistics()
    if not stats:
        print("ℹ️ No students in the database, statistics unavailable.")
        return
    print("\n--- Statistics ---")
    print(f"Total students: {stats['total_students']}")
    print(f"Average grade (all students): {stats['overall_average']:.2f}")
    print(f"Best student: {stats['best_student'].name} (average: {stats['best_student'].average:.2f})")
    print(f"Worst student: {stats['worst_student'].name} (average: {stats['worst_student'].average:.2f})")
    print(f"Data file: {stats['data_file']}")
    print(f"Backup file: {stats['backup_file']}")


def main_cli(repository: StudentRepository):
    """Основной цикл консольного приложения."""
    actions = {
        '1': add_student,
        '2': delete_student,
        '3': update_student,
        '4': find_student,
        '5': search_students,
        '6': lambda r: print_students("All students", r.get_all()),
        '7': lambda r: print_students("Students sorted by name (A-Z)", r.sorted_by_name()),
        '8': lambda r: print_students("Students sorted by average grade (highest first)",
                                      r.sorted_by_grade()),
        '9': show_statistics,
    }

    while True:
        print_menu(repository)
        choice = input("Select an option: ").strip()

        if choice == '0':
            print(f"👋 Goodbye! Your data is saved to {repository.data_file}")
            break

        action = actions.get(choice)
        if action is None:
            print("❌ Invalid choice. Please enter a number from 0 to 9.")
            continue

        try:
            action(repository)
        except errors.StudentAppError as e:
            print(f"❌ Error: {e}")
        except Exception as e:
            print(f"❌ An unexpected error occurred: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage a roster of student records.")
    parser.add_argument("--data-file", help="path to the data file (default: students.txt)")
    parser.add_argument("--backup-file", help="path to the backup file (default: students_backup.txt)")
    parser.add_argument("--verbose", "-v", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        repository = StudentRepository(args.data_file, args.backup_file)
        print(f"Welcome! {repository.count()} students loaded from {repository.data_file}")
        main_cli(repository)
    except KeyboardInterrupt:
        print("\nProgram interrupted.")
    except Exception:
        print("\n!!! CRITICAL ERROR !!!")
        traceback.print_exc()
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
