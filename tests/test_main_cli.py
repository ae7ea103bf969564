# tests/test_main_cli.py
from unittest.mock import patch

from roster.main import main, main_cli


def feed_input(monkeypatch, answers):
    """Подменяет input(): отдаёт ответы по очереди, затем '0' (выход)."""
    input_sequence = iter(answers)

    def mock_input(prompt=""):
        try:
            return next(input_sequence)
        except StopIteration:
            return "0"

    monkeypatch.setattr('builtins.input', mock_input)


def test_cli_show_students(monkeypatch, capsys, filled_repository):
    """Базовый сценарий: показать всех студентов и выйти."""
    feed_input(monkeypatch, ['6', '0'])

    main_cli(filled_repository)

    output = capsys.readouterr().out
    assert "Bob Stone" in output
    assert "alice Moore" in output
    assert "Charlie Day" in output
    assert "Goodbye!" in output


def test_cli_add_student(monkeypatch, capsys, repository):
    feed_input(monkeypatch, ['1', 'N-1', 'New Student', 'NEW@Example.com', '90', '80', '70', '0'])

    main_cli(repository)

    output = capsys.readouterr().out
    assert "Student New Student added" in output
    assert repository.find_by_id("n-1").email == "new@example.com"


def test_cli_add_reports_first_validation_error(monkeypatch, capsys, repository):
    feed_input(monkeypatch, ['1', '', 'New Student', 'bad-email', '90', '80', '70', '0'])

    main_cli(repository)

    output = capsys.readouterr().out
    assert "Student ID cannot be empty" in output
    assert repository.count() == 0


def test_cli_add_rejects_non_numeric_grade(monkeypatch, capsys, repository):
    feed_input(monkeypatch, ['1', 'N-1', 'New Student', 'new@example.com', 'ninety', '0'])

    main_cli(repository)

    assert "Prelim grade must be a number" in capsys.readouterr().out
    assert repository.count() == 0


def test_cli_add_duplicate(monkeypatch, capsys, filled_repository):
    feed_input(monkeypatch, ['1', 's-001', 'Other Bob', 'other@example.com', '1', '2', '3', '0'])

    main_cli(filled_repository)

    assert "Student with ID s-001 already exists" in capsys.readouterr().out
    assert filled_repository.count() == 3


def test_cli_update_keeps_unchanged_fields(monkeypatch, capsys, filled_repository):
    feed_input(monkeypatch, ['3', 's-003', '', 'new.charlie@example.com', '', '', '100', '0'])

    main_cli(filled_repository)

    updated = filled_repository.find_by_id("S-003")
    assert updated.name == "Charlie Day"
    assert updated.email == "new.charlie@example.com"
    assert updated.final_grade == 100.0
    assert "Student S-003 updated" in capsys.readouterr().out


def test_cli_delete_with_confirmation(monkeypatch, capsys, filled_repository):
    feed_input(monkeypatch, ['2', 'S-001', 'n', '2', 'S-001', 'y', '0'])

    main_cli(filled_repository)

    output = capsys.readouterr().out
    assert "Deletion cancelled" in output
    assert "Student with ID S-001 deleted" in output
    assert filled_repository.find_by_id("S-001") is None


def test_cli_statistics(monkeypatch, capsys, filled_repository):
    feed_input(monkeypatch, ['9', '0'])

    main_cli(filled_repository)

    output = capsys.readouterr().out
    assert "Total students: 3" in output
    assert "Average grade (all students): 80.00" in output
    assert "Best student: alice Moore" in output


def test_cli_invalid_choice(monkeypatch, capsys, repository):
    feed_input(monkeypatch, ['42', '0'])

    main_cli(repository)

    assert "Invalid choice" in capsys.readouterr().out


def test_cli_continues_after_unexpected_error(monkeypatch, capsys, filled_repository):
    feed_input(monkeypatch, ['6', '4', 'S-001', '0'])

    with patch.object(filled_repository, 'get_all', side_effect=RuntimeError("disk on fire")):
        main_cli(filled_repository)

    output = capsys.readouterr().out
    assert "An unexpected error occurred: disk on fire" in output
    assert "Bob Stone" in output
    assert "Goodbye!" in output


def test_main_uses_paths_from_arguments(monkeypatch, capsys, tmp_path):
    feed_input(monkeypatch, ['0'])
    data_file = str(tmp_path / "custom.txt")

    with patch('roster.main.main_cli') as mock_cli:
        assert main(["--data-file", data_file, "--backup-file", str(tmp_path / "b.txt")]) == 0
        mock_cli.assert_called_once()
        assert mock_cli.call_args[0][0].data_file == data_file

    assert "0 students loaded" in capsys.readouterr().out
