import pytest

from algobox.report import Student, calculate_grade, format_report, main


def _feed(monkeypatch, lines):
    answers = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.mark.parametrize(
    "average, grade",
    [(100, "A"), (90, "A"), (89.99, "B"), (75, "B"), (60, "C"), (40, "D"), (39.99, "F"), (0, "F")],
)
def test_calculate_grade(average, grade):
    assert calculate_grade(average) == grade


def test_student_average_and_grade():
    student = Student("Ann", 3, (80, 80, 80, 80, 80))
    assert student.average == pytest.approx(80.0)
    assert student.grade == calculate_grade(student.average)


def test_student_needs_five_marks():
    with pytest.raises(ValueError):
        Student("Ann", 3, (80, 80))


def test_format_report():
    text = format_report([Student("Ann", 3, (80,) * 5), Student("Ben", 4, (30,) * 5)])
    assert text.startswith("--- Student Report ---")
    assert "Name: Ann\nRoll No: 3\nAverage Marks: 80.00\nGrade: B" in text
    assert "Name: Ben\nRoll No: 4\nAverage Marks: 30.00\nGrade: F" in text


def test_main_prints_report(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "Ann", "3", "80", "80", "80", "80", "80"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Name: Ann" in out
    assert "Grade: B" in out


def test_main_rejects_too_many_students(monkeypatch):
    _feed(monkeypatch, ["51"])
    assert main([]) == 1