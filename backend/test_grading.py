import pytest

from grading import (
    InvalidIdFormatError,
    InvalidScoreFormatError,
    MissingFieldError,
    format_report,
    parse_student_line,
    read_students,
    run_demo,
    write_report,
)
from schemas.records import grade_for


@pytest.mark.parametrize("score,grade", [
    (100, "A"), (80, "A"), (79, "B"), (70, "B"), (69, "C"),
    (60, "C"), (59, "D"), (50, "D"), (49, "F"), (0, "F"), (101, "B"),
])
def test_grade_thresholds(score, grade):
    assert grade_for(score) == grade


def test_parse_line_trims_fields():
    s = parse_student_line("101, Alice Johnson, 84")
    assert (s.id, s.full_name, s.score, s.grade) == (101, "Alice Johnson", 84, "A")


def test_parse_line_accepts_signed_scores():
    assert parse_student_line("+7, Dee, -3").score == -3


@pytest.mark.parametrize("line,error", [
    ("101, Alice Johnson", MissingFieldError),
    ("101, Alice, Johnson, 84", MissingFieldError),
    ("abc, Alice Johnson, 84", InvalidIdFormatError),
    ("101, Alice Johnson, eighty", InvalidScoreFormatError),
    ("101, Bob Smith, 7_3", InvalidScoreFormatError),
    ("1_01, Bob Smith, 73", InvalidIdFormatError),
    ("\u0661\u0660\u0661, Bob Smith, 73", InvalidIdFormatError),
    ("101, Bob Smith, \uff17\uff13", InvalidScoreFormatError),
    (", Bob Smith, 73", InvalidIdFormatError),
])
def test_parse_line_errors_name_the_line(line, error):
    with pytest.raises(error) as exc:
        parse_student_line(line)
    assert exc.value.line == line
    assert line in str(exc.value)


def test_read_and_write_report(tmp_path):
    src = tmp_path / "students.txt"
    src.write_text("101, Alice Johnson, 84\n\n105, Evan Wright, 45\n", encoding="utf-8")
    students = read_students(src)
    out = tmp_path / "report.txt"
    write_report(students, out)
    assert out.read_text(encoding="utf-8").splitlines() == [
        "Alice Johnson (ID: 101): Score = 84, Grade = A",
        "Evan Wright (ID: 105): Score = 45, Grade = F",
    ]


def test_run_demo_creates_sample(tmp_path, capsys):
    src, out = tmp_path / "students.txt", tmp_path / "report.txt"
    assert run_demo(src, out) == 0
    text = capsys.readouterr().out
    assert "Sample students.txt file created." in text
    assert len(format_report(read_students(src))) == 5
    assert "Diana Prince (ID: 104): Score = 58, Grade = D" in out.read_text(encoding="utf-8")


def test_run_demo_reports_bad_line(tmp_path, capsys):
    src = tmp_path / "students.txt"
    src.write_text("101, Alice Johnson, 84\n102, Bob Smith\n", encoding="utf-8")
    assert run_demo(src, tmp_path / "report.txt") == 1
    assert "Error: Missing data in line: 102, Bob Smith" in capsys.readouterr().out
