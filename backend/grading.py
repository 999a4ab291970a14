"""
School grading: parse "id, name, score" lines and write a graded report.
Run: python grading.py [students.txt] [report.txt]
"""

import logging
import re
import sys
from pathlib import Path
from typing import Iterable

from schemas.records import Student

logger = logging.getLogger(__name__)

SAMPLE_LINES = [
    "101, Alice Johnson, 84",
    "102, Bob Smith, 73",
    "103, Charlie Brown, 65",
    "104, Diana Prince, 58",
    "105, Evan Wright, 45",
]

# ASCII digits only: int() alone would take "7_3" or non-ASCII digits.
INTEGER = re.compile(r"[+-]?[0-9]+")


class GradingFormatError(ValueError):
    """A student line could not be parsed."""

    def __init__(self, message: str, line: str):
        super().__init__(message)
        self.line = line


class MissingFieldError(GradingFormatError):
    def __init__(self, line: str):
        super().__init__(f"Missing data in line: {line}", line)


class InvalidIdFormatError(GradingFormatError):
    def __init__(self, line: str):
        super().__init__(f"Invalid ID format in line: {line}", line)


class InvalidScoreFormatError(GradingFormatError):
    def __init__(self, line: str):
        super().__init__(f"Invalid score format in line: {line}", line)


def parse_student_line(line: str) -> Student:
    parts = line.split(",")
    if len(parts) != 3:
        raise MissingFieldError(line)
    id_field, name, score_field = (p.strip() for p in parts)
    if not INTEGER.fullmatch(id_field):
        raise InvalidIdFormatError(line)
    if not INTEGER.fullmatch(score_field):
        raise InvalidScoreFormatError(line)
    return Student(id=int(id_field), full_name=name, score=int(score_field))


def parse_students(lines: Iterable[str]) -> list[Student]:
    students = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        students.append(parse_student_line(line))
    return students


def read_students(path: Path) -> list[Student]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_students(f)


def format_report(students: Iterable[Student]) -> list[str]:
    return [
        f"{s.full_name} (ID: {s.id}): Score = {s.score}, Grade = {s.grade}"
        for s in students
    ]


def write_report(students: Iterable[Student], path: Path) -> None:
    with open(path, "w", encoding="utf-8") as f:
        for line in format_report(students):
            f.write(line + "\n")


def run_demo(input_path: Path = Path("students.txt"), output_path: Path = Path("report.txt")) -> int:
    input_path, output_path = Path(input_path), Path(output_path)
    if not input_path.exists():
        input_path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
        print(f"Sample {input_path.name} file created.\n")

    try:
        students = read_students(input_path)
        write_report(students, output_path)
    except FileNotFoundError:
        print("Error: Input file not found.")
        return 1
    except GradingFormatError as e:
        print(f"Error: {e}")
        return 1

    logger.info("Graded %d student(s) into %s", len(students), output_path)
    print("Report generated successfully! Contents:")
    print(output_path.read_text(encoding="utf-8"))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    args = sys.argv[1:]
    sys.exit(run_demo(*[Path(a) for a in args[:2]]))
