"""Student report cards: average marks and letter grades."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

SUBJECTS = 5
MAX_STUDENTS = 50


def calculate_grade(average: float) -> str:
    """Return the letter grade for an average mark."""
    if average >= 90:
        return "A"
    if average >= 75:
        return "B"
    if average >= 60:
        return "C"
    if average >= 40:
        return "D"
    return "F"


@dataclass(frozen=True)
class Student:
    """A student with marks in each of the five subjects."""

    name: str
    roll: int
    marks: tuple[float, ...]

    def __post_init__(self) -> None:
        marks = tuple(float(mark) for mark in self.marks)
        if len(marks) != SUBJECTS:
            raise ValueError(f"a student needs exactly {SUBJECTS} marks")
        object.__setattr__(self, "marks", marks)

    @property
    def average(self) -> float:
        """Mean of the marks."""
        return sum(self.marks) / SUBJECTS

    @property
    def grade(self) -> str:
        """Letter grade of the average."""
        return calculate_grade(self.average)


def format_report(students: Iterable[Student]) -> str:
    """Render the report with name, roll number, average and grade of each student."""
    parts = ["--- Student Report ---"]
    for student in students:
        parts.append(
            f"\nName: {student.name}\nRoll No: {student.roll}\n"
            f"Average Marks: {student.average:.2f}\nGrade: {student.grade}"
        )
    return "\n".join(parts)


def _read_student(index: int) -> Student:
    print(f"\nEnter details for student {index}")
    name = input("Name: ").split()[0]
    roll = int(input("Roll No: ").split()[0])
    marks = [
        float(input(f"Enter marks of subject {subject}: ").split()[0])
        for subject in range(1, SUBJECTS + 1)
    ]
    return Student(name, roll, tuple(marks))


def main(argv: Sequence[str] | None = None) -> int:
    """Read students interactively and print their report."""
    parser = argparse.ArgumentParser(description="Print a student report.")
    parser.parse_args(argv)
    try:
        count = int(input("Enter number of students: ").split()[0])
        if not 0 <= count <= MAX_STUDENTS:
            print(f"Number of students must be between 0 and {MAX_STUDENTS}.")
            return 1
        students = [_read_student(i) for i in range(1, count + 1)]
    except (ValueError, IndexError, EOFError):
        print("Invalid input.")
        return 1
    print("\n" + format_report(students))
    return 0