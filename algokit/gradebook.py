"""A class gradebook of marks per subject."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Gradebook:
    """Marks of students, each given as ``(name, roll, marks)`` with one mark per subject."""

    subjects: tuple[str, ...]
    students: tuple[tuple[str, str, tuple[int, ...]], ...]

    def _column(self, subject: str) -> int:
        try:
            return self.subjects.index(subject)
        except ValueError:
            raise KeyError(f"unknown subject: {subject}") from None

    def marks_for(self, roll: str) -> dict[str, int]:
        """Return the marks, by subject, of the student with roll number ``roll``."""
        for _name, student_roll, marks in self.students:
            if student_roll == roll:
                return dict(zip(self.subjects, marks))
        raise KeyError(f"unknown roll number: {roll}")

    def below(self, subject: str, threshold: int = 40) -> list[tuple[str, str]]:
        """Return ``(name, roll)`` of every student with less than ``threshold`` in ``subject``."""
        column = self._column(subject)
        return [(name, roll) for name, roll, marks in self.students if marks[column] < threshold]

    def average(self, subject: str) -> float:
        """Return the mean mark in ``subject``."""
        column = self._column(subject)
        return sum(marks[column] for _, _, marks in self.students) / len(self.students)

    def below_average_count(self, subject: str) -> int:
        """Count students whose mark in ``subject`` is below the average."""
        column = self._column(subject)
        mean = self.average(subject)
        return sum(1 for _, _, marks in self.students if marks[column] < mean)


def default_gradebook() -> Gradebook:
    """Return the built-in class of ten students."""
    names = ("Ananya", "Bikramjit", "Chityoraj", "Dharmesh", "Elen",
             "Fatama", "Ganasan", "Harischandra", "Intrajit", "Jagdip")
    marks = ((65, 75, 90), (70, 55, 73), (55, 54, 85), (63, 65, 92), (60, 30, 65),
             (72, 84, 50), (86, 76, 30), (73, 89, 67), (91, 73, 75), (45, 35, 83))
    rolls = tuple(f"CS{number}" for number in range(101, 111))
    return Gradebook(
        subjects=("English", "Math", "Science"),
        students=tuple(zip(names, rolls, marks)),
    )