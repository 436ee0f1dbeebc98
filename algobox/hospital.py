"""A hospital queue that always treats the most severe patient first."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass

MAX_PATIENTS = 100


@dataclass(frozen=True)
class Patient:
    """A patient waiting for treatment."""

    patient_id: int
    name: str
    age: int
    severity: int


class HospitalFullError(Exception):
    """Raised when admitting a patient to a hospital at capacity."""


def _exchange_sort(items: list[Patient], out_of_order: Callable[[Patient, Patient], bool]) -> None:
    # Pairwise exchange sort; kept as is because it decides the order of ties.
    for i in range(len(items) - 1):
        for j in range(i + 1, len(items)):
            if out_of_order(items[i], items[j]):
                items[i], items[j] = items[j], items[i]


class Hospital:
    """Patients kept in order of descending severity."""

    def __init__(self, capacity: int = MAX_PATIENTS) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._patients: list[Patient] = []

    def add(self, patient: Patient) -> None:
        """Admit a patient, keeping the most severe first."""
        if len(self._patients) >= self.capacity:
            raise HospitalFullError("Hospital is full!")
        self._patients.append(patient)
        _exchange_sort(self._patients, lambda a, b: b.severity > a.severity)

    def treat(self) -> Patient:
        """Remove and return the most severe patient."""
        if not self._patients:
            raise IndexError("No patients to treat.")
        return self._patients.pop(0)

    def __iter__(self) -> Iterator[Patient]:
        return iter(self._patients)

    def __len__(self) -> int:
        return len(self._patients)


def _table(patients: Iterable[Patient]) -> str:
    lines = ["Patients in hospital:", "ID\tName\t\tAge\tSeverity"]
    lines.extend(
        f"{p.patient_id}\t{p.name}\t\t{p.age}\t{p.severity}" for p in patients
    )
    return "\n".join(lines)


def _read_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).split()[0])
    except (ValueError, IndexError):
        return None


def _admit(hospital: Hospital) -> None:
    patient_id = _read_int("Enter Patient ID: ")
    tokens = input("Enter Name: ").split()
    age = _read_int("Enter Age: ")
    severity = _read_int("Enter Disease Severity: ")
    if patient_id is None or not tokens or age is None or severity is None:
        print("Invalid input.")
        return
    try:
        hospital.add(Patient(patient_id, tokens[0], age, severity))
    except HospitalFullError as error:
        print(error)
    else:
        print(f"Patient {tokens[0]} added successfully!")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive hospital menu."""
    parser = argparse.ArgumentParser(description="Hospital patient management.")
    parser.parse_args(argv)
    hospital = Hospital()
    try:
        while True:
            print("\n=== Hospital Management ===")
            print("1. Add Patient")
            print("2. Treat Most Severe Patient")
            print("3. Display Patients")
            print("4. Exit")
            choice = _read_int("Enter choice: ")
            if choice == 1:
                _admit(hospital)
            elif choice == 2:
                try:
                    p = hospital.treat()
                except IndexError as error:
                    print(error)
                else:
                    print(
                        f"Treating patient {p.name} "
                        f"(ID: {p.patient_id}, Severity: {p.severity})"
                    )
            elif choice == 3:
                if hospital:
                    print(_table(hospital))
                else:
                    print("No patients in hospital.")
            elif choice == 4:
                print("Exiting...")
                break
            else:
                print("Invalid choice!")
    except EOFError:
        pass
    return 0