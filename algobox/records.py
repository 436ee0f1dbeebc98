"""A small in-memory database of people, saved to a tab-separated file."""

from __future__ import annotations

import argparse
import re
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, replace
from pathlib import Path

MAX_RECORDS = 100
NAME_LIMIT = 49
DEFAULT_FILE = "db.txt"

_INT = re.compile(r"\s*([+-]?\d+)")
_NAME = re.compile(r"\s*([^\t]{1,%d})" % NAME_LIMIT)


@dataclass(frozen=True)
class Record:
    """One person: an identifier, a name and an age."""

    record_id: int
    name: str
    age: int

    def __str__(self) -> str:
        return f"ID:{self.record_id} Name:{self.name} Age:{self.age}"


@dataclass(frozen=True)
class RecordStats:
    """Count of records and the spread of their ages."""

    total: int
    minimum: int | None
    maximum: int | None
    average: float | None


class RecordError(Exception):
    """Raised when a record cannot be added, found or changed."""


class RecordStore:
    """Records with unique identifiers, at most ``capacity`` of them."""

    def __init__(self, capacity: int = MAX_RECORDS) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._records: list[Record] = []

    def _index(self, record_id: int) -> int:
        for index, record in enumerate(self._records):
            if record.record_id == record_id:
                return index
        raise RecordError("Not found")

    def add(self, record: Record) -> Record:
        """Store a record, cutting its name to the name limit."""
        if len(self._records) >= self.capacity:
            raise RecordError("Database full")
        if any(r.record_id == record.record_id for r in self._records):
            raise RecordError("Id already exists")
        stored = replace(record, name=record.name[:NAME_LIMIT])
        self._records.append(stored)
        return stored

    def update(self, record_id: int, name: str, age: int) -> Record:
        """Replace the name and age of an existing record."""
        index = self._index(record_id)
        updated = replace(self._records[index], name=name[:NAME_LIMIT], age=age)
        self._records[index] = updated
        return updated

    def delete(self, record_id: int) -> Record:
        """Remove and return the record with ``record_id``."""
        return self._records.pop(self._index(record_id))

    def stats(self) -> RecordStats:
        """Return the number of records and the minimum, maximum and mean age."""
        if not self._records:
            return RecordStats(0, None, None, None)
        ages = [record.age for record in self._records]
        return RecordStats(len(ages), min(ages), max(ages), sum(ages) / len(ages))

    def search(self, query: str) -> list[Record]:
        """Return the records whose name contains ``query``."""
        return [record for record in self._records if query in record.name]

    def sort_by_age(self) -> None:
        """Order the records by age, youngest first."""
        items = self._records
        for i in range(len(items) - 1):
            for j in range(i + 1, len(items)):
                if items[i].age > items[j].age:
                    items[i], items[j] = items[j], items[i]

    def save(self, path: str | Path) -> None:
        """Write one ``id<TAB>name<TAB>age`` line per record."""
        with open(path, "w", encoding="utf-8") as handle:
            for record in self._records:
                handle.write(f"{record.record_id}\t{record.name}\t{record.age}\n")

    def load(self, path: str | Path) -> int:
        """Replace the records with those read from ``path``; return how many."""
        text = Path(path).read_text(encoding="utf-8")
        self._records = []
        position = 0
        while len(self._records) < self.capacity:
            id_match = _INT.match(text, position)
            if id_match is None:
                break
            name_match = _NAME.match(text, id_match.end())
            if name_match is None:
                break
            age_match = _INT.match(text, name_match.end())
            if age_match is None:
                break
            self._records.append(
                Record(int(id_match.group(1)), name_match.group(1), int(age_match.group(1)))
            )
            position = age_match.end()
        return len(self._records)

    def clear(self) -> None:
        """Remove every record."""
        self._records = []

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)


def _read_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).split()[0])
    except (ValueError, IndexError):
        return None


def _add(store: RecordStore, path: Path) -> None:
    if len(store) >= store.capacity:
        print("Database full")
        return
    record_id = _read_int("Enter id: ")
    if record_id is None:
        print("Invalid input")
        return
    if any(record.record_id == record_id for record in store):
        print("Id already exists")
        return
    name = input("Enter name: ")[:NAME_LIMIT]
    age = _read_int("Enter age: ")
    if age is None:
        print("Invalid input")
        return
    try:
        store.add(Record(record_id, name, age))
    except RecordError as error:
        print(error)
    else:
        print("Record added")


def _list(store: RecordStore, path: Path) -> None:
    if not store:
        print("No records")
    for record in store:
        print(record)


def _update(store: RecordStore, path: Path) -> None:
    record_id = _read_int("Enter id to update: ")
    if record_id is None:
        print("Invalid input")
        return
    if not any(record.record_id == record_id for record in store):
        print("Not found")
        return
    name = input("Enter new name: ")
    age = _read_int("Enter new age: ")
    if age is None:
        print("Invalid input")
        return
    store.update(record_id, name, age)
    print("Updated")


def _delete(store: RecordStore, path: Path) -> None:
    record_id = _read_int("Enter id to delete: ")
    if record_id is None:
        print("Invalid input")
        return
    try:
        store.delete(record_id)
    except RecordError as error:
        print(error)
    else:
        print("Deleted")


def _stats(store: RecordStore, path: Path) -> None:
    stats = store.stats()
    print(f"Total records: {stats.total}")
    if stats.total:
        print(f"Min:{stats.minimum} Max:{stats.maximum} Avg:{stats.average:.2f}")


def _search(store: RecordStore, path: Path) -> None:
    matches = store.search(input("Enter name to search: "))
    for record in matches:
        print(record)
    if not matches:
        print("No match")


def _sort(store: RecordStore, path: Path) -> None:
    store.sort_by_age()
    print("Sorted by age")


def _save(store: RecordStore, path: Path) -> None:
    try:
        store.save(path)
    except OSError:
        print("Save error")
    else:
        print(f"Saved to {path}")


def _clear(store: RecordStore, path: Path) -> None:
    store.clear()
    print("Cleared all records")


_ACTIONS: dict[int, Callable[[RecordStore, Path], None]] = {
    1: _add,
    2: _list,
    3: _update,
    4: _delete,
    5: _stats,
    6: _search,
    7: _sort,
    8: _save,
    9: _clear,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive record manager, loading and saving the data file."""
    parser = argparse.ArgumentParser(description="Keep a small database of people.")
    parser.add_argument("--file", default=DEFAULT_FILE)
    args = parser.parse_args(argv)
    path = Path(args.file)
    store = RecordStore()

    print("Simple Manager")
    print("==============")
    try:
        print(f"Loaded {store.load(path)} records")
    except OSError:
        print("No file")

    try:
        while True:
            print(
                "\n1.Add 2.List 3.Update 4.Delete 5.Stats 6.Search "
                "7.Sort 8.Save 9.Clear 10.Exit"
            )
            choice = _read_int("Choose: ")
            if choice is None:
                print("Invalid input")
                continue
            if choice == 10:
                print("Exiting")
                _save(store, path)
                break
            action = _ACTIONS.get(choice)
            if action is None:
                print("Invalid choice")
            else:
                action(store, path)
    except EOFError:
        pass
    return 0