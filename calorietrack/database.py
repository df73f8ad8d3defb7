"""A list of records kept in a CSV file whose first line is a header."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Generic, Iterator, Protocol, TextIO, TypeVar


class NoResultError(LookupError):
    """Raised when no record carries the requested name."""


class Record(Protocol):
    """What a record type must provide to be stored in a :class:`Database`.

    The type itself carries a ``HEADER`` string and a ``from_line``
    class method that returns a record, or ``None`` for a blank line.
    """

    @property
    def lookup_name(self) -> str: ...

    def to_line(self) -> str: ...

    def sort_key(self) -> Any: ...

    def describe(self) -> str: ...


R = TypeVar("R", bound=Record)


class Database(Generic[R]):
    """Records of one type, loaded from and saved to a CSV file."""

    def __init__(self, record_type: Any, path: str | Path) -> None:
        self.record_type = record_type
        self.path = Path(path)
        self._items: list[R] = []

    def load(self) -> None:
        """Read every record after the header; create the file if it is missing."""
        if not self.path.exists():
            self.path.write_text(self.record_type.HEADER + "\n", encoding="utf-8")
            return
        lines = self.path.read_text(encoding="utf-8").splitlines()
        for line in lines[1:]:
            item = self.record_type.from_line(line)
            if item is not None:
                self._items.append(item)

    def save(self) -> None:
        """Write the header and all records, ordered by their sort key."""
        ordered = sorted(self._items, key=lambda item: item.sort_key())
        with self.path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(self.record_type.HEADER + "\n")
            for item in ordered:
                handle.write(item.to_line() + "\n")

    def sort(self) -> None:
        """Order the records in place by their sort key."""
        self._items.sort(key=lambda item: item.sort_key())

    def output(self, out: TextIO) -> None:
        """Write every record's description to ``out``."""
        for item in self._items:
            out.write(item.describe())

    def append(self, item: R) -> None:
        self._items.append(item)

    def find(self, name: str) -> R:
        """Return the first record with the given name."""
        for item in self._items:
            if item.lookup_name == name:
                return item
        raise NoResultError("no result!")

    def find_all(self, name: str) -> list[R]:
        """Return every record with the given name; raise if there is none."""
        found = [item for item in self._items if item.lookup_name == name]
        if not found:
            raise NoResultError("no result!")
        return found

    def __contains__(self, name: object) -> bool:
        return any(item.lookup_name == name for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[R]:
        return iter(self._items)

    def records(self) -> list[R]:
        """Return a copy of the stored records."""
        return list(self._items)