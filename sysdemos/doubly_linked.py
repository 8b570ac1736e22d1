"""A doubly linked list of (id, name, data) records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence


class Position(Enum):
    """Where a new record is inserted."""

    BEGIN = 0
    END = 1


@dataclass
class Record:
    """One record stored in the list."""

    item_id: int
    name: str
    data: str


@dataclass(eq=False)
class _Node:
    record: Record
    prev: _Node | None = None
    next: _Node | None = None


class DoublyLinkedList:
    """Doubly linked list with insertion at either end, deletion and update by id."""

    def __init__(self) -> None:
        self._head: _Node | None = None

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Record]:
        return (node.record for node in self._nodes())

    def __reversed__(self) -> Iterator[Record]:
        tail = None
        for tail in self._nodes():
            pass
        while tail is not None:
            yield tail.record
            tail = tail.prev

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self._head is not None

    def _find(self, item_id: int) -> _Node:
        for node in self._nodes():
            if node.record.item_id == item_id:
                return node
        raise KeyError(f"elem with id {item_id} not found")

    def insert(self, item_id: int, name: str, data: str, position: Position = Position.END) -> None:
        new = _Node(Record(item_id, name, data))
        if self._head is None:
            self._head = new
        elif position is Position.END:
            tail = self._head
            while tail.next is not None:
                tail = tail.next
            new.prev = tail
            tail.next = new
        else:
            new.next = self._head
            self._head.prev = new
            self._head = new

    def delete_by_id(self, item_id: int) -> None:
        """Remove the first record with ``item_id``.

        Raises KeyError when no record matches and ValueError when the
        match is the only record left, which has no links to unhook.
        """
        node = self._find(item_id)
        if node.prev is None and node.next is None:
            record = node.record
            raise ValueError(
                f"elem with NULL prev and next link "
                f"(id={record.item_id}, name='{record.name}', data='{record.data}')"
            )
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev

    def change_by_id(self, item_id: int, name: str, data: str) -> None:
        """Replace name and data of the first record with ``item_id``."""
        record = self._find(item_id).record
        record.name = name
        record.data = data

    def clear(self) -> None:
        self._head = None

    def format(self) -> str:
        """Render the list as a framed block, one entry per record."""
        rule = " +--------------------------------"
        lines = [rule, " |"]
        for index, node in enumerate(self._nodes()):
            prev = "NULL" if node.prev is None else str(node.prev.record.item_id)
            following = "NULL" if node.next is None else str(node.next.record.item_id)
            record = node.record
            lines.append(f" | {index:02d}: {prev} <-- {record.item_id} --> {following}")
            lines.append(f" |     [id={record.item_id}, name='{record.name}', data='{record.data}']")
            lines.append(" |")
        lines.append(rule)
        return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    items = DoublyLinkedList()
    items.insert(0, "first_name", "first_data", Position.BEGIN)
    items.insert(1, "second_name", "second_data", Position.END)
    items.insert(2, "foo", "bar", Position.BEGIN)
    items.insert(3, "foo", "bar", Position.END)
    items.insert(4, "foo", "bar", Position.BEGIN)
    print(items.format(), end="")

    for item_id in (0, 3, 4, 123):
        try:
            items.delete_by_id(item_id)
        except (KeyError, ValueError) as exc:
            print(f"Error: {exc.args[0]}")
        print(items.format(), end="")

    try:
        items.change_by_id(1, "new_name", "new_data")
    except KeyError as exc:
        print(f"Error: {exc.args[0]}")
    print(items.format(), end="")

    items.clear()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())