"""A singly linked list of (id, name, data) entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence


@dataclass
class Entry:
    """One record stored in the list."""

    item_id: int
    name: str
    data: str


@dataclass
class _Node:
    entry: Entry
    next: _Node | None = None


class SinglyLinkedList:
    """Singly linked list with insertion at either end, deletion and reversal."""

    def __init__(self) -> None:
        self._head: _Node | None = None

    def __iter__(self) -> Iterator[Entry]:
        node = self._head
        while node is not None:
            yield node.entry
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return self._head is not None

    def insert_at_begin(self, item_id: int, name: str, data: str) -> None:
        self._head = _Node(Entry(item_id, name, data), self._head)

    def insert_at_end(self, item_id: int, name: str, data: str) -> None:
        new = _Node(Entry(item_id, name, data))
        if self._head is None:
            self._head = new
            return
        node = self._head
        while node.next is not None:
            node = node.next
        node.next = new

    def delete_by_id(self, item_id: int) -> bool:
        """Remove the first entry with ``item_id``; return whether one was removed."""
        prev: _Node | None = None
        node = self._head
        while node is not None:
            if node.entry.item_id == item_id:
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                return True
            prev, node = node, node.next
        return False

    def clear(self) -> None:
        self._head = None

    def reverse(self) -> None:
        prev: _Node | None = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = prev
            prev = node
            node = following
        self._head = prev

    def format(self) -> str:
        """Render one line per entry followed by a blank line."""
        lines = [f"id: {e.item_id:2d}, name: {e.name:<12}, data: {e.data}\n" for e in self]
        return "".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    items = SinglyLinkedList()
    items.insert_at_begin(0, "first_name", "first_data")
    items.insert_at_end(1, "second_name", "second_data")
    items.insert_at_begin(2, "foo", "bar")
    items.insert_at_end(3, "foo", "bar")
    items.insert_at_begin(4, "foo", "bar")
    print(items.format(), end="")

    items.reverse()
    print(items.format(), end="")

    for item_id in (0, 3, 4):
        items.delete_by_id(item_id)
        print(items.format(), end="")

    items.clear()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())