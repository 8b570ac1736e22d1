from sysdemos.singly_linked import Entry, SinglyLinkedList, main


def _ids(items):
    return [entry.item_id for entry in items]


def _build():
    items = SinglyLinkedList()
    items.insert_at_begin(0, "first_name", "first_data")
    items.insert_at_end(1, "second_name", "second_data")
    items.insert_at_begin(2, "foo", "bar")
    items.insert_at_end(3, "foo", "bar")
    items.insert_at_begin(4, "foo", "bar")
    return items


def test_insert_order():
    assert _ids(_build()) == [4, 2, 0, 1, 3]


def test_insert_at_end_on_empty():
    items = SinglyLinkedList()
    items.insert_at_end(7, "n", "d")
    assert list(items) == [Entry(7, "n", "d")]
    assert len(items) == 1


def test_reverse_is_involution():
    items = _build()
    before = _ids(items)
    items.reverse()
    assert _ids(items) == before[::-1]
    items.reverse()
    assert _ids(items) == before


def test_reverse_empty():
    items = SinglyLinkedList()
    items.reverse()
    assert list(items) == []


def test_delete_head_middle_tail():
    items = _build()
    assert items.delete_by_id(4) is True
    assert _ids(items) == [2, 0, 1, 3]
    assert items.delete_by_id(0) is True
    assert _ids(items) == [2, 1, 3]
    assert items.delete_by_id(3) is True
    assert _ids(items) == [2, 1]


def test_delete_missing_is_noop():
    items = _build()
    assert items.delete_by_id(123) is False
    assert _ids(items) == [4, 2, 0, 1, 3]


def test_delete_only_first_match():
    items = SinglyLinkedList()
    items.insert_at_end(5, "a", "x")
    items.insert_at_end(5, "b", "y")
    items.delete_by_id(5)
    assert [e.name for e in items] == ["b"]


def test_clear():
    items = _build()
    items.clear()
    assert len(items) == 0
    assert not items


def test_format():
    items = SinglyLinkedList()
    items.insert_at_end(1, "second_name", "second_data")
    assert items.format() == "id:  1, name: second_name , data: second_data\n\n"
    assert SinglyLinkedList().format() == "\n"


def test_main_output(capsys):
    assert main([]) == 0
    blocks = capsys.readouterr().out.split("\n\n")
    assert blocks[0].splitlines()[0].startswith("id:  4, name: foo")
    assert blocks[1].splitlines()[0].startswith("id:  3, name: foo")
    assert blocks[4].splitlines() == [
        "id:  1, name: second_name , data: second_data",
        "id:  2, name: foo         , data: bar",
    ]