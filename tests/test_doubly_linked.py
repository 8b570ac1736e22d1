import pytest

from sysdemos.doubly_linked import DoublyLinkedList, Position, Record, main


def _ids(records):
    return [record.item_id for record in records]


def _build():
    items = DoublyLinkedList()
    items.insert(0, "first_name", "first_data", Position.BEGIN)
    items.insert(1, "second_name", "second_data", Position.END)
    items.insert(2, "foo", "bar", Position.BEGIN)
    items.insert(3, "foo", "bar", Position.END)
    items.insert(4, "foo", "bar", Position.BEGIN)
    return items


def test_insert_order_and_back_links():
    items = _build()
    assert _ids(items) == [4, 2, 0, 1, 3]
    assert _ids(reversed(items)) == [3, 1, 0, 2, 4]


@pytest.mark.parametrize("victim", [4, 0, 3])
def test_delete_keeps_links_consistent(victim):
    items = _build()
    expected = [i for i in _ids(items) if i != victim]
    items.delete_by_id(victim)
    assert _ids(items) == expected
    assert _ids(reversed(items)) == expected[::-1]


def test_delete_missing_raises_key_error():
    items = _build()
    with pytest.raises(KeyError):
        items.delete_by_id(123)
    assert len(items) == 5


def test_delete_sole_record_refused():
    items = DoublyLinkedList()
    items.insert(9, "n", "d", Position.END)
    with pytest.raises(ValueError, match="NULL prev and next"):
        items.delete_by_id(9)
    assert list(items) == [Record(9, "n", "d")]


def test_change_by_id():
    items = _build()
    items.change_by_id(1, "new_name", "new_data")
    changed = [r for r in items if r.item_id == 1]
    assert changed == [Record(1, "new_name", "new_data")]


def test_change_missing_raises():
    with pytest.raises(KeyError):
        _build().change_by_id(77, "a", "b")


def test_clear():
    items = _build()
    items.clear()
    assert not items
    assert len(items) == 0


def test_format_single():
    items = DoublyLinkedList()
    items.insert(1, "foo", "bar", Position.BEGIN)
    lines = items.format().splitlines()
    assert lines[0] == " +--------------------------------"
    assert lines[2] == " | 00: NULL <-- 1 --> NULL"
    assert lines[3] == " |     [id=1, name='foo', data='bar']"
    assert lines[-1] == " +--------------------------------"


def test_main_reports_errors(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Error: elem with id 123 not found" in out
    assert "[id=1, name='new_name', data='new_data']" in out
    assert out.count(" +--------------------------------") == 12