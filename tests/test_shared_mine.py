import pytest

from sysdemos.shared_mine import main, mine_with_processes


def test_exact_division_empties_mine():
    left, takes = mine_with_processes(3, 60, 20)
    assert left == 0
    assert sum(takes) == 3
    assert len(takes) == 3


def test_overshoot_leaves_negative_gold():
    left, takes = mine_with_processes(2, 50, 20)
    assert sum(takes) == 3
    assert left == 50 - 20 * sum(takes)
    assert left < 0


def test_empty_mine_gives_no_takes():
    left, takes = mine_with_processes(2, 0, 20)
    assert left == 0
    assert takes == [0, 0]


@pytest.mark.parametrize("workers,per_take", [(0, 20), (2, 0)])
def test_invalid_arguments_raise(workers, per_take):
    with pytest.raises(ValueError):
        mine_with_processes(workers, 100, per_take)