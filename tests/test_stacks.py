import pytest

from pushswap.stacks import Item, Stacks


def test_new_stacks_hold_values_in_order_with_no_rank():
    stacks = Stacks([5, 1, 9])
    assert stacks.values_a() == [5, 1, 9]
    assert stacks.values_b() == []
    assert all(item.order == -1 for item in stacks.a)
    assert stacks.moves == []


def test_item_default_order():
    assert Item(4) == Item(4, -1)


def test_sa_swaps_top_two():
    stacks = Stacks([1, 2, 3])
    stacks.sa()
    assert stacks.values_a() == [2, 1, 3]
    assert stacks.moves == ["sa"]


@pytest.mark.parametrize("values", [[], [7]])
def test_sa_on_short_stack_does_nothing(values):
    stacks = Stacks(values)
    stacks.sa()
    assert stacks.values_a() == values
    assert stacks.moves == []


def test_sa_twice_restores():
    stacks = Stacks([3, 8, 4, 6])
    stacks.sa()
    stacks.sa()
    assert stacks.values_a() == [3, 8, 4, 6]
    assert stacks.moves == ["sa", "sa"]


def test_pb_then_pa_round_trip():
    stacks = Stacks([1, 2, 3])
    stacks.pb()
    stacks.pb()
    assert stacks.values_a() == [3]
    assert stacks.values_b() == [2, 1]
    stacks.pa()
    stacks.pa()
    assert stacks.values_a() == [1, 2, 3]
    assert stacks.values_b() == []
    assert stacks.moves == ["pb", "pb", "pa", "pa"]


def test_push_from_empty_is_not_logged():
    stacks = Stacks([1])
    stacks.pa()
    assert stacks.moves == []
    stacks.pb()
    stacks.pb()
    assert stacks.moves == ["pb"]
    assert stacks.values_b() == [1]


def test_sb_and_rb_act_on_b():
    stacks = Stacks([1, 2, 3])
    for _ in range(3):
        stacks.pb()
    assert stacks.values_b() == [3, 2, 1]
    stacks.sb()
    assert stacks.values_b() == [2, 3, 1]
    stacks.rb()
    assert stacks.values_b() == [3, 1, 2]
    stacks.rrb()
    assert stacks.values_b() == [2, 3, 1]
    assert stacks.moves[-3:] == ["sb", "rb", "rrb"]


def test_ra_moves_top_to_bottom():
    stacks = Stacks([1, 2, 3])
    stacks.ra()
    assert stacks.values_a() == [2, 3, 1]
    assert stacks.moves == ["ra"]


def test_rra_moves_bottom_to_top():
    stacks = Stacks([1, 2, 3])
    stacks.rra()
    assert stacks.values_a() == [3, 1, 2]
    assert stacks.moves == ["rra"]


def test_ra_then_rra_restores():
    values = [10, -4, 7, 0, 3]
    stacks = Stacks(values)
    stacks.ra()
    stacks.rra()
    assert stacks.values_a() == values


def test_full_rotation_cycle_restores():
    values = [4, 2, 9, 1]
    stacks = Stacks(values)
    for _ in values:
        stacks.ra()
    assert stacks.values_a() == values
    assert len(stacks.moves) == len(values)


def test_rotate_short_stack_not_logged():
    stacks = Stacks([1])
    stacks.ra()
    stacks.rra()
    stacks.rb()
    assert stacks.moves == []
    assert stacks.values_a() == [1]


def test_combined_moves_always_logged():
    stacks = Stacks([1])
    stacks.ss()
    stacks.rr()
    stacks.rrr()
    assert stacks.moves == ["ss", "rr", "rrr"]
    assert stacks.values_a() == [1]


def test_rr_and_rrr_act_on_both():
    stacks = Stacks([1, 2, 3, 4])
    stacks.pb()
    stacks.pb()
    stacks.rr()
    assert stacks.values_a() == [4, 3]
    assert stacks.values_b() == [1, 2]
    stacks.rrr()
    assert stacks.values_a() == [3, 4]
    assert stacks.values_b() == [2, 1]


def test_ss_swaps_both():
    stacks = Stacks([1, 2, 3, 4])
    stacks.pb()
    stacks.pb()
    stacks.ss()
    assert stacks.values_a() == [4, 3]
    assert stacks.values_b() == [1, 2]


def test_items_keep_their_order_through_moves():
    stacks = Stacks([5, 6])
    stacks.a[0].order = 1
    stacks.a[1].order = 0
    stacks.sa()
    assert [item.order for item in stacks.a] == [0, 1]
    assert stacks.values_a() == [6, 5]