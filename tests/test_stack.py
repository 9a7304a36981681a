import pytest

from pushswap.stack import Board, Stack


def make_board(values):
    ops = []
    return Board(values, emit=ops.append), ops


def test_stack_keeps_order_top_first():
    values = [5, 3, 9, 1]
    stack = Stack("a", values)
    assert len(stack) == len(values)
    assert list(stack) == values
    assert stack.values() == values


def test_values_returns_a_copy():
    stack = Stack("a", [1, 2])
    copy = stack.values()
    copy.append(7)
    assert stack.values() == [1, 2]


def test_position_of_min_and_max():
    values = [4, 8, 1, 6]
    stack = Stack("b", values)
    assert values[stack.position_of_min()] == min(values)
    assert values[stack.position_of_max()] == max(values)


def test_positions_of_empty_stack_raise():
    stack = Stack("a")
    with pytest.raises(ValueError):
        stack.position_of_min()
    with pytest.raises(ValueError):
        stack.position_of_max()


def test_push_moves_top_between_stacks():
    values = [3, 1, 2]
    board, ops = make_board(values)
    board.push(board.a, board.b)
    assert board.b.values() == values[:1]
    assert board.a.values() == values[1:]
    assert ops == ["pb"]
    board.push("b", "a")
    assert board.a.values() == values
    assert len(board.b) == 0
    assert ops == ["pb", "pa"]


def test_push_from_empty_stack_does_nothing():
    board, ops = make_board([1, 2])
    board.push(board.b, board.a)
    assert ops == []
    assert board.a.values() == [1, 2]


def test_swap_exchanges_top_two():
    values = [7, 2, 5]
    board, ops = make_board(values)
    board.swap("a")
    assert board.a.values() == [values[1], values[0], values[2]]
    assert ops == ["sa"]


def test_swap_on_short_stack_still_reports():
    board, ops = make_board([1])
    board.swap(board.b)
    board.swap(board.a)
    assert board.a.values() == [1]
    assert ops == ["sb", "sa"]


def test_swap_both():
    board, ops = make_board([1, 2, 3, 4])
    board.push("a", "b")
    board.push("a", "b")
    before_a = board.a.values()
    before_b = board.b.values()
    board.swap_both()
    assert board.a.values() == [before_a[1], before_a[0]]
    assert board.b.values() == [before_b[1], before_b[0]]
    assert ops[-1] == "ss"


def test_rotate_moves_top_to_bottom():
    values = [4, 1, 3, 2]
    board, ops = make_board(values)
    board.rotate("a")
    assert board.a.values() == values[1:] + values[:1]
    assert ops == ["ra"]


def test_reverse_rotate_moves_bottom_to_top():
    values = [4, 1, 3, 2]
    board, ops = make_board(values)
    board.reverse_rotate(board.a)
    assert board.a.values() == values[-1:] + values[:-1]
    assert ops == ["rra"]


def test_rotate_then_reverse_rotate_round_trip():
    values = [9, 8, 7, 6, 5]
    board, _ = make_board(values)
    for _ in range(3):
        board.rotate("a")
    for _ in range(3):
        board.reverse_rotate("a")
    assert board.a.values() == values


def test_full_rotation_restores_order():
    values = [2, 5, 1, 4, 3]
    board, ops = make_board(values)
    for _ in values:
        board.rotate("a")
    assert board.a.values() == values
    assert len(ops) == len(values)


def test_rotate_both_and_reverse_rotate_both():
    board, ops = make_board([1, 2, 3, 4, 5, 6])
    for _ in range(3):
        board.push("a", "b")
    a_before = board.a.values()
    b_before = board.b.values()
    board.rotate_both()
    assert board.a.values() == a_before[1:] + a_before[:1]
    assert board.b.values() == b_before[1:] + b_before[:1]
    board.reverse_rotate_both()
    assert board.a.values() == a_before
    assert board.b.values() == b_before
    assert ops[-2:] == ["rr", "rrr"]


def test_operations_preserve_contents():
    values = [6, 2, 9, 4, 1, 8]
    board, _ = make_board(values)
    board.push("a", "b")
    board.push("a", "b")
    board.swap_both()
    board.rotate_both()
    board.reverse_rotate("b")
    board.push("b", "a")
    assert sorted(board.a.values() + board.b.values()) == sorted(values)


def test_default_emit_writes_lines_to_stdout(capsys):
    board = Board([2, 1])
    board.swap("a")
    board.push("a", "b")
    assert capsys.readouterr().out == "sa\npb\n"


def test_unknown_stack_name_is_rejected():
    board, _ = make_board([1, 2])
    with pytest.raises(ValueError):
        board.rotate("c")


def test_foreign_stack_is_rejected():
    board, _ = make_board([1, 2])
    with pytest.raises(ValueError):
        board.swap(Stack("a", [1, 2]))