import random

import pytest

from pushswap.cli import main, solve
from pushswap.parse import PushSwapError
from pushswap.stack import Item, Stacks


def _apply(values, ops):
    stacks = Stacks(Item(v) for v in values)
    for op in ops:
        getattr(stacks, op)()
    return stacks


def test_solve_two():
    assert solve(["2", "1"]) == ["sa"]


def test_solve_three_descending():
    assert solve(["3", "2", "1"]) == ["sa", "rra"]


@pytest.mark.parametrize("args", [["42"], ["1", "2", "3"], ["-5", "0", "+7"]])
def test_solve_nothing_to_do(args):
    assert solve(args) == []


@pytest.mark.parametrize(
    "args",
    [["1", "a"], ["1", "1"], ["2147483648"], ["-2147483649"], ["-"], [""], ["2 1"], ["1", "+1"]],
)
def test_solve_invalid(args):
    with pytest.raises(PushSwapError):
        solve(args)


def test_solve_accepts_int_limits():
    ops = solve(["2147483647", "-2147483648"])
    assert ops == ["sa"]


@pytest.mark.parametrize("size", [3, 4, 5, 20, 100, 120])
def test_solve_sorts_random(size):
    rng = random.Random(size * 7)
    values = rng.sample(range(-1000, 1000), size)
    stacks = _apply(values, solve([str(v) for v in values]))
    assert [item.value for item in stacks.a] == sorted(values)
    assert not stacks.b


def test_main_no_args(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_main_error(capsys):
    assert main(["x"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_prints_ops(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"