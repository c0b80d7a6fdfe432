# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of stack operations. It prints the operations it chose, one per
line. The package also has small string and number helpers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
push_swap 3 2 5 1 4
```

The command can also be run as `python -m pushswap.cli 3 2 5 1 4`.

Each argument is one integer in the 32-bit signed range. It is written as
decimal digits with an optional `+` or `-` sign. The first argument is the
top of stack `a`.

- The output is the list of operations that sorts stack `a` in ascending
  order, top first. The operations are
  `sa sb ss pa pb ra rb rr rra rrb rrr`.
- A list that is already sorted, or that has only one value, gives no
  output.
- With no arguments the command prints nothing and exits with status 0.
- An argument that is not a number, a value outside the range, or a
  duplicate makes the command print `Error` on standard error. The exit
  status is then 1.

Two values take at most one `sa`. Three values are sorted by a fixed table
of at most two moves. Larger inputs are pushed to `b` in chunks: 5 chunks
for up to 100 values, 11 for more. Items then come back to `a` one at a
time, the cheapest move first. A final rotation brings the smallest value to
the top.

## Library use

```python
from pushswap.cli import solve

ops = solve(["3", "2", "1"])   # ["sa", "rra"]
```

- `pushswap.cli`
  - `solve(args)` returns the list of operation names.
  - `main(argv=None)` runs the command and returns the exit status.
- `pushswap.parse`
  - `parse_args(args)` checks and converts the arguments. It raises
    `PushSwapError`, a `ValueError` whose message is `Error`.
  - `assign_index(values)` gives each value its rank, that is how many
    values are smaller.
- `pushswap.stack`
  - `Stacks(a, b)` holds two deques of `Item(value, index)`, top first.
  - Its methods `sa` … `rrr` apply the operations. Each call is recorded in
    `Stacks.ops`, even when it changes nothing.
  - `is_sorted(values)` tells whether the values never decrease.
- `pushswap.small`
  - `sort_two(stacks)` and `sort_three(stacks)` sort two or three items by
    index.
- `pushswap.turk`
  - `turk_sort(stacks)` sorts stack `a`.
  - `plan_moves`, `target_position`, `rotation_cost`, `total_cost`,
    `cheapest`, `do_move` and the `Move` dataclass are the steps it uses.
  - A positive cost in a `Move` counts `ra`/`rb` rotations. A negative cost
    counts `rra`/`rrb` rotations.

## String helpers

`pushswap.textops` works on ASCII letters and on words separated by blanks:

- `first_word`, `rev_print`, `repeat_alpha`
- `rot13`, `rotone`, `alpha_mirror`, `ulstr` (swaps case)
- `search_and_replace(text, old, new)` replaces single characters. It
  returns `""` if `old` or `new` is longer than one character.
- `strcmp(s1, s2)` returns the code difference at the first character that
  differs.
- `inter`, `union`: characters in order of appearance, each one once.
- `wdmatch(word, text)` returns `word` if its characters appear in `text`
  in order, and `""` otherwise.
- `str_capitalizer`
- `split`, which splits on spaces, tabs and newlines.

## Number helpers

`pushswap.numeric` has:

- `fizzbuzz(limit=100)` returns the lines as a list.
- `atoi`, `atoi_base(text, base)` for bases up to 16, and `itoa`.
- `to_hex` treats its input as a 32-bit unsigned value.
- `is_power_of_2`
- `bits`, `reverse_bits`, `swap_bits` work on one byte.
- `range_exclusive(start, stop)` and `range_inclusive(start, stop)`.
- `sort_int_tab` returns a sorted list.

## What it does not do

There is no checker command that reads operations and verifies them. The
string and number helpers are library functions only and have no commands
of their own.