# pushswap

Sort a list of integers using two stacks, **a** and **b**, and a fixed set of
instructions. The package also checks whether a sequence of instructions
really sorts a given list.

## Instructions

| Name  | Effect                                               |
|-------|------------------------------------------------------|
| `sa`  | swap the first two elements of a                     |
| `sb`  | swap the first two elements of b                     |
| `ss`  | `sa` and `sb` at once, only when both hold two or more |
| `pa`  | move the top of b onto a                             |
| `pb`  | move the top of a onto b                             |
| `ra`  | rotate a up, so the first element becomes the last   |
| `rb`  | rotate b up                                          |
| `rr`  | `ra` and `rb` at once                                |
| `rra` | rotate a down, so the last element becomes the first  |
| `rrb` | rotate b down                                        |
| `rrr` | `rra` and `rrb` at once                              |

A push from an empty stack and a swap on a stack with fewer than two
elements do nothing.

## Installation

```
pip install .
```

## Command line

`push_swap` takes the numbers as arguments, either one per argument or all in
a single quoted argument separated by spaces. It prints the instructions that
sort them, one per line:

```
$ push_swap 2 1 3
sa
$ push_swap "3 2 1"
ra
sa
```

With no arguments it prints nothing. If the input is already sorted, nothing
is printed and the exit status is 1. If the input is invalid (a value that is
not an integer, a value outside the 32-bit signed range, or a duplicate),
`Error` is written to standard error.

`checker` takes the same arguments and reads instructions from standard
input, one per line, each ended by a newline. When input ends it prints `OK`
if the stacks are in ascending order and `KO` if they are not. An unknown
instruction, or a last line without a newline, makes it print `Error` on
standard error. If the numbers are already sorted it prints `OK` at once,
without reading standard input, and exits with status 1.

```
$ push_swap 5 1 4 2 3 | checker 5 1 4 2 3
OK
$ printf 'sa\n' | checker 3 1 2
KO
```

Both commands can also be run as `python -m pushswap.cli` and
`python -m pushswap.checker`.

## Library

```python
from pushswap.sorting import solve
from pushswap.checker import check
from pushswap.parsing import parse_stack

values = parse_stack(["4", "-2", "7", "0"])
ops = solve(values)
print([str(op) for op in ops])
print(check(values, [f"{op}\n" for op in ops]))  # True
```

- `pushswap.stacks.Stacks` holds the two stacks and applies instructions one
  at a time (`sa()`, `pb()`, `rra()`, … or `apply(op)`); `stack_a` and
  `stack_b` give their contents from top to bottom, and `ops` lists the
  instructions performed. `pushswap.stacks.Op` names the eleven instructions.
- `pushswap.parsing` reads arguments: `parse_stack`, `split_arguments`,
  `is_valid_number`, `atoi` and `has_doubles`. It raises `InputError` for bad
  input.
- `pushswap.sorting` holds the strategies: `sort_small`, `sort_four`,
  `sort_five` and, for larger inputs, `sort_everything`, which splits around
  the median and then reinserts the cheapest value first. `sort_stacks`
  chooses among them and `solve` returns the resulting list of `Op`.
- `pushswap.cost` computes the rotations needed to reinsert a value
  (`find_cost`, `best_move`, `do_ops`).
- `pushswap.checker` provides `parse_instruction`, `run_instructions` and
  `check`; `InstructionError` is raised for an unknown instruction.

## Running the tests

```
pip install .[test]
pytest
```