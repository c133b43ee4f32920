# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of operations. It prints the operations, one per line, that
leave every number in stack `a` in ascending order from top to bottom.

The operations are:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the two top elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate up: the top element becomes the bottom one |
| `rra`, `rrb`, `rrr` | rotate down: the bottom element becomes the top one |

The sorter itself emits only `sa`, `pa`, `pb`, `ra`, `rb`, `rra` and
`rrb`. The combined operations `ss`, `rr` and `rrr` are available as
functions in `pushswap.stacks`.

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments:

```
push-swap 3 2 5 1 4
```

or as one argument separated by spaces:

```
push-swap "3 2 5 1 4"
```

The first number is the top of stack `a`. A single argument is split on
spaces only. When the input is already sorted, or there is no input,
nothing is printed. When a token is not an optionally signed string of
digits, is out of the 32-bit signed range, or appears twice, `Error` is
written to standard error and the exit status is 1.

## Library use

```python
from pushswap.algorithm import sort_operations
from pushswap.parsing import parse_arguments, InputError
from pushswap.stacks import Stack

numbers = parse_arguments(["3", "2", "5", "1", "4"])
for op in sort_operations(numbers):
    print(op)

stack = Stack([2, 1, 3])
stack.swap()
assert stack.is_sorted()
```

- `pushswap.parsing.parse_arguments` returns the numbers, top first, and
  raises `InputError` for input the command would reject.
  `check_tokens`, `has_duplicates`, `atolong`, `atoi` and `split_words`
  are the pieces it is built from.
- `pushswap.algorithm.Sorter` runs the sort step by step; its `a` and `b`
  attributes hold the stacks and `operations` the names of the operations
  performed. `run()` sorts and returns that list. The cost helpers
  (`movements_to_top`, `find_best_position`, `find_place`,
  `calculate_cost`, `find_the_cheapest`) are public too.
- `pushswap.stacks.Stack` supports `swap`, `rotate`, `reverse_rotate`,
  `push_from`, `top`, `index_of`, `is_sorted`, `len()` and iteration;
  `format_stack` renders a stack as space-separated values.

## Helpers

The `pushswap.libft` package holds small general helpers:

- `chars`: ASCII classification (`is_alpha`, `is_digit`, ...) and
  `to_lower` / `to_upper`.
- `strings`: bounded copy and search helpers such as `strl_cpy`,
  `strl_cat`, `str_ncmp`, `str_nstr`, `substr`, `str_trim` and `itoa`.
- `memory`: byte-buffer helpers such as `mem_set`, `mem_cpy`, `mem_move`,
  `mem_cmp`, `mem_chr`, `bzero` and `calloc`.
- `lists`: `LinkedList`, a singly linked list with `add_front`,
  `add_back`, `last`, `pop_front`, `clear`, `iterate` and `map`.
- `output`: `put_char_fd`, `put_str_fd`, `put_endl_fd` and `put_nbr_fd`
  write straight to a file descriptor.
- `printf`: `ft_printf` and `format_printf` support `%c %s %d %i %u %x %X
  %p %%`; `nbr_base` renders a number in any valid base.
- `nextline`: `LineReader.get_next_line(fd)` returns a descriptor's input
  one line at a time.

## What it does not do

There is no checker: the package produces operation lists but does not
read a list of operations from input and verify that it sorts the stack.

## Tests

```
pip install ".[test]"
pytest
```