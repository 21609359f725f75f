# drillrunner

`drillrunner` is a set of worked answers to small programming drills,
written as plain Python functions and classes. Each one is short enough to
read in a minute and shows one idea: a conditional, an error that is raised
instead of returned, an iterator pipeline, a counter shared between
threads.

It has no dependencies beyond the standard library.

## Installing

```
pip install .
```

For running the package's own tests:

```
pip install ".[test]"
pytest
```

## The drills

### `drillrunner.drills.basics`

Functions, conditionals, variables and primitive types.

- `calculate_price(amount)`: apples cost 2 each, or 1 each when more than 40
  are bought at once.
- `times_two(num)`, `square(num)`, `is_even(num)`, `bigger(a, b)`.
- `sale_price(price)`: even prices get 10 off, odd prices get 3 off.
- `ring_calls(num)`: one `"Ring! Call number N"` message per call,
  numbered from 1.
- `greeting_for(is_morning, is_evening)`: the greetings that apply.
- `classify_character(ch)`: `"Alphabetical!"`, `"Numerical!"` or
  `"Neither alphabetic nor numeric!"`; raises `ValueError` unless given
  exactly one character.
- `describe_array(items)`: comments on whether a sequence has at least 100
  items.
- `middle_slice(items)`: the items at positions 1 to 3; raises `IndexError`
  for sequences shorter than four.
- `describe_cat(cat)`: describes a `(name, age)` pair.
- `second_number(numbers)`: the second element of a sequence.

```python
from drillrunner.drills.basics import calculate_price, middle_slice

calculate_price(55)            # 55
calculate_price(40)            # 80
middle_slice([1, 2, 3, 4, 5])  # [2, 3, 4]
```

### `drillrunner.drills.errors`

Reporting failures by raising.

- `generate_nametag_text(name)`: `"Hi! My name is <name>"`; raises
  `ValueError` for an empty name.
- `total_cost(item_quantity)`: tokens for the typed quantity at 5 per item
  plus a fee of 1. The text must be a 32-bit integer in ASCII digits,
  otherwise `ParseIntError` (a `ValueError`) is raised, with messages such
  as `"invalid digit found in string"`.
- `spend_tokens(tokens, user_input)`: says whether the purchase is
  affordable and what is left.
- `PositiveNonzeroInteger(value)`: a frozen dataclass that raises
  `CreationError` for zero or negative values; the error's `reason` is a
  `CreationReason` (`ZERO` or `NEGATIVE`).
- `read_and_validate(stream)`: reads one line (text or bytes) and returns a
  `PositiveNonzeroInteger`; read errors, parse errors and range errors all
  propagate.
- `pop_too_much()`: pops twice from a one-item list without failing when it
  runs empty, printing what it found.

```python
import io
from drillrunner.drills.errors import total_cost, read_and_validate

total_cost("34")                        # 171
read_and_validate(io.StringIO("42\n"))  # PositiveNonzeroInteger(value=42)
```

### `drillrunner.drills.iteration`

Iterators, shared state between threads and ownership of lists.

- `capitalize_first(text)`, `capitalize_words(words)`,
  `capitalize_joined(words)`.
- `divide(a, b)`: exact integer division; raises `DivideByZeroError` or
  `NotDivisibleError` (with `dividend` and `divisor`), both subclasses of
  `DivisionError`.
- `divide_all(numbers, divisor)`: all results, or the first failure raised.
- `division_results(numbers, divisor)`: each result or the
  `DivisionError` in its place.
- `factorial(num)`: raises `ValueError` for negative numbers.
- `offset_sums(numbers, workers=8, stride=5)`: one thread per offset sums
  every `stride`-th number of a shared sequence; sums come back in offset
  order.
- `JobStatus`: a lock-guarded counter with `complete_one()` and
  `completed()`.
- `run_jobs(total=10, work_interval=0.25, poll_interval=0.5)`: a worker
  thread completes the jobs while the caller prints `"waiting... "` until
  they are all done; returns the `JobStatus`.
- `fill_vec(vec=None)`: a new list holding `vec` followed by 22, 44 and 66,
  leaving the argument untouched.

```python
from drillrunner.drills.iteration import divide_all, factorial

divide_all([27, 297, 38502, 81], 27)  # [1, 11, 1426, 3]
factorial(4)                          # 24
```

## What it does not do

`drillrunner` is a library of answers only. It has no command-line tool:
it does not read an exercise list, compile or run exercise files, verify
them in order, or watch a directory for changes. There are no drills on
strings, structured values or modules in this package.