# katsolve

Solutions to short programming-contest problems, each written as an
ordinary Python function. The functions take values that have already been
parsed and return their answer; none of them reads standard input or
writes output.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `katsolve.strings`

- `autori(name)`: the capital letters of `name`, in order.
- `digit_swap(digits)`: the string reversed.
- `echo(word)`: the word three times, separated by spaces.
- `finding_a(word)`: the suffix starting at the first `a`, or `None` if
  there is no `a`.
- `fyi(number)`: `1` if the number starts with `555`, else `0`.
- `greetings(greeting)`: `h`, then twice as many `e` letters as the
  greeting has, then `y`.
- `pokechat(text, ids)`: letters of `text` picked by three-digit, one-based
  positions; raises `IndexError` for a position outside the text.
- `odd_echo(words)`: the words at the first, third, fifth ... positions.

### `katsolve.arithmetic`

`betting`, `carrots`, `gcvwr`, `jackolantern`, `jumbo_javelin`, `nsum`,
`planina`, `pot`, `qaly`, `r2`, `rating_bounds`, `shattered_cake`,
`tarifa`, `two_sum`, `triangle_area`, `sort_two`, `which_is_greater`,
`spavanac`, `stopwatch`, `digit_sum` and `zamka`. A few points worth
knowing:

- `pot(terms)` raises `ValueError` for a term shorter than two characters.
- `stopwatch(presses)` returns `None` when the number of presses is odd
  (the watch is still running).
- `spavanac(hour, minute)` returns the time 45 minutes earlier as an
  `(hour, minute)` tuple.
- `zamka(low, high, target)` returns the smallest and largest numbers in
  `[low, high]` whose digit sum is `target`, and raises `ValueError` if
  there is none.

### `katsolve.decisions`

`knight_packing`, `nasty_hacks`, `oddity`, `sibice`, `two_stones` and
`quadrant` return one of a few fixed answers. `time_loop(n)` returns the
lines `"1 Abracadabra"` to `"n Abracadabra"`, and `count_to_ten()` returns
the numbers 1 to 10, each followed by `hi` unless it is a multiple of three.

### `katsolve.graphs`

- `coin_stacks(counts)`: empties the stacks by repeatedly taking one coin
  from the two fullest stacks (numbered from 1). Returns the list of moves
  as pairs of stack numbers, or `None` if the stacks cannot all be emptied.
- `even_land(node_count, edges)`: for nodes numbered from 1, counts the edge
  subsets in which every node has even degree, modulo `MODULUS`
  (1000000009). Raises `ValueError` for an edge endpoint out of range.

### `katsolve.ingredients`

- `Dish`: a frozen record of `name`, `base`, `ingredient`, `cost` and
  `prestige`.
- `parse_dishes(lines)`: reads lines of `name base ingredient cost
  prestige` into `Dish` records, skipping blank lines and raising
  `ValueError` for a line with the wrong number of fields.
- `best_menu(budget, dishes)`: prices each pizza at its cheapest way to
  build it and returns `(prestige, cost)` of the most prestigious set of
  distinct pizzas within the budget, the cheapest among equals. A recipe
  that depends on itself raises `ValueError`.

### `katsolve.paintball`

Geometry helpers: the `Circle` class (`x`, `y`, `r`) with `intersects`,
`intersects_vertical_line` and `vertical_line_intersection`, and the
functions `intervals_intersect`, `distance`, `remove_interval` and
`build_graph` (for each circle, the ascending indices of the circles it
overlaps).

## Example

```python
from katsolve.strings import autori
from katsolve.arithmetic import two_sum
from katsolve.decisions import two_stones

autori("Knuth-Morris-Pratt")   # "KMP"
two_sum(3, 4)                  # 7
two_stones(1)                  # "Alice"
```

## Command line

Installing the package provides a `katsolve` command:

```
katsolve
```

It takes no arguments other than `--help` and prints `Hello World!`, the
greeting returned by `katsolve.cli.hello`.

## What it does not do

- There is no command that reads a problem's input and prints its answer;
  the solutions are only available as Python functions.
- `katsolve.paintball` holds geometry building blocks only; it does not
  solve a whole paintball problem.