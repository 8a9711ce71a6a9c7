# cselab

This package holds two small tools:

- **Game of Life**: a board on a torus, where the edges wrap around. The
  board is loaded from a text file and stepped forward some number of
  generations (`cselab.board`, `cselab.sim`).
- **Transaction lookup**: sales records are loaded from a comma-separated
  file into a chained hash table. Sale ids are then looked up one per line
  (`cselab.transactions`, `cselab.lookup_cli`).

The package depends only on the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Game of Life

A board file gives the number of rows and then the number of columns.
After those come any number of `row col` pairs, one for each live cell.
Tokens may be separated by any whitespace.

```
5
5
1 2
2 2
3 2
```

```python
from cselab.board import Board
from cselab.sim import sim_loop

board = Board.from_file("blinker.txt")
sim_loop(board, 3)
print(board.gen)               # 3
print(list(board.live_cells()))
```

`Board.from_file` raises `ValueError` in two cases: the dimensions are
missing or invalid, or a cell lies outside the board. Reading of the pairs
stops at the first token that is not an integer.

A `Board` keeps two flat `bytearray` buffers, `current_buffer` and
`next_buffer`, and a generation counter, `gen`. Its methods are:

- `is_alive(row, col)` and `set_alive(row, col, alive)`, which work on the
  current generation. Both raise `IndexError` for cells outside the board.
- `live_cells()`, which yields `(row, col)` for each live cell in row-major
  order.
- `clear()`, which sets every cell in both buffers to dead.
- `swap_buffers()`, which exchanges the current and next buffers.

`cselab.board.get_index(num_cols, row, col)` gives the flat buffer index of
a cell.

The functions in `cselab.sim` are:

- `step(board)`, which advances the board one generation.
- `sim_loop(board, steps)`, which advances it `steps` generations.
- `next_row(src, row, rows, cols)`, which computes one row of the next
  generation.
- `wrap(x, n)`, which returns `x` modulo `n` and is never negative.

Each generation follows these rules:

- A live cell stays alive with two or three live neighbours.
- A dead cell comes alive with exactly three or exactly six live neighbours.

The Game of Life has no command-line entry point and no display. Use it
from Python as shown above.

## Transaction lookup

The data file holds one sale per line, in the form `id,item,cost`.

```
transaction-lookup [-s] [-t table_size] sales.csv < queries.txt
```

The tool reads sale ids from standard input, one per line. For each id it
prints one of these lines:

```
found sale id=<id>, purchased_item=<item>, cost=<cost to 5 places>
could not find sale with id=<id>
```

At the end it prints `<n> successful queries`. If an id appears again in
the data file, that later entry is skipped and reported on standard error.

- `-s` also prints the table statistics: table size, total entries, longest
  chain, shortest chain and empty buckets.
- `-t` sets the number of buckets. A value that is not greater than 3 is
  ignored and the default of 1873 is used instead.

The tool exits with status 1 in two cases: the usage is wrong, or the data
file cannot be opened.

### From Python

```python
from cselab.transactions import TransactionTable, format_stats

table = TransactionTable(1873)
duplicates = table.load("sales.csv")   # ids skipped as duplicates
sale = table.lookup("A100")            # Sale or None
if sale is not None:
    print(sale.purchased_item, sale.cost)
print(len(table), "A100" in table)
print(format_stats(table.stats()))
```

`TransactionTable` has these members:

- `insert(sale_id, purchased_item, cost)`, which puts a sale at the front of
  its chain.
- `lookup(sale_id)`.
- `bucket_index(sale_id)`.
- `load(filename)`. It raises `TableLoadError` when the file cannot be
  opened.
- `clear()`.
- `stats()`, which returns a `TableStats`.

`hash_string(text)` is the 64-bit string hash that the table uses.

From `cselab.lookup_cli`:

- `parse_args(argv)` parses the command's options.
- `run_queries(table, lines, out)` answers queries and writes the results to
  a stream. It returns the number of queries that succeeded.
- `main(argv=None)` runs the whole command.