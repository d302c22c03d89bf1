# algokit

A collection of classic algorithms and data structures, plus a few small
service-shaped building blocks (a scaling worker pool, a layered request
handler, a configuration loader), all written in plain Python.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `merge_sort`, `merge`, `insertion_sort`, `selection_sort`, `merge_sorted`, `partition`, `kth_largest`, `find_max_min`, `find_element`, `first_one`, `row_with_most_ones`, `random_values` |
| `algokit.arith` | `add_one`, `digit_sum`, `add_digits`, `quotient`, `atoi`, `is_palindrome`, `is_palindrome_numeric`, `reverse_number`, `roman_to_int`, `factorial`, `factorial_tail`, `squares`, `sum_of_squares` |
| `algokit.text` | `full_justify`, `longest_k_string`, `split_words` |
| `algokit.dynamic` | `can_sum`, `min_coins`, `lcs`, `min_cost_stairs`, `can_construct`, `count_construct`, `traveller_ways`, `can_partition`, `min_cost_tickets` |
| `algokit.grids` | `bfs_order`, `dfs_order`, `count_islands`, `min_island_distance`, `walls_and_gates` |
| `algokit.graphs` | `UnionFind`, `DirectedGraph`, `cost_from_root`, `earliest_time`, `inform_time`, `min_time`, `network_delay` |
| `algokit.succession` | `Monarchy`, a line-of-succession tracker |
| `algokit.trees` | `BinarySearchTree`, `MaxHeap` |
| `algokit.hashing` | `ChainedHashSet`, `hash_key` |
| `algokit.linear` | `LinkedList`, `Queue`, `Stack` |
| `algokit.vending` | `VendingMachine`, `Application` |
| `algokit.alternate` | `odd_even_sequence`, two threads taking turns |
| `algokit.workerpool` | `Request`, `Worker`, `Dispatcher` |
| `algokit.timezone` | `time_in_timezone`, `date_in_timezone` |
| `algokit.config` | `Config`, `ServerConfig`, `DatabaseConfig`, `load_config`, `get_config` |
| `algokit.cockroach` | `CockroachHandler`, `CockroachUsecase`, `CockroachRepository`, `CockroachMessaging`, `LoggingMessaging` and their data classes |

Where there is no answer, functions return `None` (for example
`min_coins`, `network_delay`, `earliest_time`, `min_island_distance`) and
invalid input raises `ValueError`. Containers raise `IndexError` when taken
from while empty; `ChainedHashSet.delete` raises `KeyError` and
`LinkedList.remove` raises `ValueError` for a missing value.

## Examples

```python
from algokit.sorting import merge_sort
from algokit.dynamic import lcs
from algokit.arith import roman_to_int
from algokit.trees import BinarySearchTree

merge_sort([5, -3, 2, 0])        # [-3, 0, 2, 5]
lcs("abcd", "ace")               # 2
roman_to_int("XXXIX")            # 39

tree = BinarySearchTree()
for value in (20, 30, 25, 10, 12):
    tree.insert(value)
tree.right_view()                # [20, 30, 25]
```

```python
from algokit.succession import Monarchy

kingdom = Monarchy("jake")
kingdom.birth("charlie", "jake")
kingdom.birth("lucy", "jake")
kingdom.death("charlie")
kingdom.succession()             # ['jake', 'lucy']
```

```python
from algokit.cockroach import (
    CockroachHandler, CockroachRepository, CockroachUsecase, LoggingMessaging,
)

handler = CockroachHandler(CockroachUsecase(CockroachRepository(), LoggingMessaging()))
handler.detect('{"amount": 3}')  # Response(status=<HTTPStatus.OK: 200>, body={'message': 'Success 🪳🪳🪳'})
handler.detect("not json")       # status 400, body {'message': 'Bad request'}
```

## Commands

Two commands are installed.

`algokit-workerpool` runs a demonstration of the worker pool: it starts a
minimum set of workers, grows and shrinks the pool with the queue load while
a batch of requests is sent, and then stops the pool, waiting up to a
timeout for the workers to drain the queue. Options: `--buffer-size`,
`--max-workers`, `--min-workers`, `--load-threshold`, `--requests` and
`--stop-timeout`. Worker activity is reported through the `logging` module.

```
algokit-workerpool --requests 1000
```

`algokit-timezone` prints the current date in a given time zone. The
`timezone` subcommand takes an IANA zone name (or `UTC` / `Local`). The
optional `--date` flag takes a layout written as the reference time
`Mon Jan 2 15:04:05 MST 2006`, so `02/01/2006` means day/month/year; without
it the date is printed as `YYYY-MM-DD`. An unknown zone exits with status 1.

```
algokit-timezone timezone Europe/Paris
algokit-timezone timezone Asia/Tokyo --date "02/01/2006"
```

## Configuration

`algokit.config.load_config` reads a YAML file, or a directory holding
`config.yaml`, `config.yml` or `config`, with `server` and `db` sections.
Non-empty environment variables named after the dotted keys in upper case
with dots replaced by underscores (for example `SERVER_PORT`, `DB_HOST`)
take precedence over the file. `get_config` loads from the working
directory once and returns the same `Config` on every later call.

## What this package does not do

- The cockroach handler is a plain object: nothing here runs an HTTP
  server or routes requests to it; you pass the request body to
  `CockroachHandler.detect` yourself.
- `CockroachRepository` keeps sightings in memory only. The database
  settings in `Config.db` are read but no database connection is made.
- `LoggingMessaging` records and logs notifications; it does not deliver
  them to any push service.