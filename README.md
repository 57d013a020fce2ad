# drillbook

A compact collection of classic data structures and algorithms as plain
Python functions and classes, plus three small TCP programs. It uses only
the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `drillbook.lru_cache` | `LRUCache` |
| `drillbook.arrays` | `three_sum`, `merge_intervals`, `move_zeroes`, `product_except_self`, `remove_duplicates`, `remove_element`, `sorted_squares`, `sorted_squares_by_sorting`, `is_valid_parentheses` |
| `drillbook.bits` | `add_binary`, `missing_number` |
| `drillbook.linked_list` | `ListNode`, `from_values`, `natural_list`, `iter_values`, `length`, `format_list`, `reverse`, `reverse_by_storage`, `merge_two_lists` |
| `drillbook.search` | `binary_search`, `check_if_double_exists`, `check_if_double_exists_sorted` |
| `drillbook.queues` | `ArrayQueue`, `CircularQueue`, `LinkedQueue`, `QueueFullError`, `QueueEmptyError` |
| `drillbook.strings` | `first_unique_char`, `hex_to_bytes`, `InvalidHexStringError`, `length_of_longest_substring`, `length_of_longest_substring_brute`, `roman_to_int`, `my_atoi`, `my_atoi_scanning` |
| `drillbook.net` | `send_message`, `serve_once`, `serve_sums`, `parse_operands`, `format_sum`, `answer_sum_request`, `client_main`, `server_main`, `sum_server_main` |

### Notes on behaviour

- `LRUCache(capacity)` needs a positive capacity. `get` returns `-1` for a
  missing key; both `get` and `put` mark a key as most recently used.
  `len(cache)`, `key in cache` and `str(cache)` are supported.
- The queues raise `QueueFullError` when full and `QueueEmptyError` when
  read or dequeued while empty. `ArrayQueue` does not reuse slots freed by
  `dequeue` until it is completely empty; `CircularQueue` reuses them at
  once; `LinkedQueue` is unbounded. All three can be iterated front to rear.
- `hex_to_bytes` collects every `x` followed by one or two hex digits and
  raises `InvalidHexStringError` for an `x` with no hex digit after it.
- `my_atoi` and `my_atoi_scanning` clamp their result to the 32-bit signed
  range; `roman_to_int` raises `ValueError` on an unknown symbol;
  `add_binary` raises `ValueError` on a non-binary operand.
- `three_sum` does not remove duplicate triples.

## Examples

```python
from drillbook.lru_cache import LRUCache

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)      # 1
cache.put(3, 3)   # evicts key 2
cache.get(2)      # -1
```

```python
from drillbook.arrays import merge_intervals, product_except_self
from drillbook.strings import roman_to_int, my_atoi

merge_intervals([[1, 3], [2, 6], [8, 10]])   # [[1, 6], [8, 10]]
product_except_self([1, 2, 3, 4])            # [24, 12, 8, 6]
roman_to_int("MCMXCIV")                      # 1994
my_atoi("   -42")                            # -42
```

```python
from drillbook.linked_list import from_values, merge_two_lists, format_list, reverse

merged = merge_two_lists(from_values([1, 4, 5]), from_values([1, 2, 3, 6]))
format_list(reverse(merged))   # '6 5 4 3 2 1 1 .'
```

```python
from drillbook.queues import CircularQueue

queue = CircularQueue(3)
queue.enqueue(2)
queue.enqueue(1)
queue.dequeue()   # 2
list(queue)       # [1]
```

## Commands

```
drillbook-server [--host HOST] [--port PORT] [--reply TEXT]
drillbook-client [--host HOST] [--port PORT] [--message TEXT]
drillbook-sum-server [--host HOST] [--port PORT]
```

- `drillbook-server` listens on `0.0.0.0:8080` by default, accepts one
  connection, prints what it received and its length, answers with the
  reply text and exits.
- `drillbook-client` connects to `127.0.0.1:8080` by default, sends the
  message and prints the reply.
- `drillbook-sum-server` listens on `127.0.0.1:5001` by default and serves
  one client until it disconnects. It first sends the line
  `HTTP/1.0 200 OK`, then answers each request carrying `a=<digits>` and
  `b=<digits>` with the sum of the two. The digits of the sum are sent
  least significant first, followed by a newline; a sum of zero sends only
  the newline. The operands and sum are logged to standard error.

## Limits

The servers each handle a single client and then stop. The sum service only
looks for `a` and `b` in the raw bytes it reads; it does not parse HTTP
requests or send HTTP headers beyond its one status line.