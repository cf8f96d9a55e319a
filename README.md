# shulzcache

`shulzcache` wraps a function that takes an integer and returns a string so
that its results are cached:

- entries live in an LRU cache with a maximum size (1000 by default) and a
  time-to-live (5 minutes by default);
- when several threads ask for the same key at once, only one of them runs
  the wrapped function; the others wait and then read the cached result;
- if the wrapped function raises, the exception reaches the caller and
  nothing is cached.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Usage

```python
from shulzcache.cache import new_cached_function, new_cached_function_with_options

def lookup(item_id: int) -> str:
    return f"Result for ID {item_id}"

cached_lookup = new_cached_function(lookup)
cached_lookup(1)   # runs lookup(1)
cached_lookup(1)   # served from the cache

# Custom limits: at most 10 entries, each kept for 30 seconds.
short_lived = new_cached_function_with_options(lookup, 10, 30.0)
```

The TTL can be given as a number of seconds or as a `datetime.timedelta`.

### Supplying your own cache

Pass any object with `get(param)` and `put(param, value)` methods, following
the `Cache` protocol in `shulzcache.cache`, to
`new_cached_function_with_cache`. `get` returns the cached value, or `None`
if the key is missing or has expired.

The built-in `shulzcache.lru_cache.LRUCache` follows this protocol. It also
supports `len()` and the `in` operator; note that `in` reports whether an
entry is stored, whether or not it has expired:

```python
from shulzcache.cache import new_cached_function_with_cache
from shulzcache.lru_cache import LRUCache

cache = LRUCache(10, 0.5)
cached_lookup = new_cached_function_with_cache(lookup, cache)
cached_lookup(7)
assert 7 in cache and len(cache) == 1
```

When a `put` takes the cache over its maximum size, the least recently used
entries are dropped. Both `get` (on a fresh hit) and `put` count as a use.

### Building blocks

- `shulzcache.lru.LinkedListLRU` tracks key recency on its own:
  `hit(key)` marks a present key as recently used and returns whether it was
  present, `hit_or_add(key)` also adds a missing key, and
  `size_to(max_size)` removes and returns the oldest keys, oldest first,
  until at most `max_size` remain.
- `shulzcache.mutex_with_counter.MutexWithCounter` is a lock (usable with
  `with`) paired with a thread-safe counter; `inc()` and `dec()` return the
  new count.

## Demo

```
shulzcache-demo
```

This starts ten threads that look up two different keys through a function
that sleeps for two seconds. The function runs only once per key, and every
thread logs the result it got. The command takes no options besides
`--help`.

## What it does not do

Keys are kept in memory only; nothing is written to disk or shared between
processes. Expired entries are not swept in the background: they stay stored
until they are looked up again and replaced, or evicted by size.

## Running the tests

```
pip install .[test]
pytest
```