# tally

Building blocks for emitting application metrics. The package has no
dependencies outside the standard library.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `tally.histogram`

- `ValueBuckets` and `DurationBuckets`: list types holding bucket upper
  bounds as floats or as durations in nanoseconds. Both offer `as_values()`
  (floats, in seconds for durations) and `as_durations()` (nanoseconds,
  treating values as seconds). `str()` gives `[1.000000 2.000000 3.000000]`
  or `[1s 2s 3s]`.
- `linear_value_buckets(start, width, n)`,
  `linear_duration_buckets(start, width, n)`,
  `exponential_value_buckets(start, factor, n)` and
  `exponential_duration_buckets(start, factor, n)` build bucket sets. They
  raise `BucketsError` (a `ValueError`) when `n <= 0`, and the exponential
  ones also when `start <= 0` or `factor <= 1`.
- `bucket_pairs(buckets)` sorts the bounds and returns a list of
  `BucketPair` objects (`lower_bound_value`, `upper_bound_value`,
  `lower_bound_duration`, `upper_bound_duration`) running from the lowest
  representable bound to the highest. `None` or an empty set yields a
  single pair covering the whole range.
- `buckets_equal(x, y)` compares two bucket sets by kind and contents.
- `format_duration(ns)` renders a nanosecond duration such as `1m30s` or
  `25ms`. Time unit constants `NANOSECOND` through `HOUR` are provided.

### `tally.identity`

- `Accumulator`: an immutable, commutative folding accumulator over
  unsigned 64-bit values (`add_uint64`, `add_string`, `value`).
- `murmur3_sum64(data)`: the first 64 bits of MurmurHash3 x64-128 with
  seed 0.
- `durations`, `int64s`, `float64s` and `string_string_map` return an
  order-independent identity for a sequence or mapping, or 0 when empty.

### `tally.cache`

- `StringInterner.intern(s)` returns one shared instance per distinct
  string.
- `TagCache.get(key)` / `TagCache.set(key, tags)` cache converted tag lists;
  `set` keeps an existing entry and returns whatever is cached.
- `tag_map_key(tags)` computes the cache key for a tag mapping.

Both caches are safe to use from several threads.

### `tally.transports`

- `CalcTransport` counts the bytes written to it (`write`, `write_byte`,
  `write_string`, `count`, `reset_count`) without storing them; reads
  return nothing and `remaining_bytes()` reports the largest 64-bit value.
- `BufferedReadTransport` reads from an in-memory buffer; `read(size)`
  raises `EOFError` once the buffer is drained, and `write(buf)` replaces
  the buffer.

### `tally.instrument`

- `Call(scope, name)` creates the counters `name` tagged
  `result_type=success` and `result_type=error` and the timer `latency` in
  the sub-scope `name`. `Call.execute(fn)` runs `fn`, times it, increments
  the matching counter, and returns the result or re-raises the exception.

## Examples

```python
from tally.histogram import bucket_pairs, exponential_value_buckets

buckets = exponential_value_buckets(2.0, 2.0, 4)   # [2.0, 4.0, 8.0, 16.0]
for pair in bucket_pairs(buckets):
    print(pair.lower_bound_value, pair.upper_bound_value)
```

```python
from tally.transports import CalcTransport

calc = CalcTransport()
calc.write(b"test")
calc.write_string("string")
print(calc.count)  # 10
```

## What this package does not do

There is no scope, counter, gauge, timer or reporter implementation here,
and nothing that sends metrics over the network. `Call` works with any
scope object you supply that offers `tagged`, `sub_scope`, `counter` and
`timer`. The package has no command-line program.