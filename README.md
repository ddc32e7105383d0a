# sequencekit

Small container types that track size and capacity explicitly:

- `FixedArray` (`sequencekit.fixed_array`): a sequence whose length is set when it
  is created and never changes.
- `DynamicString` (`sequencekit.dynamic_string`): a mutable character string whose
  capacity grows as it is needed. Capacity counts one terminating slot, so
  `capacity() >= len(s) + 1` always holds.
- `Vector` (`sequencekit.vector`): a growable sequence with `reserve`,
  `shrink_to_fit`, `insert`, `erase`, `resize` and related operations, where
  `len(v) <= v.capacity()` always holds.

The package has no third-party dependencies.

## Installation

```
pip install .
```

Add the `test` extra (`pip install .[test]`) to get pytest as well.

## Usage

### FixedArray

```python
from sequencekit.fixed_array import FixedArray

arr = FixedArray(5, 10)       # five elements, each 10
arr[2] = 99
arr.front(), arr.back()       # (10, 10)
list(reversed(arr))           # [10, 10, 99, 10, 10]

other = FixedArray(5, 3)
arr.swap(other)               # swaps the contents of the two arrays
arr.at(10)                    # raises IndexError
```

`swap` raises `ValueError` when the arrays differ in size. `fill(value)` sets
every element; `max_size()` is the array's length.

### DynamicString

```python
from sequencekit.dynamic_string import DynamicString

s = DynamicString("Hello")
s.insert(5, " World")
str(s)                        # "Hello World"

s.clear()
s.push_back("c")
s.pop_back()
s.append("abc")
s += s
str(s)                        # "abcabc"
s == "abcabc"                 # True
```

`pop_back` on an empty string raises `IndexError`; `push_back` and item
assignment accept only single characters (`ValueError` otherwise).

### Vector

```python
from sequencekit.vector import Vector

v = Vector()
for n in (1, 2, 3):
    v.push_back(n)
v.pop_back()                  # returns 3
v.insert(1, 42)               # [1, 42, 2]
v.erase(1)                    # [1, 2]
v.reserve(100)
v.capacity()                  # 100
v.shrink_to_fit()
v.capacity()                  # 2

w = v.copy()                  # independent copy
v.resize(4, 0)                # [1, 2, 0, 0]
v.insert(0, 7, count=2)       # [7, 7, 1, 2, 0, 0]
```

`Vector(count, value)` starts with `count` copies of `value`. Requesting more
capacity than `max_size()` raises `MemoryError`.

Reading past the end with `at`, `front`, `back` or indexing raises `IndexError`
for all three types. `at` accepts only indexes from `0` to `len - 1`; plain
indexing also accepts negative indexes.

## Running the tests

```
pytest
```