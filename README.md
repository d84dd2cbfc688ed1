# statecheck

Building blocks for checking that a concurrent system behaves like a simple
sequential object.

- **Sequential specifications** (`statecheck.spec.SequentialSpec` and its
  subclasses) describe how an object should behave when operations run one at
  a time.
- **Consistency testers** record a concurrent history of invocations and
  returns and decide whether it can be explained by a specification.
- **Utilities**: hashable sets and maps, a dense natural-number map and a
  vector clock.

The package has no dependencies beyond the standard library and needs
Python 3.10 or later.

## Installation

```
pip install statecheck
```

## Checking a history

```python
from statecheck.linearizability import LinearizabilityTester
from statecheck.register import Register, Write, Read, WriteOk, ReadOk

tester = LinearizabilityTester(Register("A"))
tester.on_invoke(0, Write("B"))
tester.on_invret(1, Read(), ReadOk("A"))

assert tester.is_consistent()
print(tester.serialized_history())   # [(Read, ReadOk('A'))]
```

There are two testers. Both take the initial specification object.

- `statecheck.linearizability.LinearizabilityTester` checks
  linearizability. An operation that starts after another one has returned,
  in any thread, must come after it in the order.
- `statecheck.sequential_consistency.SequentialConsistencyTester` checks
  sequential consistency. Only the order of operations within each thread is
  kept.

Thread identifiers must be hashable and comparable with each other. Threads
are explored in ascending order of identifier.

The testers record events with these methods:

- `on_invoke(thread_id, op)` records that a thread invoked an operation.
- `on_return(thread_id, ret)` records that the thread's operation returned.
- `on_invret(thread_id, op, ret)` records an invocation and its return in one
  call.

Each method returns the tester, so calls can be chained. A malformed history
raises `statecheck.spec.HistoryError`, which is a subclass of `ValueError`.
There are two ways to make one: a second invocation while the thread already
has an operation in flight, or a return with no invocation in flight. After
this error the tester is marked invalid. Later recording calls raise
`HistoryError("Earlier history was invalid.")`, and `serialized_history()`
returns `None`.

To inspect the result:

- `serialized_history()` returns one total order of `(op, ret)` pairs that
  fits the specification, or `None` if there is none. Every completed
  operation appears in it. An operation still in flight may be included, with
  the result the specification gives it, or left out.
- `is_consistent()` is `True` when such an order exists.
- `len(tester)` counts the operations recorded so far, both completed and in
  flight.

## Specifications

Each operation and each result is a small frozen dataclass.

| Module | Spec | Operations | Results |
|---|---|---|---|
| `statecheck.register` | `Register(value)` | `Write(v)`, `Read()` | `WriteOk()`, `ReadOk(v)` |
| `statecheck.vec` | `VecSpec(items)` | `Push(v)`, `Pop()`, `Len()` | `PushOk()`, `PopOk(v or None)`, `LenOk(n)` |
| `statecheck.write_once_register` | `WORegister(value)` | `WOWrite(v)`, `WORead()` | `WOWriteOk()`, `WOWriteFail()`, `WOReadOk(v or None)` |

`VecSpec` works like a stack. `Pop` on an empty vector returns `PopOk(None)`.

`WORegister` starts unwritten, with the value `None`. The first write
succeeds. A later write succeeds only if it writes the value already stored,
and fails otherwise.

```python
from statecheck.vec import VecSpec, Push, Pop, Len, PushOk, PopOk, LenOk

assert VecSpec().is_valid_history([
    (Push(10), PushOk()),
    (Len(), LenOk(1)),
    (Pop(), PopOk(10)),
    (Pop(), PopOk(None)),
])
```

A specification offers three methods:

- `invoke(op)` applies an operation and returns its result.
- `is_valid_step(op, ret)` applies an operation and reports whether it
  produces `ret`.
- `is_valid_history(pairs)` replays a history in order. It mutates the
  object, and it stops at the first invalid step.

To write your own specification, subclass `SequentialSpec` and implement
`invoke`. The default `is_valid_step` calls `invoke` and compares the result
with `ret`; override it if that does not fit. Testers copy specification
objects with `copy.deepcopy` while they explore orders.

## Utilities

### Hashable collections

`statecheck.hashable.HashableSet` and `statecheck.hashable.HashableMap`
subclass `set` and `dict` and can be hashed. Each entry is hashed on its own,
or each key-value pair for a map. These hashes are sorted and then combined,
so equal collections hash the same whatever the insertion order. Map values
must therefore be hashable.

The comparison operators `<`, `<=`, `>` and `>=` compare these hashes. This
gives an arbitrary but consistent order within one process, not set
inclusion.

### Dense natural-number maps

`statecheck.densenatmap.DenseNatMap` maps the keys `0..n-1` to values. Keys
can be any type with `__index__`. There are three ways to build one:

- `DenseNatMap(values, key_type=int)` takes values in key order.
- `DenseNatMap.from_pairs(pairs)` takes `(key, value)` pairs in any order.
  The indices must be exactly `0..n-1`, or `ValueError` is raised.
- `insert(key, value)` adds pairs one at a time.

`insert` accepts only an existing key or the next index, and raises
`IndexError` otherwise. It returns the previous value, or `None`. `get(key)`
returns `None` when the key is out of range. Indexing with `[]` raises
`IndexError` when the key is out of range.

Iterating the map, or calling `keys()`, yields keys built with `key_type`.
`items()` and `values()` follow index order.

### Vector clocks

`statecheck.vector_clock.VectorClock` is an immutable vector clock. Missing
trailing components count as zero.

```python
from statecheck.vector_clock import VectorClock

a = VectorClock([1, 2, 3])
b = VectorClock([1, 3, 4])
assert a < b
assert str(VectorClock.merge_max(a, b)) == "<1, 3, 4, ...>"
assert VectorClock([1, 0]) == VectorClock([1])
assert hash(VectorClock([1, 0])) == hash(VectorClock([1]))
```

- `incremented(index)` returns a new clock with one component raised by one.
- `merge_max(c1, c2)` takes the larger value of each pair of components.
- `partial_cmp(other)` returns `-1`, `0` or `1`, or `None` for concurrent
  clocks. The comparison operators follow it, so two concurrent clocks are
  neither `<` nor `>=` each other.

## What this package does not do

It does not include a model checker or any state-space exploration. The
testers only judge histories that you record yourself, for example from a
test harness or from states your own checker visits.

## Running the tests

```
pip install -e ".[test]"
pytest
```