# nslib

A small collection of general-purpose building blocks. It has no dependencies
outside the standard library.

- `nslib.nstring.String` – a mutable text string. It offers `contains`,
  `compare_with`, `compare_n_with`, `is_equal_with`, `is_n_equal_with`,
  `replace`, `append`, `swap`, `shuffle`, `erase`, `clear`, `at`, `first` and
  `last`. It also supports `+`, `+=`, `*` and `*=`. A repeat count of zero
  keeps one copy. Comparison and hashing work with both `String` and `str`.
- `nslib.vector.Vector3d` and `nslib.vector.Vector3f` – 3D vectors.
  - They provide `cross`, `dot`, `norm`, `normalize`, `angle` (in radians),
    `distance` and `scalar` (`|a| * |b| * sin(angle)`).
  - `same_direction`, `opposite_direction` and `is_orthogonal` are based on
    `scalar`.
  - Arithmetic is component-wise with another vector, or uses a number for all
    three components.
  - `Vector3f` rounds its components to single precision.
- `nslib.maths` – `PI`, `deg_to_rad` and `rad_to_deg`.
- `nslib.simd` – `Architecture`, `detect_architecture`, `supported_features`
  and `describe_simd`. These name the processor family and list the SIMD
  extensions found in a set of CPU flags. By default the flags are read from
  `/proc/cpuinfo`; elsewhere the list is empty.
- `nslib.mutex.Mutex` – a non-reentrant lock. It offers `lock`, `unlock`,
  `try_lock`, `timed_lock(seconds)` and `locked`, and can be used as a context
  manager.
- `nslib.thread.Thread` – runs a callable in a background thread that starts at
  once.
  - `get()` waits and returns the result, and re-raises any exception the
    callable raised. `wait()` waits and discards the result. `is_alive()`
    reports whether the thread is still running.
  - `Thread.exit_with(value)` ends a worker thread with `value` as its result.
    Called from the main thread, it only returns `value`.
  - `Thread.send(id, value)` and `Thread.receive(id, timeout=None)` pass
    messages between threads. Reusing an id that is still pending raises
    `ValueError`. A receive that times out raises `TimeoutError`.
- `nslib.multithreading` – a registry of named threads for each calling thread,
  with `create`, `get_one`, `wait_one`, `is_alive` and `exists`.
  - `is_alive` and `exists` both report whether a name is registered, not
    whether the thread is still running.
  - `wait_one` removes the name from the registry.
- `nslib.pool.Pool` – an ordered container of objects of any type. It offers
  `add`, `acquire(factory, *args, **kwargs)`, `at`, `remove_at`, `release`,
  `size` and `is_empty`.
- `nslib.smartptr.SmartPtr` – a shared, reference-counted holder.
  - `share()` returns a new owner of the same value and `how_many()` counts the
    owners.
  - `destroy()` gives up one share. `destroy_force()` drops the value for every
    owner.
  - A value can have at most `MAX_SHARES` owners.
- `nslib.iostreams` – the `Streams` class and the `StreamMode` enum.
  - A `Streams` object writes strings, `String` values and numbers. Floats are
    written with six decimals.
  - In `KEEP` mode it stores text without displaying it. In `SAVE` mode it both
    displays and stores text.
  - `flush()` displays the stored text, and forgets it only in save mode.
  - `get_stream()` returns the calling thread's stream on standard output.

## Installation

```
pip install .
```

## Examples

```python
from nslib.nstring import String
from nslib.vector import Vector3d
from nslib.thread import Thread

s = String("abc")
s += String("def")
print(str(s * 2))        # abcdefabcdef

a = Vector3d(1.0, 0.0, 0.0)
b = Vector3d(0.0, 1.0, 0.0)
print(tuple(a.cross(b)))  # (0.0, 0.0, 1.0)

t = Thread(lambda x, y: x + y, 2, 3)
print(t.get())            # 5
```

Buffered output:

```python
from nslib.iostreams import get_stream

stream = get_stream()
stream.keep_mode()
stream << "hidden for now " << 42
stream.reset_mode()
stream.flush()            # prints "hidden for now 42"
stream.clear()            # forget the stored text
```

## What it does not do

This package is a library only. It has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```