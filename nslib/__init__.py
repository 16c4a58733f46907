"""Utility building blocks: strings, vectors, SIMD reporting, threads, mutexes, pools, shared pointers and streams."""

__version__ = "0.1.0"

__all__ = [
    "iostreams",
    "maths",
    "multithreading",
    "mutex",
    "nstring",
    "pool",
    "simd",
    "smartptr",
    "thread",
    "vector",
]