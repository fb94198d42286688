"""PODARCHIVER

A podcast archiver built on four narrow I/O capabilities (fetch, download,
move, file attributes), with in-memory test doubles and an interaction
recorder so the whole archiving flow can be exercised without real I/O.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
