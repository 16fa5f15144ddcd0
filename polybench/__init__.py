"""PolyBench numerical kernels in pure Python, with a timing harness and command."""

__version__ = "0.2.0"