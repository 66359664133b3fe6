"""
hashbench - Hash Function Microbenchmark Harness

Times repeated hash computations over a phrase and writes the per-run
timings and their average to a CSV table.
"""

__version__ = "1.0.0"
