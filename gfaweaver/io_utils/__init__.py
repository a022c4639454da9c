"""
GFAWeaver v0.1.0

I/O module for GFAWeaver.

1. gfa_io.py - GFA v1 reading, writing, and summary statistics
"""

from .gfa_io import (
    # File handling
    open_input,
    open_output,
    # Reading
    parse_gfa_lines,
    read_gfa,
    # Writing
    write_gfa,
    # Summaries
    gfa_stats,
    validate_gfa_file,
)

__all__ = [
    "open_input",
    "open_output",
    "parse_gfa_lines",
    "read_gfa",
    "write_gfa",
    "gfa_stats",
    "validate_gfa_file",
]
