#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

GFA I/O — tokenizes GFA v1 text into record constructors, writes graphs back
out as canonical lines, and summarises graphs.

Author: GFAWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from __future__ import annotations

import bz2
import gzip
import logging
from pathlib import Path
from typing import Any, Iterable, Optional, TextIO, Union

from ..gfa.errors import GFAError, GFAParseError
from ..gfa.fields import TEXT_ERRORS, IntegerDecoding, OptionalField
from ..gfa.graph import GFAGraph
from ..gfa.records import new_link, new_segment

logger = logging.getLogger(__name__)

UNSUPPORTED_RECORD_POLICIES = ("skip", "error")
RESERVED_RECORD_TYPES = {"C": "containment", "P": "path"}
TEXT_MODE = {'encoding': 'utf-8', 'errors': TEXT_ERRORS}


# ============================================================================
#                           FILE HANDLING
# ============================================================================

def open_input(filename: Union[str, Path]) -> TextIO:
    """
    Open a GFA file for reading as text.

    Files ending in .gz or .bz2 are decompressed on the fly. Bytes that are
    not valid UTF-8 are kept as surrogate escapes, so names and sequences
    survive a read-write cycle unchanged.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    suffix = str(filename).split('.')[-1].lower()
    if suffix == 'bz2':
        return bz2.open(filename, 'rt', **TEXT_MODE)
    elif suffix == 'gz':
        return gzip.open(filename, 'rt', **TEXT_MODE)
    else:
        return open(filename, 'rt', **TEXT_MODE)


def open_output(filename: Union[str, Path], compress: bool = False) -> TextIO:
    """Open a file for writing as text, gzip-compressed if asked or if it ends in .gz."""
    suffix = str(filename).split('.')[-1].lower()
    if suffix == 'bz2':
        return bz2.open(filename, 'wt', **TEXT_MODE)
    elif compress or suffix == 'gz':
        return gzip.open(filename, 'wt', **TEXT_MODE)
    else:
        return open(filename, 'w', **TEXT_MODE)


# ============================================================================
#                               READING
# ============================================================================

def _parse_version(value: str) -> int:
    """Accept '1' as well as the '1.0' spelling other tools write."""
    try:
        return int(value)
    except ValueError:
        pass
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"version '{value}' is not a whole number")
    return int(number)


def _read_header(graph: GFAGraph, fields: list[str]) -> None:
    for token in fields[1:]:
        field = OptionalField.parse(token)
        if field.tag != "VN":
            logger.debug(f"Ignoring header tag {field}")
            continue
        version = _parse_version(field.value)
        if version == 0:
            # VN:Z:0 is how an unversioned header is written out
            continue
        graph.header.add_version_number(version)


def _read_comment(graph: GFAGraph, line: str) -> None:
    text = line[1:]
    if text.startswith('\t'):
        text = text[1:]
    graph.header.add_comment(text)


def _read_record(
    graph: GFAGraph,
    line: str,
    line_no: int,
    int_decoding: IntegerDecoding,
    unsupported_records: str,
) -> None:
    fields = line.split('\t')
    record_type = fields[0]

    if record_type == 'H':
        _read_header(graph, fields)

    elif record_type == 'S':
        # S <name> <sequence> [optional ...]
        if len(fields) < 3:
            raise GFAParseError(line_no, "S-line needs a name and a sequence")
        segment = new_segment(fields[1], fields[2], *fields[3:], int_decoding=int_decoding)
        segment.insert(graph)

    elif record_type == 'L':
        # L <from> <from_orient> <to> <to_orient> <overlap> [optional ...]
        if len(fields) < 6:
            raise GFAParseError(line_no, "L-line needs 5 fields after the record type")
        link = new_link(*fields[1:6], *fields[6:])
        link.insert(graph)

    elif record_type in RESERVED_RECORD_TYPES:
        kind = RESERVED_RECORD_TYPES[record_type]
        if unsupported_records == "error":
            raise GFAParseError(line_no, f"{kind} records are not supported")
        logger.warning(f"GFA line {line_no}: skipping unsupported {kind} record")

    else:
        raise GFAParseError(line_no, f"unknown record type '{record_type}'")


def parse_gfa_lines(
    lines: Iterable[str],
    graph: Optional[GFAGraph] = None,
    *,
    strict: bool = True,
    int_decoding: Union[IntegerDecoding, str] = IntegerDecoding.DECIMAL,
    unsupported_records: str = "skip",
) -> GFAGraph:
    """
    Build a graph from GFA v1 text lines.

    Each line is split on tabs and handed to the matching record constructor,
    then inserted into the graph.

    Args:
        lines: Iterable of text lines (trailing newlines are stripped)
        graph: Graph to fill; a new GFAGraph is created when None
        strict: If True, the first bad line raises; otherwise bad lines are
                logged and skipped
        int_decoding: Decoding for RC/FC/KC segment tags
        unsupported_records: 'skip' or 'error' for C and P lines

    Returns:
        The populated graph.

    Raises:
        GFAParseError: On a bad line in strict mode. The underlying record
            error is chained.
    """
    if unsupported_records not in UNSUPPORTED_RECORD_POLICIES:
        raise ValueError(
            f"unsupported_records must be one of {UNSUPPORTED_RECORD_POLICIES}, "
            f"got {unsupported_records!r}"
        )
    if not isinstance(int_decoding, IntegerDecoding):
        int_decoding = IntegerDecoding(int_decoding)
    if graph is None:
        graph = GFAGraph()

    skipped = 0
    for line_no, raw_line in enumerate(lines, 1):
        line = raw_line.rstrip('\r\n')
        if not line.strip():
            continue

        try:
            if line.startswith('#'):
                _read_comment(graph, line)
            else:
                _read_record(graph, line, line_no, int_decoding, unsupported_records)
        except GFAParseError as e:
            if strict:
                raise
            logger.warning(str(e))
            skipped += 1
        except (GFAError, ValueError) as e:
            if strict:
                raise GFAParseError(line_no, str(e)) from e
            logger.warning(f"GFA line {line_no}: {e}, skipping")
            skipped += 1

    if skipped:
        logger.warning(f"Skipped {skipped} invalid line(s)")
    return graph


def read_gfa(gfa_path: Union[str, Path], **options: Any) -> GFAGraph:
    """
    Load a GFA v1 file into a new GFAGraph.

    Keyword options are passed to parse_gfa_lines.

    Raises:
        FileNotFoundError: If gfa_path does not exist.
        GFAParseError: On malformed lines in strict mode.
    """
    gfa_path = Path(gfa_path)
    if not gfa_path.exists():
        raise FileNotFoundError(f"GFA file not found: {gfa_path}")

    logger.info(f"Loading graph from GFA: {gfa_path}")
    with open_input(gfa_path) as f:
        graph = parse_gfa_lines(f, **options)

    logger.info(f"Loaded {len(graph.segments)} segments and {len(graph.links)} links")
    return graph


# ============================================================================
#                               WRITING
# ============================================================================

def write_gfa(
    graph: GFAGraph,
    output: Union[str, Path, TextIO],
    compress: bool = False,
) -> None:
    """
    Write a graph as GFA v1 text.

    Args:
        graph: Graph to write
        output: Output path, or an open text stream
        compress: Gzip the output file (ignored for streams)
    """
    if hasattr(output, 'write'):
        for line in graph.lines():
            output.write(line + "\n")
        return

    output_path = Path(output)
    logger.info(f"Writing GFA with {len(graph.segments)} segments and "
                f"{len(graph.links)} links: {output_path}")
    with open_output(output_path, compress=compress) as f:
        for line in graph.lines():
            f.write(line + "\n")
    logger.info(f"GFA export complete: {output_path}")


# ============================================================================
#                             SUMMARIES
# ============================================================================

def gfa_stats(graph: GFAGraph) -> dict[str, int]:
    """
    Summarise a graph.

    Returns:
        Dict with keys: 'version', 'segments', 'links', 'comments', 'total_length'
    """
    return {
        'version': graph.header.version,
        'segments': len(graph.segments),
        'links': len(graph.links),
        'comments': len(graph.header.comment_lines),
        'total_length': sum(seg.length for seg in graph.segments),
    }


def validate_gfa_file(gfa_path: Union[str, Path], **options: Any) -> dict[str, int]:
    """
    Strictly parse a GFA file and return its statistics.

    Raises:
        GFAParseError: On the first invalid line.
    """
    options['strict'] = True
    return gfa_stats(read_gfa(gfa_path, **options))


__all__ = [
    "open_input",
    "open_output",
    "parse_gfa_lines",
    "read_gfa",
    "write_gfa",
    "gfa_stats",
    "validate_gfa_file",
]

# GFAWeaver v0.1.0
# Any usage is subject to this software's license.
