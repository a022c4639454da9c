#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

GFA graph container — owns the header and the ordered record lists, and
keeps the index of segment names used to reject duplicates.

Author: GFAWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Set, Tuple

from .fields import as_text
from .header import Header
from .records import Containment, GFARecord, Link, Path, Segment

logger = logging.getLogger(__name__)


class GFAGraph:
    """
    Append-only collection of GFA records.

    Records are added through ``record.insert(graph)`` (or ``graph.add``),
    which applies the record's own invariants. Insertion order is kept.
    The graph is not thread-safe; serialise inserts when sharing one.
    """

    def __init__(self):
        self.header = Header()
        self._segments: List[Segment] = []
        self._links: List[Link] = []
        self._containments: List[Containment] = []
        self._paths: List[Path] = []
        self._segment_names: Set[bytes] = set()

    @property
    def segments(self) -> Tuple[Segment, ...]:
        """Segments in insertion order."""
        return tuple(self._segments)

    @property
    def links(self) -> Tuple[Link, ...]:
        """Links in insertion order."""
        return tuple(self._links)

    @property
    def containments(self) -> Tuple[Containment, ...]:
        return tuple(self._containments)

    @property
    def paths(self) -> Tuple[Path, ...]:
        return tuple(self._paths)

    def add(self, record: GFARecord) -> None:
        """Insert ``record``; shorthand for ``record.insert(self)``."""
        record.insert(self)

    def lines(self) -> Iterator[str]:
        """
        Yield the graph as GFA lines without newlines.

        Order: header, comments, segments, links. A comment holding
        embedded newlines is written as one comment line per text line.
        """
        yield self.header.header_line()
        for comment in self.header.comment_lines:
            first, *rest = as_text(comment).split("\n")
            yield first
            for part in rest:
                yield f"#\t{part}"
        for segment in self._segments:
            yield segment.format()
        for link in self._links:
            yield link.format()

    # Used by Segment.insert / Link.insert only.

    def _has_segment_name(self, name: bytes) -> bool:
        return name in self._segment_names

    def _append_segment(self, segment: Segment) -> None:
        self._segments.append(segment)
        self._segment_names.add(segment.name)

    def _append_link(self, link: Link) -> None:
        self._links.append(link)

    def __repr__(self) -> str:
        return (
            f"GFAGraph(version={self.header.version}, "
            f"segments={len(self._segments)}, links={len(self._links)})"
        )


__all__ = ["GFAGraph"]

# GFAWeaver v0.1.0
# Any usage is subject to this software's license.
