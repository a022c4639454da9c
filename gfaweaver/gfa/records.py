#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

GFA list records — segments (S), links (L), and the reserved containment (C)
and path (P) kinds — behind one record contract: format, kind, insert.

Links connect oriented segments. A link from A to B means that the end of A
overlaps with the start of B. If either end is marked '-', the reverse
complement of that segment is used; '+' uses the sequence as-is. The overlap
is a CIGAR string: '0M' means B follows directly after A, '*' means the
nature of the overlap is not specified.

Author: GFAWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Union

from .errors import (
    DuplicateSegmentError,
    InvalidOrientationError,
    MalformedIdentifierError,
    MissingSequenceError,
    UnrecognizedOptionalFieldError,
)
from .fields import IntegerDecoding, OptionalField, as_bytes, as_text

if TYPE_CHECKING:
    from .graph import GFAGraph

logger = logging.getLogger(__name__)

FORBIDDEN_NAME_CHARS = "+-*="
ORIENTATIONS = ("+", "-")

BytesLike = Union[bytes, bytearray, str]


def is_valid_name(name: bytes) -> bool:
    """True if a segment name has no reserved characters and no whitespace."""
    text = as_text(name)
    return not any(c in FORBIDDEN_NAME_CHARS or c.isspace() for c in text)


def _check_name(name: bytes) -> bytes:
    if not is_valid_name(name):
        raise MalformedIdentifierError(
            f"Segment name can't contain +/-/*/= or whitespace: {as_text(name)!r}"
        )
    return name


def _coerce_decoding(decoding: Union[IntegerDecoding, str]) -> IntegerDecoding:
    if isinstance(decoding, IntegerDecoding):
        return decoding
    return IntegerDecoding(decoding)


# ============================================================================
#                           RECORD CONTRACT
# ============================================================================

class GFARecord(ABC):
    """
    Contract shared by every list record a GFAGraph can hold.

    Subclasses set ``record_type`` to their line tag and implement
    ``format``, ``kind`` and ``insert``.
    """

    record_type: str = ""

    @abstractmethod
    def format(self) -> str:
        """Return the record's tab-delimited GFA line (no trailing newline)."""
        ...

    @abstractmethod
    def kind(self) -> str:
        """Return the human-readable record kind, e.g. 'segment'."""
        ...

    @abstractmethod
    def insert(self, graph: "GFAGraph") -> None:
        """Add the record to ``graph``, raising a GFAError if it is refused."""
        ...


# ============================================================================
#                               SEGMENT
# ============================================================================

class Segment(GFARecord):
    """
    A graph node: a named piece of sequence plus optional annotations.

    Counts of 0, a checksum of None and an empty URI all mean "not present".
    Segments are immutable once built; uniqueness of the name is only
    checked when the segment is inserted into a graph.
    """

    record_type = "S"

    def __init__(
        self,
        name: BytesLike,
        sequence: BytesLike,
        *optional: BytesLike,
        int_decoding: Union[IntegerDecoding, str] = IntegerDecoding.DECIMAL,
    ):
        name = _check_name(as_bytes(name))
        sequence = as_bytes(sequence)
        if len(sequence) == 0:
            raise MissingSequenceError("Segment must have a sequence")

        self._name = name
        self._sequence = sequence
        self._length = len(sequence)
        self._read_count = 0
        self._frag_count = 0
        self._kmer_count = 0
        self._checksum: Optional[bytes] = None
        self._uri = ""

        decoding = _coerce_decoding(int_decoding)
        for token in optional:
            self._apply_optional(OptionalField.parse(token), decoding)

    def _apply_optional(self, field: OptionalField, decoding: IntegerDecoding) -> None:
        if field.tag == "RC":
            self._read_count = field.as_int(decoding)
        elif field.tag == "FC":
            self._frag_count = field.as_int(decoding)
        elif field.tag == "KC":
            self._kmer_count = field.as_int(decoding)
        elif field.tag == "SH":
            self._checksum = as_bytes(field.value)
        elif field.tag == "UR":
            self._uri = field.value
        elif field.tag == "LN":
            # length always comes from the sequence
            logger.debug(f"Ignoring {field} on segment {as_text(self._name)}")
        else:
            raise UnrecognizedOptionalFieldError(str(field))

    @property
    def name(self) -> bytes:
        return self._name

    @property
    def sequence(self) -> bytes:
        return self._sequence

    @property
    def length(self) -> int:
        return self._length

    @property
    def read_count(self) -> int:
        return self._read_count

    @property
    def fragment_count(self) -> int:
        return self._frag_count

    @property
    def kmer_count(self) -> int:
        return self._kmer_count

    @property
    def checksum(self) -> Optional[bytes]:
        return self._checksum

    @property
    def uri(self) -> str:
        return self._uri

    def format(self) -> str:
        """
        Format as an S line.

        Format: S <name> <sequence> LN:i:<length> [RC:i:] [FC:i:] [KC:i:] [SH:i:] [UR:i:]
        """
        line = (
            f"{self.record_type}\t{as_text(self._name)}\t"
            f"{as_text(self._sequence)}\tLN:i:{self._length}"
        )
        if self._read_count != 0:
            line += f"\tRC:i:{self._read_count}"
        if self._frag_count != 0:
            line += f"\tFC:i:{self._frag_count}"
        if self._kmer_count != 0:
            line += f"\tKC:i:{self._kmer_count}"
        if self._checksum is not None:
            line += f"\tSH:i:{as_text(self._checksum)}"
        if self._uri != "":
            line += f"\tUR:i:{self._uri}"
        return line

    def kind(self) -> str:
        return "segment"

    def insert(self, graph: "GFAGraph") -> None:
        """
        Append to ``graph`` and register the name.

        Raises:
            DuplicateSegmentError: If the name is already registered; the
                graph is left untouched.
        """
        if graph._has_segment_name(self._name):
            raise DuplicateSegmentError(as_text(self._name))
        graph._append_segment(self)

    def __repr__(self) -> str:
        return f"Segment(name={as_text(self._name)!r}, length={self._length})"


# ============================================================================
#                                 LINK
# ============================================================================

class Link(GFARecord):
    """An oriented edge from the end of one segment to the start of another."""

    record_type = "L"

    def __init__(
        self,
        from_name: BytesLike,
        from_orient: BytesLike,
        to_name: BytesLike,
        to_orient: BytesLike,
        overlap: BytesLike,
        *optional: BytesLike,
    ):
        from_name = _check_name(as_bytes(from_name))
        to_name = _check_name(as_bytes(to_name))

        from_orient = as_text(from_orient)
        to_orient = as_text(to_orient)
        if from_orient not in ORIENTATIONS:
            raise InvalidOrientationError("From orientation field must be either + or -")
        if to_orient not in ORIENTATIONS:
            raise InvalidOrientationError("To orientation field must be either + or -")

        self._from_name = from_name
        self._from_orient = from_orient
        self._to_name = to_name
        self._to_orient = to_orient
        self._overlap = as_text(overlap)

        # TODO: keep link tags (MQ, NM, RC, FC, KC, ID) once a caller needs them
        if optional:
            logger.debug(
                f"Ignoring {len(optional)} optional field(s) on link "
                f"{as_text(from_name)} -> {as_text(to_name)}"
            )

    @property
    def from_name(self) -> bytes:
        return self._from_name

    @property
    def from_orient(self) -> str:
        return self._from_orient

    @property
    def to_name(self) -> bytes:
        return self._to_name

    @property
    def to_orient(self) -> str:
        return self._to_orient

    @property
    def overlap(self) -> str:
        return self._overlap

    def format(self) -> str:
        """
        Format as an L line.

        Format: L <from> <from_orient> <to> <to_orient> <overlap>
        """
        return (
            f"{self.record_type}\t{as_text(self._from_name)}\t{self._from_orient}\t"
            f"{as_text(self._to_name)}\t{self._to_orient}\t{self._overlap}"
        )

    def kind(self) -> str:
        return "link"

    def insert(self, graph: "GFAGraph") -> None:
        """Append to ``graph``; links are never deduplicated or cross-checked."""
        graph._append_link(self)

    def __repr__(self) -> str:
        return (
            f"Link({as_text(self._from_name)}{self._from_orient} -> "
            f"{as_text(self._to_name)}{self._to_orient}, overlap={self._overlap!r})"
        )


# ============================================================================
#                         RESERVED RECORD KINDS
# ============================================================================

class Containment(GFARecord):
    """Placeholder for C lines; not yet supported."""

    record_type = "C"

    def format(self) -> str:
        raise NotImplementedError("containment records are not yet supported")

    def kind(self) -> str:
        return "containment"

    def insert(self, graph: "GFAGraph") -> None:
        raise NotImplementedError("containment records are not yet supported")


class Path(GFARecord):
    """Placeholder for P lines; not yet supported."""

    record_type = "P"

    def format(self) -> str:
        raise NotImplementedError("path records are not yet supported")

    def kind(self) -> str:
        return "path"

    def insert(self, graph: "GFAGraph") -> None:
        raise NotImplementedError("path records are not yet supported")


# ============================================================================
#                             CONSTRUCTORS
# ============================================================================

def new_segment(
    name: BytesLike,
    sequence: BytesLike,
    *optional: BytesLike,
    int_decoding: Union[IntegerDecoding, str] = IntegerDecoding.DECIMAL,
) -> Segment:
    """
    Validate fields and build a Segment.

    Args:
        name: Segment name; must not contain +, -, *, = or whitespace
        sequence: Non-empty sequence data
        *optional: TAG:TYPE:VALUE tokens (RC, FC, KC, SH, UR; LN is ignored)
        int_decoding: How RC/FC/KC values become integers

    Returns:
        The new Segment

    Raises:
        MalformedIdentifierError, MissingSequenceError,
        MalformedOptionalFieldError, UnrecognizedOptionalFieldError
    """
    return Segment(name, sequence, *optional, int_decoding=int_decoding)


def new_link(
    from_name: BytesLike,
    from_orient: BytesLike,
    to_name: BytesLike,
    to_orient: BytesLike,
    overlap: BytesLike,
    *optional: BytesLike,
) -> Link:
    """
    Validate fields and build a Link.

    Optional fields are accepted but not stored.

    Raises:
        MalformedIdentifierError, InvalidOrientationError
    """
    return Link(from_name, from_orient, to_name, to_orient, overlap, *optional)


__all__ = [
    "FORBIDDEN_NAME_CHARS",
    "ORIENTATIONS",
    "GFARecord",
    "Segment",
    "Link",
    "Containment",
    "Path",
    "is_valid_name",
    "new_segment",
    "new_link",
]

# GFAWeaver v0.1.0
# Any usage is subject to this software's license.
