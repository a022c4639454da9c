#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Exception hierarchy for GFA record construction, header mutation and
graph insertion.

Author: GFAWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""


class GFAError(ValueError):
    """Base class for every validation failure raised by gfaweaver."""
    pass


class MalformedIdentifierError(GFAError):
    """Raised when a segment name contains a reserved character."""
    pass


class MissingSequenceError(GFAError):
    """Raised when a segment is built without sequence data."""
    pass


class InvalidOrientationError(GFAError):
    """Raised when a link orientation is not '+' or '-'."""
    pass


class MalformedOptionalFieldError(GFAError):
    """Raised when an optional field is not of the form TAG:TYPE:VALUE."""

    def __init__(self, token: str, reason: str = "expected TAG:TYPE:VALUE"):
        super().__init__(f"Malformed optional field '{token}': {reason}")
        self.token = token


class UnrecognizedOptionalFieldError(GFAError):
    """Raised when an optional field carries a tag the record does not know."""

    def __init__(self, token: str):
        super().__init__(f"Don't recognise optional field: {token}")
        self.token = token


class HeaderVersionError(GFAError):
    """Base class for header version policy violations."""
    pass


class VersionAlreadySetError(HeaderVersionError):
    pass


class UnsupportedVersionError(HeaderVersionError):
    pass


class InvalidVersionError(HeaderVersionError):
    pass


class DuplicateSegmentError(GFAError):
    """Raised when a segment name is already registered in a graph."""

    def __init__(self, name: str):
        super().__init__(f"Duplicate segment name already present in GFA instance: {name}")
        self.name = name


class GFAParseError(GFAError):
    """
    Raised by the reader when a line cannot be turned into a record.

    The originating record error, if any, is chained as ``__cause__``.
    """

    def __init__(self, line_no: int, message: str):
        super().__init__(f"GFA line {line_no}: {message}")
        self.line_no = line_no


__all__ = [
    "GFAError",
    "MalformedIdentifierError",
    "MissingSequenceError",
    "InvalidOrientationError",
    "MalformedOptionalFieldError",
    "UnrecognizedOptionalFieldError",
    "HeaderVersionError",
    "VersionAlreadySetError",
    "UnsupportedVersionError",
    "InvalidVersionError",
    "DuplicateSegmentError",
    "GFAParseError",
]

# GFAWeaver v0.1.0
# Any usage is subject to this software's license.
