"""
GFAWeaver v0.1.0

GFA v1 record model.

Module structure:
1. errors.py - Exception hierarchy
2. fields.py - TAG:TYPE:VALUE optional field decoding
3. header.py - Header (H line and comments)
4. records.py - Segment, Link and the reserved Containment/Path kinds
5. graph.py - GFAGraph container
"""

from .errors import (
    GFAError,
    MalformedIdentifierError,
    MissingSequenceError,
    InvalidOrientationError,
    MalformedOptionalFieldError,
    UnrecognizedOptionalFieldError,
    HeaderVersionError,
    VersionAlreadySetError,
    UnsupportedVersionError,
    InvalidVersionError,
    DuplicateSegmentError,
    GFAParseError,
)
from .fields import IntegerDecoding, OptionalField
from .header import Header
from .records import (
    GFARecord,
    Segment,
    Link,
    Containment,
    Path,
    is_valid_name,
    new_segment,
    new_link,
)
from .graph import GFAGraph

__all__ = [
    # Errors
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

    # Optional fields
    "IntegerDecoding",
    "OptionalField",

    # Records
    "Header",
    "GFARecord",
    "Segment",
    "Link",
    "Containment",
    "Path",
    "is_valid_name",
    "new_segment",
    "new_link",

    # Container
    "GFAGraph",
]
