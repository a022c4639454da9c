#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Package initialization and version metadata.

Author: GFAWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .version import __version__
from .gfa import (
    GFAError,
    GFAGraph,
    Header,
    Segment,
    Link,
    IntegerDecoding,
    new_segment,
    new_link,
)

__all__ = [
    "__version__",
    "GFAError",
    "GFAGraph",
    "Header",
    "Segment",
    "Link",
    "IntegerDecoding",
    "new_segment",
    "new_link",
]

# GFAWeaver v0.1.0
# Any usage is subject to this software's license.
