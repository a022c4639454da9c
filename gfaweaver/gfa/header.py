#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

GFA header — the single H line of a graph plus its free-text comments.

Author: GFAWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from typing import List, Union

from .errors import InvalidVersionError, UnsupportedVersionError, VersionAlreadySetError
from .fields import as_bytes, as_text

logger = logging.getLogger(__name__)

COMMENT_PREFIX = b"#\t"
UNSET_VERSION = 0


class Header:
    """
    Header record of a GFA graph.

    A header carries a version number (0 while unset) and any number of
    comment lines. It is not one of the list records of a graph: every
    GFAGraph owns exactly one, created when the graph is created.
    """

    record_type = "H"

    def __init__(self):
        self._version = UNSET_VERSION
        self._comments: List[bytes] = []

    @property
    def version(self) -> int:
        """GFA version number, 0 if never set."""
        return self._version

    def add_version_number(self, v: int) -> None:
        """
        Attach a version number to the header.

        Only GFA version 1 is accepted, and only once.

        Raises:
            VersionAlreadySetError: A version is already attached, or v is 0.
            UnsupportedVersionError: v is 2.
            InvalidVersionError: v is not an int (bools included), or is
                anything other than 0, 1 or 2.
        """
        if self._version != UNSET_VERSION:
            raise VersionAlreadySetError("GFA instance already has a version number attached")
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidVersionError(f"GFA version number must be an integer, got {v!r}")
        if v == UNSET_VERSION:
            raise VersionAlreadySetError("GFA instance already has a version number attached")
        if v == 2:
            raise UnsupportedVersionError("GFA version 2 is currently unsupported")
        if v != 1:
            raise InvalidVersionError("GFA format must be either version 1 or version 2")

        self._version = v
        logger.debug(f"Header version set to {v}")

    def add_comment(self, comment: Union[bytes, str]) -> None:
        """Append a comment; it is stored with its '#\\t' prefix."""
        self._comments.append(COMMENT_PREFIX + as_bytes(comment))

    @property
    def comment_lines(self) -> tuple:
        """Stored comments, prefix included, in insertion order."""
        return tuple(self._comments)

    def header_line(self) -> str:
        """Return the formatted H line."""
        return f"{self.record_type}\tVN:Z:{self._version}"

    def comments(self) -> str:
        """Return all comments joined by newlines ('' when there are none)."""
        return as_text(b"\n".join(self._comments))

    def __repr__(self) -> str:
        return f"Header(version={self._version}, comments={len(self._comments)})"


__all__ = ["Header", "COMMENT_PREFIX", "UNSET_VERSION"]

# GFAWeaver v0.1.0
# Any usage is subject to this software's license.
