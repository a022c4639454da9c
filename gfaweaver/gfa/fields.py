#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Optional field decoding — the TAG:TYPE:VALUE convention used by the trailing
columns of S and L lines, and the integer decoding policy for count tags.

Author: GFAWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import MalformedOptionalFieldError

# Lossless bytes <-> text mapping for names and sequences that are not UTF-8
TEXT_ERRORS = "surrogateescape"


def as_bytes(value: Union[bytes, bytearray, str]) -> bytes:
    """
    Normalise str/bytes input to an immutable bytes object.

    Text is UTF-8 encoded; surrogate escapes produced by as_text map back to
    the original raw bytes.
    """
    if isinstance(value, str):
        return value.encode("utf-8", errors=TEXT_ERRORS)
    return bytes(value)


def as_text(value: Union[bytes, bytearray, str]) -> str:
    """Normalise str/bytes input to text; undecodable bytes become surrogate escapes."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors=TEXT_ERRORS)
    return value


class IntegerDecoding(Enum):
    """
    How the value of an integer count tag (RC, FC, KC) becomes an int.

    DECIMAL parses the whole value as a base-10 integer, so ``RC:i:42``
    yields 42. CHAR_CODE reproduces the legacy behaviour of taking the code
    point of the first value character, so ``RC:i:42`` yields 52 (``ord('4')``).
    """
    DECIMAL = "decimal"
    CHAR_CODE = "char_code"


@dataclass(frozen=True)
class OptionalField:
    """A decoded optional field: tag, declared type, and raw value text."""
    tag: str
    type: str
    value: str

    @classmethod
    def parse(cls, token: Union[bytes, str]) -> "OptionalField":
        """
        Split a TAG:TYPE:VALUE token.

        Only the first two colons delimit; anything after the second colon
        belongs to the value, so ``UR:Z:http://host/x`` keeps its URI intact.

        Raises:
            MalformedOptionalFieldError: If fewer than three parts are present.
        """
        text = as_text(token)
        parts = text.split(":", 2)
        if len(parts) < 3:
            raise MalformedOptionalFieldError(text)
        return cls(tag=parts[0], type=parts[1], value=parts[2])

    def as_int(self, decoding: IntegerDecoding = IntegerDecoding.DECIMAL) -> int:
        """
        Decode the value as an integer under the given policy.

        Raises:
            MalformedOptionalFieldError: If the value cannot be decoded.
        """
        if decoding is IntegerDecoding.CHAR_CODE:
            if not self.value:
                raise MalformedOptionalFieldError(str(self), "empty integer value")
            return ord(self.value[0])

        try:
            return int(self.value, 10)
        except ValueError:
            raise MalformedOptionalFieldError(
                str(self), f"'{self.value}' is not a decimal integer"
            ) from None

    def __str__(self) -> str:
        return f"{self.tag}:{self.type}:{self.value}"


__all__ = ["IntegerDecoding", "OptionalField", "as_bytes", "as_text"]

# GFAWeaver v0.1.0
# Any usage is subject to this software's license.
