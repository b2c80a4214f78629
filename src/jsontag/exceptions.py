"""Exception hierarchy for jsontag.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from JsontagError for easy catching of any jsontag-specific error.
Both concrete errors also inherit from ValueError, so callers that already
guard JSON parsing with ``except ValueError`` keep working.
"""

from __future__ import annotations


class JsontagError(Exception):
    """Base exception for all jsontag errors."""

    pass


class InvalidEncoding(JsontagError, ValueError):
    """Raised when a textual encoding inside an envelope is malformed.

    Examples:
        - Hex string with an odd number of digits
        - Hex string containing a non-hex character
        - Big-integer tag value that is not a base-10 integer literal
    """

    pass


class InvalidPayload(JsontagError, ValueError):
    """Raised when a typed-array envelope carries a malformed payload.

    Examples:
        - Payload is not an object
        - Payload is missing ``type`` or ``bytes``, or has extra keys
        - ``type`` or ``bytes`` is not a string
        - Decoded byte count is not a multiple of the element width
    """

    pass
