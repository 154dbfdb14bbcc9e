# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Decode error values and exceptions for varu64.

Decoding reports problems as values (DecodeError) so callers can decide
whether a non-canonical encoding is fatal. The exception classes are the
strict view of the same errors.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class DecodeErrorKind(IntEnum):
    """Everything that can go wrong when decoding a varu64."""
    NON_CANONICAL = 0
    UNEXPECTED_END_OF_INPUT = 1

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class DecodeError:
    """
    A decode error.

    For NON_CANONICAL errors, value holds the number that was encoded
    with more bytes than necessary. It is None otherwise.
    """
    kind: DecodeErrorKind
    value: Optional[int] = None

    @classmethod
    def non_canonical(cls, value: int) -> "DecodeError":
        return cls(DecodeErrorKind.NON_CANONICAL, value)

    @classmethod
    def unexpected_end_of_input(cls) -> "DecodeError":
        return cls(DecodeErrorKind.UNEXPECTED_END_OF_INPUT)

    @property
    def is_non_canonical(self) -> bool:
        return self.kind == DecodeErrorKind.NON_CANONICAL

    def __str__(self) -> str:
        if self.is_non_canonical:
            return f"Invalid varu64: NonCanonical encoding of {self.value}"
        return "Invalid varu64: Not enough input bytes"

    def to_exception(self, offset: Optional[int] = None) -> "Varu64Error":
        """
        Build the exception matching this error.

        Args:
            offset: Optional position of the frame in the caller's input,
                included in the message when given
        """
        if self.is_non_canonical:
            return NonCanonicalError(self, offset)
        return UnexpectedEndOfInputError(self, offset)


class Varu64Error(ValueError):
    """Base exception for varu64 decode errors."""

    def __init__(self, error: DecodeError, offset: Optional[int] = None):
        message = str(error)
        if offset is not None:
            message = f"{message} at offset {offset}"
        super().__init__(message)
        self.error = error
        self.offset = offset


class NonCanonicalError(Varu64Error):
    """The encoding is not the shortest possible one for the number."""

    @property
    def value(self) -> int:
        return self.error.value


class UnexpectedEndOfInputError(Varu64Error):
    """The input contains less data than the encoding needs."""
    pass
