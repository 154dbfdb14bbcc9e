# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
varu64 encoding/decoding.

varu64 encodes an unsigned 64-bit integer in 1 to 9 bytes:
- 0x00-0xF7: the byte is the value itself
- 0xF8-0xFF: the low 3 bits plus 2 give the total length, and the
  remaining bytes hold the value in big-endian order

Only the shortest encoding of a value is canonical. Longer encodings
are parsed but reported as NON_CANONICAL.
"""

import errno
from dataclasses import dataclass
from typing import BinaryIO, Tuple, Union

from .errors import DecodeError

MAX_VALUE = 0xFFFF_FFFF_FFFF_FFFF
MAX_ENCODING_LENGTH = 9
SINGLE_BYTE_LIMIT = 248

# Exclusive upper bound of the values encoded with 2, 3, ... 8 bytes
_LENGTH_LIMITS = (
    1 << 8,
    1 << 16,
    1 << 24,
    1 << 32,
    1 << 40,
    1 << 48,
    1 << 56,
)

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class Decoded:
    """
    A successfully decoded value and the input that follows it.

    remaining is a view into the caller's input, so results are not
    hashable.
    """
    value: int
    remaining: memoryview

    __hash__ = None

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> Tuple[int, memoryview]:
        return self.value, self.remaining


@dataclass(frozen=True)
class DecodeFailure:
    """
    A failed decode.

    remaining is the input after the full frame for NON_CANONICAL
    errors, and the (empty) unread tail for UNEXPECTED_END_OF_INPUT.
    Results compare by value but are not hashable.
    """
    error: DecodeError
    remaining: memoryview

    __hash__ = None

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Tuple[int, memoryview]:
        """Raise the exception matching the error."""
        raise self.error.to_exception()


# Type alias for any decode result
DecodeResult = Union[Decoded, DecodeFailure]


def _check_value(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"varu64 value must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Cannot encode negative value as varu64: {value}")
    if value > MAX_VALUE:
        raise ValueError(f"Value does not fit in 64 bits: {value}")


def _byte_view(data: BytesLike) -> memoryview:
    """Return a flat unsigned-byte view of data without copying."""
    view = memoryview(data)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def encoding_length(value: int) -> int:
    """
    Return how many bytes the encoding of value takes up.

    Args:
        value: Integer in [0, 2**64)

    Returns:
        Encoded length, 1 to 9
    """
    _check_value(value)

    if value < SINGLE_BYTE_LIMIT:
        return 1
    length = 2
    for limit in _LENGTH_LIMITS:
        if value < limit:
            return length
        length += 1
    return MAX_ENCODING_LENGTH


def encode(value: int, buffer: Union[bytearray, memoryview]) -> int:
    """
    Encode value into the start of buffer.

    Args:
        value: Integer in [0, 2**64)
        buffer: Writable buffer of at least encoding_length(value) bytes

    Returns:
        Number of bytes written

    Raises:
        ValueError: If value is out of range or buffer is too small
    """
    length = encoding_length(value)
    if len(buffer) < length:
        raise ValueError(
            f"Buffer too small for varu64 encoding of {value}: "
            f"need {length} bytes, got {len(buffer)}"
        )

    if length == 1:
        buffer[0] = value
        return 1

    buffer[0] = 246 + length
    _write_bytes(value, length - 1, buffer, 1)
    return length


def _write_bytes(value: int, k: int, out: Union[bytearray, memoryview], start: int) -> None:
    """Write the k least significant bytes of value to out[start:], big-endian."""
    be = [(value >> shift) & 0xFF for shift in range(56, -8, -8)]
    for i in range(k):
        out[start + i] = be[(8 - k) + i]


def encode_to_bytes(value: int) -> bytes:
    """Return the canonical encoding of value."""
    out = bytearray(encoding_length(value))
    encode(value, out)
    return bytes(out)


def encode_to_sink(value: int, sink: BinaryIO) -> int:
    """
    Encode value and write it to sink.

    Short writes are retried until the whole encoding is written.
    A write() returning None (a non-blocking stream that would block)
    counts as a failure, never as a complete write.
    Errors raised by sink propagate unchanged.

    Args:
        value: Integer in [0, 2**64)
        sink: Object with a write() method accepting bytes

    Returns:
        Number of bytes written

    Raises:
        BlockingIOError: If a non-blocking sink cannot take the bytes
        OSError: If sink accepts zero bytes
    """
    scratch = bytearray(MAX_ENCODING_LENGTH)
    written = encode(value, scratch)
    pending = bytes(scratch[:written])

    while pending:
        count = sink.write(pending)
        if count is None:
            # Non-blocking raw stream that took nothing
            raise BlockingIOError(
                errno.EAGAIN, "varu64 sink would block", written - len(pending)
            )
        if count == 0:
            raise OSError("failed to write whole varu64 encoding")
        pending = pending[count:]

    return written


def decode(data: BytesLike) -> DecodeResult:
    """
    Decode one varu64 from the start of data.

    Never raises for malformed input. If the input is too short the
    result is UNEXPECTED_END_OF_INPUT, even when the partial frame
    already shows the encoding is not canonical.

    Args:
        data: Bytes-like object holding the encoding

    Returns:
        Decoded(value, remaining) or DecodeFailure(error, remaining).
        remaining is a memoryview into data.
    """
    view = _byte_view(data)

    if len(view) == 0:
        return DecodeFailure(DecodeError.unexpected_end_of_input(), view)

    first = view[0]
    if (first | 0b0000_0111) != 0b1111_1111:
        return Decoded(first, view[1:])

    # Header plus (low 3 bits + 1) payload bytes
    length = (first & 0b0000_0111) + 2
    value = 0
    for i in range(1, length):
        if i >= len(view):
            return DecodeFailure(DecodeError.unexpected_end_of_input(), view[i:])
        value = (value << 8) | view[i]

    if length > encoding_length(value):
        return DecodeFailure(DecodeError.non_canonical(value), view[length:])
    return Decoded(value, view[length:])


def decode_varu64(data: BytesLike, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a varu64 from bytes, raising on any error.

    Args:
        data: Bytes containing the varu64
        offset: Starting offset in data

    Returns:
        Tuple of (decoded value, new offset after the varu64)

    Raises:
        NonCanonicalError: If the encoding is longer than necessary
        UnexpectedEndOfInputError: If the data is truncated
        ValueError: If offset is negative
    """
    if offset < 0:
        raise ValueError(f"Offset must be non-negative, got {offset}")

    view = _byte_view(data)
    result = decode(view[offset:])
    if not result.is_ok:
        raise result.error.to_exception(offset)
    return result.value, len(view) - len(result.remaining)
