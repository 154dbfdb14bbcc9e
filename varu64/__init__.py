# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
varu64 - canonical variable-length encoding of unsigned 64-bit integers.

Every value in [0, 2**64) has exactly one encoding of 1 to 9 bytes, and
the first byte alone determines the encoded length.

Example usage:
    from varu64 import encode, encoding_length, decode

    buf = bytearray(encoding_length(300))
    encode(300, buf)              # buf == b"\\xf9\\x01\\x2c"

    result = decode(buf)
    if result.is_ok:
        print(result.value, bytes(result.remaining))
    else:
        print(f"Bad input: {result.error}")
"""

from .codec import (
    MAX_VALUE,
    MAX_ENCODING_LENGTH,
    SINGLE_BYTE_LIMIT,
    Decoded,
    DecodeFailure,
    DecodeResult,
    encoding_length,
    encode,
    encode_to_bytes,
    encode_to_sink,
    decode,
    decode_varu64,
)
from .errors import (
    DecodeError,
    DecodeErrorKind,
    Varu64Error,
    NonCanonicalError,
    UnexpectedEndOfInputError,
)
from .sequence import iter_decode, decode_all

__version__ = "0.1.0"

__all__ = [
    # Constants
    "MAX_VALUE",
    "MAX_ENCODING_LENGTH",
    "SINGLE_BYTE_LIMIT",
    # Encoding
    "encoding_length",
    "encode",
    "encode_to_bytes",
    "encode_to_sink",
    # Decoding
    "Decoded",
    "DecodeFailure",
    "DecodeResult",
    "decode",
    "decode_varu64",
    # Sequences
    "iter_decode",
    "decode_all",
    # Errors
    "DecodeError",
    "DecodeErrorKind",
    "Varu64Error",
    "NonCanonicalError",
    "UnexpectedEndOfInputError",
]
