# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Decoding of back-to-back varu64 encodings.

A non-canonical frame is still well framed, so lenient decoding can
report it and carry on with the next frame. Truncated input cannot be
resynchronized and always raises.
"""

from typing import Callable, Iterator, List, Optional

from .codec import BytesLike, _byte_view, decode

NonCanonicalCallback = Callable[[int, int], None]


def iter_decode(
    data: BytesLike,
    strict: bool = True,
    on_non_canonical: Optional[NonCanonicalCallback] = None,
) -> Iterator[int]:
    """
    Yield every value in a buffer of concatenated varu64 encodings.

    Args:
        data: Concatenated encodings
        strict: Raise on non-canonical frames (default True)
        on_non_canonical: Optional callback(value, offset) called for
            each non-canonical frame in lenient mode

    Yields:
        Decoded values, in order

    Raises:
        NonCanonicalError: If strict and a frame is not canonical
        UnexpectedEndOfInputError: If the last frame is truncated
    """
    remaining = _byte_view(data)
    total = len(remaining)

    while len(remaining) > 0:
        offset = total - len(remaining)
        result = decode(remaining)

        if result.is_ok:
            yield result.value
        else:
            error = result.error
            if strict or not error.is_non_canonical:
                raise error.to_exception(offset)
            if on_non_canonical:
                on_non_canonical(error.value, offset)
            yield error.value

        remaining = result.remaining


def decode_all(
    data: BytesLike,
    strict: bool = True,
    on_non_canonical: Optional[NonCanonicalCallback] = None,
) -> List[int]:
    """Decode every value in data. See iter_decode()."""
    return list(iter_decode(data, strict, on_non_canonical))
