# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for decoding concatenated varu64 encodings."""

from unittest.mock import Mock, call

import pytest
from varu64.codec import MAX_VALUE, encode_to_bytes
from varu64.errors import NonCanonicalError, UnexpectedEndOfInputError
from varu64.sequence import iter_decode, decode_all

from codec_cases import FIXTURES


class TestDecodeAll:
    """Tests for decode_all function."""

    def test_empty(self):
        """Empty input holds no values."""
        assert decode_all(b"") == []

    def test_fixtures_concatenated(self):
        """All fixture encodings back to back decode in order."""
        data = b"".join(encoded for _, encoded in FIXTURES)
        assert decode_all(data) == [value for value, _ in FIXTURES]

    def test_mixed_lengths(self):
        """Frames of different lengths are consumed exactly."""
        values = [MAX_VALUE, 0, 248, 247, 2**40]
        data = b"".join(encode_to_bytes(v) for v in values)
        assert decode_all(data) == values

    def test_accepts_bytearray_and_memoryview(self):
        """Any bytes-like input works."""
        data = bytearray([1, 248, 250, 2])
        assert decode_all(data) == [1, 250, 2]
        assert decode_all(memoryview(data)[1:]) == [250, 2]

    def test_strict_non_canonical_raises(self):
        """Strict mode rejects a non-canonical frame with its offset."""
        data = bytes([5, 248, 42, 6])
        with pytest.raises(NonCanonicalError, match="at offset 1") as exc_info:
            decode_all(data)
        assert exc_info.value.value == 42

    def test_lenient_non_canonical_kept(self):
        """Lenient mode yields the value and resumes after the frame."""
        data = bytes([5, 248, 42, 6])
        assert decode_all(data, strict=False) == [5, 42, 6]

    def test_lenient_callback(self):
        """Lenient mode reports each non-canonical frame."""
        callback = Mock()
        data = bytes([249, 0, 1]) + bytes([7]) + bytes([248, 0])
        assert decode_all(data, strict=False, on_non_canonical=callback) == [1, 7, 0]
        assert callback.call_args_list == [call(1, 0), call(0, 4)]

    def test_callback_not_called_for_canonical(self):
        """Canonical input never triggers the callback."""
        callback = Mock()
        decode_all(encode_to_bytes(300) + encode_to_bytes(3), strict=False,
                   on_non_canonical=callback)
        callback.assert_not_called()

    def test_truncated_tail_raises(self):
        """A truncated last frame raises in both modes."""
        data = encode_to_bytes(7) + bytes([250, 1])
        with pytest.raises(UnexpectedEndOfInputError, match="at offset 1"):
            decode_all(data)
        with pytest.raises(UnexpectedEndOfInputError):
            decode_all(data, strict=False)

    def test_truncated_non_canonical_tail_raises(self):
        """Truncation is reported even when the frame is also non-canonical."""
        with pytest.raises(UnexpectedEndOfInputError):
            decode_all(bytes([249, 0]), strict=False)


class TestIterDecode:
    """Tests for iter_decode generator."""

    def test_lazy(self):
        """Values before a bad frame are yielded before the error."""
        gen = iter_decode(bytes([1, 2, 248]))
        assert next(gen) == 1
        assert next(gen) == 2
        with pytest.raises(UnexpectedEndOfInputError):
            next(gen)

    def test_stops_at_end(self):
        """The generator finishes when the input is used up."""
        gen = iter_decode(bytes([0]))
        assert next(gen) == 0
        with pytest.raises(StopIteration):
            next(gen)
