# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Shared fixtures for varu64 tests."""

import pytest

from codec_cases import MockSink


@pytest.fixture
def sink():
    """A sink accepting whole writes."""
    return MockSink()


@pytest.fixture
def scratch():
    """A buffer large enough for any varu64."""
    return bytearray(9)
