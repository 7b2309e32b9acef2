"""Shared fixtures for the binedit tests."""

import pytest

from binedit import EditorConfig, EditSession
from binedit.core import ByteBuffer, HistoryStack, SelectionModel


@pytest.fixture
def buffer():
    return ByteBuffer(b'ABC')


@pytest.fixture
def history(buffer):
    return HistoryStack(buffer, capacity=3)


@pytest.fixture
def selection():
    return SelectionModel()


@pytest.fixture
def session():
    """Session over 32 bytes 0x00..0x1F with rows of 8 bytes."""
    s = EditSession(EditorConfig(undo_depth=5, bytes_per_row=8))
    s.load(bytes(range(32)), 'sample.bin')
    return s
