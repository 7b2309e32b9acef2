"""Tests for HistoryStack undo/redo ordering."""

import pytest

from binedit.core import ByteBuffer, HistoryStack, NothingToRedoError, NothingToUndoError


def mutate(buf, history, offset, value):
    history.begin_mutation()
    buf.set_byte(offset, value)


def test_undo_restores_previous_content(buffer, history):
    mutate(buffer, history, 1, 0x00)
    assert buffer.get_byte(1) == 0x00

    history.undo()

    assert buffer.get_byte(1) == 0x42
    assert not buffer.modified


def test_redo_reapplies(buffer, history):
    mutate(buffer, history, 0, 0x61)
    history.undo()
    history.redo()

    assert buffer.to_bytes() == b'aBC'
    assert buffer.modified
    assert history.can_undo()
    assert not history.can_redo()


def test_modified_stays_true_while_history_remains(buffer, history):
    mutate(buffer, history, 0, 1)
    mutate(buffer, history, 1, 2)

    history.undo()

    assert buffer.modified
    assert buffer.to_bytes() == b'\x01BC'


def test_empty_stacks_raise(buffer, history):
    with pytest.raises(NothingToUndoError):
        history.undo()
    with pytest.raises(NothingToRedoError):
        history.redo()

    assert buffer.to_bytes() == b'ABC'


def test_new_mutation_clears_redo(buffer, history):
    mutate(buffer, history, 0, 1)
    history.undo()
    assert history.can_redo()

    mutate(buffer, history, 2, 3)

    assert not history.can_redo()
    with pytest.raises(NothingToRedoError):
        history.redo()


def test_sequence_of_undos_and_redos(buffer, history):
    states = [buffer.to_bytes()]
    for offset, value in ((0, 1), (1, 2), (2, 3)):
        mutate(buffer, history, offset, value)
        states.append(buffer.to_bytes())

    for expected in reversed(states[:-1]):
        history.undo()
        assert buffer.to_bytes() == expected

    for expected in states[1:]:
        history.redo()
        assert buffer.to_bytes() == expected


def test_capacity_evicts_oldest(buffer, history):
    # capacity is 3: the first of four mutations becomes unrecoverable
    states = [buffer.to_bytes()]
    for value in (1, 2, 3, 4):
        mutate(buffer, history, 0, value)
        states.append(buffer.to_bytes())

    assert history.undo_depth == 3

    for expected in (states[3], states[2], states[1]):
        history.undo()
        assert buffer.to_bytes() == expected

    assert not history.can_undo()
    with pytest.raises(NothingToUndoError):
        history.undo()
    assert buffer.to_bytes() == states[1]
    assert not buffer.modified

    for expected in (states[2], states[3], states[4]):
        history.redo()
        assert buffer.to_bytes() == expected


def test_undo_redo_inverse_past_capacity():
    buf = ByteBuffer(bytes(8))
    history = HistoryStack(buf, capacity=4)
    for step in range(10):
        before = buf.to_bytes()
        mutate(buf, history, step % 8, step + 1)
        after = buf.to_bytes()

        history.undo()
        assert buf.to_bytes() == before
        history.redo()
        assert buf.to_bytes() == after


def test_reset_forgets_everything(buffer, history):
    mutate(buffer, history, 0, 1)
    history.undo()
    history.reset()

    assert not history.can_undo()
    assert not history.can_redo()


def test_capacity_must_be_positive(buffer):
    with pytest.raises(ValueError):
        HistoryStack(buffer, capacity=0)
