"""Tests for configuration defaults and environment parsing."""

import pytest

from binedit.config import (
    DEFAULT_BLOCK_SIZE,
    DEFAULT_BYTES_PER_ROW,
    DEFAULT_UNDO_DEPTH,
    EditorConfig
)


def test_defaults():
    config = EditorConfig()

    assert config.undo_depth == DEFAULT_UNDO_DEPTH == 100
    assert config.block_size == DEFAULT_BLOCK_SIZE == 256
    assert config.bytes_per_row == DEFAULT_BYTES_PER_ROW == 16


def test_from_env():
    config = EditorConfig.from_env({
        'BINEDIT_UNDO_DEPTH': '10',
        'BINEDIT_BLOCK_SIZE': '0x40',
        'BINEDIT_BYTES_PER_ROW': ' ',
    })

    assert config.undo_depth == 10
    assert config.block_size == 64
    assert config.bytes_per_row == DEFAULT_BYTES_PER_ROW


def test_from_env_uses_os_environ(monkeypatch):
    monkeypatch.setenv('BINEDIT_UNDO_DEPTH', '7')

    assert EditorConfig.from_env().undo_depth == 7


@pytest.mark.parametrize('value', ['ten', '0', '-3'])
def test_from_env_rejects_bad_values(value):
    with pytest.raises(ValueError):
        EditorConfig.from_env({'BINEDIT_UNDO_DEPTH': value})


def test_direct_construction_validates():
    with pytest.raises(ValueError):
        EditorConfig(block_size=0)
