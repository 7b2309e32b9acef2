"""Tests for the command line entry point."""

import logging

import pytest

from binedit.__main__ import main


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / 'sample.bin'
    path.write_bytes(b'ABCB' + bytes(4))
    return path


def test_dump(sample, capsys):
    assert main(['dump', str(sample)]) == 0

    out = capsys.readouterr().out
    assert out.startswith('00000000  41 42 43 42 00 00 00 00')
    assert '|ABCB....|' in out


def test_dump_width_and_color(sample, capsys):
    assert main(['dump', str(sample), '--width', '4', '--color']) == 0

    out = capsys.readouterr().out
    assert '\x1b[' in out


def test_dump_empty_file(tmp_path, capsys, caplog):
    path = tmp_path / 'empty.bin'
    path.write_bytes(b'')

    with caplog.at_level(logging.INFO):
        assert main(['dump', str(path)]) == 0

    assert capsys.readouterr().out == ''
    assert 'File is empty.' in caplog.text


def test_dump_start_past_end(sample, capsys, caplog):
    with caplog.at_level(logging.INFO):
        assert main(['dump', str(sample), '--start', '0x100']) == 0

    assert capsys.readouterr().out == ''
    assert 'No bytes at offset 00000100.' in caplog.text
    assert 'File is empty.' not in caplog.text


def test_find_all_hex(sample, capsys):
    assert main(['find', str(sample), '42', '--hex', '--all']) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == ['00000001  42', '00000003  42']


def test_find_text_prev(sample, capsys):
    assert main(['find', str(sample), 'b', '-i', '--prev']) == 0

    assert capsys.readouterr().out.strip() == '00000003  42'


def test_find_from_offset(sample, capsys):
    assert main(['find', str(sample), 'B', '--from', '1']) == 0

    assert capsys.readouterr().out.strip() == '00000003  42'


def test_find_not_found(sample, caplog):
    assert main(['find', str(sample), 'Z']) == 1
    assert 'not found' in caplog.text


def test_inspect(sample, capsys):
    assert main(['inspect', str(sample), '0x4']) == 0

    out = capsys.readouterr().out
    assert 'Offset: 00000004' in out
    assert 'int32: 0' in out


def test_inspect_out_of_range(sample, caplog):
    assert main(['inspect', str(sample), '8']) == 1
    assert 'out of range' in caplog.text


def test_stats(sample, capsys):
    assert main(['stats', str(sample), '--block-size', '4']) == 0

    out = capsys.readouterr().out
    assert 'Range: 00000000-00000008 (8 bytes)' in out
    assert 'Distinct values: 4' in out
    assert '00000004  0.000' in out


def test_stats_rejects_zero_block_size(sample, caplog):
    assert main(['stats', str(sample), '--block-size', '0']) == 1
    assert 'Block size' in caplog.text


def test_patch_writes_edited_copy(sample, caplog):
    with caplog.at_level(logging.INFO):
        assert main(['patch', str(sample), '0=61', '4=DEAD']) == 0

    output = sample.with_name('edited_sample.bin')
    assert output.read_bytes() == b'aBCB\xde\xad\x00\x00'
    assert sample.read_bytes() == b'ABCB' + bytes(4)
    assert 'edited_sample.bin' in caplog.text


def test_patch_to_output(sample, tmp_path):
    target = tmp_path / 'out.bin'

    assert main(['patch', str(sample), '7=FF', '-o', str(target)]) == 0
    assert target.read_bytes()[-1] == 0xFF


def test_patch_past_end_fails(sample, tmp_path):
    target = tmp_path / 'out.bin'

    assert main(['patch', str(sample), '7=FFFF', '-o', str(target)]) == 1
    assert not target.exists()


def test_missing_file(tmp_path, caplog):
    assert main(['dump', str(tmp_path / 'nope.bin')]) == 1
    assert 'Error' in caplog.text


def test_bad_edit_argument(sample):
    with pytest.raises(SystemExit):
        main(['patch', str(sample), 'nonsense'])
