import os
import tempfile

import pytest

from bingen.hexutil import (
    DecodeResult,
    InvalidInput,
    decode,
    encode,
    format_buffer,
    is_hex_str,
    parse_hex,
    text_or_file,
)


def test_decode_known_values():
    assert decode('') == DecodeResult(True, b'', None)
    assert decode('0FFF') == DecodeResult(True, b'\x0f\xff', None)
    assert decode('0fff').data == b'\x0f\xff'
    assert decode('ABC').data == b'\xab'  # trailing 'C' dropped


def test_decode_invalid_char_poisons_whole_text():
    res = decode('0G')
    assert res.ok is False
    assert res.data is None
    assert res.reason == 'Invalid input.'


@pytest.mark.parametrize('bad', ['G', '0x0F', '0F FF', ' 0F', '0F\n', 'AB-', 'zzzz', 'ÄB', '0FF١'])
def test_decode_rejects_non_hex_anywhere(bad: str) -> None:
    assert decode(bad).ok is False


def test_decode_bad_char_after_valid_pairs_still_invalid():
    assert decode('00112233G').ok is False
    assert decode('G00112233').ok is False


@pytest.mark.parametrize('text,length', [
    ('a', 0),
    ('aB', 1),
    ('aBc', 1),
    ('aBcD', 2),
    ('0123456789abcdefABCDEF', 11),
    ('0123456789abcdefABCDEF0', 11),
])
def test_decode_lengths(text: str, length: int) -> None:
    res = decode(text)
    assert res.ok is True
    assert res.data is not None and len(res.data) == length


def test_decode_preserves_pair_order():
    assert decode('00017FFF80').data == bytes([0x00, 0x01, 0x7F, 0xFF, 0x80])


def test_encode_canonical_uppercase():
    assert encode(b'\x0f\xff') == '0FFF'
    assert encode(b'') == ''
    assert encode(bytearray([0xab, 0x01])) == 'AB01'


def test_encode_decode_roundtrip_all_byte_values():
    data = bytes(range(256))
    assert decode(encode(data)) == DecodeResult(True, data, None)


def test_is_hex_str():
    assert is_hex_str('00ff')
    assert not is_hex_str('')
    assert not is_hex_str('0x00')


def test_parse_hex_valid_and_length():
    b = parse_hex('x', '00ff', length=2)
    assert b == bytes.fromhex('00ff')
    assert parse_hex('x', '00f') == b'\x00'


def test_parse_hex_invalid_raises():
    with pytest.raises(InvalidInput, match='Invalid hex for x'):
        parse_hex('x', 'zz')
    with pytest.raises(ValueError, match='required'):
        parse_hex('x', None)
    with pytest.raises(ValueError, match='must be 3 bytes'):
        parse_hex('x', '00ff', length=3)


def test_invalid_input_is_value_error():
    assert issubclass(InvalidInput, ValueError)


def test_text_or_file_precedence_and_file_reading():
    with tempfile.TemporaryDirectory() as td:
        p = os.path.join(td, 'h.txt')
        with open(p, 'wt') as f:
            f.write('0a\n')
        # argument takes precedence
        assert text_or_file('x', 'ff', p) == 'ff'
        # empty text is still an argument
        assert text_or_file('x', '', p) == ''
        # file path used when text not provided
        assert text_or_file('x', None, p) == '0a'
    with pytest.raises(ValueError, match='x required'):
        text_or_file('x', None, None)


def test_format_buffer():
    assert format_buffer(b'') == '[]'
    assert format_buffer(b'\x0f\xff') == '[15, 255]'


def test_text_or_file_strips_only_line_ending():
    with tempfile.TemporaryDirectory() as td:
        p = os.path.join(td, 'h.txt')
        with open(p, 'wt', newline='') as f:
            f.write('0F \r\n')
        text = text_or_file('x', None, p)
    assert text == '0F '
    assert decode(text).ok is False
