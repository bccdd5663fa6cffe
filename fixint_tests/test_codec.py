#  Copyright 2026 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

import struct
from array import array

import pytest

from fixint import (
    INT8,
    INT16,
    INT24,
    INT32,
    INT48,
    INT64,
    UINT8,
    UINT16,
    UINT24,
    UINT32,
    UINT48,
    UINT64,
    BufferIndexError,
    ByteOrder,
    FixedWidthIntCodec,
    NullArgumentError,
    PositionedBuffer,
    ReadOnlyBufferError,
    UnsupportedWidthError,
    get_codec,
)

ALL_CODECS = [INT8, UINT8, INT16, UINT16, INT24, UINT24, INT32, UINT32, INT48, UINT48, INT64, UINT64]


def _codec_id(codec: FixedWidthIntCodec) -> str:
    return f'{"" if codec.signed else "u"}int{codec.bits}'


def _boundary_values(codec: FixedWidthIntCodec) -> list[int]:
    lo, hi = codec.min_value, codec.max_value
    return [lo, lo + 1, (lo + hi) // 2, hi - 1, hi] + ([-1, 0, 1] if codec.signed else [0, 1])


@pytest.mark.parametrize('codec', ALL_CODECS, ids=_codec_id)
def test_bounds(codec: FixedWidthIntCodec) -> None:
    n = codec.bits
    if codec.signed:
        assert codec.min_value == -(1 << (n - 1))
        assert codec.max_value == (1 << (n - 1)) - 1
    else:
        assert codec.min_value == 0
        assert codec.max_value == (1 << n) - 1
    assert codec.byte_size * 8 == n
    assert codec.contains(codec.min_value)
    assert codec.contains(codec.max_value)
    assert not codec.contains(codec.min_value - 1)
    assert not codec.contains(codec.max_value + 1)


@pytest.mark.parametrize('codec', ALL_CODECS, ids=_codec_id)
def test_boundary_round_trip(codec: FixedWidthIntCodec) -> None:
    for x in _boundary_values(codec):
        be = codec.pack_big_endian(x)
        le = codec.pack_little_endian(x)
        assert len(be) == len(le) == codec.byte_size
        assert bytes(be) == bytes(reversed(le))
        assert codec.unpack_big_endian(be) == x
        assert codec.unpack_little_endian(le) == x


@pytest.mark.parametrize(
    ('codec', 'fmt'),
    [(INT8, 'b'), (UINT8, 'B'), (INT16, 'h'), (UINT16, 'H'), (INT32, 'i'), (UINT32, 'I'), (INT64, 'q'), (UINT64, 'Q')],
    ids=lambda x: x if isinstance(x, str) else _codec_id(x),
)
def test_matches_struct(codec: FixedWidthIntCodec, fmt: str) -> None:
    for x in _boundary_values(codec):
        assert bytes(codec.pack_big_endian(x)) == struct.pack('>' + fmt, x)
        assert bytes(codec.pack_little_endian(x)) == struct.pack('<' + fmt, x)
        assert codec.unpack_big_endian(struct.pack('>' + fmt, x)) == x
        assert codec.unpack_little_endian(struct.pack('<' + fmt, x)) == x


def test_48_bit_layout() -> None:
    assert UINT48.pack_big_endian(0x0102030405060708).hex() == '030405060708'
    assert UINT48.pack_little_endian(0x010203040506).hex() == '060504030201'
    assert INT48.unpack_big_endian(bytes.fromhex('ffffffffff00')) == -256


def test_pack_allocates_fresh_array() -> None:
    a = UINT32.pack_big_endian(1)
    b = UINT32.pack_big_endian(1)
    assert isinstance(a, bytearray)
    assert a == b
    assert a is not b


def test_array_longer_than_width() -> None:
    array = bytearray(b'\xaa' * 6)
    UINT16.pack_big_endian_to(0x1234, array)
    assert array == bytearray(b'\x12\x34\xaa\xaa\xaa\xaa')
    assert UINT16.unpack_big_endian(array) == 0x1234
    assert UINT16.unpack_little_endian(array) == 0x3412
    assert UINT32.unpack_big_endian(array) == 0x1234aaaa


def test_other_array_types() -> None:
    # any writable buffer works, not only bytearray
    raw = bytearray(4)
    view = memoryview(raw)
    assert UINT16.pack_little_endian_to(0xabcd, view) is view
    assert raw == bytearray(b'\xcd\xab\x00\x00')

    signed_bytes = array('b', [0, 0, 0])
    INT24.pack_big_endian_to(-2, signed_bytes)
    assert list(signed_bytes) == [-1, -1, -2]
    assert INT24.unpack_big_endian(signed_bytes) == -2

    assert UINT16.unpack_big_endian(bytes([0xab, 0xcd])) == 0xabcd
    assert UINT16.unpack_big_endian(memoryview(b'\xab\xcd')) == 0xabcd


def test_strided_views() -> None:
    data = memoryview(bytes([0xab, 0x00, 0xcd, 0x00]))[::2]
    assert UINT16.unpack_big_endian(data) == 0xabcd
    assert UINT16.unpack_little_endian(data) == 0xcdab

    raw = bytearray(6)
    every_other = memoryview(raw)[::2]
    assert UINT24.pack_big_endian_to(0x123456, every_other) is every_other
    assert raw == bytearray(b'\x12\x00\x34\x00\x56\x00')

    buffer = PositionedBuffer.allocate(4)
    buffer.put_bytes(1, memoryview(b'\x01\xff\x02\xff')[::2])
    assert bytes(buffer) == b'\x00\x01\x02\x00'


def test_pack_to_read_only_array_fails() -> None:
    with pytest.raises(TypeError):
        UINT16.pack_big_endian_to(1, b'\x00\x00')


def test_null_arguments() -> None:
    buffer = PositionedBuffer.allocate(4)
    calls = [
        lambda: UINT16.pack_big_endian_to(1, None),
        lambda: UINT16.pack_little_endian_to(1, None),
        lambda: UINT16.unpack_big_endian(None),
        lambda: UINT16.unpack_little_endian(None),
        lambda: UINT16.pack_big_endian_to_buffer(1, None, 0),
        lambda: UINT16.pack_little_endian_to_buffer(1, None, 0),
        lambda: UINT16.pack_to_buffer(1, None, 0),
        lambda: UINT16.unpack_big_endian_from_buffer(None, 0),
        lambda: UINT16.unpack_little_endian_from_buffer(None, 0),
        lambda: UINT16.unpack_from_buffer(None, 0),
    ]
    for call in calls:
        with pytest.raises(NullArgumentError):
            call()
    # NullArgumentError is also a TypeError
    with pytest.raises(TypeError):
        UINT16.unpack_big_endian(None)
    assert bytes(buffer) == bytes(4)


@pytest.mark.parametrize('codec', [UINT16, INT24, UINT32, INT64], ids=_codec_id)
@pytest.mark.parametrize('order', list(ByteOrder))
def test_buffer_offset_leaves_other_bytes_untouched(codec: FixedWidthIntCodec, order: ByteOrder) -> None:
    capacity = codec.byte_size + 5
    for offset in range(capacity - codec.byte_size + 1):
        buffer = PositionedBuffer.wrap(bytearray(b'\xee' * capacity), order=order)
        codec.pack_to_buffer(-3 if codec.signed else 3, buffer, offset)
        data = bytes(buffer)
        assert data[:offset] == b'\xee' * offset
        assert data[offset + codec.byte_size:] == b'\xee' * (capacity - offset - codec.byte_size)
        assert data[offset:offset + codec.byte_size] == bytes(codec.pack(-3 if codec.signed else 3, order))
        assert codec.unpack_from_buffer(buffer, offset) == (-3 if codec.signed else 3)


def test_buffer_write_is_visible_in_wrapped_array() -> None:
    raw = bytearray(6)
    buffer = PositionedBuffer.wrap(raw, order=ByteOrder.BIG)
    UINT32.pack_to_buffer(0xdeadbeef, buffer, 1)
    assert raw == bytearray(b'\x00\xde\xad\xbe\xef\x00')
    buffer.order = ByteOrder.LITTLE
    assert UINT32.unpack_from_buffer(buffer, 1) == 0xefbeadde


@pytest.mark.parametrize('offset', [-1, 3, 4, 100])
def test_buffer_out_of_range(offset: int) -> None:
    buffer = PositionedBuffer.wrap(bytearray(b'\x11\x22\x33\x44'), order=ByteOrder.LITTLE)
    with pytest.raises(BufferIndexError):
        UINT16.pack_little_endian_to_buffer(0xffff, buffer, offset)
    with pytest.raises(BufferIndexError):
        UINT16.pack_big_endian_to_buffer(0xffff, buffer, offset)
    with pytest.raises(IndexError):
        UINT16.pack_to_buffer(0xffff, buffer, offset)
    with pytest.raises(BufferIndexError):
        UINT16.unpack_from_buffer(buffer, offset)
    # failed writes leave the buffer as it was
    assert bytes(buffer) == b'\x11\x22\x33\x44'


def test_buffer_read_only() -> None:
    buffer = PositionedBuffer.wrap(b'\x01\x02', order=ByteOrder.BIG)
    assert buffer.read_only
    assert UINT16.unpack_from_buffer(buffer, 0) == 0x0102
    with pytest.raises(ReadOnlyBufferError):
        UINT16.pack_to_buffer(0, buffer, 0)


def test_get_codec_predefined() -> None:
    for codec in ALL_CODECS:
        assert get_codec(codec.bits, signed=codec.signed) is codec


def test_get_codec_other_width() -> None:
    codec = get_codec(40, signed=True)
    assert codec == FixedWidthIntCodec(40, signed=True)
    assert get_codec(40, signed=True) is codec
    assert codec.pack_big_endian(-2).hex() == 'fffffffffe'
    assert codec.unpack_little_endian(bytes.fromhex('feffffffff')) == -2

    # the test settings raise the maximum to 128 bits
    wide = get_codec(128, signed=False)
    assert wide.unpack_big_endian(wide.pack_big_endian(2**128 - 1)) == 2**128 - 1


@pytest.mark.parametrize('bits', [0, -8, 12, 17])
def test_unsupported_width(bits: int) -> None:
    with pytest.raises(UnsupportedWidthError):
        FixedWidthIntCodec(bits, signed=False)
    with pytest.raises(UnsupportedWidthError):
        get_codec(bits, signed=False)


def test_get_codec_above_max_bits() -> None:
    with pytest.raises(UnsupportedWidthError, match='above the maximum'):
        get_codec(136, signed=False)
