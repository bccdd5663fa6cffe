# Copyright 2026 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

r"""
This module implements packing and unpacking of integers with a fixed width, the width and signedness are parametrized.

A width of N bits always takes exactly N/8 bytes, laid out either most significant byte first (big-endian) or least
significant byte first (little-endian). Signedness only matters when unpacking: the same bit pattern reads as a
two's-complement negative number when the codec is signed and the top bit is set.

Packing never rejects a value, only its low N bits are written (negative values are taken in two's complement). This
is relied upon for wraparound encodings, so it must not be turned into a range check. Unpacking from an array does
check that the array is long enough, before reading anything.

>>> UINT16.pack_big_endian(0xABCD).hex()
'abcd'
>>> UINT16.pack_little_endian(0xABCD).hex()
'cdab'
>>> INT16.pack_big_endian(-1234).hex()
'fb2e'
>>> INT16.unpack_big_endian(bytes.fromhex('fb2e'))
-1234
>>> UINT16.unpack_big_endian(bytes.fromhex('fb2e'))
64302
>>> UINT16.pack_big_endian(0x1FFFF).hex()  # bits above 16 are dropped
'ffff'
>>> INT24.unpack_big_endian(UINT24.pack_big_endian(0xFFFFFF))
-1

Writing into an existing array always starts at index 0 and returns the same array:

>>> out = bytearray(4)
>>> INT16.pack_little_endian_to(-2, out)
bytearray(b'\xfe\xff\x00\x00')
>>> try:
...     INT16.unpack_big_endian(b'\x01')
... except ValueError as e:
...     print(*e.args)
buffer length must be >= 2 (is 1)

Positioned buffers are addressed with an explicit offset, and carry their own byte order:

>>> buf = PositionedBuffer.allocate(6, order=ByteOrder.LITTLE)
>>> UINT24.pack_to_buffer(0x123456, buf, 2) is buf
True
>>> bytes(buf).hex()
'000056341200'
>>> hex(UINT24.unpack_from_buffer(buf, 2))
'0x123456'
>>> hex(UINT24.unpack_big_endian_from_buffer(buf, 2))
'0x563412'
"""

from dataclasses import dataclass
from typing import TypeVar

from structlog import get_logger
from typing_extensions import Buffer

from fixint.buffer import PositionedBuffer
from fixint.byte_order import ByteOrder
from fixint.exceptions import BufferTooSmallError, NullArgumentError, UnsupportedWidthError

logger = get_logger()

ArrayT = TypeVar('ArrayT', bound=Buffer)


@dataclass(slots=True, frozen=True)
class FixedWidthIntCodec:
    """ Packs and unpacks integers of `bits` width (a positive multiple of 8) with the given signedness.

    This module's docstring has more details and examples.
    """

    bits: int
    signed: bool

    def __post_init__(self) -> None:
        if self.bits <= 0 or self.bits % 8 != 0:
            raise UnsupportedWidthError(f'width must be a positive multiple of 8 bits, got {self.bits}')

    @property
    def byte_size(self) -> int:
        return self.bits // 8

    @property
    def min_value(self) -> int:
        if self.signed:
            return -(2**(self.bits - 1))
        else:
            return 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return 2**(self.bits - 1) - 1
        else:
            return 2**self.bits - 1

    def contains(self, value: int) -> bool:
        """Whether `value` is representable without truncation, packing does not use this."""
        return self.min_value <= value <= self.max_value

    def _encode(self, value: int, order: ByteOrder) -> bytes:
        # masking keeps the low bits of the two's complement representation, so it never overflows
        mask = (1 << self.bits) - 1
        return int.to_bytes(value & mask, self.byte_size, byteorder=order)

    def _decode(self, data: memoryview, order: ByteOrder) -> int:
        assert len(data) == self.byte_size
        return int.from_bytes(data.tobytes(), byteorder=order, signed=self.signed)

    def _check_array(self, array: Buffer | None) -> memoryview:
        if array is None:
            raise NullArgumentError('array must not be None')
        view = memoryview(array)
        # strided byte views are used as they are, cast() only works on contiguous memory
        if view.format != 'B' or view.ndim != 1:
            view = view.cast('B')
        if len(view) < self.byte_size:
            raise BufferTooSmallError(f'buffer length must be >= {self.byte_size} (is {len(view)})')
        return view

    # generic forms, the byte order is a parameter

    def pack(self, value: int, order: ByteOrder) -> bytearray:
        """Pack `value` into a new array of exactly `byte_size` bytes."""
        return self.pack_to(value, bytearray(self.byte_size), order)

    def pack_to(self, value: int, array: ArrayT, order: ByteOrder) -> ArrayT:
        """Pack `value` into the first `byte_size` bytes of `array` and return `array`.

        Raises `BufferTooSmallError` before writing anything if the array is too short.
        """
        view = self._check_array(array)
        view[:self.byte_size] = self._encode(value, order)
        return array

    def pack_to_buffer_with_order(
        self,
        value: int,
        buffer: PositionedBuffer,
        offset: int,
        order: ByteOrder,
    ) -> PositionedBuffer:
        """Pack `value` into `buffer` at `[offset, offset + byte_size)`, the buffer is in charge of bounds checking."""
        if buffer is None:
            raise NullArgumentError('buffer must not be None')
        buffer.put_bytes(offset, self._encode(value, order))
        return buffer

    def unpack(self, data: Buffer, order: ByteOrder) -> int:
        """Unpack a value from the first `byte_size` bytes of `data`.

        Raises `BufferTooSmallError` if `data` is too short.
        """
        view = self._check_array(data)
        return self._decode(view[:self.byte_size], order)

    def unpack_from_buffer_with_order(self, buffer: PositionedBuffer, offset: int, order: ByteOrder) -> int:
        """Unpack a value from `buffer` at `[offset, offset + byte_size)`, the buffer is in charge of bounds checking."""
        if buffer is None:
            raise NullArgumentError('buffer must not be None')
        return self._decode(buffer.get_bytes(offset, self.byte_size), order)

    # allocate and return

    def pack_big_endian(self, value: int) -> bytearray:
        return self.pack(value, ByteOrder.BIG)

    def pack_little_endian(self, value: int) -> bytearray:
        return self.pack(value, ByteOrder.LITTLE)

    # array, always from index 0

    def pack_big_endian_to(self, value: int, array: ArrayT) -> ArrayT:
        return self.pack_to(value, array, ByteOrder.BIG)

    def pack_little_endian_to(self, value: int, array: ArrayT) -> ArrayT:
        return self.pack_to(value, array, ByteOrder.LITTLE)

    def unpack_big_endian(self, data: Buffer) -> int:
        return self.unpack(data, ByteOrder.BIG)

    def unpack_little_endian(self, data: Buffer) -> int:
        return self.unpack(data, ByteOrder.LITTLE)

    # positioned buffer

    def pack_big_endian_to_buffer(self, value: int, buffer: PositionedBuffer, offset: int) -> PositionedBuffer:
        return self.pack_to_buffer_with_order(value, buffer, offset, ByteOrder.BIG)

    def pack_little_endian_to_buffer(self, value: int, buffer: PositionedBuffer, offset: int) -> PositionedBuffer:
        return self.pack_to_buffer_with_order(value, buffer, offset, ByteOrder.LITTLE)

    def pack_to_buffer(self, value: int, buffer: PositionedBuffer, offset: int) -> PositionedBuffer:
        """Same as the explicit variants but using the byte order declared by `buffer`."""
        if buffer is None:
            raise NullArgumentError('buffer must not be None')
        return self.pack_to_buffer_with_order(value, buffer, offset, buffer.order)

    def unpack_big_endian_from_buffer(self, buffer: PositionedBuffer, offset: int) -> int:
        return self.unpack_from_buffer_with_order(buffer, offset, ByteOrder.BIG)

    def unpack_little_endian_from_buffer(self, buffer: PositionedBuffer, offset: int) -> int:
        return self.unpack_from_buffer_with_order(buffer, offset, ByteOrder.LITTLE)

    def unpack_from_buffer(self, buffer: PositionedBuffer, offset: int) -> int:
        """Same as the explicit variants but using the byte order declared by `buffer`."""
        if buffer is None:
            raise NullArgumentError('buffer must not be None')
        return self.unpack_from_buffer_with_order(buffer, offset, buffer.order)


INT8 = FixedWidthIntCodec(8, signed=True)
UINT8 = FixedWidthIntCodec(8, signed=False)
INT16 = FixedWidthIntCodec(16, signed=True)
UINT16 = FixedWidthIntCodec(16, signed=False)
INT24 = FixedWidthIntCodec(24, signed=True)
UINT24 = FixedWidthIntCodec(24, signed=False)
INT32 = FixedWidthIntCodec(32, signed=True)
UINT32 = FixedWidthIntCodec(32, signed=False)
INT48 = FixedWidthIntCodec(48, signed=True)
UINT48 = FixedWidthIntCodec(48, signed=False)
INT64 = FixedWidthIntCodec(64, signed=True)
UINT64 = FixedWidthIntCodec(64, signed=False)

_codecs: dict[tuple[int, bool], FixedWidthIntCodec] = {
    (codec.bits, codec.signed): codec
    for codec in (INT8, UINT8, INT16, UINT16, INT24, UINT24, INT32, UINT32, INT48, UINT48, INT64, UINT64)
}


def get_codec(bits: int, *, signed: bool) -> FixedWidthIntCodec:
    """ Return the codec for the given width and signedness.

    Predefined widths return the module-level instances, other widths are built on first use and reused afterwards.
    Widths above the configured `MAX_BITS` are rejected.

    >>> get_codec(16, signed=True) is INT16
    True
    >>> get_codec(40, signed=False).pack_big_endian(1).hex()
    '0000000001'
    """
    from fixint.settings import get_global_settings
    max_bits = get_global_settings().MAX_BITS
    if bits > max_bits:
        raise UnsupportedWidthError(f'width of {bits} bits is above the maximum of {max_bits} bits')

    key = (bits, signed)
    codec = _codecs.get(key)
    if codec is None:
        codec = FixedWidthIntCodec(bits, signed=signed)
        log = logger.new(bits=bits, signed=signed)
        log.debug('created codec')
        _codecs[key] = codec
    return codec
