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
This module implements a positioned buffer: a fixed-capacity byte container addressed by absolute index, that also
declares the byte order its contents should be read and written with.

The codec only asks the buffer for whole ranges of bytes, and the buffer checks the entire range before touching its
memory, so an out-of-range access fails without writing anything.

>>> buf = PositionedBuffer.allocate(4, order=ByteOrder.LITTLE)
>>> buf.put_bytes(1, b'\xab\xcd')
>>> bytes(buf)
b'\x00\xab\xcd\x00'
>>> bytes(buf.get_bytes(2, 2))
b'\xcd\x00'
>>> buf.order
<ByteOrder.LITTLE: 'little'>
>>> try:
...     buf.put_bytes(3, b'\x01\x02')
... except IndexError as e:
...     print(*e.args)
range [3, 5) is out of bounds for capacity 4
>>> bytes(buf)
b'\x00\xab\xcd\x00'
"""

from typing_extensions import Buffer, Self

from fixint.byte_order import ByteOrder
from fixint.exceptions import BufferIndexError, NullArgumentError, ReadOnlyBufferError


class PositionedBuffer:
    """Addressable byte container with a fixed capacity and a declared byte order.

    Use `allocate()` or `wrap()` to build one, both default to big-endian. The `order` attribute can be changed at any
    time, it only affects operations that infer the byte order from the buffer.
    """

    __slots__ = ('_view', 'order')

    def __init__(self, view: memoryview, order: ByteOrder) -> None:
        if view.format != 'B' or view.ndim != 1:
            view = view.cast('B')
        self._view = view
        self.order = ByteOrder(order)

    @classmethod
    def allocate(cls, capacity: int, *, order: ByteOrder = ByteOrder.BIG) -> Self:
        """Create a zero-filled writable buffer."""
        if capacity < 0:
            raise ValueError('capacity cannot be negative')
        return cls(memoryview(bytearray(capacity)), order)

    @classmethod
    def wrap(cls, data: Buffer, *, order: ByteOrder = ByteOrder.BIG) -> Self:
        """Create a buffer that shares memory with `data`.

        Writes through the buffer are visible in `data` and vice versa. Immutable data (like `bytes`) results in a
        read-only buffer.
        """
        if data is None:
            raise NullArgumentError('data must not be None')
        return cls(memoryview(data), order)

    @property
    def capacity(self) -> int:
        return len(self._view)

    @property
    def read_only(self) -> bool:
        return self._view.readonly

    def as_read_only(self) -> Self:
        """Return a read-only buffer over the same memory and with the same order."""
        return type(self)(self._view.toreadonly(), self.order)

    def _check_range(self, index: int, size: int) -> None:
        # negative indexes are rejected instead of counting from the end
        if index < 0 or size < 0 or index + size > len(self._view):
            raise BufferIndexError(f'range [{index}, {index + size}) is out of bounds for capacity {len(self._view)}')

    def get(self, index: int) -> int:
        """Read a single byte as unsigned int."""
        self._check_range(index, 1)
        return self._view[index]

    def put(self, index: int, value: int) -> None:
        """Write a single byte, `value` must be in range(256)."""
        self.put_bytes(index, bytes((value,)))

    def get_bytes(self, index: int, size: int) -> memoryview:
        """Read `size` bytes starting at `index`, the result shares memory with the buffer."""
        self._check_range(index, size)
        return self._view[index:index + size]

    def put_bytes(self, index: int, data: Buffer) -> None:
        """Write all of `data` starting at `index`, nothing is written if any of it would fall out of bounds."""
        if self._view.readonly:
            raise ReadOnlyBufferError('buffer is read-only')
        part = memoryview(data)
        if part.format != 'B' or part.ndim != 1:
            part = part.cast('B')
        self._check_range(index, len(part))
        self._view[index:index + len(part)] = part

    def __len__(self) -> int:
        return len(self._view)

    def __bytes__(self) -> bytes:
        return self._view.tobytes()

    def __repr__(self) -> str:
        return f'PositionedBuffer(capacity={self.capacity}, order={self.order.value!r}, read_only={self.read_only})'
