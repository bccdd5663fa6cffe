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

"""
Fixed-width integer packing and unpacking, in big-endian and little-endian byte order, signed and unsigned.
"""

from fixint.buffer import PositionedBuffer
from fixint.byte_order import ByteOrder
from fixint.codec import (
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
    FixedWidthIntCodec,
    get_codec,
)
from fixint.exceptions import (
    BufferIndexError,
    BufferTooSmallError,
    FixintError,
    NullArgumentError,
    ReadOnlyBufferError,
    UnsupportedWidthError,
)
from fixint.version import __version__

__all__ = [
    'ByteOrder',
    'PositionedBuffer',
    'FixedWidthIntCodec',
    'get_codec',
    'INT8',
    'UINT8',
    'INT16',
    'UINT16',
    'INT24',
    'UINT24',
    'INT32',
    'UINT32',
    'INT48',
    'UINT48',
    'INT64',
    'UINT64',
    'FixintError',
    'NullArgumentError',
    'BufferTooSmallError',
    'BufferIndexError',
    'ReadOnlyBufferError',
    'UnsupportedWidthError',
    '__version__',
]
