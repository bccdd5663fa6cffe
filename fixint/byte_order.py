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

import sys
from enum import StrEnum, unique


@unique
class ByteOrder(StrEnum):
    """Order in which the bytes of a multi-byte integer are laid out.

    The values are the same strings accepted by `int.to_bytes` and `int.from_bytes`, so a member can be passed
    directly as their `byteorder` argument.

    >>> ByteOrder.BIG == 'big'
    True
    >>> ByteOrder('little') is ByteOrder.LITTLE
    True
    >>> (1).to_bytes(2, ByteOrder.LITTLE)
    b'\\x01\\x00'
    """

    # Most significant byte first.
    BIG = 'big'

    # Least significant byte first.
    LITTLE = 'little'

    @classmethod
    def native(cls) -> 'ByteOrder':
        """Byte order of the running machine."""
        return cls(sys.byteorder)
