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


class FixintError(Exception):
    """Base class for exceptions in fixint."""


class NullArgumentError(FixintError, TypeError):
    """A required array or buffer argument is missing (`None`).

    Raised before anything is read or written.
    """


class BufferTooSmallError(FixintError, ValueError):
    """An array is too short to hold a packed integer of the requested width.

    Raised before anything is read or written, array-based operations are all-or-nothing.
    """


class BufferIndexError(FixintError, IndexError):
    """Access outside of the bounds of a positioned buffer."""


class ReadOnlyBufferError(FixintError):
    """Attempt to write into a read-only positioned buffer."""


class UnsupportedWidthError(FixintError, ValueError):
    """The requested width is not a positive multiple of 8 bits or is above the configured maximum."""
