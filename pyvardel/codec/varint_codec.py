################################################################################
#  Licensed to the Apache Software Foundation (ASF) under one
#  or more contributor license agreements.  See the NOTICE file
#  distributed with this work for additional information
#  regarding copyright ownership.  The ASF licenses this file
#  to you under the Apache License, Version 2.0 (the
#  "License"); you may not use this file except in compliance
#  with the License.  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
# limitations under the License.
################################################################################

"""Single value var-int (LEB128) encoding for unsigned integers."""

from typing import Tuple

from pyvardel.common.int_width import IntWidth
from pyvardel.common.varint_exception import BufferTooSmallException, InvalidVarIntException


class VarIntCodec:
    """
    Encodes and decodes one unsigned integer of a fixed width.

    Every byte carries 7 bits of the value in its low bits, least significant
    group first. The high bit is set on all bytes except the last one.
    """

    def __init__(self, width: IntWidth = IntWidth.U64, strict_width: bool = False):
        """
        Args:
            width: The unsigned integer width values are encoded from and decoded to.
            strict_width: If True, decoding a value with bits beyond ``width`` raises
                InvalidVarIntException instead of discarding those bits.
        """
        self.width = width
        self.strict_width = strict_width
        self._mask = width.mask

    def encode(self, value: int, out) -> int:
        """
        Encodes ``value`` into the writable buffer ``out``.

        Args:
            value: The unsigned value, must fit in the codec width.
            out: A bytearray or writable memoryview.

        Returns:
            The number of bytes written, always at the start of ``out``.

        Raises:
            BufferTooSmallException: If ``out`` is exhausted before the last byte. The
                bytes written so far are left in ``out``.
        """
        x = self.width.check_value(value)
        for i in range(len(out)):
            x_next = x >> 7
            if x_next == 0:
                out[i] = x & 0x7F
                return i + 1
            out[i] = (x & 0x7F) | 0x80
            x = x_next
        raise BufferTooSmallException(len(out))

    def encode_to_bytes(self, value: int) -> bytes:
        buf = bytearray(self.width.max_encoded_length)
        n = self.encode(value, buf)
        return bytes(buf[:n])

    def encoded_length(self, value: int) -> int:
        """Number of bytes ``value`` takes once encoded."""
        x = self.width.check_value(value)
        return max(1, (x.bit_length() + 6) // 7)

    def decode(self, data) -> Tuple[int, memoryview]:
        """
        Decodes the first value of ``data``.

        Args:
            data: Any object supporting the buffer protocol. Trailing bytes that belong
                to following values are allowed.

        Returns:
            The value and a memoryview over the bytes after it.

        Raises:
            InvalidVarIntException: If no byte with a clear high bit is found.
        """
        view = data if isinstance(data, memoryview) else memoryview(data)
        if view.format != 'B':
            view = view.cast('B')
        x = 0
        shift = 0
        for i, b in enumerate(view):
            x |= (b & 0x7F) << shift
            if b & 0x80 == 0:
                return self._narrow(x), view[i + 1:]
            shift += 7
        raise InvalidVarIntException()

    def _narrow(self, x: int) -> int:
        if x > self._mask:
            if self.strict_width:
                raise InvalidVarIntException(
                    f"invalid var int: value needs {x.bit_length()} bits, "
                    f"more than the {self.width.bits} bits of {self.width.value}")
            return x & self._mask
        return x

    def __repr__(self):
        return f"VarIntCodec(width={self.width.value}, strict_width={self.strict_width})"
