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

from typing import Iterable, List

from pyvardel.codec.bulk_codec import SCRATCH_SIZE, write_to_sink
from pyvardel.codec.varint_codec import VarIntCodec
from pyvardel.common.varint_exception import UnsortedSequenceException


class DeltaCodec:
    """
    Encodes a non-decreasing sequence as var-int deltas between neighbours,
    the first value being its delta from zero.

    Unless ``check_order`` is set the order is not verified: a descending step
    is stored modulo 2**width and decoding wraps the running sum the same way.
    """

    def __init__(self, codec: VarIntCodec, check_order: bool = False):
        self.codec = codec
        self.check_order = check_order

    def encode_sequence(self, values: Iterable[int], sink) -> int:
        """
        Delta-encodes ``values`` and appends the var-ints to ``sink``.

        Returns:
            The total number of bytes written.

        Raises:
            UnsortedSequenceException: If order checking is on and a value is smaller
                than its predecessor. Earlier values are already in the sink.
            VarIntIOException: If the sink fails.
        """
        mask = self.codec.width.mask
        scratch = bytearray(SCRATCH_SIZE)
        total_bytes_written = 0
        prev = 0
        for i, value in enumerate(values):
            self.codec.width.check_value(value)
            if self.check_order and value < prev:
                raise UnsortedSequenceException(i, prev, value)
            n = self.codec.encode((value - prev) & mask, scratch)
            write_to_sink(sink, bytes(scratch[:n]))
            total_bytes_written += n
            prev = value
        return total_bytes_written

    def decode_sequence(self, data) -> List[int]:
        """
        Rebuilds the original sequence from delta-encoded ``data``.

        Raises:
            InvalidVarIntException: If any delta is truncated.
        """
        mask = self.codec.width.mask
        out = []
        prev = 0
        rest = memoryview(data)
        while len(rest) > 0:
            delta, rest = self.codec.decode(rest)
            prev = (prev + delta) & mask
            out.append(prev)
        return out
