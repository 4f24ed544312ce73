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

from pyvardel.codec.varint_codec import VarIntCodec
from pyvardel.common.varint_exception import VarIntIOException

# Large enough for the widest supported value, 19 bytes for 128 bits.
SCRATCH_SIZE = 24


def write_to_sink(sink, chunk: bytes) -> None:
    """
    Appends ``chunk`` to ``sink``: a bytearray is extended in place, anything else
    must provide ``write``. Write failures are raised as VarIntIOException.
    """
    if isinstance(sink, bytearray):
        sink.extend(chunk)
        return
    try:
        sink.write(chunk)
    except OSError as e:
        raise VarIntIOException(e) from e


class BulkCodec:
    """Encodes a sequence of unsigned integers as concatenated var-ints."""

    def __init__(self, codec: VarIntCodec):
        self.codec = codec

    def encode_sequence(self, values: Iterable[int], sink) -> int:
        """
        Encodes ``values`` in order and appends them to ``sink``.

        Returns:
            The total number of bytes written.

        Raises:
            VarIntIOException: If the sink fails. Bytes already written stay in the sink.
        """
        scratch = bytearray(SCRATCH_SIZE)
        total_bytes_written = 0
        for value in values:
            n = self.codec.encode(value, scratch)
            write_to_sink(sink, bytes(scratch[:n]))
            total_bytes_written += n
        return total_bytes_written

    def decode_sequence(self, data) -> List[int]:
        """
        Decodes every value of ``data``.

        Raises:
            InvalidVarIntException: If any value is truncated. Nothing is returned in
                that case.
        """
        out = []
        rest = memoryview(data)
        while len(rest) > 0:
            value, rest = self.codec.decode(rest)
            out.append(value)
        return out
