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

from pyvardel.codec.varint_codec import VarIntCodec


class DeltaScanner:
    """
    Point lookups on delta-encoded bytes in one left to right pass, without
    building the decoded sequence.
    """

    def __init__(self, codec: VarIntCodec, sorted_input: bool = False):
        """
        Args:
            codec: Codec whose width and strictness the bytes were written with.
            sorted_input: If True the data is known to be non-decreasing, so the scan
                stops as soon as the running sum passes the target.
        """
        self.codec = codec
        self.sorted_input = sorted_input

    def contains(self, target: int, data) -> bool:
        """
        Whether ``target`` is one of the values encoded in ``data``.

        Truncated or otherwise undecodable input ends the scan with False.
        """
        mask = self.codec.width.mask
        view = memoryview(data)
        if view.format != 'B':
            view = view.cast('B')

        acc = 0
        delta = 0
        shift = 0
        for b in view:
            delta |= (b & 0x7F) << shift
            if b & 0x80:
                shift += 7
                continue
            if delta > mask:
                if self.codec.strict_width:
                    return False
                delta &= mask
            acc = (acc + delta) & mask
            if acc == target:
                return True
            if self.sorted_input and acc > target:
                return False
            delta = 0
            shift = 0
        return False
