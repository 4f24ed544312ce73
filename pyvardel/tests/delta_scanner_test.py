"""
Licensed to the Apache Software Foundation (ASF) under one
or more contributor license agreements.  See the NOTICE file
distributed with this work for additional information
regarding copyright ownership.  The ASF licenses this file
to you under the Apache License, Version 2.0 (the
"License"); you may not use this file except in compliance
with the License.  You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""
import unittest

from parameterized import parameterized

from pyvardel.codec.delta_codec import DeltaCodec
from pyvardel.codec.delta_scanner import DeltaScanner
from pyvardel.codec.varint_codec import VarIntCodec
from pyvardel.common.int_width import IntWidth

MEMBERS = [4, 8, 15, 16, 23, 42]


class DeltaScannerTest(unittest.TestCase):

    def setUp(self):
        self.codec = VarIntCodec(IntWidth.U32)
        self.data = bytearray()
        DeltaCodec(self.codec).encode_sequence(MEMBERS, self.data)

    @parameterized.expand([
        ("unsorted", False),
        ("sorted", True),
    ])
    def test_contains(self, _, sorted_input):
        scanner = DeltaScanner(self.codec, sorted_input)
        for value in MEMBERS:
            self.assertTrue(scanner.contains(value, self.data))
        for value in range(0, 50):
            if value not in MEMBERS:
                self.assertFalse(scanner.contains(value, self.data), value)

    def test_empty(self):
        self.assertFalse(DeltaScanner(self.codec).contains(0, b''))

    def test_truncated_tail(self):
        data = bytes(self.data) + b'\x80'
        scanner = DeltaScanner(self.codec)
        self.assertTrue(scanner.contains(42, data))
        self.assertFalse(scanner.contains(43, data))

    def test_corrupt_input(self):
        self.assertFalse(DeltaScanner(self.codec).contains(0, b'\x80\x80\x80'))

    def test_multi_byte_deltas(self):
        codec = VarIntCodec(IntWidth.U128)
        values = [1, 150, 1 << 64, (1 << 128) - 1]
        data = bytearray()
        DeltaCodec(codec).encode_sequence(values, data)
        scanner = DeltaScanner(codec)
        for value in values:
            self.assertTrue(scanner.contains(value, data))
        self.assertFalse(scanner.contains(151, data))
        self.assertFalse(scanner.contains((1 << 64) + 1, data))

    def test_agrees_with_decode_on_wrapped_input(self):
        data = bytearray()
        DeltaCodec(self.codec).encode_sequence([10, 5, 7], data)
        scanner = DeltaScanner(self.codec)
        self.assertTrue(scanner.contains(5, data))
        self.assertTrue(scanner.contains(7, data))
        self.assertFalse(scanner.contains(6, data))

    def test_strict_width_stops_on_overflow(self):
        # 65536 does not fit in 16 bits
        data = bytes([0x01, 0x80, 0x80, 0x04, 0x01])
        self.assertFalse(DeltaScanner(VarIntCodec(IntWidth.U16, strict_width=True)).contains(2, data))
        # without strict width the overflowing delta is masked to zero
        self.assertTrue(DeltaScanner(VarIntCodec(IntWidth.U16)).contains(2, data))


if __name__ == '__main__':
    unittest.main()
