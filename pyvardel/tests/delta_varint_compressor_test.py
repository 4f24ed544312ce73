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
import os
import random
import shutil
import tempfile
import unittest

from pyvardel.common.delta_varint_compressor import DeltaVarintCompressor
from pyvardel.common.file_io import FileIO
from pyvardel.common.int_width import IntWidth
from pyvardel.common.varint_exception import InvalidVarIntException


class DeltaVarintCompressorTest(unittest.TestCase):

    def test_normal_case(self):
        original = [50, 70, 80, 80, 90]
        compressed = DeltaVarintCompressor.compress(original)
        self.assertEqual(bytes([50, 20, 10, 0, 10]), compressed)
        self.assertEqual(original, DeltaVarintCompressor.decompress(compressed))

    def test_random(self):
        rnd = random.Random(2024)
        for _ in range(100):
            original = sorted(rnd.randint(0, (1 << 64) - 1) for _ in range(100))
            compressed = DeltaVarintCompressor.compress(original)
            self.assertEqual(original, DeltaVarintCompressor.decompress(compressed))

    def test_empty_array(self):
        compressed = DeltaVarintCompressor.compress([])
        self.assertEqual(b'', compressed)
        self.assertEqual([], DeltaVarintCompressor.decompress(compressed))

    def test_single_element(self):
        compressed = DeltaVarintCompressor.compress([42])
        # 42 (0x2A) fits in one byte
        self.assertEqual(b'\x2a', compressed)
        self.assertEqual([42], DeltaVarintCompressor.decompress(compressed))

    def test_extreme_values(self):
        original = [0, (1 << 128) - 1]
        compressed = DeltaVarintCompressor.compress(original, IntWidth.U128)
        self.assertEqual(20, len(compressed))
        self.assertEqual(original, DeltaVarintCompressor.decompress(compressed, IntWidth.U128))
        with self.assertRaises(ValueError):
            DeltaVarintCompressor.compress(original)

    def test_corrupted_input(self):
        with self.assertRaises(InvalidVarIntException):
            DeltaVarintCompressor.decompress(bytes([0x80, 0x80, 0x80]))

    def test_ascending_sequence(self):
        original = list(range(1, 11))
        compressed = DeltaVarintCompressor.compress(original, IntWidth.U16)
        self.assertEqual(bytes([1] * 10), compressed)
        self.assertEqual(original, DeltaVarintCompressor.decompress(compressed, IntWidth.U16))


class DeltaVarintCompressorFileTest(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp(prefix="pyvardel_")
        self.file_io = FileIO(self.temp_dir)

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_write_and_read_file(self):
        path = os.path.join(self.temp_dir, "ids", "part-0.dvi")
        original = [4, 8, 15, 16, 23, 42, 300000]
        written = DeltaVarintCompressor.write_file(self.file_io, path, original, IntWidth.U32)

        self.assertTrue(self.file_io.exists(path))
        self.assertEqual(written, self.file_io.get_file_size(path))
        self.assertEqual(original, DeltaVarintCompressor.read_file(self.file_io, path, IntWidth.U32))

        self.file_io.delete_quietly(path)
        self.assertFalse(self.file_io.exists(path))

    def test_file_uri(self):
        path = "file://" + os.path.join(self.temp_dir, "uri.dvi")
        DeltaVarintCompressor.write_file(self.file_io, path, [1, 2, 3])
        self.assertEqual(3, self.file_io.get_file_size(path))
        self.assertEqual([1, 2, 3], DeltaVarintCompressor.read_file(self.file_io, path))

    def test_read_missing_file(self):
        with self.assertRaises(OSError):
            DeltaVarintCompressor.read_file(self.file_io, os.path.join(self.temp_dir, "missing"))


if __name__ == '__main__':
    unittest.main()
