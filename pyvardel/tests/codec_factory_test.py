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

from pyvardel.codec.codec_factory import CodecFactory
from pyvardel.common.codec_options import CodecOptions
from pyvardel.common.int_width import IntWidth
from pyvardel.common.options import Options
from pyvardel.common.varint_exception import UnsortedSequenceException


class CodecFactoryTest(unittest.TestCase):

    def test_defaults(self):
        factory = CodecFactory()
        codec = factory.varint_codec()
        self.assertEqual(IntWidth.U64, codec.width)
        self.assertFalse(codec.strict_width)
        self.assertFalse(factory.delta_codec().check_order)
        self.assertFalse(factory.delta_scanner().sorted_input)
        self.assertIs(codec, factory.bulk_codec().codec)

    def test_from_dict(self):
        factory = CodecFactory({
            'varint.width': 'u16',
            'varint.strict-width': 'true',
            'delta.check-order': 'true',
        })
        self.assertEqual(IntWidth.U16, factory.varint_codec().width)
        self.assertTrue(factory.varint_codec().strict_width)
        self.assertTrue(factory.delta_scanner().sorted_input)
        with self.assertRaises(UnsortedSequenceException):
            factory.delta_codec().encode_sequence([3, 2], bytearray())

    def test_from_options(self):
        options = Options.from_none()
        options.set(CodecOptions.WIDTH, IntWidth.U128)
        options.set(CodecOptions.CHECK_ORDER, False)
        self.assertEqual({'varint.width': 'u128', 'delta.check-order': 'false'}, options.to_map())

        factory = CodecFactory(options)
        self.assertEqual(IntWidth.U128, factory.varint_codec().width)
        out = bytearray()
        factory.delta_codec().encode_sequence([1, (1 << 128) - 1], out)
        self.assertEqual([1, (1 << 128) - 1], factory.delta_codec().decode_sequence(out))

    def test_width_names_are_case_insensitive(self):
        self.assertEqual(IntWidth.U32, CodecFactory({'varint.width': 'U32'}).varint_codec().width)

    def test_invalid_options(self):
        with self.assertRaises(ValueError):
            CodecFactory({'varint.width': 'u8'})
        with self.assertRaises(ValueError):
            CodecFactory({'varint.strict-width': 'maybe'})

    def test_option_descriptions(self):
        for option in (CodecOptions.WIDTH, CodecOptions.STRICT_WIDTH, CodecOptions.CHECK_ORDER):
            self.assertTrue(option.description().text)
            self.assertTrue(option.has_default_value())


if __name__ == '__main__':
    unittest.main()
