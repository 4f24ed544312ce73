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

import io
import logging
from typing import List

from pyvardel.codec.delta_codec import DeltaCodec
from pyvardel.codec.varint_codec import VarIntCodec
from pyvardel.common.file_io import FileIO
from pyvardel.common.int_width import IntWidth

logger = logging.getLogger(__name__)


class DeltaVarintCompressor:
    """Whole-buffer helpers around DeltaCodec for sorted unsigned sequences."""

    @staticmethod
    def compress(data: List[int], width: IntWidth = IntWidth.U64) -> bytes:
        if not data:
            return b''

        out = io.BytesIO()
        DeltaVarintCompressor._codec(width).encode_sequence(data, out)
        result = out.getvalue()
        out.close()
        logger.debug("Compressed %d values into %d bytes", len(data), len(result))
        return result

    @staticmethod
    def decompress(compressed, width: IntWidth = IntWidth.U64) -> List[int]:
        if not compressed:
            return []
        return DeltaVarintCompressor._codec(width).decode_sequence(compressed)

    @staticmethod
    def write_file(file_io: FileIO, path: str, data: List[int], width: IntWidth = IntWidth.U64) -> int:
        """Writes ``data`` delta-encoded to ``path`` and returns the file length."""
        with file_io.new_output_stream(path) as out:
            written = DeltaVarintCompressor._codec(width).encode_sequence(data, out)
        logger.debug("Wrote %d values (%d bytes) to %s", len(data), written, path)
        return written

    @staticmethod
    def read_file(file_io: FileIO, path: str, width: IntWidth = IntWidth.U64) -> List[int]:
        return DeltaVarintCompressor._codec(width).decode_sequence(file_io.read_bytes(path))

    @staticmethod
    def _codec(width: IntWidth) -> DeltaCodec:
        return DeltaCodec(VarIntCodec(width))
