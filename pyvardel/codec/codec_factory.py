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

import logging
from typing import Optional, Union

from pyvardel.codec.bulk_codec import BulkCodec
from pyvardel.codec.delta_codec import DeltaCodec
from pyvardel.codec.delta_scanner import DeltaScanner
from pyvardel.codec.varint_codec import VarIntCodec
from pyvardel.common.codec_options import CodecOptions
from pyvardel.common.options import Options

logger = logging.getLogger(__name__)


class CodecFactory:
    """Creates codecs configured from CodecOptions."""

    def __init__(self, options: Optional[Union[Options, dict]] = None):
        self.options = CodecOptions(Options.of(options))
        self._codec = VarIntCodec(self.options.width(), self.options.strict_width())
        logger.debug("Created %s, check_order=%s", self._codec, self.options.check_order())

    def varint_codec(self) -> VarIntCodec:
        return self._codec

    def bulk_codec(self) -> BulkCodec:
        return BulkCodec(self._codec)

    def delta_codec(self) -> DeltaCodec:
        return DeltaCodec(self._codec, self.options.check_order())

    def delta_scanner(self) -> DeltaScanner:
        return DeltaScanner(self._codec, self.options.check_order())
