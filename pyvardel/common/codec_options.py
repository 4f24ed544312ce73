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

from pyvardel.common.int_width import IntWidth
from pyvardel.common.options import Options
from pyvardel.common.options.config_option import ConfigOption
from pyvardel.common.options.config_options import ConfigOptions


class CodecOptions:
    """Options controlling how var-int codecs are created."""

    WIDTH: ConfigOption[IntWidth] = (
        ConfigOptions.key("varint.width")
        .enum_type(IntWidth)
        .default_value(IntWidth.U64)
        .with_description("Unsigned integer width of encoded values: u16, u32, u64 or u128. "
                          "Encoder and decoder must agree, the width is not stored in the bytes.")
    )

    STRICT_WIDTH: ConfigOption[bool] = (
        ConfigOptions.key("varint.strict-width")
        .boolean_type()
        .default_value(False)
        .with_description("Whether decoding fails on values carrying bits beyond the configured width. "
                          "When false those bits are discarded.")
    )

    CHECK_ORDER: ConfigOption[bool] = (
        ConfigOptions.key("delta.check-order")
        .boolean_type()
        .default_value(False)
        .with_description("Whether delta encoding rejects sequences that are not non-decreasing. "
                          "When false descending steps wrap around modulo the width.")
    )

    def __init__(self, options: Options):
        self.options = options

    def width(self) -> IntWidth:
        return self.options.get(CodecOptions.WIDTH)

    def strict_width(self) -> bool:
        return self.options.get(CodecOptions.STRICT_WIDTH)

    def check_order(self) -> bool:
        return self.options.get(CodecOptions.CHECK_ORDER)
