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

from enum import Enum


class IntWidth(str, Enum):
    """
    Unsigned integer widths supported by the var-int codecs.
    """
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"

    @property
    def bits(self) -> int:
        return int(self.value[1:])

    @property
    def mask(self) -> int:
        """All bits of this width set, i.e. the largest representable value."""
        return (1 << self.bits) - 1

    @property
    def max_encoded_length(self) -> int:
        """Worst-case number of var-int bytes for a value of this width."""
        return (self.bits + 6) // 7

    def check_value(self, value: int) -> int:
        if value < 0:
            raise ValueError(f"Negative value {value} is not supported by unsigned codec {self.value}")
        if value > self.mask:
            raise ValueError(f"Value {value} does not fit in {self.bits} bits")
        return value
