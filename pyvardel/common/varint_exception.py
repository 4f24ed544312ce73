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


# Exception classes
class VarIntException(Exception):
    """Base var-int codec exception"""


class BufferTooSmallException(VarIntException):
    """Output buffer exhausted before a value could be terminated"""

    def __init__(self, capacity: int = None):
        self.capacity = capacity
        super().__init__("output buffer is too small")


class InvalidVarIntException(VarIntException):
    """Input ended without a terminating byte, or the value overflowed its width"""

    def __init__(self, message: str = "invalid var int: no terminator byte found"):
        super().__init__(message)


class VarIntIOException(VarIntException):
    """The sink rejected a write"""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"io error: {cause}")


class UnsortedSequenceException(VarIntException):
    """Delta input is not in non-decreasing order"""

    def __init__(self, index: int, previous: int, current: int):
        self.index = index
        self.previous = previous
        self.current = current
        super().__init__(
            f"Sequence is not non-decreasing at index {index}: {current} < {previous}")
