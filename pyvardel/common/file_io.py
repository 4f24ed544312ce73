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
import os
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import pyarrow
import pyarrow.fs
from pyarrow._fs import FileSystem

from pyvardel.common.options import Options


class FileIO:
    """
    Byte streams on a pyarrow filesystem. Output streams returned here are sinks
    for the bulk and delta codecs.
    """

    def __init__(self, path: str, options: Optional[Options] = None):
        self.properties = options or Options.from_none()
        self.logger = logging.getLogger(__name__)
        scheme, _, _ = self.parse_location(path)
        if scheme in {"file"}:
            self.filesystem = self._initialize_local_fs()
        else:
            self.filesystem, _ = pyarrow.fs.FileSystem.from_uri(path)

    @staticmethod
    def parse_location(location: str):
        uri = urlparse(location)
        if not uri.scheme:
            return "file", uri.netloc, os.path.abspath(location)
        elif uri.scheme == "file":
            return uri.scheme, uri.netloc, uri.path
        else:
            return uri.scheme, uri.netloc, f"{uri.netloc}{uri.path}"

    def _initialize_local_fs(self) -> FileSystem:
        from pyarrow.fs import LocalFileSystem

        return LocalFileSystem()

    def to_filesystem_path(self, path: str) -> str:
        _, _, path_str = self.parse_location(path)
        return path_str

    def new_input_stream(self, path: str):
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"Invoking new_input_stream for {path}")
        path_str = self.to_filesystem_path(path)
        return self.filesystem.open_input_file(path_str)

    def new_output_stream(self, path: str):
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"Invoking new_output_stream for {path}")
        path_str = self.to_filesystem_path(path)
        parent_dir = Path(path_str).parent
        if str(parent_dir) and not self.exists(str(parent_dir)):
            self.mkdirs(str(parent_dir))

        return self.filesystem.open_output_stream(path_str)

    def read_bytes(self, path: str) -> pyarrow.Buffer:
        with self.new_input_stream(path) as input_stream:
            return input_stream.read_buffer()

    def get_file_status(self, path: str):
        path_str = self.to_filesystem_path(path)
        return self.filesystem.get_file_info([path_str])[0]

    def exists(self, path: str) -> bool:
        try:
            return self.get_file_status(path).type != pyarrow.fs.FileType.NotFound
        except Exception:
            return False

    def get_file_size(self, path: str) -> int:
        file_info = self.get_file_status(path)
        if file_info.size is None:
            raise ValueError(f"File size not available for {path}")
        return file_info.size

    def mkdirs(self, path: str) -> bool:
        try:
            self.filesystem.create_dir(self.to_filesystem_path(path), recursive=True)
            return True
        except Exception as e:
            self.logger.warning(f"Failed to create directory {path}: {e}")
            return False

    def delete(self, path: str) -> bool:
        try:
            self.filesystem.delete_file(self.to_filesystem_path(path))
            return True
        except Exception as e:
            self.logger.warning(f"Failed to delete {path}: {e}")
            return False

    def delete_quietly(self, path: str):
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"Ready to delete {path}")

        if not self.delete(path) and self.exists(path):
            self.logger.warning(f"Failed to delete file {path}")
