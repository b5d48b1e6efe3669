# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
import os
from typing import Optional

from ..adapters.allocator.heap import get_default_allocator
from ..diagnostics import set_error_msg
from ..ports.allocator import Allocator
from .dir_iter_service import dir_iter_start
from .path_service import join_path
from .predicate_service import is_directory, is_file

logger = logging.getLogger(__name__)


def calculate_directory_size(directory_path: Optional[str], allocator: Optional[Allocator] = None) -> int:
    """
    Sum of the sizes of the direct children of `directory_path`.

    Subdirectories are not descended into; they count as 0 like any other
    non-regular file.
    """
    dir_size = 0

    if not is_directory(directory_path):
        set_error_msg(f"Path is not a directory: {directory_path}")
        return dir_size

    if allocator is None:
        allocator = get_default_allocator()
    iterator = dir_iter_start(directory_path, allocator)
    if iterator is None:
        return dir_size

    directory_path = os.fspath(directory_path)
    with iterator:
        for name in iterator:
            # Skip over the directory itself (`.`) and its parent (`..`)
            if name in (".", ".."):
                continue
            file_path = join_path(directory_path, name, allocator)
            if file_path is None:
                continue
            dir_size += get_file_size(file_path)
            allocator.deallocate(file_path)

    logger.debug("calculate_directory_size: %s -> %d bytes", directory_path, dir_size)
    return dir_size


def get_file_size(file_path: Optional[str]) -> int:
    if not is_file(file_path):
        set_error_msg(f"Path is not a file: {file_path}")
        return 0

    try:
        return os.stat(file_path).st_size
    except OSError as e:
        logger.debug("get_file_size: stat failed for %s: %s", file_path, e)
        return 0
