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
from typing import Callable, Optional

from ..adapters.allocator.heap import get_default_allocator
from ..domain.errors import AllocationError
from ..environment import get_home_dir
from ..ports.allocator import Allocator

logger = logging.getLogger(__name__)

SEP = "\\" if os.name == "nt" else "/"
HOME_REFERENCE = "~"


def _produce(build: Callable[[], str], allocator: Optional[Allocator]) -> Optional[str]:
    if allocator is None:
        allocator = get_default_allocator()
    if not allocator.is_valid():
        logger.debug("path utilities: allocator is invalid")
        return None
    try:
        return allocator.zero_allocate(build)
    except AllocationError as e:
        logger.debug("path utilities: allocation failed: %s", e)
        return None


def join_path(
    left_hand_path: Optional[str],
    right_hand_path: Optional[str],
    allocator: Optional[Allocator] = None,
) -> Optional[str]:
    """`left + SEP + right`, without any normalisation."""
    if left_hand_path is None or right_hand_path is None:
        return None
    return _produce(lambda: f"{left_hand_path}{SEP}{right_hand_path}", allocator)


def to_native_path(path: Optional[str], allocator: Optional[Allocator] = None) -> Optional[str]:
    """Replace every forward slash with the native delimiter."""
    if path is None:
        return None
    return _produce(lambda: path.replace("/", SEP), allocator)


def expand_user(path: Optional[str], allocator: Optional[Allocator] = None) -> Optional[str]:
    """
    Replace a leading `~` with the home directory.

    Paths without the leading `~` come back as a copy. Returns None when the
    home directory cannot be resolved.
    """
    if path is None:
        return None
    if not path.startswith(HOME_REFERENCE):
        return _produce(lambda: str(path), allocator)

    homedir = get_home_dir()
    if homedir is None:
        logger.debug("expand_user: home directory is not set")
        return None
    return _produce(lambda: homedir + path[1:], allocator)


def get_cwd() -> Optional[str]:
    try:
        return os.getcwd()
    except OSError as e:
        logger.debug("get_cwd failed: %s", e)
        return None
