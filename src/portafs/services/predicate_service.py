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
import stat
from typing import Optional

logger = logging.getLogger(__name__)


def _stat(path: Optional[str]) -> Optional[os.stat_result]:
    # Every failure reads as "property not proven".
    if path is None:
        return None
    try:
        return os.stat(path)
    except (OSError, ValueError) as e:
        logger.debug("stat failed for %s: %s", path, e)
        return None


def exists(path: Optional[str]) -> bool:
    return _stat(path) is not None


def is_directory(path: Optional[str]) -> bool:
    st = _stat(path)
    return st is not None and stat.S_ISDIR(st.st_mode)


def is_file(path: Optional[str]) -> bool:
    st = _stat(path)
    return st is not None and stat.S_ISREG(st.st_mode)


def is_readable(path: Optional[str]) -> bool:
    st = _stat(path)
    return st is not None and bool(st.st_mode & stat.S_IRUSR)


def is_writable(path: Optional[str]) -> bool:
    st = _stat(path)
    return st is not None and bool(st.st_mode & stat.S_IWUSR)


def is_readable_and_writable(path: Optional[str]) -> bool:
    # NOTE: Windows reports every writable file as readable, so there this is "writable".
    st = _stat(path)
    if st is None:
        return False
    return bool(st.st_mode & stat.S_IRUSR) and bool(st.st_mode & stat.S_IWUSR)
