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

from ...ports.enumeration import EnumerationBackend

logger = logging.getLogger(__name__)

# Entries every readdir() stream reports ahead of the real children.
DOT_ENTRIES = (".", "..")


class ScandirBackend(EnumerationBackend):
    """
    open/read/close enumeration over os.scandir().

    The first entry is only produced by an explicit read after open, like
    opendir()/readdir(). `.` and `..` are reported before the directory's
    children since scandir() leaves them out.
    """

    def __init__(self) -> None:
        self._it = None
        self._pending: list[str] = []
        self._exhausted = False
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def open(self, path: str) -> None:
        self._it = os.scandir(path)
        self._closed = False
        self._exhausted = False
        self._pending = list(DOT_ENTRIES)

    def read_one(self) -> Optional[str]:
        if self._exhausted or self._it is None:
            return None
        if self._pending:
            return self._pending.pop(0)
        try:
            entry = next(self._it, None)
        except OSError:
            self._exhausted = True
            raise
        if entry is None:
            self._exhausted = True
            return None
        return entry.name

    def close(self) -> None:
        if self._closed:
            return
        if self._it is not None:
            self._it.close()
        self._it = None
        self._pending = []
        self._closed = True
        logger.debug("ScandirBackend: handle closed")
