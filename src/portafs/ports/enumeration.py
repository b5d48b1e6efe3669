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

from abc import ABC, abstractmethod
from typing import Optional


class EnumerationBackend(ABC):
    """
    One native directory enumeration mechanism.

    Implementations wrap either an open/read/close style API or a handle-based
    find-first/find-next API. Both are reduced to the same three calls:
      - open(path): acquire the native handle (raises OSError on failure)
      - read_one(): next entry name, or None when exhausted (raises OSError on read error)
      - close(): release the handle; safe to call more than once
    """

    @abstractmethod
    def open(self, path: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def read_one(self) -> Optional[str]:
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        raise NotImplementedError

    @property
    @abstractmethod
    def closed(self) -> bool:
        """True once the native handle has been released."""
        raise NotImplementedError
