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
from typing import Any, Callable, TypeVar

T = TypeVar("T")


class Allocator(ABC):
    """Abstract interface for the allocator every heap-owning object is bound to."""

    @abstractmethod
    def zero_allocate(self, factory: Callable[[], T]) -> T:
        """Return a freshly initialised object built by `factory`.

        Raises AllocationError when the object cannot be provided.
        """
        raise NotImplementedError

    @abstractmethod
    def deallocate(self, obj: Any) -> None:
        """Release an object previously returned by `zero_allocate`."""
        raise NotImplementedError

    def is_valid(self) -> bool:
        """Whether this allocator can be used at all."""
        return True
