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

from __future__ import annotations

from typing import Any, Callable, TypeVar

from ...domain.errors import AllocationError
from ...ports.allocator import Allocator

T = TypeVar("T")


class HeapAllocator(Allocator):
    """Allocator backed by the interpreter's own heap."""

    def zero_allocate(self, factory: Callable[[], T]) -> T:
        try:
            return factory()
        except MemoryError as e:
            raise AllocationError(str(e) or "out of memory") from e

    def deallocate(self, obj: Any) -> None:
        # Objects are reclaimed by the garbage collector once unreferenced.
        return None


_DEFAULT = HeapAllocator()


def get_default_allocator() -> Allocator:
    return _DEFAULT
