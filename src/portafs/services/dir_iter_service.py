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

import logging
import os
from typing import Callable, Iterator, Optional

from ..adapters.allocator.heap import get_default_allocator
from ..adapters.enumeration.findfile_backend import FindFileBackend, native_error_code
from ..adapters.enumeration.scandir_backend import ScandirBackend
from ..diagnostics import set_error_msg
from ..domain.errors import (
    AllocationError,
    EnumerationError,
    InvalidArgumentError,
    IteratorClosedError,
)
from ..ports.allocator import Allocator
from ..ports.enumeration import EnumerationBackend

logger = logging.getLogger(__name__)

BackendFactory = Callable[[], EnumerationBackend]


def default_backend_factory() -> EnumerationBackend:
    if os.name == "nt":
        return FindFileBackend()
    return ScandirBackend()


class DirIterator:
    """
    One enumeration session over a directory.

    `entry_name` is the current entry, replaced by every dir_iter_next() and
    cleared when the sequence is exhausted or the iterator is ended. `state`
    owns the native handle and is None once dir_iter_end() has run.

    `error` keeps the OSError of a failed read, which dir_iter_next() otherwise
    reports the same way as a clean end of the listing.
    """

    def __init__(self, allocator: Allocator) -> None:
        self.entry_name: Optional[str] = None
        self.state: Optional[EnumerationBackend] = None
        self.allocator = allocator
        self.path: Optional[str] = None
        self.error: Optional[OSError] = None
        self.ended = False

    def __enter__(self) -> "DirIterator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        dir_iter_end(self)

    def __iter__(self) -> Iterator[str]:
        name = self.entry_name
        while name is not None:
            yield name
            if not dir_iter_next(self):
                return
            name = self.entry_name

    def __repr__(self) -> str:
        return f"DirIterator(path={self.path!r}, entry_name={self.entry_name!r}, ended={self.ended})"


def _start_error_code(exc: Exception) -> int:
    if isinstance(exc, OSError):
        return native_error_code(exc)
    return 0


def _checked_allocator(directory_path: Optional[str], allocator: Optional[Allocator]) -> Allocator:
    if directory_path is None:
        raise InvalidArgumentError("directory_path argument is null")
    if allocator is None:
        allocator = get_default_allocator()
    if not allocator.is_valid():
        raise InvalidArgumentError("allocator is invalid")
    return allocator


def dir_iter_start(
    directory_path: Optional[str],
    allocator: Optional[Allocator] = None,
    *,
    backend_factory: Optional[BackendFactory] = None,
) -> Optional[DirIterator]:
    """
    Open `directory_path` for enumeration and read its first entry.

    Returns None when the path is missing, the allocator is unusable,
    allocation fails, or the directory cannot be opened or read. Anything
    acquired before the failure is released again.
    """
    try:
        allocator = _checked_allocator(directory_path, allocator)
    except InvalidArgumentError as e:
        set_error_msg(str(e))
        return None

    path = os.fspath(directory_path)
    factory = backend_factory or default_backend_factory
    iterator: Optional[DirIterator] = None
    try:
        iterator = allocator.zero_allocate(lambda: DirIterator(allocator))
        iterator.path = path

        try:
            iterator.state = allocator.zero_allocate(factory)
        except AllocationError:
            raise
        except Exception as e:
            msg = f"Can't create enumeration backend for {path}: {e}"
            set_error_msg(msg)
            raise EnumerationError(path, _start_error_code(e), msg) from e

        try:
            iterator.state.open(path)
        except (OSError, ValueError) as e:
            code = _start_error_code(e)
            msg = f"Can't open directory {path}. Error code: {code}"
            set_error_msg(msg)
            raise EnumerationError(path, code, msg) from e

        try:
            iterator.entry_name = iterator.state.read_one()
        except OSError as e:
            code = native_error_code(e)
            msg = f"Can't iterate directory {path}. Error code: {code}"
            set_error_msg(msg)
            raise EnumerationError(path, code, msg) from e
    except (AllocationError, EnumerationError) as e:
        logger.debug("dir_iter_start failed for %s: %s", path, e)
        dir_iter_end(iterator)
        return None

    return iterator


def dir_iter_next(iterator: Optional[DirIterator]) -> bool:
    """Advance to the next entry. False once the listing is exhausted."""
    if iterator is None:
        set_error_msg("iter argument is null")
        return False
    if iterator.ended or iterator.state is None:
        raise IteratorClosedError("iter is invalid")

    try:
        name = iterator.state.read_one()
    except OSError as e:
        set_error_msg(
            f"Can't iterate directory {iterator.path}. Error code: {native_error_code(e)}"
        )
        iterator.error = e
        name = None

    iterator.entry_name = name
    return name is not None


def dir_iter_end(iterator: Optional[DirIterator]) -> None:
    """Release the native handle and everything the iterator owns."""
    if iterator is None or iterator.ended:
        return

    allocator = iterator.allocator
    state = iterator.state
    iterator.state = None
    iterator.entry_name = None
    iterator.ended = True
    if state is not None:
        if not state.closed:
            try:
                state.close()
            except OSError as e:
                logger.warning("dir_iter_end: closing %s failed: %s", iterator.path, e)
        allocator.deallocate(state)

    allocator.deallocate(iterator)
