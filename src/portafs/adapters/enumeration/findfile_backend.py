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
from typing import Any, Optional, Protocol

from ...ports.enumeration import EnumerationBackend

logger = logging.getLogger(__name__)

ERROR_FILE_NOT_FOUND = 2
ERROR_NO_MORE_FILES = 18


def native_error_code(exc: OSError) -> int:
    """Windows error code when the OS supplied one, errno otherwise."""
    code = getattr(exc, "winerror", None)
    if code is None:
        code = exc.errno
    return int(code or 0)


class Finder(Protocol):
    """
    Handle-based find-first/find-next API.

    find_first() opens the search and returns the first match with it;
    find_next() returns None once the search is exhausted.
    """

    def find_first(self, pattern: str) -> tuple[Any, str]: ...

    def find_next(self, handle: Any) -> Optional[str]: ...

    def find_close(self, handle: Any) -> None: ...


if os.name == "nt":
    import ctypes
    from ctypes import wintypes

    _kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)

    FindFirstFileW = _kernel32.FindFirstFileW
    FindFirstFileW.argtypes = [wintypes.LPCWSTR, ctypes.POINTER(wintypes.WIN32_FIND_DATAW)]
    FindFirstFileW.restype = wintypes.HANDLE

    FindNextFileW = _kernel32.FindNextFileW
    FindNextFileW.argtypes = [wintypes.HANDLE, ctypes.POINTER(wintypes.WIN32_FIND_DATAW)]
    FindNextFileW.restype = wintypes.BOOL

    FindClose = _kernel32.FindClose
    FindClose.argtypes = [wintypes.HANDLE]
    FindClose.restype = wintypes.BOOL

    INVALID_HANDLE_VALUE = wintypes.HANDLE(-1).value

    class Win32Finder:
        """kernel32 FindFirstFileW/FindNextFileW/FindClose."""

        def find_first(self, pattern: str) -> tuple[Any, str]:
            data = wintypes.WIN32_FIND_DATAW()
            handle = FindFirstFileW(pattern, ctypes.byref(data))
            if handle == INVALID_HANDLE_VALUE:
                raise ctypes.WinError(ctypes.get_last_error())
            return handle, data.cFileName

        def find_next(self, handle: Any) -> Optional[str]:
            data = wintypes.WIN32_FIND_DATAW()
            if FindNextFileW(handle, ctypes.byref(data)):
                return data.cFileName
            error = ctypes.get_last_error()
            if error == ERROR_NO_MORE_FILES:
                return None
            raise ctypes.WinError(error)

        def find_close(self, handle: Any) -> None:
            if not FindClose(handle):
                raise ctypes.WinError(ctypes.get_last_error())


class FindFileBackend(EnumerationBackend):
    """
    Enumeration over a find-first/find-next handle.

    open() already yields the first entry, so it is buffered until the first
    read_one(). The handle is closed as soon as the search is exhausted and the
    closed state is tracked here, so close() afterwards does not touch it again.
    """

    def __init__(self, finder: Optional[Finder] = None) -> None:
        if finder is None:
            if os.name != "nt":
                raise OSError("find-first enumeration needs a Windows finder")
            finder = Win32Finder()
        self._finder = finder
        self._handle: Any = None
        self._first: Optional[str] = None
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def open(self, path: str) -> None:
        try:
            self._handle, self._first = self._finder.find_first(path + "\\*")
        except OSError as e:
            # No match inside an existing directory is an empty listing.
            if native_error_code(e) != ERROR_FILE_NOT_FOUND or not os.path.isdir(path):
                raise
            logger.debug("FindFileBackend: %s has no entries", path)
            self._handle = None
            self._first = None
            self._closed = True
            return
        self._closed = False

    def read_one(self) -> Optional[str]:
        if self._first is not None:
            name, self._first = self._first, None
            return name
        if self._closed:
            return None
        try:
            name = self._finder.find_next(self._handle)
        except OSError:
            self.close()
            raise
        if name is None:
            self.close()
        return name

    def close(self) -> None:
        if self._closed:
            return
        handle, self._handle = self._handle, None
        self._first = None
        self._closed = True
        self._finder.find_close(handle)
        logger.debug("FindFileBackend: handle closed")
