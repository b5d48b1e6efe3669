# tests/unit/test_allocator_injection.py
from pathlib import Path

import pytest

from portafs.adapters.allocator.heap import HeapAllocator, get_default_allocator
from portafs.diagnostics import get_error_string, reset_error
from portafs.domain.errors import AllocationError
from portafs.ports.allocator import Allocator
from portafs.services.dir_iter_service import dir_iter_end, dir_iter_next, dir_iter_start
from portafs.services.path_service import expand_user, join_path, to_native_path
from portafs.services.size_service import calculate_directory_size


class CountingAllocator(Allocator):
    """Tracks live objects; fails once `fail_after` allocations were made."""

    def __init__(self, fail_after=None, valid=True):
        self.fail_after = fail_after
        self.valid = valid
        self.allocations = 0
        self.live = 0

    def zero_allocate(self, factory):
        if self.fail_after is not None and self.allocations >= self.fail_after:
            raise AllocationError("allocator exhausted")
        self.allocations += 1
        obj = factory()
        self.live += 1
        return obj

    def deallocate(self, obj):
        self.live -= 1

    def is_valid(self):
        return self.valid


def test_default_allocator_is_shared_heap_allocator():
    assert isinstance(get_default_allocator(), HeapAllocator)
    assert get_default_allocator() is get_default_allocator()


def test_heap_allocator_translates_memory_error():
    def boom():
        raise MemoryError()

    with pytest.raises(AllocationError):
        HeapAllocator().zero_allocate(boom)


def test_iterator_releases_everything_through_its_allocator(tmp_path: Path):
    (tmp_path / "a").write_text("a")
    alloc = CountingAllocator()
    it = dir_iter_start(str(tmp_path), alloc)
    assert it.allocator is alloc
    assert alloc.live == 2
    while dir_iter_next(it):
        pass
    dir_iter_end(it)
    assert alloc.live == 0


def test_failed_state_allocation_does_not_leak(tmp_path: Path):
    alloc = CountingAllocator(fail_after=1)
    assert dir_iter_start(str(tmp_path), alloc) is None
    assert alloc.allocations == 1
    assert alloc.live == 0


def test_failed_iterator_allocation(tmp_path: Path):
    alloc = CountingAllocator(fail_after=0)
    assert dir_iter_start(str(tmp_path), alloc) is None
    assert alloc.live == 0


def test_open_failure_does_not_leak(tmp_path: Path):
    alloc = CountingAllocator()
    assert dir_iter_start(str(tmp_path / "missing"), alloc) is None
    assert alloc.allocations == 2
    assert alloc.live == 0


def test_invalid_allocator_is_rejected(tmp_path: Path):
    reset_error()
    alloc = CountingAllocator(valid=False)
    assert dir_iter_start(str(tmp_path), alloc) is None
    assert alloc.allocations == 0
    assert get_error_string() == "allocator is invalid"


def test_path_utilities_return_none_when_allocation_fails():
    alloc = CountingAllocator(fail_after=0)
    assert join_path("a", "b", alloc) is None
    assert to_native_path("a/b", alloc) is None
    assert expand_user("/abs", alloc) is None
    assert join_path("a", "b", CountingAllocator(valid=False)) is None


def test_directory_size_returns_joined_paths_to_allocator(tmp_path: Path):
    (tmp_path / "a").write_bytes(b"12345")
    (tmp_path / "b").write_bytes(b"1")
    alloc = CountingAllocator()
    assert calculate_directory_size(str(tmp_path), alloc) == 6
    assert alloc.live == 0


def test_nul_byte_path_does_not_leak(tmp_path: Path):
    alloc = CountingAllocator()
    assert dir_iter_start(str(tmp_path) + "\x00x", alloc) is None
    assert alloc.allocations == 2
    assert alloc.live == 0


def test_backend_construction_error_does_not_leak(tmp_path: Path):
    def broken_factory():
        raise OSError(38, "no enumeration API")

    alloc = CountingAllocator()
    assert dir_iter_start(str(tmp_path), alloc, backend_factory=broken_factory) is None
    assert alloc.allocations == 1
    assert alloc.live == 0
