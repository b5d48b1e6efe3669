from .dir_iter_service import DirIterator, dir_iter_end, dir_iter_next, dir_iter_start
from .path_service import expand_user, get_cwd, join_path, to_native_path
from .predicate_service import (
    exists,
    is_directory,
    is_file,
    is_readable,
    is_readable_and_writable,
    is_writable,
)
from .size_service import calculate_directory_size, get_file_size
from .mkdir_service import mkdir


__all__ = [
    'DirIterator',
    'dir_iter_start',
    'dir_iter_next',
    'dir_iter_end',
    'join_path',
    'to_native_path',
    'expand_user',
    'get_cwd',
    'exists',
    'is_directory',
    'is_file',
    'is_readable',
    'is_writable',
    'is_readable_and_writable',
    'calculate_directory_size',
    'get_file_size',
    'mkdir',
]
