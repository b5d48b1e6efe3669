from .services import (
    DirIterator,
    calculate_directory_size,
    dir_iter_end,
    dir_iter_next,
    dir_iter_start,
    exists,
    expand_user,
    get_cwd,
    get_file_size,
    is_directory,
    is_file,
    is_readable,
    is_readable_and_writable,
    is_writable,
    join_path,
    mkdir,
    to_native_path,
)

__version__ = "0.1.0"

__all__ = [
    "DirIterator",
    "calculate_directory_size",
    "dir_iter_end",
    "dir_iter_next",
    "dir_iter_start",
    "exists",
    "expand_user",
    "get_cwd",
    "get_file_size",
    "is_directory",
    "is_file",
    "is_readable",
    "is_readable_and_writable",
    "is_writable",
    "join_path",
    "mkdir",
    "to_native_path",
]
