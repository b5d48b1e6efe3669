from .allocator import Allocator
from .enumeration import EnumerationBackend

__all__ = ["Allocator", "EnumerationBackend"]
