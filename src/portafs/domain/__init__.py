from .errors import (
    AllocationError,
    EnumerationError,
    InvalidArgumentError,
    IteratorClosedError,
    PortafsError,
)

__all__ = [
    "AllocationError",
    "EnumerationError",
    "InvalidArgumentError",
    "IteratorClosedError",
    "PortafsError",
]
