class PortafsError(Exception):
    """Base exception for filesystem-layer errors."""


class InvalidArgumentError(PortafsError):
    """Absent required input or an unusable allocator."""


class AllocationError(PortafsError):
    """The allocator could not provide the requested object."""


class IteratorClosedError(PortafsError):
    """A directory iterator was used after it was ended."""


class EnumerationError(PortafsError):
    """A directory could not be opened or read."""

    def __init__(self, path: str, errno: int, message: str) -> None:
        super().__init__(message)
        self.path = path
        self.errno = errno
