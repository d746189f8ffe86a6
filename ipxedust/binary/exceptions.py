"""Exceptions raised by the binary registry and patcher."""


class BinaryError(Exception):
    """Base exception for ipxedust binary operations."""

    pass


class PatchTooLongError(BinaryError, ValueError):
    """Raised when a patch does not fit in the magic string."""

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(length, limit)

    def __str__(self) -> str:
        return f"patch string is too long ({self.length} > {self.limit} bytes)"


class AssetNotFoundError(BinaryError, KeyError):
    """Raised when no binary is registered under a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"binary not found: {self.name}"


class AssetLoadError(BinaryError):
    """Raised when a packaged binary is missing or empty."""

    pass
