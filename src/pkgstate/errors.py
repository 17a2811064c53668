from __future__ import annotations

import enum
from typing import Optional


class ErrorKind(enum.Enum):
    OUT_OF_MEMORY = "out-of-memory"
    INVALID_VALUE = "invalid-value"
    NOT_FOUND = "not-found"
    FILESYSTEM = "filesystem"


class PackageStateError(RuntimeError):
    """Base error for the package state registry."""

    kind: ErrorKind


class RegistryOutOfMemoryError(PackageStateError):
    """An allocation failed while building or persisting the registry."""

    kind = ErrorKind.OUT_OF_MEMORY


class InvalidValueError(PackageStateError):
    """An argument or stored value is outside what the registry accepts."""

    kind = ErrorKind.INVALID_VALUE


class InvalidStateError(InvalidValueError):
    """A state is outside the canonical set, or a strict read found none."""


class PackageNotFoundError(PackageStateError):
    """The package is not present in the queried store."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, pkgname: str) -> None:
        super().__init__(f"Package not found: {pkgname}")
        self.pkgname = pkgname


class RegistryFilesystemError(PackageStateError):
    """Creating the metadata directory or writing the registry file failed.

    Carries the underlying OS error code (`errno`) and the path involved.
    """

    kind = ErrorKind.FILESYSTEM

    def __init__(self, message: str, *, errno: Optional[int] = None, filename: Optional[str] = None) -> None:
        super().__init__(message)
        self.errno = errno
        self.filename = filename

    @classmethod
    def from_oserror(cls, what: str, ex: OSError) -> "RegistryFilesystemError":
        filename = str(ex.filename) if ex.filename is not None else None
        return cls(f"{what}: {ex.strerror or ex}", errno=ex.errno, filename=filename)
