"""
Package installation state registry.

Tracks a small lifecycle state per installed package and persists it in a
single property-list document below the configured root directory.
"""

from .codec import PackageState, decode_state, encode_state
from .config import RegistryConfig
from .errors import (
    ErrorKind,
    InvalidStateError,
    InvalidValueError,
    PackageNotFoundError,
    PackageStateError,
    RegistryFilesystemError,
    RegistryOutOfMemoryError,
)
from .models import PackageRecord, RegistryDocument
from .query import (
    get_state_from_record,
    is_pkg_installed,
    list_installed_states,
    lookup_installed_state,
    set_state_on_record,
)
from .registry import StateRegistry, set_pkg_state_installed

__all__ = [
    "ErrorKind",
    "InvalidStateError",
    "InvalidValueError",
    "PackageNotFoundError",
    "PackageRecord",
    "PackageState",
    "PackageStateError",
    "RegistryConfig",
    "RegistryDocument",
    "RegistryFilesystemError",
    "RegistryOutOfMemoryError",
    "StateRegistry",
    "decode_state",
    "encode_state",
    "get_state_from_record",
    "is_pkg_installed",
    "list_installed_states",
    "lookup_installed_state",
    "set_pkg_state_installed",
    "set_state_on_record",
]
