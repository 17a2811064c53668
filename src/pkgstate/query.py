from __future__ import annotations

from typing import Dict

from .codec import PackageState
from .config import RegistryConfig
from .errors import InvalidStateError, PackageNotFoundError
from .installed import find_installed_record, load_installed_document
from .models import PackageRecord
from .records import get_state, set_state


def get_state_from_record(record: PackageRecord) -> PackageState:
    """Strict read of a record's state.

    Unlike `records.get_state`, a missing or unrecognized state is an error.
    """
    state = get_state(record)
    if state is PackageState.UNKNOWN:
        raise InvalidStateError(f"{record.pkgname}: no valid state (got {record.state!r})")
    return state


def set_state_on_record(record: PackageRecord, state: PackageState) -> None:
    """Set the state field on an in-memory record; nothing is persisted."""
    set_state(record, state)


def lookup_installed_state(config: RegistryConfig, pkgname: str) -> PackageState:
    """Return the state of an installed package.

    Raises:
    - PackageNotFoundError if `pkgname` is not in the installed store.
    - InvalidStateError if the record has no recognizable state.
    """
    record = find_installed_record(config, pkgname)
    if record is None:
        raise PackageNotFoundError(pkgname)
    return get_state_from_record(record)


def is_pkg_installed(config: RegistryConfig, pkgname: str) -> bool:
    """True only when `pkgname` is registered with state INSTALLED."""
    record = find_installed_record(config, pkgname)
    if record is None:
        return False
    return get_state(record) is PackageState.INSTALLED


def list_installed_states(config: RegistryConfig) -> Dict[str, PackageState]:
    """Map every registered package to its (leniently decoded) state.

    Order follows the registry document; for duplicate names the first
    record wins, matching lookups.
    """
    out: Dict[str, PackageState] = {}
    for record in load_installed_document(config).records():
        out.setdefault(record.pkgname, get_state(record))
    return out
