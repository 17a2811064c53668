from __future__ import annotations

import enum
from typing import Any, Dict, Optional

from .errors import InvalidStateError


class PackageState(enum.IntEnum):
    """Lifecycle state of an installed package.

    `UNKNOWN` is a sentinel for "no recognizable state"; it is never written.
    """

    UNKNOWN = 0
    UNPACKED = 1
    INSTALLED = 2
    BROKEN = 3
    CONFIG_FILES = 4
    NOT_INSTALLED = 5
    HALF_UNPACKED = 6


# Stable wire values; these appear verbatim in registry files.
_TOKENS: Dict[PackageState, str] = {
    PackageState.UNPACKED: "unpacked",
    PackageState.INSTALLED: "installed",
    PackageState.BROKEN: "broken",
    PackageState.CONFIG_FILES: "config-files",
    PackageState.NOT_INSTALLED: "not-installed",
    PackageState.HALF_UNPACKED: "half-unpacked",
}
_STATES: Dict[str, PackageState] = {tok: st for st, tok in _TOKENS.items()}

CANONICAL_TOKENS = tuple(_TOKENS.values())


def encode_state(state: Any) -> str:
    """Return the canonical token for `state`.

    Raises InvalidStateError for `PackageState.UNKNOWN` and for anything that
    is not a PackageState member (plain ints are not accepted).
    """
    if not isinstance(state, PackageState) or state not in _TOKENS:
        raise InvalidStateError(f"Cannot encode package state: {state!r}")
    return _TOKENS[state]


def decode_state(token: Optional[str]) -> PackageState:
    """Map a token back to a PackageState; UNKNOWN when absent or unrecognized."""
    if not isinstance(token, str):
        return PackageState.UNKNOWN
    return _STATES.get(token, PackageState.UNKNOWN)
