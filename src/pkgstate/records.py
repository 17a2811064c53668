from __future__ import annotations

import logging
from typing import Optional

from .codec import PackageState, decode_state, encode_state
from .models import PackageRecord, RegistryDocument


logger = logging.getLogger(__name__)


def find_by_name(document: RegistryDocument, name: str) -> Optional[PackageRecord]:
    """Return the first record whose pkgname equals `name`, or None."""
    for record in document.records():
        if record.pkgname == name:
            return record
    return None


def get_state(record: PackageRecord) -> PackageState:
    """Lenient read: a missing or unrecognized state yields PackageState.UNKNOWN."""
    return decode_state(record.state)


def set_state(record: PackageRecord, state: PackageState) -> None:
    """Encode `state` and store it on `record`.

    On InvalidStateError the record is left untouched.
    """
    token = encode_state(state)
    record.state = token
    logger.debug("%s: changed pkg state to '%s'", record.pkgname, token)
