"""Single-owner permission check, modelled on the usual Ownable contract."""

import logging

from eth_utils import is_address, to_checksum_address

from .eip712_config import ZERO_ADDRESS
from .eip712_helpers import normalize_address
from .errors import InvalidOwner, Unauthorized

logger = logging.getLogger(__name__)


class Ownable:
    def __init__(self, owner: str):
        owner = normalize_address(owner)
        if owner == ZERO_ADDRESS:
            raise InvalidOwner("Owner cannot be the zero address")
        self._owner = owner
        logger.info("Ownership assigned to %s", owner)

    @property
    def owner(self) -> str:
        return self._owner

    def check_owner(self, caller: str) -> None:
        """Raise Unauthorized unless `caller` is the current owner"""
        if self._owner == ZERO_ADDRESS or not is_address(caller) or to_checksum_address(caller) != self._owner:
            raise Unauthorized(caller)

    def transfer_ownership(self, caller: str, new_owner: str) -> None:
        self.check_owner(caller)
        new_owner = normalize_address(new_owner)
        if new_owner == ZERO_ADDRESS:
            raise InvalidOwner("New owner is the zero address; use renounce_ownership")
        previous, self._owner = self._owner, new_owner
        logger.info("Ownership transferred from %s to %s", previous, new_owner)

    def renounce_ownership(self, caller: str) -> None:
        """Leave the system without an owner. Owner-only operations become unreachable."""
        self.check_owner(caller)
        previous, self._owner = self._owner, ZERO_ADDRESS
        logger.info("Ownership renounced by %s", previous)
