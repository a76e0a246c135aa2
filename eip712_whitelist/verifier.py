"""
Whitelist verification engine.

A trusted signer signs `Minter(address wallet)` off-chain for each wallet
allowed to perform a gated action. The verifier rebuilds the EIP712 digest
for the caller, recovers the signer and compares it to the configured
signing key.

Signing key states:

    Unset --set_signing_key(k)--> Active(k) --set_signing_key(k')--> Active(k')
    Active(k) --set_signing_key(ZERO_ADDRESS)--> Unset

Every transition is owner-only. While Unset, `is_signed` raises
SigningDisabled instead of returning False.
"""

import logging
import threading
from functools import wraps
from typing import Callable, Optional, Union

from eth_utils import decode_hex

from .domain import DomainContext
from .eip712_config import ZERO_ADDRESS
from .eip712_helpers import MINTER_TYPE_HASH, get_eip712_digest, get_minter_struct_hash, normalize_address
from .errors import InvalidSignature, RecoveryError, SigningDisabled
from .ownership import Ownable
from .recovery import EthAccountRecoverer, SignatureRecoverer

logger = logging.getLogger(__name__)

SignatureInput = Union[bytes, bytearray, str]


def _signature_bytes(signature: SignatureInput) -> bytes:
    if isinstance(signature, str):
        try:
            return decode_hex(signature)
        except ValueError as e:
            raise RecoveryError(f"Signature is not valid hex: {e}") from e
    return bytes(signature)


class WhitelistVerifier(Ownable):
    def __init__(self, domain: DomainContext, owner: str, recoverer: Optional[SignatureRecoverer] = None):
        super().__init__(owner)
        self._domain = domain
        self._recoverer = recoverer or EthAccountRecoverer()
        self._signing_key = ZERO_ADDRESS
        # Rotation and verification never interleave
        self._lock = threading.RLock()

    @property
    def domain(self) -> DomainContext:
        return self._domain

    @property
    def domain_separator(self) -> bytes:
        return self._domain.separator

    @property
    def type_hash(self) -> bytes:
        return MINTER_TYPE_HASH

    @property
    def signing_key(self) -> str:
        return self._signing_key

    @property
    def signing_enabled(self) -> bool:
        return self._signing_key != ZERO_ADDRESS

    def set_signing_key(self, caller: str, new_key: str) -> None:
        """Replace the trusted signer. ZERO_ADDRESS disables verification."""
        with self._lock:
            self.check_owner(caller)
            new_key = normalize_address(new_key)
            previous, self._signing_key = self._signing_key, new_key
        if new_key == ZERO_ADDRESS:
            logger.info("Signing disabled (previous key %s)", previous)
        else:
            logger.info("Signing key rotated from %s to %s", previous, new_key)

    def digest_for(self, wallet: str) -> bytes:
        """The digest a signer must sign to whitelist `wallet` in this domain"""
        return get_eip712_digest(self._domain.separator, get_minter_struct_hash(wallet))

    def is_signed(self, caller: str, signature: SignatureInput) -> bool:
        """
        Check that `signature` was produced by the signing key for `caller`.

        Returns False for any signature that does not recover to the signing
        key, including malformed ones.

        Raises:
            SigningDisabled: no signing key is configured.
            ValueError: `caller` is not an address.
        """
        with self._lock:
            signing_key = self._signing_key
            if signing_key == ZERO_ADDRESS:
                raise SigningDisabled()

            digest = self.digest_for(caller)
            try:
                recovered = self._recoverer.recover(digest, _signature_bytes(signature))
            except RecoveryError as e:
                logger.debug("Signature rejected for %s: %s", caller, e)
                return False

        if recovered.lower() != signing_key.lower():
            logger.debug("Signature for %s recovered to %s, expected %s", caller, recovered, signing_key)
            return False
        return True


def require_signed(verifier: WhitelistVerifier) -> Callable:
    """
    Guard an action so it only runs for callers holding a valid signature.

    The wrapped function is called as `func(caller, signature, *args, **kwargs)`.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(caller, signature, *args, **kwargs):
            if not verifier.is_signed(caller, signature):
                raise InvalidSignature(f"{caller} is not whitelisted")
            return func(caller, signature, *args, **kwargs)
        return wrapper
    return decorator
