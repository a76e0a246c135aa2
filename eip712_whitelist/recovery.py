"""
Signature recovery backends.

The verifier only needs "digest + signature -> address, or a failure".
`SignatureRecoverer` is that boundary; `EthAccountRecoverer` implements it
with eth_account and applies the same acceptance rules as on-chain ECDSA
recovery, so a signature accepted here is accepted by the contract too.
"""

import logging
from abc import ABC, abstractmethod
from typing import Tuple

from eth_account import Account

from .eip712_config import SIGNATURE_LENGTH, ZERO_ADDRESS
from .errors import RecoveryError

logger = logging.getLogger(__name__)

# Order of the secp256k1 curve
SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
SECP256K1_HALF_N = SECP256K1_N // 2


def split_signature(signature: bytes) -> Tuple[int, int, int]:
    """Split a 65-byte r || s || v signature into (v, r, s)"""
    if len(signature) != SIGNATURE_LENGTH:
        raise RecoveryError(f"Signature must be {SIGNATURE_LENGTH} bytes, got {len(signature)}")
    r = int.from_bytes(signature[0:32], "big")
    s = int.from_bytes(signature[32:64], "big")
    v = signature[64]
    return v, r, s


class SignatureRecoverer(ABC):
    """Recovers the address that produced a signature over a digest."""

    @abstractmethod
    def recover(self, digest: bytes, signature: bytes) -> str:
        """
        Return the checksum address that signed `digest`.

        Raises:
            RecoveryError: the signature is malformed or does not recover.
        """


class EthAccountRecoverer(SignatureRecoverer):
    """ECDSA secp256k1 recovery backed by eth_account."""

    def recover(self, digest: bytes, signature: bytes) -> str:
        if len(digest) != 32:
            raise RecoveryError(f"Digest must be 32 bytes, got {len(digest)}")

        v, r, s = split_signature(bytes(signature))
        if v not in (27, 28):
            raise RecoveryError(f"Invalid signature v value: {v}")
        if s > SECP256K1_HALF_N:
            # Malleable form of another valid signature
            raise RecoveryError("Invalid signature s value")
        if r == 0 or s == 0:
            raise RecoveryError("Invalid signature: zero r or s")

        try:
            recovered = Account._recover_hash(digest, vrs=(v - 27, r, s))
        except Exception as e:
            raise RecoveryError(f"Error recovering address: {e}") from e

        if recovered == ZERO_ADDRESS:
            raise RecoveryError("Signature recovered to the zero address")
        return recovered
