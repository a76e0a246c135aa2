"""
Off-chain signer for whitelist entries.

Produces the signature a whitelisted wallet later presents to the verifier.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict

from eth_account import Account
from eth_utils import to_hex

from .domain import DomainContext
from .eip712_helpers import get_eip712_digest, get_minter_struct_hash, normalize_address

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignedWhitelist:
    wallet: str
    signer: str
    struct_hash: bytes
    digest: bytes
    v: int
    r: int
    s: int
    signature: bytes

    def to_dict(self) -> Dict[str, Any]:
        return {
            "wallet": self.wallet,
            "signer": self.signer,
            "struct_hash": to_hex(self.struct_hash),
            "digest": to_hex(self.digest),
            "v": self.v,
            "r": self.r,
            "s": self.s,
            "signature": to_hex(self.signature),
        }


def generate_eth_keypair() -> Dict[str, str]:
    """Generate a new ETH private key and address"""
    account = Account.create()
    return {
        "private_key": to_hex(account.key),
        "address": account.address,
    }


class WhitelistSigner:
    def __init__(self, private_key: str, domain: DomainContext):
        self._account = Account.from_key(private_key)
        self.domain = domain

    @property
    def address(self) -> str:
        return self._account.address

    def sign(self, wallet: str) -> SignedWhitelist:
        """Sign Minter(wallet) in this signer's domain"""
        wallet = normalize_address(wallet)
        struct_hash = get_minter_struct_hash(wallet)
        digest = get_eip712_digest(self.domain.separator, struct_hash)

        signed_message = Account.unsafe_sign_hash(digest, self._account.key)
        logger.debug("Signed whitelist entry for %s with %s", wallet, self.address)

        return SignedWhitelist(
            wallet=wallet,
            signer=self.address,
            struct_hash=struct_hash,
            digest=digest,
            v=signed_message.v,
            r=signed_message.r,
            s=signed_message.s,
            signature=bytes(signed_message.signature),
        )
