"""
Domain context for whitelist signatures.

The domain separator binds every signature to one (name, version, chain id,
verifying contract) tuple. It is computed once when the context is built and
never recomputed, so a different deployment or network rejects the signature.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from web3 import Web3

from .eip712_config import CHAIN_ID, Settings
from .eip712_helpers import compute_domain_separator, normalize_address
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DomainContext:
    name: str
    version: str
    chain_id: int
    verifying_contract: str
    separator: bytes = field(init=False, repr=False)

    def __post_init__(self):
        if self.chain_id < 0:
            raise ValueError(f"Chain id must not be negative: {self.chain_id}")
        contract = normalize_address(self.verifying_contract)
        object.__setattr__(self, "verifying_contract", contract)
        object.__setattr__(
            self,
            "separator",
            compute_domain_separator(self.name, self.version, self.chain_id, contract),
        )

    @classmethod
    def from_settings(cls, settings: Settings, chain_id: Optional[int] = None) -> "DomainContext":
        if chain_id is None:
            chain_id = resolve_chain_id(settings.rpc_url, default=settings.chain_id)
        return cls(
            name=settings.domain_name,
            version=settings.domain_version,
            chain_id=chain_id,
            verifying_contract=settings.verifying_contract,
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "version": self.version,
            "chainId": self.chain_id,
            "verifyingContract": self.verifying_contract,
            "domainSeparator": "0x" + self.separator.hex(),
        }


def resolve_chain_id(rpc_url: Optional[str] = None, default: Optional[int] = None) -> int:
    """Read the network identifier from the node when an RPC URL is configured"""
    if not rpc_url:
        return CHAIN_ID if default is None else default

    w3 = Web3(Web3.HTTPProvider(rpc_url))
    try:
        chain_id = w3.eth.chain_id
    except Exception as e:
        raise ConfigurationError(f"Could not read chain id from {rpc_url}: {e}") from e
    logger.info("Resolved chain id %d from %s", chain_id, rpc_url)
    return chain_id
