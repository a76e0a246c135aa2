# EIP712 Domain Configuration
# This file contains the domain and type values used for whitelist signing.
# The off-chain signer and the verifier must agree on every value here.

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from eth_utils import is_address, to_checksum_address

from .errors import ConfigurationError

# Domain parameters
DOMAIN_NAME = "WhitelistToken"
DOMAIN_VERSION = "1"
CHAIN_ID = 31337  # Local devnet
VERIFYING_CONTRACT = to_checksum_address("0x5fbdb2315678afecb367f032d93f642f64180aa3")  # First devnet deployment

# Sentinel for "no signing key configured"
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# EIP712 type strings
DOMAIN_TYPE = "EIP712Domain(string name,string version,uint256 chainId,address verifyingContract)"
MINTER_TYPE = "Minter(address wallet)"

# Structured signing prefix: 0x19 followed by the EIP-712 version byte
EIP712_PREFIX = b"\x19\x01"

# Fixed length of a recoverable ECDSA signature: r (32) + s (32) + v (1)
SIGNATURE_LENGTH = 65

# The domain separator is computed as:
# keccak256(abi.encode(
#     keccak256(DOMAIN_TYPE),
#     keccak256(bytes(DOMAIN_NAME)),
#     keccak256(bytes(DOMAIN_VERSION)),
#     CHAIN_ID,
#     VERIFYING_CONTRACT
# ))


@dataclass(frozen=True)
class Settings:
    domain_name: str = DOMAIN_NAME
    domain_version: str = DOMAIN_VERSION
    chain_id: int = CHAIN_ID
    verifying_contract: str = VERIFYING_CONTRACT
    rpc_url: Optional[str] = None
    owner_address: Optional[str] = None
    signer_private_key: Optional[str] = None


def _env_address(name: str, default: Optional[str]) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        return default
    if not is_address(value):
        raise ConfigurationError(f"{name} is not a valid address: {value!r}")
    return to_checksum_address(value)


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Load settings from a .env file and the process environment"""
    load_dotenv(env_file)

    raw_chain_id = os.getenv("CHAIN_ID")
    try:
        chain_id = int(raw_chain_id, 0) if raw_chain_id else CHAIN_ID
    except ValueError:
        raise ConfigurationError(f"CHAIN_ID is not an integer: {raw_chain_id!r}")
    if chain_id < 0:
        raise ConfigurationError(f"CHAIN_ID must not be negative: {chain_id}")

    return Settings(
        domain_name=os.getenv("WHITELIST_DOMAIN_NAME", DOMAIN_NAME),
        domain_version=os.getenv("WHITELIST_DOMAIN_VERSION", DOMAIN_VERSION),
        chain_id=chain_id,
        verifying_contract=_env_address("VERIFYING_CONTRACT", VERIFYING_CONTRACT),
        rpc_url=os.getenv("RPC_URL") or None,
        owner_address=_env_address("OWNER_ADDRESS", None),
        signer_private_key=os.getenv("SIGNER_PRIVATE_KEY") or None,
    )
