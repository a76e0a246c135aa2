"""
EIP712 Helper Functions
This module builds the exact byte layout that both the off-chain signer and
the verifier hash: domain separator, Minter struct hash and final digest.
"""

from typing import Any, Dict

from eth_abi import encode
from eth_utils import is_address, keccak, to_checksum_address

from .eip712_config import DOMAIN_TYPE, EIP712_PREFIX, MINTER_TYPE


def keccak256(data: bytes) -> bytes:
    """Compute keccak256 hash of data"""
    return keccak(data)


def type_hash(type_string: str) -> bytes:
    """Hash an EIP712 type string such as 'Minter(address wallet)'"""
    return keccak256(type_string.encode("utf-8"))


DOMAIN_TYPE_HASH = type_hash(DOMAIN_TYPE)
MINTER_TYPE_HASH = type_hash(MINTER_TYPE)


def normalize_address(address: str) -> str:
    """Return the checksum form of an address, rejecting anything else"""
    if not isinstance(address, str) or not is_address(address):
        raise ValueError(f"Invalid address: {address!r}")
    return to_checksum_address(address)


def compute_domain_separator(name: str, version: str, chain_id: int, verifying_contract: str) -> bytes:
    """Compute the EIP712 domain separator"""
    # abi.encode, not abi.encodePacked: every field occupies a full 32-byte word
    return keccak256(encode(
        ["bytes32", "bytes32", "bytes32", "uint256", "address"],
        [
            DOMAIN_TYPE_HASH,
            keccak256(name.encode("utf-8")),
            keccak256(version.encode("utf-8")),
            chain_id,
            normalize_address(verifying_contract),
        ],
    ))


def get_minter_struct_hash(wallet: str) -> bytes:
    """Compute the struct hash for Minter(address wallet)"""
    return keccak256(encode(
        ["bytes32", "address"],
        [MINTER_TYPE_HASH, normalize_address(wallet)],
    ))


def get_eip712_digest(domain_separator: bytes, struct_hash: bytes) -> bytes:
    """Compute the EIP712 digest: keccak256(0x1901 || domainSeparator || structHash)"""
    if len(domain_separator) != 32 or len(struct_hash) != 32:
        raise ValueError("Domain separator and struct hash must be 32 bytes each")
    return keccak256(EIP712_PREFIX + domain_separator + struct_hash)


def build_typed_data(name: str, version: str, chain_id: int, verifying_contract: str, wallet: str) -> Dict[str, Any]:
    """Build the full EIP712 typed-data document understood by wallets (eth_signTypedData_v4)"""
    return {
        "types": {
            "EIP712Domain": [
                {"name": "name", "type": "string"},
                {"name": "version", "type": "string"},
                {"name": "chainId", "type": "uint256"},
                {"name": "verifyingContract", "type": "address"},
            ],
            "Minter": [
                {"name": "wallet", "type": "address"},
            ],
        },
        "primaryType": "Minter",
        "domain": {
            "name": name,
            "version": version,
            "chainId": chain_id,
            "verifyingContract": normalize_address(verifying_contract),
        },
        "message": {
            "wallet": normalize_address(wallet),
        },
    }
