#!/usr/bin/env python3
"""
Command line tools for whitelist signatures.

    eip712-whitelist domain
    eip712-whitelist keygen
    eip712-whitelist sign --wallet 0x...
    eip712-whitelist verify --wallet 0x... --signature 0x... --signer 0x...
    eip712-whitelist vectors --out test_vectors/whitelist_vectors.json

Domain values come from the environment (see eip712_config.load_settings)
and can be overridden with --chain-id / --contract.
"""

import argparse
import logging
import sys
from pathlib import Path

from eth_utils import to_hex

from .domain import DomainContext
from .eip712_config import load_settings
from .eip712_helpers import MINTER_TYPE_HASH
from .errors import SigningDisabled, WhitelistError
from .signer import WhitelistSigner, generate_eth_keypair
from .vectors import generate_vectors, write_vectors
from .verifier import WhitelistVerifier

# Hardhat/Anvil default development accounts, used as vector actors
DEFAULT_ACTORS = {
    "alice": "0x70997970c51812dc3a010c7d01b50e0d17dc79c8",
    "bob": "0x3c44cdddb6a900fa2b585dd299e03d12fa4293bc",
    "charlie": "0x90f79bf6eb2c4f870365e785982e1f101e93b906",
    "danielle": "0x15d34aaf54267db7d7c367839aaf71a00a2c6a65",
}


def build_domain(args) -> DomainContext:
    settings = load_settings(args.env_file)
    domain = DomainContext.from_settings(settings, chain_id=args.chain_id)
    if args.contract:
        domain = DomainContext(domain.name, domain.version, domain.chain_id, args.contract)
    return domain


def require_private_key(args) -> str:
    private_key = args.private_key or load_settings(args.env_file).signer_private_key
    if not private_key:
        print("❌ No signer private key: pass --private-key or set SIGNER_PRIVATE_KEY")
        sys.exit(1)
    return private_key


def cmd_domain(args) -> int:
    domain = build_domain(args)
    print("Computing domain separator...")
    print(f"Name: {domain.name}")
    print(f"Version: {domain.version}")
    print(f"Chain ID: {domain.chain_id}")
    print(f"Verifying contract: {domain.verifying_contract}")
    print(f"\nDomain Separator: {to_hex(domain.separator)}")
    print(f"Minter type hash: {to_hex(MINTER_TYPE_HASH)}")
    return 0


def cmd_keygen(args) -> int:
    keypair = generate_eth_keypair()
    print(f"Address: {keypair['address']}")
    print(f"Private Key: {keypair['private_key']}")
    print("⚠️  Remember: this is a real private key - keep it secure!")
    return 0


def cmd_sign(args) -> int:
    signer = WhitelistSigner(require_private_key(args), build_domain(args))
    signed = signer.sign(args.wallet)
    print(f"Signer: {signed.signer}")
    print(f"Wallet: {signed.wallet}")
    print(f"Digest: {to_hex(signed.digest)}")
    print(f"Signature: {to_hex(signed.signature)}")
    return 0


def cmd_verify(args) -> int:
    domain = build_domain(args)
    # Owner only matters for rotation; any non-zero address will do here
    owner = load_settings(args.env_file).owner_address or generate_eth_keypair()["address"]
    verifier = WhitelistVerifier(domain, owner=owner)
    verifier.set_signing_key(owner, args.signer)
    try:
        valid = verifier.is_signed(args.wallet, args.signature)
    except SigningDisabled as e:
        print(f"❌ {e}")
        return 1

    if valid:
        print(f"✅ SIGNATURE IS VALID - {args.wallet} is whitelisted by {verifier.signing_key}")
        return 0
    print(f"❌ SIGNATURE IS INVALID - not signed by {verifier.signing_key} for {args.wallet}")
    return 1


def cmd_vectors(args) -> int:
    signer = WhitelistSigner(require_private_key(args), build_domain(args))
    wallets = args.wallet or list(DEFAULT_ACTORS.values())
    vectors = generate_vectors(signer, wallets)
    write_vectors(Path(args.out), vectors)
    print(f"✅ Generated {len(vectors)} whitelist vectors")
    print(f"✅ Wrote {args.out}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="EIP712 whitelist signing and verification")
    parser.add_argument("--env-file", default=None, help="Path to a .env file")
    parser.add_argument("--chain-id", type=int, default=None, help="Override the chain id")
    parser.add_argument("--contract", default=None, help="Override the verifying contract address")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("domain", help="Print the domain separator and type hash")
    p.set_defaults(func=cmd_domain)

    p = subparsers.add_parser("keygen", help="Generate a new signer keypair")
    p.set_defaults(func=cmd_keygen)

    p = subparsers.add_parser("sign", help="Sign a whitelist entry for a wallet")
    p.add_argument("--wallet", required=True)
    p.add_argument("--private-key", default=None)
    p.set_defaults(func=cmd_sign)

    p = subparsers.add_parser("verify", help="Verify a wallet's whitelist signature")
    p.add_argument("--wallet", required=True)
    p.add_argument("--signature", required=True)
    p.add_argument("--signer", required=True, help="Expected signing key address")
    p.set_defaults(func=cmd_verify)

    p = subparsers.add_parser("vectors", help="Write whitelist test vectors as JSON")
    p.add_argument("--out", default="test_vectors/whitelist_vectors.json")
    p.add_argument("--wallet", action="append", help="Wallet to sign (repeatable)")
    p.add_argument("--private-key", default=None)
    p.set_defaults(func=cmd_vectors)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (WhitelistError, ValueError) as e:
        print(f"❌ Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
