"""
Tests for the off-chain signer and whitelist test vectors.
"""
from eth_account import Account
from eth_utils import to_hex

from eip712_whitelist.eip712_helpers import get_eip712_digest, get_minter_struct_hash
from eip712_whitelist.recovery import SECP256K1_HALF_N
from eip712_whitelist.signer import generate_eth_keypair
from eip712_whitelist.vectors import generate_vectors, load_vectors, write_vectors

from conftest import SIGNER_KEY


def test_signer_address(signer):
    assert signer.address == Account.from_key(SIGNER_KEY).address


def test_signed_whitelist_fields(signer, domain, alice):
    signed = signer.sign(alice.lower())
    assert signed.wallet == alice
    assert signed.signer == signer.address
    assert signed.struct_hash == get_minter_struct_hash(alice)
    assert signed.digest == get_eip712_digest(domain.separator, signed.struct_hash)
    assert signed.signature == signed.r.to_bytes(32, "big") + signed.s.to_bytes(32, "big") + bytes([signed.v])
    assert signed.v in (27, 28)
    assert signed.s <= SECP256K1_HALF_N


def test_signing_is_deterministic(signer, alice):
    assert signer.sign(alice).signature == signer.sign(alice).signature


def test_generate_eth_keypair():
    keypair = generate_eth_keypair()
    assert Account.from_key(keypair["private_key"]).address == keypair["address"]


def test_vectors_round_trip_through_json(tmp_path, signer, verifier, alice, bob):
    vectors = generate_vectors(signer, [alice, bob])
    path = tmp_path / "vectors" / "whitelist_vectors.json"
    write_vectors(path, vectors)

    loaded = load_vectors(path)
    assert loaded == vectors
    assert [v["wallet"] for v in loaded] == [alice, bob]
    for vector in loaded:
        assert vector["signer"] == signer.address
        assert vector["domain"]["domainSeparator"] == to_hex(signer.domain.separator)
        assert verifier.is_signed(vector["wallet"], vector["signature"])
