"""
Tests for the owner permission check.
"""
import pytest

from eip712_whitelist import ZERO_ADDRESS, InvalidOwner, Unauthorized
from eip712_whitelist.ownership import Ownable


def test_owner_is_checksummed(owner):
    assert Ownable(owner.lower()).owner == owner


def test_zero_owner_rejected():
    with pytest.raises(InvalidOwner):
        Ownable(ZERO_ADDRESS)


def test_check_owner(owner, alice):
    ownable = Ownable(owner)
    ownable.check_owner(owner.lower())
    with pytest.raises(Unauthorized) as excinfo:
        ownable.check_owner(alice)
    assert excinfo.value.caller == alice


def test_transfer_ownership(owner, alice):
    ownable = Ownable(owner)
    ownable.transfer_ownership(owner, alice)
    assert ownable.owner == alice
    with pytest.raises(Unauthorized):
        ownable.check_owner(owner)


def test_transfer_ownership_requires_owner(owner, alice, bob):
    ownable = Ownable(owner)
    with pytest.raises(Unauthorized):
        ownable.transfer_ownership(alice, bob)
    assert ownable.owner == owner


def test_transfer_to_zero_rejected(owner):
    ownable = Ownable(owner)
    with pytest.raises(InvalidOwner):
        ownable.transfer_ownership(owner, ZERO_ADDRESS)
    assert ownable.owner == owner


def test_renounce_locks_owner_operations(verifier, owner, new_signer, signer):
    verifier.renounce_ownership(owner)
    assert verifier.owner == ZERO_ADDRESS
    with pytest.raises(Unauthorized):
        verifier.set_signing_key(owner, new_signer.address)
    with pytest.raises(Unauthorized):
        verifier.set_signing_key(ZERO_ADDRESS, new_signer.address)
    assert verifier.signing_key == signer.address


def test_new_owner_can_rotate(verifier, owner, alice, new_signer):
    verifier.transfer_ownership(owner, alice)
    verifier.set_signing_key(alice, new_signer.address)
    assert verifier.signing_key == new_signer.address


@pytest.mark.parametrize("caller", ["0x1234", "garbage", None])
def test_malformed_caller_is_not_owner(owner, caller):
    with pytest.raises(Unauthorized):
        Ownable(owner).check_owner(caller)
