import pytest
from eth_account import Account

from eip712_whitelist import DomainContext, WhitelistSigner, WhitelistVerifier

# Hardhat/Anvil default development keys
OWNER_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
SIGNER_KEY = "0x59c6995e998f97a5a0044966f0945389dc9e86dae88c7a8412f4603b6b78690d"
NEW_SIGNER_KEY = "0x5de4111afa1a4b94908f83103eb1f1706367c2e68ca870fc3fb9a804cdab365a"
ALICE_KEY = "0x7c852118294e51e653712a81e05800f419141751be58f605c371e15141b007a6"
BOB_KEY = "0x47e179ec197488593b187f80a00eb0da91f1b9d0b13f8733639f19c30a34926a"

ENV_KEYS = [
    "WHITELIST_DOMAIN_NAME",
    "WHITELIST_DOMAIN_VERSION",
    "CHAIN_ID",
    "RPC_URL",
    "VERIFYING_CONTRACT",
    "OWNER_ADDRESS",
    "SIGNER_PRIVATE_KEY",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment and .env values out of the tests."""
    for key in ENV_KEYS:
        # setenv first so the key is removed again on undo
        monkeypatch.setenv(key, "unset")
        monkeypatch.delenv(key)


@pytest.fixture
def owner():
    return Account.from_key(OWNER_KEY).address


@pytest.fixture
def alice():
    return Account.from_key(ALICE_KEY).address


@pytest.fixture
def bob():
    return Account.from_key(BOB_KEY).address


@pytest.fixture
def domain():
    return DomainContext(
        name="WhitelistToken",
        version="1",
        chain_id=31337,
        verifying_contract="0x5fbdb2315678afecb367f032d93f642f64180aa3",
    )


@pytest.fixture
def signer(domain):
    return WhitelistSigner(SIGNER_KEY, domain)


@pytest.fixture
def new_signer(domain):
    return WhitelistSigner(NEW_SIGNER_KEY, domain)


@pytest.fixture
def unset_verifier(domain, owner):
    return WhitelistVerifier(domain, owner=owner)


@pytest.fixture
def verifier(unset_verifier, owner, signer):
    unset_verifier.set_signing_key(owner, signer.address)
    return unset_verifier
