"""EIP712 signature-gated whitelist: off-chain signing, verification and key rotation."""

from .domain import DomainContext, resolve_chain_id
from .eip712_config import ZERO_ADDRESS, Settings, load_settings
from .errors import (
    ConfigurationError,
    InvalidOwner,
    InvalidSignature,
    RecoveryError,
    SigningDisabled,
    Unauthorized,
    WhitelistError,
)
from .recovery import EthAccountRecoverer, SignatureRecoverer
from .signer import SignedWhitelist, WhitelistSigner
from .verifier import WhitelistVerifier, require_signed

__all__ = [
    "ConfigurationError",
    "DomainContext",
    "EthAccountRecoverer",
    "InvalidOwner",
    "InvalidSignature",
    "RecoveryError",
    "Settings",
    "SignatureRecoverer",
    "SignedWhitelist",
    "SigningDisabled",
    "Unauthorized",
    "WhitelistError",
    "WhitelistSigner",
    "WhitelistVerifier",
    "ZERO_ADDRESS",
    "load_settings",
    "require_signed",
    "resolve_chain_id",
]
