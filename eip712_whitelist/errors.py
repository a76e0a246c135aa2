"""
Error types raised by the whitelist verifier.

A signature that simply does not match is NOT an error: `is_signed` returns
False for it. These exceptions cover configuration and permission faults
that must abort the call.
"""


class WhitelistError(Exception):
    """Base class for all whitelist errors"""


class Unauthorized(WhitelistError):
    """Caller does not hold the owner role"""

    def __init__(self, caller: str):
        super().__init__(f"Caller {caller} is not the owner")
        self.caller = caller


class InvalidOwner(WhitelistError):
    """Ownership cannot be transferred to this address"""


class SigningDisabled(WhitelistError):
    """Verification attempted while no signing key is configured"""

    def __init__(self):
        super().__init__("Signing is disabled: no signing key configured")


class InvalidSignature(WhitelistError):
    """Raised by guarded actions when the caller's signature does not verify"""


class RecoveryError(WhitelistError):
    """The signature could not be recovered to an address"""


class ConfigurationError(WhitelistError):
    """Settings loaded from the environment are malformed"""
