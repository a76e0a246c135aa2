"""
Whitelist test vector generation.

Vectors carry every intermediate value (domain separator, struct hash,
digest, v/r/s) so a contract test suite can check its own encoding step by
step against the off-chain side.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List

from .signer import WhitelistSigner


def generate_vectors(signer: WhitelistSigner, wallets: Iterable[str]) -> List[Dict[str, Any]]:
    vectors = []
    for wallet in wallets:
        signed = signer.sign(wallet)
        vector = {"domain": signer.domain.to_dict()}
        vector.update(signed.to_dict())
        vectors.append(vector)
    return vectors


def write_vectors(path: Path, vectors: List[Dict[str, Any]]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump({"whitelist": vectors}, f, indent=2)


def load_vectors(path: Path) -> List[Dict[str, Any]]:
    with open(path, "r") as f:
        return json.load(f)["whitelist"]
