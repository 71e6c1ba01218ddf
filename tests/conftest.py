import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from icid import SessionIdentity


@dataclass
class FakeDelegationChain:
    """Stands in for the identity subsystem's delegation chain."""
    public_key: str
    delegations: List[Dict[str, Any]]

    def to_json(self) -> Dict[str, Any]:
        return {"delegations": self.delegations, "publicKey": self.public_key}


def issue_delegation_chain(
    identity_key: Ed25519PrivateKey,
    session_identity: SessionIdentity,
    expires_in: int = 3600,
    targets: Optional[List[str]] = None,
) -> FakeDelegationChain:
    expiration_ns = (int(time.time()) + expires_in) * 1_000_000_000
    delegation: Dict[str, Any] = {
        "expiration": format(expiration_ns, "x"),
        "pubkey": session_identity.hex,
    }
    if targets is not None:
        delegation["targets"] = targets
    signature = identity_key.sign(bytes.fromhex(session_identity.hex) + expiration_ns.to_bytes(8, "big"))
    return FakeDelegationChain(
        public_key=SessionIdentity.from_public_key(identity_key.public_key()).hex,
        delegations=[{"delegation": delegation, "signature": signature.hex()}],
    )


@pytest.fixture
def session_key():
    return Ed25519PrivateKey.generate()


@pytest.fixture
def session_identity(session_key):
    return SessionIdentity.from_public_key(session_key.public_key())


@pytest.fixture
def identity_key():
    return Ed25519PrivateKey.generate()


@pytest.fixture
def issue_chain(identity_key):
    def _issue(session_identity, **kwargs):
        return issue_delegation_chain(identity_key, session_identity, **kwargs)
    return _issue


@pytest.fixture
def delegation_chain(issue_chain, session_identity):
    return issue_chain(session_identity)
