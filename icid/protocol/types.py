"""
Protocol-native message types for the IC-ID authentication protocol.

RPs build an AuthenticationRequest and send it to the identity provider; the
identity provider answers with an AuthenticationResponse whose access token
is an encoded delegation chain (see bearer.py). Each message class carries a
``type`` tag so decoded messages can be dispatched without duck-typing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.types import PublicKeyTypes

from ..config import TOKEN_TYPE_BEARER
from ..urls import normalize_url


@dataclass(frozen=True)
class SessionIdentity:
    """Session public key of the RP, hex-encoded DER."""
    hex: str

    @classmethod
    def from_public_key(cls, public_key: PublicKeyTypes) -> "SessionIdentity":
        der = public_key.public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        return cls(hex=der.hex())

    def public_key(self) -> PublicKeyTypes:
        """Load the session key (raises ValueError if hex is not a DER public key)."""
        return serialization.load_der_public_key(bytes.fromhex(self.hex))


@dataclass(frozen=True)
class AuthenticationRequest:
    """Request an RP sends to the identity provider.

    redirect_uri is normalized on construction; a value that is not an
    absolute URL raises MalformedUrlError.
    """
    type: ClassVar[str] = "AuthenticationRequest"

    session_identity: SessionIdentity
    redirect_uri: str
    scope: str = ""
    state: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "redirect_uri", normalize_url(self.redirect_uri))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "sessionIdentity": {"hex": self.session_identity.hex},
            "redirectUri": self.redirect_uri,
            "scope": self.scope,
            "state": self.state,
        }


@dataclass(frozen=True)
class AuthenticationResponse:
    """Response the identity provider redirects back to the RP."""
    type: ClassVar[str] = "AuthenticationResponse"

    access_token: str
    expires_in: Optional[int]
    token_type: str = TOKEN_TYPE_BEARER
    state: Optional[str] = None
    scope: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "accessToken": self.access_token,
            "tokenType": self.token_type,
            "expiresIn": self.expires_in,
            "state": self.state,
            "scope": self.scope,
        }


@dataclass(frozen=True)
class Delegation:
    """One delegation: a public key allowed to act until expiration."""
    expiration: str  # hex nanoseconds since the epoch
    pubkey: str      # hex DER public key
    targets: Optional[List[str]] = None

    @property
    def expiration_ns(self) -> int:
        return int(self.expiration, 16)

    def to_json(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"expiration": self.expiration, "pubkey": self.pubkey}
        if self.targets is not None:
            result["targets"] = list(self.targets)
        return result


@dataclass(frozen=True)
class SignedDelegation:
    delegation: Delegation
    signature: str

    def to_json(self) -> Dict[str, Any]:
        return {"delegation": self.delegation.to_json(), "signature": self.signature}


@dataclass(frozen=True)
class ParsedBearerToken:
    """Validated content of an IC-ID bearer token."""
    public_key: str
    delegations: List[SignedDelegation] = field(default_factory=list)

    def to_json(self) -> Dict[str, Any]:
        """Return the delegation-chain JSON shape this token was decoded from."""
        return {
            "delegations": [d.to_json() for d in self.delegations],
            "publicKey": self.public_key,
        }


@dataclass(frozen=True)
class CanisterScope:
    principal: Any


@dataclass(frozen=True)
class ParsedScopeString:
    canisters: List[CanisterScope] = field(default_factory=list)
