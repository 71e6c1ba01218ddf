"""
Bearer token codec.

The access token of an AuthenticationResponse is a delegation chain
serialized as JSON, encoded as UTF-8 and then hex:

    delegation_chain.to_json() | json.dumps | utf-8 | hex

Decoding reverses the pipeline and narrows the result to ParsedBearerToken.
Only the narrowed, validated object is returned; keys outside the known shape
are dropped. Signatures are carried, not verified.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, List, Optional

from ..errors import MalformedTokenError, ValidationError
from .types import Delegation, ParsedBearerToken, SignedDelegation

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def create_bearer_token(delegation_chain: Any) -> str:
    """Create a bearer token encoding the result of IC authentication.

    Args:
        delegation_chain: Object exposing ``to_json()`` (e.g. a delegation chain
            from the identity subsystem, or a ParsedBearerToken), or plain
            JSON-serializable data

    Returns:
        Lowercase hex string of the UTF-8 JSON text
    """
    to_json = getattr(delegation_chain, "to_json", None)
    value = to_json() if callable(to_json) else delegation_chain
    text = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return text.encode("utf-8").hex()


def _decode_json(token: str) -> Any:
    # bytes.fromhex skips whitespace
    if not isinstance(token, str) or not _HEX_RE.fullmatch(token):
        raise MalformedTokenError("bearer token is not hex")
    try:
        data = bytes.fromhex(token)
    except (TypeError, ValueError) as e:
        raise MalformedTokenError(f"bearer token is not hex: {e}") from e
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedTokenError(f"bearer token is not UTF-8: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedTokenError(f"bearer token is not JSON: {e}") from e


def _parse_targets(index: int, targets: Any) -> Optional[List[str]]:
    if targets is None:
        return None
    if not isinstance(targets, list) or not all(isinstance(t, str) for t in targets):
        raise ValidationError(f"delegations[{index}].delegation.targets must be a list of strings")
    return list(targets)


def _parse_signed_delegation(index: int, entry: Any) -> SignedDelegation:
    if not isinstance(entry, dict):
        raise ValidationError(f"delegations[{index}] must be an object")
    delegation = entry.get("delegation")
    if not isinstance(delegation, dict):
        raise ValidationError(f"delegations[{index}].delegation must be an object")
    for key in ("expiration", "pubkey"):
        if not isinstance(delegation.get(key), str):
            raise ValidationError(f"delegations[{index}].delegation.{key} must be a string")
    signature = entry.get("signature")
    if not isinstance(signature, str):
        raise ValidationError(f"delegations[{index}].signature must be a string")

    return SignedDelegation(
        delegation=Delegation(
            expiration=delegation["expiration"],
            pubkey=delegation["pubkey"],
            targets=_parse_targets(index, delegation.get("targets")),
        ),
        signature=signature,
    )


def parse_bearer_token(token: str) -> ParsedBearerToken:
    """Parse a bearer token from an IC-ID access-token response.

    Args:
        token: Hex-encoded UTF-8 JSON produced by create_bearer_token

    Returns:
        The validated ParsedBearerToken

    Raises:
        MalformedTokenError: If the token is not hex, UTF-8 or JSON
        ValidationError: If publicKey is not a string, delegations is missing,
            or a delegation entry does not have the expected shape
    """
    parsed = _decode_json(token)
    if not isinstance(parsed, dict):
        raise ValidationError("bearer token must encode a JSON object")

    public_key = parsed.get("publicKey")
    if not isinstance(public_key, str):
        raise ValidationError("publicKey must be a string")
    delegations = parsed.get("delegations")
    if delegations is None:
        raise ValidationError("delegations required")
    if not isinstance(delegations, list):
        raise ValidationError("delegations must be a list")

    result = ParsedBearerToken(
        public_key=public_key,
        delegations=[_parse_signed_delegation(i, entry) for i, entry in enumerate(delegations)],
    )
    logger.debug(f"Parsed bearer token with {len(result.delegations)} delegation(s)")
    return result


__all__ = [
    "create_bearer_token",
    "parse_bearer_token",
]
