"""
Scope string codec.

Per OAuth2 the scope is a space-delimited list of strings. In IC-ID each
segment is the canonical text of a canister principal, e.g.
``"ryjl3-tyaaa-aaaaa-aaaba-cai rrkah-fqaaa-aaaaa-aaaaq-cai"``.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..config import ProtocolConfig
from ..errors import IdentifierParseError
from ..principal import DEFAULT_PRINCIPAL_CODEC, PrincipalCodec
from .types import CanisterScope, ParsedScopeString

logger = logging.getLogger(__name__)


def parse_scope_string(
    scope: str,
    codec: Optional[PrincipalCodec] = None,
    config: Optional[ProtocolConfig] = None,
) -> ParsedScopeString:
    """Parse an AuthenticationRequest scope into canister scopes.

    Empty segments are dropped and order is preserved. No bound is placed on
    the number of segments.

    Raises:
        IdentifierParseError: If a segment is not a valid principal text
    """
    codec = codec or DEFAULT_PRINCIPAL_CODEC
    config = config or ProtocolConfig()

    canisters = []
    for segment in scope.split():
        try:
            principal = codec.from_text(segment)
        except IdentifierParseError as e:
            if config.log_scope_errors:
                logger.error(f"Error decoding scope segment {segment!r} as principal text: {e}")
            raise
        canisters.append(CanisterScope(principal=principal))
    return ParsedScopeString(canisters=canisters)


def stringify_scope(scope: ParsedScopeString, codec: Optional[PrincipalCodec] = None) -> str:
    """Convert a ParsedScopeString back to its space-delimited form."""
    codec = codec or DEFAULT_PRINCIPAL_CODEC
    return " ".join(codec.to_text(cs.principal) for cs in scope.canisters)


__all__ = [
    "parse_scope_string",
    "stringify_scope",
]
