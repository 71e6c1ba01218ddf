"""
OAuth 2.0 wire shapes carried in redirect query strings.

Field names are the snake_case wire keys of RFC 6749. Absent optional fields
are None; ``items()`` reports them so callers can clear stale parameters, and
``to_query_params()`` leaves them out.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..config import RESPONSE_TYPE_TOKEN


@dataclass(frozen=True)
class OAuth2AuthorizationRequest:
    """Implicit-grant authorization request (RFC 6749 section 4.2.1)."""
    login_hint: str
    redirect_uri: str
    response_type: str = RESPONSE_TYPE_TOKEN
    scope: Optional[str] = None
    state: Optional[str] = None

    def items(self) -> List[Tuple[str, Optional[str]]]:
        return [
            ("response_type", self.response_type),
            ("login_hint", self.login_hint),
            ("redirect_uri", self.redirect_uri),
            ("scope", self.scope),
            ("state", self.state),
        ]

    def to_query_params(self) -> Dict[str, str]:
        return {key: value for key, value in self.items() if value is not None}


@dataclass(frozen=True)
class OAuth2AccessTokenResponse:
    """Access-token response delivered in a redirect (RFC 6749 section 4.2.2)."""
    access_token: str
    token_type: Optional[str] = None
    expires_in: Optional[int] = None
    scope: Optional[str] = None
    state: Optional[str] = None

    def items(self) -> List[Tuple[str, Optional[str]]]:
        expires_in = None if self.expires_in is None else str(self.expires_in)
        return [
            ("access_token", self.access_token),
            ("expires_in", expires_in),
            ("token_type", self.token_type),
            ("state", self.state),
            ("scope", self.scope),
        ]

    def to_query_params(self) -> Dict[str, str]:
        return {key: value for key, value in self.items() if value is not None}
