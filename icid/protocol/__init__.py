"""
IC-ID protocol: messages, codecs and redirect URL builders.

  - codec:    AuthenticationRequest/Response <-> OAuth2 shapes, query-string decoding
  - bearer:   delegation chain <-> hex bearer token
  - scope:    canister principals <-> space-delimited scope
  - redirect: request and response redirect URLs
"""

from .types import (
    SessionIdentity,
    AuthenticationRequest,
    AuthenticationResponse,
    Delegation,
    SignedDelegation,
    ParsedBearerToken,
    CanisterScope,
    ParsedScopeString,
)

from .codec import (
    Message,
    to_oauth2,
    from_oauth2_response,
    to_oauth2_request,
    from_oauth2_request,
    from_query_string,
)

from .bearer import (
    create_bearer_token,
    parse_bearer_token,
)

from .scope import (
    parse_scope_string,
    stringify_scope,
)

from .redirect import (
    create_authentication_request_url,
    create_response_redirect_url,
)

__all__ = [
    # Message types
    "SessionIdentity",
    "AuthenticationRequest",
    "AuthenticationResponse",
    "Message",
    "Delegation",
    "SignedDelegation",
    "ParsedBearerToken",
    "CanisterScope",
    "ParsedScopeString",

    # OAuth2 mapping
    "to_oauth2",
    "from_oauth2_response",
    "to_oauth2_request",
    "from_oauth2_request",
    "from_query_string",

    # Bearer tokens
    "create_bearer_token",
    "parse_bearer_token",

    # Scopes
    "parse_scope_string",
    "stringify_scope",

    # Redirects
    "create_authentication_request_url",
    "create_response_redirect_url",
]
