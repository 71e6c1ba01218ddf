"""
IC-ID Python Package

Codecs for the HTTP-based Internet Computer Identity protocol, a profile of
OAuth 2.0 carried in redirect query strings.
"""

__version__ = "0.1.0"

from .config import ProtocolConfig
from .errors import (
    ProtocolError,
    MalformedUrlError,
    ValidationError,
    MalformedTokenError,
    IdentifierParseError,
    MalformedParameterError,
)
from .principal import Principal, PrincipalCodec, TextPrincipalCodec
from .protocol import (
    SessionIdentity,
    AuthenticationRequest,
    AuthenticationResponse,
    ParsedBearerToken,
    ParsedScopeString,
    CanisterScope,
    to_oauth2,
    from_oauth2_response,
    to_oauth2_request,
    from_oauth2_request,
    from_query_string,
    create_bearer_token,
    parse_bearer_token,
    parse_scope_string,
    stringify_scope,
    create_authentication_request_url,
    create_response_redirect_url,
)

# Import oauth2 package
from . import oauth2

__all__ = [
    "ProtocolConfig",
    "ProtocolError",
    "MalformedUrlError",
    "ValidationError",
    "MalformedTokenError",
    "IdentifierParseError",
    "MalformedParameterError",
    "Principal",
    "PrincipalCodec",
    "TextPrincipalCodec",
    "SessionIdentity",
    "AuthenticationRequest",
    "AuthenticationResponse",
    "ParsedBearerToken",
    "ParsedScopeString",
    "CanisterScope",
    "to_oauth2",
    "from_oauth2_response",
    "to_oauth2_request",
    "from_oauth2_request",
    "from_query_string",
    "create_bearer_token",
    "parse_bearer_token",
    "parse_scope_string",
    "stringify_scope",
    "create_authentication_request_url",
    "create_response_redirect_url",
    "oauth2",
]
