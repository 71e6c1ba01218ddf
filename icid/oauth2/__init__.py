"""
OAuth 2.0 message shapes and query-string parsing used as the IC-ID wire format.
"""

from .types import (
    OAuth2AuthorizationRequest,
    OAuth2AccessTokenResponse,
)

from .query import (
    QueryInput,
    OAuth2Message,
    parse_query_params,
    parse_access_token_response,
    parse_authorization_request,
    from_query_string,
)

__all__ = [
    # Wire shapes
    "OAuth2AuthorizationRequest",
    "OAuth2AccessTokenResponse",
    "OAuth2Message",

    # Parsing
    "QueryInput",
    "parse_query_params",
    "parse_access_token_response",
    "parse_authorization_request",
    "from_query_string",
]
