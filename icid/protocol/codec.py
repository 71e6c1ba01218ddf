"""
Translation between IC-ID messages and their OAuth 2.0 wire shapes.

IC-ID is a profile of OAuth 2.0: the mapping is a field rename plus a few
defaults. The rename tables are the contract between RPs and the identity
provider, so every field is mapped explicitly.
"""

import logging
from typing import Optional, Union

from ..config import RESPONSE_TYPE_TOKEN, TOKEN_TYPE_BEARER, ProtocolConfig
from ..errors import MalformedParameterError
from ..oauth2 import query as oauth2_query
from ..oauth2.types import OAuth2AccessTokenResponse, OAuth2AuthorizationRequest
from .types import AuthenticationRequest, AuthenticationResponse, SessionIdentity

logger = logging.getLogger(__name__)

Message = Union[AuthenticationRequest, AuthenticationResponse]


def to_oauth2(response: AuthenticationResponse) -> OAuth2AccessTokenResponse:
    """Convert an AuthenticationResponse to an OAuth2 access-token response."""
    return OAuth2AccessTokenResponse(
        access_token=response.access_token,
        expires_in=response.expires_in,
        token_type=response.token_type,
        state=response.state,
        scope=response.scope,
    )


def from_oauth2_response(
    message: OAuth2AccessTokenResponse,
    config: Optional[ProtocolConfig] = None,
) -> AuthenticationResponse:
    """Convert an OAuth2 access-token response to an AuthenticationResponse.

    A missing token_type defaults to bearer. token_type is case-insensitive
    on the wire (RFC 6749 section 5.1); anything other than bearer is rejected.

    Raises:
        MalformedParameterError: If token_type names another token type
    """
    config = config or ProtocolConfig()

    token_type = message.token_type or TOKEN_TYPE_BEARER
    if token_type.lower() != TOKEN_TYPE_BEARER:
        raise MalformedParameterError("token_type", token_type, "only bearer tokens are issued")

    expires_in = message.expires_in
    if expires_in is None:
        expires_in = config.default_expires_in

    return AuthenticationResponse(
        access_token=message.access_token,
        token_type=TOKEN_TYPE_BEARER,
        expires_in=expires_in,
        state=message.state,
        scope=message.scope,
    )


def to_oauth2_request(request: AuthenticationRequest) -> OAuth2AuthorizationRequest:
    """Convert an AuthenticationRequest to an OAuth2 authorization request."""
    return OAuth2AuthorizationRequest(
        response_type=RESPONSE_TYPE_TOKEN,
        login_hint=request.session_identity.hex,
        redirect_uri=request.redirect_uri,
        scope=request.scope,
        state=request.state,
    )


def from_oauth2_request(message: OAuth2AuthorizationRequest) -> AuthenticationRequest:
    """Convert an OAuth2 authorization request to an AuthenticationRequest.

    Raises:
        MalformedUrlError: If redirect_uri is not an absolute URL
    """
    logger.debug(f"Decoding authentication request: {message}")
    return AuthenticationRequest(
        session_identity=SessionIdentity(hex=message.login_hint),
        redirect_uri=message.redirect_uri,
        scope=message.scope or "",
        state=message.state,
    )


def from_query_string(
    query: oauth2_query.QueryInput,
    config: Optional[ProtocolConfig] = None,
) -> Optional[Message]:
    """Parse an IC-ID message from redirect query parameters.

    Returns:
        AuthenticationResponse if access_token is present, otherwise
        AuthenticationRequest if login_hint and redirect_uri are present,
        otherwise None
    """
    oauth2_message = oauth2_query.from_query_string(query)
    if oauth2_message is None:
        return None
    if isinstance(oauth2_message, OAuth2AccessTokenResponse):
        return from_oauth2_response(oauth2_message, config)
    return from_oauth2_request(oauth2_message)


__all__ = [
    "Message",
    "to_oauth2",
    "from_oauth2_response",
    "to_oauth2_request",
    "from_oauth2_request",
    "from_query_string",
]
