"""
Redirect URL construction for both legs of the IC-ID flow.

Both builders go through ``apply_query_params``: a field with a value sets
(or overwrites) its parameter, an absent field removes it. An absent state is
therefore never written as a literal placeholder.
"""

import logging

import httpx

from ..urls import URLInput, apply_query_params, parse_absolute_url
from .codec import to_oauth2, to_oauth2_request
from .types import AuthenticationRequest, AuthenticationResponse

logger = logging.getLogger(__name__)


def create_authentication_request_url(
    identity_provider_url: URLInput,
    request: AuthenticationRequest,
) -> httpx.URL:
    """Create a full URL to submit an AuthenticationRequest to an identity provider.

    Args:
        identity_provider_url: Authorization endpoint of the identity provider
        request: Request built by the RP

    Returns:
        Copy of identity_provider_url carrying the OAuth2 authorization request

    Raises:
        MalformedUrlError: If identity_provider_url is not an absolute URL
    """
    url = parse_absolute_url(identity_provider_url)
    url = apply_query_params(url, to_oauth2_request(request).items())
    logger.debug(f"Built authentication request URL for {url.host}")
    return url


def create_response_redirect_url(
    response: AuthenticationResponse,
    request_redirect_uri: URLInput,
) -> httpx.URL:
    """Create the URL that delivers an AuthenticationResponse to the RP.

    Query parameters already on request_redirect_uri are kept unless the
    response names them.

    Raises:
        MalformedUrlError: If request_redirect_uri is not an absolute URL
    """
    url = parse_absolute_url(request_redirect_uri)
    return apply_query_params(url, to_oauth2(response).items())


__all__ = [
    "create_authentication_request_url",
    "create_response_redirect_url",
]
