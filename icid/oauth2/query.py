"""
Generic OAuth 2.0 query-string parsing.

Authorization requests and access-token responses share one channel (the
redirect query string), so the message kind is decided from which fields are
present. The rule lives in ``from_query_string`` and nowhere else:

1. a non-empty ``access_token`` makes it an access-token response, even if
   ``login_hint`` is also present;
2. otherwise non-empty ``login_hint`` and ``redirect_uri`` make it an
   authorization request;
3. anything else is unrecognized and yields None.

This is stricter than classifying on key presence alone: an empty value
counts as absent, so a query with ``access_token=`` and a valid request is
read as the request.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Union

import httpx

from ..config import RESPONSE_TYPE_TOKEN
from ..errors import MalformedParameterError
from .types import OAuth2AccessTokenResponse, OAuth2AuthorizationRequest

logger = logging.getLogger(__name__)

QueryInput = Union[str, Mapping[str, str], httpx.QueryParams, httpx.URL]
OAuth2Message = Union[OAuth2AuthorizationRequest, OAuth2AccessTokenResponse]


def parse_query_params(query: QueryInput) -> httpx.QueryParams:
    """Normalize the accepted query inputs to QueryParams."""
    if isinstance(query, httpx.URL):
        return query.params
    if isinstance(query, str):
        return httpx.QueryParams(query[1:] if query.startswith("?") else query)
    return httpx.QueryParams(query)


def _parse_expires_in(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    if not (value.isascii() and value.isdigit()):
        raise MalformedParameterError("expires_in", value, "expected a decimal integer")
    return int(value)


def parse_access_token_response(params: httpx.QueryParams) -> Optional[OAuth2AccessTokenResponse]:
    """Read an access-token response, or None if access_token is missing."""
    access_token = params.get("access_token")
    if not access_token:
        return None
    return OAuth2AccessTokenResponse(
        access_token=access_token,
        token_type=params.get("token_type"),
        expires_in=_parse_expires_in(params.get("expires_in")),
        scope=params.get("scope"),
        state=params.get("state"),
    )


def parse_authorization_request(params: httpx.QueryParams) -> Optional[OAuth2AuthorizationRequest]:
    """Read an authorization request, or None if login_hint or redirect_uri is missing."""
    login_hint = params.get("login_hint")
    redirect_uri = params.get("redirect_uri")
    if not login_hint or not redirect_uri:
        return None
    return OAuth2AuthorizationRequest(
        login_hint=login_hint,
        redirect_uri=redirect_uri,
        response_type=params.get("response_type") or RESPONSE_TYPE_TOKEN,
        scope=params.get("scope"),
        state=params.get("state"),
    )


def from_query_string(query: QueryInput) -> Optional[OAuth2Message]:
    """Classify and parse an OAuth 2.0 message from redirect query parameters.

    Args:
        query: Raw query string, mapping, QueryParams, or a URL whose query is used

    Returns:
        An OAuth2AccessTokenResponse, an OAuth2AuthorizationRequest, or None
        when neither shape is recognized

    Raises:
        MalformedParameterError: If expires_in is present but not decimal
    """
    params = parse_query_params(query)

    response = parse_access_token_response(params)
    if response is not None:
        if "login_hint" in params:
            logger.debug("Query carries both access_token and login_hint, treating it as a response")
        return response

    request = parse_authorization_request(params)
    if request is not None:
        return request

    logger.debug(f"Unrecognized OAuth2 query parameters: {sorted(params.keys())}")
    return None


__all__ = [
    "QueryInput",
    "OAuth2Message",
    "parse_query_params",
    "parse_access_token_response",
    "parse_authorization_request",
    "from_query_string",
]
