import httpx
import pytest

from icid import MalformedParameterError
from icid.oauth2 import (
    OAuth2AccessTokenResponse,
    OAuth2AuthorizationRequest,
    from_query_string,
    parse_query_params,
)


def test_access_token_only_is_response():
    message = from_query_string("access_token=ab12")
    assert isinstance(message, OAuth2AccessTokenResponse)
    assert message.access_token == "ab12"
    assert message.token_type is None
    assert message.expires_in is None
    assert message.state is None
    assert message.scope is None


def test_login_hint_and_redirect_uri_is_request():
    message = from_query_string({"login_hint": "deadbeef", "redirect_uri": "https://rp.example/cb"})
    assert isinstance(message, OAuth2AuthorizationRequest)
    assert message.login_hint == "deadbeef"
    assert message.redirect_uri == "https://rp.example/cb"
    assert message.response_type == "token"
    assert message.scope is None


def test_access_token_wins_over_login_hint():
    # Both kinds of fields on one query string: classified as a response,
    # the request fields are ignored.
    message = from_query_string(
        "access_token=ab12&login_hint=deadbeef&redirect_uri=https%3A%2F%2Frp.example%2Fcb"
    )
    assert isinstance(message, OAuth2AccessTokenResponse)
    assert message.access_token == "ab12"


@pytest.mark.parametrize(
    "query",
    [
        "",
        "?",
        "foo=1",
        "login_hint=deadbeef",
        "redirect_uri=https%3A%2F%2Frp.example%2Fcb",
        "access_token=",
        "login_hint=&redirect_uri=https%3A%2F%2Frp.example%2Fcb",
    ],
)
def test_unrecognized_queries(query):
    assert from_query_string(query) is None


def test_empty_access_token_falls_through_to_request():
    message = from_query_string("access_token=&login_hint=deadbeef&redirect_uri=https%3A%2F%2Frp.example%2Fcb")
    assert isinstance(message, OAuth2AuthorizationRequest)


def test_expires_in_parsed_as_integer():
    message = from_query_string("access_token=ab12&expires_in=3600&token_type=bearer&state=s1&scope=x")
    assert message == OAuth2AccessTokenResponse(
        access_token="ab12", token_type="bearer", expires_in=3600, scope="x", state="s1"
    )


@pytest.mark.parametrize("value", ["soon", "-1", "1.5", "\u0663", "\uff13\uff16"])
def test_malformed_expires_in(value):
    with pytest.raises(MalformedParameterError) as exc:
        from_query_string({"access_token": "ab12", "expires_in": value})
    assert exc.value.name == "expires_in"


def test_query_input_forms_are_equivalent():
    expected = from_query_string("login_hint=deadbeef&redirect_uri=https%3A%2F%2Frp.example%2Fcb&state=xyz")
    assert from_query_string("?login_hint=deadbeef&redirect_uri=https%3A%2F%2Frp.example%2Fcb&state=xyz") == expected
    assert from_query_string(httpx.URL(
        "https://idp.example/authorize?login_hint=deadbeef&redirect_uri=https%3A%2F%2Frp.example%2Fcb&state=xyz"
    )) == expected
    assert from_query_string(httpx.QueryParams(
        {"login_hint": "deadbeef", "redirect_uri": "https://rp.example/cb", "state": "xyz"}
    )) == expected


def test_parse_query_params_decodes_percent_and_plus():
    params = parse_query_params("scope=aaaa%20bbbb&state=a+b")
    assert params["scope"] == "aaaa bbbb"
    assert params["state"] == "a b"


def test_to_query_params_omits_absent_fields():
    request = OAuth2AuthorizationRequest(login_hint="deadbeef", redirect_uri="https://rp.example/cb")
    assert request.to_query_params() == {
        "response_type": "token",
        "login_hint": "deadbeef",
        "redirect_uri": "https://rp.example/cb",
    }
    response = OAuth2AccessTokenResponse(access_token="ab12", expires_in=60)
    assert response.to_query_params() == {"access_token": "ab12", "expires_in": "60"}
    assert ("state", None) in response.items()
