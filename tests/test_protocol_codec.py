import pytest
from cryptography.hazmat.primitives import serialization

from icid import (
    AuthenticationRequest,
    AuthenticationResponse,
    MalformedParameterError,
    MalformedUrlError,
    ProtocolConfig,
    SessionIdentity,
    from_oauth2_request,
    from_oauth2_response,
    from_query_string,
    to_oauth2,
    to_oauth2_request,
)
from icid.oauth2 import OAuth2AccessTokenResponse, OAuth2AuthorizationRequest


def make_request(**overrides):
    base = dict(
        session_identity=SessionIdentity(hex="deadbeef"),
        redirect_uri="https://rp.example/cb",
        scope="ryjl3-tyaaa-aaaaa-aaaba-cai",
        state="xyz",
    )
    base.update(overrides)
    return AuthenticationRequest(**base)


def make_response(**overrides):
    base = dict(access_token="ab12", expires_in=3600, state="xyz", scope="aaaaa-aa")
    base.update(overrides)
    return AuthenticationResponse(**base)


def test_decode_request_query_string():
    message = from_query_string(
        "login_hint=deadbeef&redirect_uri=https%3A%2F%2Frp.example%2Fcb&scope=aaaa%20bbbb&state=xyz"
    )
    assert isinstance(message, AuthenticationRequest)
    assert message.to_dict() == {
        "type": "AuthenticationRequest",
        "sessionIdentity": {"hex": "deadbeef"},
        "redirectUri": "https://rp.example/cb",
        "scope": "aaaa bbbb",
        "state": "xyz",
    }


def test_decode_response_query_string():
    message = from_query_string("access_token=ab12&expires_in=3600&token_type=bearer")
    assert isinstance(message, AuthenticationResponse)
    assert message.type == "AuthenticationResponse"
    assert message == AuthenticationResponse(access_token="ab12", expires_in=3600)


def test_classification_ignores_login_hint_when_access_token_present():
    message = from_query_string(
        {"access_token": "ab12", "login_hint": "deadbeef", "redirect_uri": "https://rp.example/cb"}
    )
    assert isinstance(message, AuthenticationResponse)
    assert message.access_token == "ab12"


def test_unrecognized_query_string():
    assert from_query_string("") is None
    assert from_query_string({"state": "xyz"}) is None


@pytest.mark.parametrize(
    "request_",
    [
        make_request(),
        make_request(state=None),
        make_request(scope=""),
        make_request(redirect_uri="https://rp.example/cb?session=1"),
    ],
)
def test_request_round_trip(request_):
    assert from_oauth2_request(to_oauth2_request(request_)) == request_


@pytest.mark.parametrize(
    "response",
    [
        make_response(),
        make_response(state=None, scope=None),
        make_response(expires_in=None),
    ],
)
def test_response_round_trip(response):
    assert from_oauth2_response(to_oauth2(response)) == response


def test_to_oauth2_renames_fields():
    message = to_oauth2(make_response(state=None))
    assert message == OAuth2AccessTokenResponse(
        access_token="ab12", token_type="bearer", expires_in=3600, state=None, scope="aaaaa-aa"
    )


def test_to_oauth2_request_fields():
    message = to_oauth2_request(make_request())
    assert message.response_type == "token"
    assert message.login_hint == "deadbeef"
    assert message.redirect_uri == "https://rp.example/cb"
    assert message.scope == "ryjl3-tyaaa-aaaaa-aaaba-cai"
    assert message.state == "xyz"


def test_missing_token_type_defaults_to_bearer():
    response = from_oauth2_response(OAuth2AccessTokenResponse(access_token="ab12", expires_in=10))
    assert response.token_type == "bearer"
    response = from_oauth2_response(OAuth2AccessTokenResponse(access_token="ab12", token_type=""))
    assert response.token_type == "bearer"


def test_token_type_is_case_insensitive():
    response = from_oauth2_response(OAuth2AccessTokenResponse(access_token="ab12", token_type="Bearer"))
    assert response.token_type == "bearer"


def test_other_token_types_rejected():
    with pytest.raises(MalformedParameterError):
        from_oauth2_response(OAuth2AccessTokenResponse(access_token="ab12", token_type="mac"))


def test_missing_expires_in_uses_config_default():
    message = OAuth2AccessTokenResponse(access_token="ab12")
    assert from_oauth2_response(message).expires_in is None
    assert from_oauth2_response(message, ProtocolConfig(default_expires_in=900)).expires_in == 900
    assert from_query_string("access_token=ab12", ProtocolConfig(default_expires_in=900)).expires_in == 900


def test_missing_scope_defaults_to_empty_string():
    request = from_oauth2_request(
        OAuth2AuthorizationRequest(login_hint="deadbeef", redirect_uri="https://rp.example/cb")
    )
    assert request.scope == ""
    assert request.state is None


def test_scope_and_state_pass_through_response():
    response = from_oauth2_response(
        OAuth2AccessTokenResponse(access_token="ab12", state="s", scope="aaaaa-aa")
    )
    assert response.state == "s"
    assert response.scope == "aaaaa-aa"


@pytest.mark.parametrize("redirect_uri", ["not a url", "/relative/cb", "rp.example/cb"])
def test_malformed_redirect_uri(redirect_uri):
    with pytest.raises(MalformedUrlError):
        from_oauth2_request(OAuth2AuthorizationRequest(login_hint="deadbeef", redirect_uri=redirect_uri))
    with pytest.raises(MalformedUrlError):
        make_request(redirect_uri=redirect_uri)


@pytest.mark.parametrize(
    "redirect_uri, expected",
    [
        ("HTTPS://RP.Example:443/cb", "https://rp.example/cb"),
        ("https://rp.example", "https://rp.example/"),
        ("https://rp.example?app=demo", "https://rp.example/?app=demo"),
    ],
)
def test_redirect_uri_is_stored_normalized(redirect_uri, expected):
    assert make_request(redirect_uri=redirect_uri).redirect_uri == expected
    request = from_oauth2_request(OAuth2AuthorizationRequest(login_hint="deadbeef", redirect_uri=redirect_uri))
    assert request.redirect_uri == expected


def test_malformed_redirect_uri_in_query_string():
    with pytest.raises(MalformedUrlError):
        from_query_string("login_hint=deadbeef&redirect_uri=%2Fcb")


def test_session_identity_public_key_round_trip(session_key, session_identity):
    assert session_identity.hex.startswith("302a300506032b6570032100")
    raw = (serialization.Encoding.Raw, serialization.PublicFormat.Raw)
    assert session_identity.public_key().public_bytes(*raw) == session_key.public_key().public_bytes(*raw)
