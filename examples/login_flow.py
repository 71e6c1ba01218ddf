#!/usr/bin/env python3
"""
Login Flow Example for IC-ID

This example walks both legs of an IC-ID login:
- RP builds an AuthenticationRequest and the identity provider URL
- Identity provider decodes it and answers with a bearer token
- RP decodes the response and the delegation chain

The identity subsystem is simulated with a freshly generated Ed25519 key.
"""

import logging
import time

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from icid import (
    AuthenticationRequest,
    AuthenticationResponse,
    IdentifierParseError,
    SessionIdentity,
    create_authentication_request_url,
    create_bearer_token,
    create_response_redirect_url,
    from_query_string,
    parse_bearer_token,
    parse_scope_string,
)


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def demo_rp_request(session_identity):
    """Build the URL an RP redirects the browser to."""
    print("\n=== RP: Authentication Request ===")

    request = AuthenticationRequest(
        session_identity=session_identity,
        redirect_uri="https://rp.example/callback",
        scope="ryjl3-tyaaa-aaaaa-aaaba-cai",
        state="demo-state",
    )
    url = create_authentication_request_url("https://identity.example/authorize", request)
    print(f"✓ Redirect to identity provider: {str(url)[:80]}...")
    return url


def demo_idp_response(url, identity_key):
    """Decode the request and answer it with a delegation chain."""
    print("\n=== Identity Provider: Authentication Response ===")

    request = from_query_string(url)
    print(f"✓ Decoded {request.type} for session {request.session_identity.hex[:16]}...")

    canisters = parse_scope_string(request.scope).canisters
    print(f"  Requested canisters: {[c.principal.to_text() for c in canisters]}")

    expiration_ns = (int(time.time()) + 3600) * 1_000_000_000
    signature = identity_key.sign(bytes.fromhex(request.session_identity.hex))
    chain = {
        "delegations": [
            {
                "delegation": {"expiration": format(expiration_ns, "x"), "pubkey": request.session_identity.hex},
                "signature": signature.hex(),
            }
        ],
        "publicKey": SessionIdentity.from_public_key(identity_key.public_key()).hex,
    }
    response = AuthenticationResponse(
        access_token=create_bearer_token(chain),
        expires_in=3600,
        state=request.state,
    )
    redirect = create_response_redirect_url(response, request.redirect_uri)
    print(f"✓ Redirect back to RP: {str(redirect)[:80]}...")
    return redirect


def demo_rp_callback(redirect):
    """Decode the response the RP receives."""
    print("\n=== RP: Callback ===")

    response = from_query_string(redirect)
    token = parse_bearer_token(response.access_token)
    print(f"✓ Decoded {response.type}, state={response.state}, expires_in={response.expires_in}")
    print(f"  Identity public key: {token.public_key[:24]}...")
    for signed in token.delegations:
        print(f"  Delegation to {signed.delegation.pubkey[:24]}... until {signed.delegation.expiration_ns} ns")


def demo_bad_scope():
    print("\n=== Malformed Scope ===")
    try:
        parse_scope_string("not-a-principal")
    except IdentifierParseError as e:
        print(f"✓ Rejected: {e}")


def main():
    """Run the login flow example."""
    print("IC-ID Login Flow Example")
    print("=" * 50)

    session_identity = SessionIdentity.from_public_key(Ed25519PrivateKey.generate().public_key())
    identity_key = Ed25519PrivateKey.generate()

    try:
        url = demo_rp_request(session_identity)
        redirect = demo_idp_response(url, identity_key)
        demo_rp_callback(redirect)
        demo_bad_scope()

        print("\n✓ Login flow completed successfully!")

    except Exception as e:
        print(f"\n✗ Demo failed: {e}")
        raise


if __name__ == "__main__":
    main()
