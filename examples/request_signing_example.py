#!/usr/bin/env python3
"""
API Headers SDK - Request Signing Example

This example shows how to generate HMAC-SHA256 authentication headers for
API calls, both directly and through a requests session.
"""

import json

import requests

from api_headers_sdk import (
    HeadersAuth,
    HeadersSigner,
    SigningOptions,
    create_signing_config,
    create_signer,
    generate_headers,
    generate_salt,
    generate_timestamp,
)


def basic_signing_example():
    """Sign a request body and print the headers"""
    print("=== Basic Request Signing Example ===")

    signer = HeadersSigner("example-access-key", "example-secret-key")
    headers = signer.sign("POST", "/v1/payments", {"amount": 100, "currency": "USD"})

    for name, value in headers.items():
        print(f"   {name}: {value}")


def reproducible_signing_example():
    """Fix salt and timestamp to reproduce a signature"""
    print("\n=== Reproducible Signature Example ===")

    config = (create_signing_config()
              .access_key("example-access-key")
              .secret_key("example-secret-key")
              .build())
    signer = create_signer(config)

    options = SigningOptions(salt=generate_salt(), timestamp=generate_timestamp())
    first = signer.sign("GET", "/v1/data/countries", options=options)
    second = signer.sign("GET", "/v1/data/countries", options=options)

    print(f"   Same signature: {first['signature'] == second['signature']}")
    print(f"   Idempotency tokens: {first['idempotency']}, {second['idempotency']}")


def merged_headers_example():
    """Combine signed headers with request headers"""
    print("\n=== Merged Headers Example ===")

    signer = HeadersSigner("example-access-key", "example-secret-key")
    headers = generate_headers(
        signer,
        "GET",
        "/v1/data/countries",
        additional_headers={"Content-Type": "application/json"}
    )
    print(json.dumps(headers, indent=2))


def requests_session_example():
    """Attach signed headers to requests made through a session"""
    print("\n=== requests Session Example ===")

    session = requests.Session()
    session.auth = HeadersAuth(
        HeadersSigner("example-access-key", "example-secret-key"),
        {"Content-Type": "application/json"}
    )

    prepared = session.prepare_request(
        requests.Request("POST", "https://sandboxapi.example.com/v1/payments", json={"amount": 100})
    )
    print(f"   Signed path: {prepared.path_url}")
    print(f"   Signature header: {prepared.headers['signature']}")


if __name__ == "__main__":
    basic_signing_example()
    reproducible_signing_example()
    merged_headers_example()
    requests_session_example()
