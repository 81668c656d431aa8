"""
HTTP client integration for request signing

This module provides helpers that merge signed headers with caller
headers and a ``requests`` authentication hook that signs prepared
requests just before they are sent.
"""

import logging
from typing import Any, Dict, Mapping, Optional

import requests
from requests.auth import AuthBase

from .types import HeaderDict, SigningConfig, SigningError, SigningErrorCodes
from .signer import HeadersSigner, create_signer

logger = logging.getLogger(__name__)


def prepared_body_text(body: Any) -> Optional[str]:
    """
    Return the text of a prepared request body.

    Raises:
        SigningError: If the body is streamed or is not UTF-8 text
    """
    if body is None or isinstance(body, str):
        return body

    if isinstance(body, (bytes, bytearray)):
        try:
            return bytes(body).decode('utf-8')
        except UnicodeDecodeError as e:
            raise SigningError(
                f"Request body is not valid UTF-8 and cannot be signed: {e}",
                SigningErrorCodes.UNSIGNABLE_BODY,
                {"body_type": type(body).__name__, "original_error": str(e)}
            )

    raise SigningError(
        f"Request body of type {type(body).__name__} cannot be signed, expected str or bytes",
        SigningErrorCodes.UNSIGNABLE_BODY,
        {"body_type": type(body).__name__}
    )


def generate_headers(
    signer: HeadersSigner,
    http_method: str,
    path: str,
    body: Optional[Any] = None,
    additional_headers: Optional[Mapping[str, str]] = None,
    salt: Optional[str] = None,
    timestamp: Optional[int] = None
) -> HeaderDict:
    """
    Generate signed headers merged with additional headers.

    Signed headers are applied last, so they replace additional headers
    with the same name.

    Args:
        signer: Signer holding the credentials
        http_method: HTTP method (e.g. "GET", "POST")
        path: Request path (e.g. "/v1/data/countries")
        body: Optional request body
        additional_headers: Extra headers to include in the result
        salt: Optional custom salt
        timestamp: Optional custom timestamp

    Returns:
        HeaderDict: Additional headers followed by the signed headers
    """
    headers: Dict[str, str] = dict(additional_headers or {})
    headers.update(signer.sign(http_method, path, body=body, salt=salt, timestamp=timestamp))
    return headers


class HeadersAuth(AuthBase):
    """
    requests authentication hook adding signed headers.

    Usage:
        session = requests.Session()
        session.auth = HeadersAuth(signer)
        session.post("https://api.example.com/v1/payments", data=payload)

    The signed path is ``PreparedRequest.path_url`` (path plus query string)
    and the signed body is the exact prepared body text, so the signature
    covers what goes on the wire. Streamed and non-UTF-8 bodies raise
    SigningError.
    """

    def __init__(
        self,
        signer: HeadersSigner,
        additional_headers: Optional[Mapping[str, str]] = None
    ):
        self.signer = signer
        self.additional_headers = dict(additional_headers or {})

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        headers = generate_headers(
            self.signer,
            request.method,
            request.path_url,
            body=prepared_body_text(request.body),
            additional_headers=self.additional_headers
        )
        request.headers.update(headers)

        logger.debug(f"Signed {request.method} request to {request.path_url}")
        return request

    def __eq__(self, other):
        return (
            isinstance(other, HeadersAuth)
            and self.signer.access_key == other.signer.access_key
            and self.additional_headers == other.additional_headers
        )

    def __ne__(self, other):
        return not self == other


def create_auth(
    config: SigningConfig,
    additional_headers: Optional[Mapping[str, str]] = None
) -> HeadersAuth:
    """
    Create a requests authentication hook from a signing configuration.

    Args:
        config: Signing configuration
        additional_headers: Extra headers added to every signed request

    Returns:
        HeadersAuth: Authentication hook for requests
    """
    return HeadersAuth(create_signer(config), additional_headers)
