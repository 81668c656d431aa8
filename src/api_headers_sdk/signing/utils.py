"""
Utility functions for request signing

This module provides the primitives used by the header signer: salt
generation, timestamp handling, body serialization, HMAC-SHA256
computation and signature encoding.
"""

import json
import time
import base64
import secrets
import string
from typing import Any, Optional

from cryptography.hazmat.primitives import hashes, hmac

from ..exceptions import ValidationError
from .types import (
    BodySerializer,
    DEFAULT_SALT_LENGTH,
    SUPPORTED_HTTP_METHODS,
    InvalidMethodError,
    InvalidPathError,
)

# Alphabet for generated salts: A-Z, a-z, 0-9
SALT_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


def generate_salt(length: int = DEFAULT_SALT_LENGTH) -> str:
    """
    Generate a random alphanumeric salt.

    Characters are drawn uniformly, with replacement, from ``[A-Za-z0-9]``.

    Args:
        length: Number of characters to generate (default: 12)

    Returns:
        str: Random salt string

    Raises:
        ValidationError: If length is negative
    """
    if not isinstance(length, int) or length < 0:
        raise ValidationError(
            f"Salt length must be a non-negative integer, got {length!r}",
            "INVALID_SALT_LENGTH"
        )

    return ''.join(secrets.choice(SALT_ALPHABET) for _ in range(length))


def generate_timestamp() -> int:
    """
    Generate current Unix timestamp.

    Returns:
        int: Current Unix timestamp (seconds since epoch)
    """
    return int(time.time())


def json_serializer(value: Any) -> str:
    """
    Default body serializer producing compact JSON with sorted keys.

    Sorting keeps the serialized text, and therefore the signature,
    stable across runs for equal values.
    """
    return json.dumps(value, sort_keys=True, separators=(',', ':'), ensure_ascii=False)


def serialize_body(body: Any, serializer: Optional[BodySerializer] = None) -> Optional[str]:
    """
    Convert a request body to the text that is signed.

    Args:
        body: None, text, UTF-8 bytes, or any value the serializer accepts
        serializer: Serializer for non-text bodies (defaults to json_serializer)

    Returns:
        Optional[str]: Body text, or None when there is no body
    """
    if body is None:
        return None

    if isinstance(body, str):
        return body

    if isinstance(body, (bytes, bytearray)):
        return bytes(body).decode('utf-8')

    return (serializer or json_serializer)(body)


def normalize_method(http_method: str) -> str:
    """
    Lowercase an HTTP method and check it against the supported set.

    Raises:
        InvalidMethodError: If the method is not supported
    """
    if not isinstance(http_method, str) or http_method.lower() not in SUPPORTED_HTTP_METHODS:
        raise InvalidMethodError(http_method)
    return http_method.lower()


def validate_path(path: str) -> None:
    """
    Check that a request path starts with '/'.

    Raises:
        InvalidPathError: If the path is not absolute
    """
    if not isinstance(path, str) or not path.startswith('/'):
        raise InvalidPathError(path)


def hmac_sha256(data: str, secret_key: str) -> bytes:
    """
    Compute HMAC-SHA256 over UTF-8 data keyed with the UTF-8 secret key.

    Args:
        data: Message to authenticate
        secret_key: Shared secret

    Returns:
        bytes: Raw 32-byte digest
    """
    mac = hmac.HMAC(secret_key.encode('utf-8'), hashes.SHA256())
    mac.update(data.encode('utf-8'))
    return mac.finalize()


def to_hex(data: bytes) -> str:
    """
    Convert bytes to lowercase hex string.

    Args:
        data: Bytes to convert

    Returns:
        str: Lowercase hex string, two digits per byte
    """
    return data.hex()


def encode_signature(digest: bytes) -> str:
    """
    Encode a raw MAC digest as a header-safe signature.

    The digest is rendered as lowercase hex first and the hex text is then
    URL-safe Base64 encoded, so the result is Base64 of the hex string and
    not of the raw digest.

    Args:
        digest: Raw HMAC digest

    Returns:
        str: Padded URL-safe Base64 signature
    """
    return base64.urlsafe_b64encode(to_hex(digest).encode('utf-8')).decode('ascii')
