"""
Canonical signing string construction

The canonical string is the exact byte sequence covered by the HMAC. Its
field order and the absence of delimiters are shared with the verifying
server, so any change here breaks every signature.
"""

from typing import Optional


def build_canonical_string(
    http_method: str,
    path: str,
    salt: str,
    timestamp: int,
    access_key: str,
    secret_key: str,
    body: Optional[str] = None
) -> str:
    """
    Build the string to sign for a request.

    Fields are concatenated without separators in this order: lowercase
    method, path, salt, decimal timestamp, access key, secret key, body.

    Args:
        http_method: HTTP method (any case)
        path: Request path starting with '/'
        salt: Request salt
        timestamp: Epoch-second timestamp
        access_key: Caller access key
        secret_key: Caller secret key
        body: Serialized body, or None for an empty body

    Returns:
        str: Canonical signing string
    """
    return ''.join((
        http_method.lower(),
        path,
        salt,
        str(timestamp),
        access_key,
        secret_key,
        body or '',
    ))
