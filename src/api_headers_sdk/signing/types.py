"""
Type definitions for request signing functionality

This module provides type definitions, data classes and error types for
HMAC-SHA256 API header signing.
"""

from typing import Dict, Optional, Callable, Any
from dataclasses import dataclass, field
from enum import Enum

from ..exceptions import ValidationError


class HttpMethod(str, Enum):
    """HTTP methods supported for signing"""
    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"
    HEAD = "head"
    OPTIONS = "options"


# Lowercase method tokens accepted by the signer, in display order
SUPPORTED_HTTP_METHODS = tuple(method.value for method in HttpMethod)

# Header names of a signed result, in output order
ACCESS_KEY_HEADER = "access_key"
SALT_HEADER = "salt"
TIMESTAMP_HEADER = "timestamp"
SIGNATURE_HEADER = "signature"
IDEMPOTENCY_HEADER = "idempotency"

SIGNED_HEADER_NAMES = (
    ACCESS_KEY_HEADER,
    SALT_HEADER,
    TIMESTAMP_HEADER,
    SIGNATURE_HEADER,
    IDEMPOTENCY_HEADER,
)

DEFAULT_SALT_LENGTH = 12


@dataclass
class SigningOptions:
    """
    Signing options for individual requests

    Attributes:
        body: Optional request body (text, bytes, or a value for the serializer)
        salt: Custom salt for this request, used verbatim
        timestamp: Custom epoch-second timestamp for this request, used verbatim
    """
    body: Optional[Any] = None
    salt: Optional[str] = None
    timestamp: Optional[int] = None


@dataclass
class SignatureParams:
    """
    Values produced while signing a single request

    Attributes:
        salt: Salt mixed into the canonical string
        timestamp: Epoch second mixed into the canonical string
        signature: Encoded HMAC signature
    """
    salt: str
    timestamp: int
    signature: str


class SigningError(Exception):
    """
    Error class for signing operations

    Attributes:
        message: Error message
        code: Error code for programmatic handling
        details: Optional additional error details
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message='{self.message}', code='{self.code}', details={self.details})"


class InvalidArgumentError(SigningError, ValueError):
    """Raised when a signing argument is rejected before any hashing happens"""


class InvalidMethodError(InvalidArgumentError):
    """Raised for HTTP methods outside of the supported set"""

    def __init__(self, method: str):
        supported = ", ".join(SUPPORTED_HTTP_METHODS)
        super().__init__(
            f"Method {method} is not supported, supported methods: [{supported}]",
            SigningErrorCodes.INVALID_METHOD,
            {"method": method, "supported_methods": list(SUPPORTED_HTTP_METHODS)}
        )


class InvalidPathError(InvalidArgumentError):
    """Raised for request paths that do not start with '/'"""

    def __init__(self, path: str):
        super().__init__(
            "Path variable should start from '/'",
            SigningErrorCodes.INVALID_PATH,
            {"path": path}
        )


# Common signing error codes
class SigningErrorCodes:
    """Standard error codes for signing operations"""

    # Request errors
    INVALID_METHOD = "INVALID_METHOD"
    INVALID_PATH = "INVALID_PATH"
    UNSIGNABLE_BODY = "UNSIGNABLE_BODY"


# Type aliases for convenience
BodySerializer = Callable[[Any], str]
HeaderDict = Dict[str, str]


@dataclass
class SigningConfig:
    """
    Configuration for request signing

    IMPORTANT: Never share the access key and secret key with unauthorized
    personnel or services.

    Attributes:
        access_key: Access key sent in the access_key header
        secret_key: Secret key used as HMAC key (never sent, never logged)
        serializer: Optional serializer for structured bodies
    """
    access_key: str
    secret_key: str = field(repr=False)
    serializer: Optional[BodySerializer] = None

    def __post_init__(self):
        """Validate signing configuration"""
        if not self.access_key or not isinstance(self.access_key, str):
            raise ValidationError("Access key must be a non-empty string", "INVALID_ACCESS_KEY")

        if not self.secret_key or not isinstance(self.secret_key, str):
            raise ValidationError("Secret key must be a non-empty string", "INVALID_SECRET_KEY")

        if self.serializer is not None and not callable(self.serializer):
            raise ValidationError("Serializer must be callable", "INVALID_SERIALIZER")
