"""
HMAC-SHA256 API header signer

This module provides the main signer implementation. Given an HTTP method,
a request path and an optional body it produces the access_key, salt,
timestamp, signature and idempotency headers expected by the API.

IMPORTANT: DEBUG logging in this module prints signing material. Never
enable DEBUG for this package in production.
"""

import logging
from typing import Any, Dict, Optional

from .types import (
    ACCESS_KEY_HEADER,
    IDEMPOTENCY_HEADER,
    SALT_HEADER,
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    BodySerializer,
    SignatureParams,
    SigningConfig,
    SigningOptions,
)
from .utils import (
    encode_signature,
    generate_salt,
    generate_timestamp,
    hmac_sha256,
    json_serializer,
    normalize_method,
    serialize_body,
    validate_path,
)
from .canonical_message import build_canonical_string


class HeadersSigner:
    """
    Signer producing HMAC-SHA256 authentication headers

    Holds the caller's credential pair and signs individual requests. The
    signer keeps no mutable state, so one instance can be shared between
    threads.
    """

    def __init__(
        self,
        access_key: str,
        secret_key: str,
        serializer: Optional[BodySerializer] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the signer with credentials.

        Args:
            access_key: Access key sent in the access_key header
            secret_key: Secret key used as HMAC key
            serializer: Optional serializer for structured bodies
                (defaults to compact JSON with sorted keys)
            logger: Optional diagnostic logger (defaults to the module logger)
        """
        self._access_key = access_key
        self._secret_key = secret_key
        self.serializer = serializer or json_serializer
        self.logger = logger if logger is not None else logging.getLogger(__name__)

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.warning(
                "DEBUG mode is enabled! Sensitive information such as signature "
                "may be printed in the logs. NEVER enable DEBUG logging in production for this package."
            )

    @property
    def access_key(self) -> str:
        return self._access_key

    def __repr__(self) -> str:
        return f"HeadersSigner(access_key='{self._access_key}')"

    def sign(
        self,
        http_method: str,
        path: str,
        body: Optional[Any] = None,
        salt: Optional[str] = None,
        timestamp: Optional[int] = None,
        options: Optional[SigningOptions] = None
    ) -> Dict[str, str]:
        """
        Generate the signed headers for an API call.

        Explicit keyword arguments take precedence over values in options.

        Args:
            http_method: HTTP method, case-insensitive (e.g. "GET", "post")
            path: Request path starting with '/' (e.g. "/v1/data/countries")
            body: Optional request body
            salt: Optional salt, used verbatim instead of a generated one
            timestamp: Optional epoch second, used verbatim instead of the clock
            options: Optional SigningOptions bundling body, salt and timestamp

        Returns:
            Dict[str, str]: access_key, salt, timestamp, signature and
            idempotency headers, in that order

        Raises:
            InvalidMethodError: If the method is not supported
            InvalidPathError: If the path does not start with '/'
        """
        options = self._merge_options(options, body, salt, timestamp)
        self.logger.debug(
            f"Generating headers for HTTP method: {http_method}, path: {path}, body: {options.body}"
        )

        method = normalize_method(http_method)
        validate_path(path)

        params = self._pre_call(method, path, options)
        headers = self._create_headers(params)
        self.logger.debug(f"Generated headers: {headers}")
        return headers

    def _merge_options(
        self,
        options: Optional[SigningOptions],
        body: Optional[Any],
        salt: Optional[str],
        timestamp: Optional[int]
    ) -> SigningOptions:
        if options is None:
            return SigningOptions(body=body, salt=salt, timestamp=timestamp)

        return SigningOptions(
            body=body if body is not None else options.body,
            salt=salt if salt is not None else options.salt,
            timestamp=timestamp if timestamp is not None else options.timestamp
        )

    def _pre_call(self, method: str, path: str, options: SigningOptions) -> SignatureParams:
        """
        Prepare salt, timestamp and signature for a validated request.

        Args:
            method: Lowercase HTTP method
            path: Request path
            options: Effective signing options

        Returns:
            SignatureParams: Values used for signing
        """
        body_text = serialize_body(options.body, self.serializer)
        salt = options.salt if options.salt is not None else generate_salt()
        timestamp = options.timestamp if options.timestamp is not None else generate_timestamp()

        to_sign = build_canonical_string(
            method, path, salt, timestamp, self._access_key, self._secret_key, body_text
        )
        signature = encode_signature(hmac_sha256(to_sign, self._secret_key))

        self.logger.debug(f"Pre-call data: salt={salt}, timestamp={timestamp}, signature={signature}")
        return SignatureParams(salt=salt, timestamp=timestamp, signature=signature)

    def _create_headers(self, params: SignatureParams) -> Dict[str, str]:
        # idempotency takes its own clock read, independent of the signed timestamp
        return {
            ACCESS_KEY_HEADER: self._access_key,
            SALT_HEADER: params.salt,
            TIMESTAMP_HEADER: str(params.timestamp),
            SIGNATURE_HEADER: params.signature,
            IDEMPOTENCY_HEADER: f"{generate_timestamp()}{params.salt}",
        }


def create_signer(
    config: SigningConfig,
    logger: Optional[logging.Logger] = None
) -> HeadersSigner:
    """
    Create a new header signer.

    Args:
        config: Signing configuration
        logger: Optional diagnostic logger

    Returns:
        HeadersSigner: Configured signer instance
    """
    return HeadersSigner(
        config.access_key,
        config.secret_key,
        serializer=config.serializer,
        logger=logger
    )


def sign_request(
    http_method: str,
    path: str,
    config: SigningConfig,
    body: Optional[Any] = None,
    options: Optional[SigningOptions] = None
) -> Dict[str, str]:
    """
    Sign a single request with the given configuration.

    Args:
        http_method: HTTP method
        path: Request path
        config: Signing configuration
        body: Optional request body
        options: Optional signing options

    Returns:
        Dict[str, str]: Signed headers
    """
    signer = create_signer(config)
    return signer.sign(http_method, path, body=body, options=options)
