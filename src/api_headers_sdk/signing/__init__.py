"""
API Headers SDK - Request Signing Module

HMAC-SHA256 header signing for authenticating outbound API calls with an
access key and secret key pair.
"""

from .types import (
    HttpMethod,
    SigningConfig,
    SigningOptions,
    SignatureParams,
    SigningError,
    SigningErrorCodes,
    InvalidArgumentError,
    InvalidMethodError,
    InvalidPathError,
    SUPPORTED_HTTP_METHODS,
    SIGNED_HEADER_NAMES,
    DEFAULT_SALT_LENGTH,
)

from .signer import (
    HeadersSigner,
    create_signer,
    sign_request,
)

from .signing_config import (
    SigningConfigBuilder,
    create_signing_config,
    load_config_from_env,
    load_config_from_file,
    read_config_file,
    DEFAULT_ENV_PREFIX,
)

from .utils import (
    generate_salt,
    generate_timestamp,
    json_serializer,
    serialize_body,
    hmac_sha256,
    encode_signature,
)

from .canonical_message import build_canonical_string

from .integration import (
    HeadersAuth,
    create_auth,
    generate_headers,
)

# Public API exports
__all__ = [
    # Core signing functionality
    'HeadersSigner',
    'create_signer',
    'sign_request',
    # Types
    'HttpMethod',
    'SigningConfig',
    'SigningOptions',
    'SignatureParams',
    'SigningError',
    'SigningErrorCodes',
    'InvalidArgumentError',
    'InvalidMethodError',
    'InvalidPathError',
    'SUPPORTED_HTTP_METHODS',
    'SIGNED_HEADER_NAMES',
    'DEFAULT_SALT_LENGTH',
    # Configuration
    'SigningConfigBuilder',
    'create_signing_config',
    'load_config_from_env',
    'load_config_from_file',
    'read_config_file',
    'DEFAULT_ENV_PREFIX',
    # Utilities
    'generate_salt',
    'generate_timestamp',
    'json_serializer',
    'serialize_body',
    'hmac_sha256',
    'encode_signature',
    'build_canonical_string',
    # HTTP Integration
    'HeadersAuth',
    'create_auth',
    'generate_headers',
]
