"""
API Headers SDK
HMAC-SHA256 authentication headers for outbound API calls
"""

from .version import __version__
from .exceptions import (
    ApiHeadersSDKError,
    ValidationError,
    ConfigurationError,
)
from .signing import (
    # Core signing functionality
    HeadersSigner,
    create_signer,
    sign_request,
    # Types
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
    # Configuration
    SigningConfigBuilder,
    create_signing_config,
    load_config_from_env,
    load_config_from_file,
    # Utilities
    generate_salt,
    generate_timestamp,
    json_serializer,
    # HTTP Integration
    HeadersAuth,
    create_auth,
    generate_headers,
)

# Public API exports
__all__ = [
    '__version__',
    # Exceptions
    'ApiHeadersSDKError',
    'ValidationError',
    'ConfigurationError',
    # Request Signing - Core
    'HeadersSigner',
    'create_signer',
    'sign_request',
    # Request Signing - Types
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
    # Request Signing - Configuration
    'SigningConfigBuilder',
    'create_signing_config',
    'load_config_from_env',
    'load_config_from_file',
    # Request Signing - Utilities
    'generate_salt',
    'generate_timestamp',
    'json_serializer',
    # Request Signing - HTTP Integration
    'HeadersAuth',
    'create_auth',
    'generate_headers',
]
