"""
Configuration management for request signing

This module provides configuration builders and loaders for the header
signer. Credentials can be supplied directly, through environment
variables, or through a JSON file.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ..exceptions import ConfigurationError, ValidationError
from .types import BodySerializer, SigningConfig

DEFAULT_ENV_PREFIX = "API_HEADERS_"


class SigningConfigBuilder:
    """
    Builder for creating signing configurations with fluent API
    """

    def __init__(self):
        self._access_key: Optional[str] = None
        self._secret_key: Optional[str] = None
        self._serializer: Optional[BodySerializer] = None

    def access_key(self, access_key: str) -> 'SigningConfigBuilder':
        """
        Set access key.

        Args:
            access_key: Access key sent with every request

        Returns:
            SigningConfigBuilder: Self for method chaining
        """
        self._access_key = access_key
        return self

    def secret_key(self, secret_key: str) -> 'SigningConfigBuilder':
        """
        Set secret key used for HMAC signing.

        Args:
            secret_key: Shared secret key

        Returns:
            SigningConfigBuilder: Self for method chaining
        """
        self._secret_key = secret_key
        return self

    def serializer(self, serializer: BodySerializer) -> 'SigningConfigBuilder':
        """
        Set serializer for structured request bodies.

        Args:
            serializer: Function turning a body value into text

        Returns:
            SigningConfigBuilder: Self for method chaining
        """
        self._serializer = serializer
        return self

    def build(self) -> SigningConfig:
        """
        Build the signing configuration.

        Returns:
            SigningConfig: Complete signing configuration

        Raises:
            ValidationError: If configuration is incomplete or invalid
        """
        if self._access_key is None:
            raise ValidationError("Access key is required", "MISSING_ACCESS_KEY")

        if self._secret_key is None:
            raise ValidationError("Secret key is required", "MISSING_SECRET_KEY")

        return SigningConfig(
            access_key=self._access_key,
            secret_key=self._secret_key,
            serializer=self._serializer
        )


def create_signing_config() -> SigningConfigBuilder:
    """
    Create a new signing configuration builder.

    Returns:
        SigningConfigBuilder: New configuration builder
    """
    return SigningConfigBuilder()


def load_config_from_env(
    prefix: str = DEFAULT_ENV_PREFIX,
    environ: Optional[Mapping[str, str]] = None
) -> SigningConfig:
    """
    Load signing configuration from environment variables.

    Reads ``{prefix}ACCESS_KEY`` and ``{prefix}SECRET_KEY``.

    Args:
        prefix: Environment variable prefix
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        SigningConfig: Loaded configuration

    Raises:
        ConfigurationError: If a required variable is missing
    """
    environ = os.environ if environ is None else environ

    missing = [
        name for name in (f"{prefix}ACCESS_KEY", f"{prefix}SECRET_KEY")
        if not environ.get(name)
    ]
    if missing:
        raise ConfigurationError(
            f"Missing environment variables: {', '.join(missing)}",
            "MISSING_ENVIRONMENT",
            {"missing": missing}
        )

    return (create_signing_config()
            .access_key(environ[f"{prefix}ACCESS_KEY"])
            .secret_key(environ[f"{prefix}SECRET_KEY"])
            .build())


def read_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read the raw JSON object of a configuration file.

    Keys are not checked here, so a file may hold only some credentials.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    config_path = Path(path)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(
            f"Configuration file not found: {config_path}",
            "CONFIG_NOT_FOUND",
            {"path": str(config_path)}
        )
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Failed to read configuration file {config_path}: {e}",
            "CONFIG_UNREADABLE",
            {"path": str(config_path), "original_error": str(e)}
        )

    if not isinstance(data, dict):
        raise ConfigurationError(
            "Configuration file must contain a JSON object",
            "CONFIG_INVALID",
            {"path": str(config_path)}
        )

    return data


def load_config_from_file(path: Union[str, Path]) -> SigningConfig:
    """
    Load signing configuration from a JSON file.

    The file must hold an object with ``access_key`` and ``secret_key``.

    Args:
        path: Path to the JSON file

    Returns:
        SigningConfig: Loaded configuration

    Raises:
        ConfigurationError: If the file cannot be read or parsed
        ValidationError: If the credentials are invalid
    """
    data = read_config_file(path)

    builder = create_signing_config()
    if 'access_key' in data:
        builder.access_key(data['access_key'])
    if 'secret_key' in data:
        builder.secret_key(data['secret_key'])
    return builder.build()
