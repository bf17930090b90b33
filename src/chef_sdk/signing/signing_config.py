"""
Configuration management for request signing

Provides a fluent builder and validation for the assembler configuration.
"""

import re
from typing import Optional

from ..exceptions import ConfigurationError, ErrorCodes
from .types import SigningConfig, SIGNING_PROTOCOL_VERSION


SUPPORTED_PROTOCOL_VERSIONS = ("1.0",)

_VERSION_PATTERN = re.compile(r"^\d+\.\d+$")


def validate_signing_config(config: SigningConfig) -> None:
    """
    Validate a signing configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    if not isinstance(config, SigningConfig):
        raise ConfigurationError(
            f"Expected SigningConfig, got {type(config).__name__}",
            ErrorCodes.INVALID_CONFIG
        )

    if not isinstance(config.version, str) or not _VERSION_PATTERN.match(config.version):
        raise ConfigurationError(
            f"Malformed signing protocol version: {config.version!r}",
            ErrorCodes.INVALID_CONFIG,
            {"version": config.version}
        )

    if config.version not in SUPPORTED_PROTOCOL_VERSIONS:
        raise ConfigurationError(
            f"Unsupported signing protocol version: {config.version}",
            ErrorCodes.INVALID_CONFIG,
            {"version": config.version, "supported": list(SUPPORTED_PROTOCOL_VERSIONS)}
        )


class SigningConfigBuilder:
    """
    Builder for creating signing configurations with fluent API
    """

    def __init__(self):
        self._version: Optional[str] = None

    def version(self, version: str) -> 'SigningConfigBuilder':
        """
        Set the signing protocol version.

        Args:
            version: Version advertised in X-Ops-Sign (e.g. "1.0")

        Returns:
            SigningConfigBuilder: Self for method chaining
        """
        self._version = version
        return self

    def build(self) -> SigningConfig:
        """
        Build and validate the configuration.

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        config = SigningConfig(version=self._version or SIGNING_PROTOCOL_VERSION)
        validate_signing_config(config)
        return config


def create_signing_config() -> SigningConfigBuilder:
    """Create a new signing configuration builder."""
    return SigningConfigBuilder()
