"""
Configuration management for Chef Python SDK

Provides loading of the JSON client configuration that names the server,
the client identity and its signing key.
"""

from .client_config import (
    ClientConfig,
    load_client_config,
    DEFAULT_TIMESTAMP_INTERVAL_SECONDS,
)

__all__ = [
    'ClientConfig',
    'load_client_config',
    'DEFAULT_TIMESTAMP_INTERVAL_SECONDS',
]
