"""
Chef Python SDK
Signed header authentication for Chef-style management servers
"""

from .version import __version__
from .exceptions import (
    ChefSDKError,
    ValidationError,
    SigningError,
    HashingError,
    ConfigurationError,
    ErrorCodes,
)
from .signing import (
    # Core signing functionality
    AuthHeaderAssembler,
    sign,
    Request,
    HeaderSet,
    SigningConfig,
    HttpMethod,
    hash_content,
    build_canonical_request,
    chunk_signature,
    reassemble_signature,
    load_private_key,
    create_signing_config,
)
from .timestamp import (
    TimestampProvider,
    format_timestamp,
)
from .config import (
    ClientConfig,
    load_client_config,
)
from .integration import (
    SignedHeaderAuth,
    SigningSession,
    create_signing_auth,
    create_signing_session,
)

__all__ = [
    '__version__',
    # Exceptions
    'ChefSDKError',
    'ValidationError',
    'SigningError',
    'HashingError',
    'ConfigurationError',
    'ErrorCodes',
    # Signing
    'AuthHeaderAssembler',
    'sign',
    'Request',
    'HeaderSet',
    'SigningConfig',
    'HttpMethod',
    'hash_content',
    'build_canonical_request',
    'chunk_signature',
    'reassemble_signature',
    'load_private_key',
    'create_signing_config',
    # Timestamps
    'TimestampProvider',
    'format_timestamp',
    # Configuration
    'ClientConfig',
    'load_client_config',
    # HTTP integration
    'SignedHeaderAuth',
    'SigningSession',
    'create_signing_auth',
    'create_signing_session',
]
