"""
Chef Python SDK - Request Signing Module

Signed header authentication (X-Ops-Sign version=1.0) with RSA keys.
This module provides request signing for authenticating with a Chef-style
management server.
"""

from .types import (
    Request,
    HeaderSet,
    SigningConfig,
    HttpMethod,
    SIGNING_PROTOCOL_VERSION,
    AUTHORIZATION_CHUNK_WIDTH,
    SIGN_HEADER,
    USERID_HEADER,
    TIMESTAMP_HEADER,
    CONTENT_HASH_HEADER,
    AUTHORIZATION_HEADER_PREFIX,
)

from .hashing import (
    hash_content,
    EMPTY_CONTENT_HASH,
)

from .canonical_request import (
    CanonicalRequestBuilder,
    build_canonical_request,
    normalize_path,
)

from .keys import (
    load_private_key,
    coerce_private_key,
)

from .signer import (
    RsaSha1Signer,
    sign_canonical_request,
)

from .chunking import (
    chunk_signature,
    join_chunks,
    reassemble_signature,
)

from .signing_config import (
    SigningConfigBuilder,
    create_signing_config,
    validate_signing_config,
)

from .assembler import (
    AuthHeaderAssembler,
    sign,
)

# Public API exports
__all__ = [
    # Core signing functionality
    'AuthHeaderAssembler',
    'sign',
    'RsaSha1Signer',
    'sign_canonical_request',
    'CanonicalRequestBuilder',
    'build_canonical_request',
    'normalize_path',
    'hash_content',
    'EMPTY_CONTENT_HASH',
    'chunk_signature',
    'join_chunks',
    'reassemble_signature',
    # Keys
    'load_private_key',
    'coerce_private_key',
    # Types
    'Request',
    'HeaderSet',
    'SigningConfig',
    'HttpMethod',
    # Configuration
    'SigningConfigBuilder',
    'create_signing_config',
    'validate_signing_config',
    # Protocol constants
    'SIGNING_PROTOCOL_VERSION',
    'AUTHORIZATION_CHUNK_WIDTH',
    'SIGN_HEADER',
    'USERID_HEADER',
    'TIMESTAMP_HEADER',
    'CONTENT_HASH_HEADER',
    'AUTHORIZATION_HEADER_PREFIX',
]
