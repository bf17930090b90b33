"""
X-Ops authentication header assembly

This module ties the signing pipeline together:

    Request -> content hash -> canonical request -> RSA signature
            -> 60-character chunks -> ordered header set

Everything here is a pure function of its inputs. Timestamps come from the
caller; nothing is logged and no I/O is performed.
"""

import base64
from typing import Optional

from .canonical_request import CanonicalRequestBuilder
from .chunking import chunk_signature, authorization_header_name
from .keys import PrivateKeyInput
from .signer import RsaSha1Signer
from .signing_config import validate_signing_config
from .types import (
    Request,
    HeaderSet,
    SigningConfig,
    SIGN_HEADER,
    USERID_HEADER,
    TIMESTAMP_HEADER,
    CONTENT_HASH_HEADER,
)


class AuthHeaderAssembler:
    """
    Produces the X-Ops header set for requests.

    Instances hold only configuration and can be shared between threads.
    """

    def __init__(self, config: Optional[SigningConfig] = None):
        """
        Args:
            config: Signing configuration (defaults to protocol version 1.0)

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        config = config or SigningConfig()
        validate_signing_config(config)
        self.config = config

    def sign(
        self,
        request: Request,
        principal: str,
        timestamp: str,
        private_key: PrivateKeyInput
    ) -> HeaderSet:
        """
        Sign a request.

        Args:
            request: Request to sign
            principal: Identity the request is made for
            timestamp: Timestamp in wire format
            private_key: RSA private key or its PEM text

        Returns:
            HeaderSet: Headers to attach to the outgoing request

        Raises:
            ValidationError: If principal, timestamp or path is malformed
            SigningError: If the key cannot be used
            HashingError: If SHA-1 is unavailable
        """
        builder = CanonicalRequestBuilder(request, principal, timestamp)
        content_hash = builder.hashed_body()
        canonical_request = builder.build()

        signature = RsaSha1Signer(private_key).sign(canonical_request)
        signature_b64 = base64.b64encode(signature).decode("ascii")

        entries = [
            (SIGN_HEADER, self.config.sign_header_value),
            (USERID_HEADER, principal),
            (TIMESTAMP_HEADER, timestamp),
            (CONTENT_HASH_HEADER, content_hash),
        ]
        for index, chunk in enumerate(chunk_signature(signature_b64), start=1):
            entries.append((authorization_header_name(index), chunk))

        return HeaderSet(
            entries=tuple(entries),
            canonical_request=canonical_request,
            signature=signature_b64
        )


def sign(
    request: Request,
    principal: str,
    timestamp: str,
    private_key: PrivateKeyInput,
    config: Optional[SigningConfig] = None
) -> HeaderSet:
    """
    Sign a request with a one-off assembler.

    Args:
        request: Request to sign
        principal: Identity the request is made for
        timestamp: Timestamp in wire format
        private_key: RSA private key or its PEM text
        config: Optional signing configuration

    Returns:
        HeaderSet: Headers to attach to the outgoing request
    """
    return AuthHeaderAssembler(config).sign(request, principal, timestamp, private_key)
