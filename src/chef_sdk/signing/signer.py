"""
RSA signer for canonical requests

Signatures are RSASSA-PKCS1-v1_5 over the SHA-1 digest of the canonical
request. PKCS#1 v1.5 padding carries no randomness, so the same key and text
always produce the same signature bytes.
"""

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from ..exceptions import SigningError, HashingError, ErrorCodes
from .keys import PrivateKeyInput, coerce_private_key


class RsaSha1Signer:
    """
    Signs canonical requests with a caller-supplied RSA private key.

    The key is held only for the lifetime of the signer instance.
    """

    def __init__(self, private_key: PrivateKeyInput):
        """
        Args:
            private_key: RSA private key or its PEM text

        Raises:
            SigningError: If the key is malformed, not RSA or too small
        """
        self._private_key = coerce_private_key(private_key)

    @property
    def key_size(self) -> int:
        return self._private_key.key_size

    def sign(self, canonical_request: str) -> bytes:
        """
        Sign a canonical request.

        Args:
            canonical_request: Text produced by the canonical request builder

        Returns:
            bytes: Raw signature

        Raises:
            SigningError: If the primitive rejects the key or input
            HashingError: If the backend refuses SHA-1
        """
        try:
            return self._private_key.sign(
                canonical_request.encode("utf-8"),
                padding.PKCS1v15(),
                hashes.SHA1()
            )
        except UnsupportedAlgorithm as e:
            raise HashingError(
                f"SHA-1 digest is not available for signing: {e}",
                ErrorCodes.DIGEST_UNAVAILABLE,
                {"algorithm": "sha1", "original_error": str(e)}
            ) from e
        except (ValueError, TypeError) as e:
            raise SigningError(
                f"Message signing failed: {e}",
                ErrorCodes.SIGNING_FAILED,
                {"key_size": self._private_key.key_size, "original_error": str(e)}
            ) from e


def sign_canonical_request(canonical_request: str, private_key: PrivateKeyInput) -> bytes:
    """
    Sign a canonical request with the given key.

    Args:
        canonical_request: Canonical request text
        private_key: RSA private key or its PEM text

    Returns:
        bytes: Raw RSASSA-PKCS1-v1_5/SHA-1 signature
    """
    return RsaSha1Signer(private_key).sign(canonical_request)
