"""
Private key loading for signed header authentication

Client credentials are RSA keys handed to the SDK as PEM text (PKCS#1
"BEGIN RSA PRIVATE KEY" or PKCS#8 "BEGIN PRIVATE KEY").
"""

from typing import Optional, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from ..exceptions import SigningError, ErrorCodes


MIN_RSA_KEY_SIZE = 1024

PrivateKeyInput = Union[RSAPrivateKey, str, bytes]


def validate_private_key(key: object) -> RSAPrivateKey:
    """
    Check that a loaded key can be used by the signer.

    Raises:
        SigningError: If the key is not RSA or is too small
    """
    if not isinstance(key, RSAPrivateKey):
        raise SigningError(
            f"Unsupported private key type: {type(key).__name__}",
            ErrorCodes.UNSUPPORTED_KEY_TYPE,
            {"key_type": type(key).__name__}
        )
    if key.key_size < MIN_RSA_KEY_SIZE:
        raise SigningError(
            f"RSA key must be at least {MIN_RSA_KEY_SIZE} bits",
            ErrorCodes.KEY_TOO_SMALL,
            {"key_size": key.key_size}
        )
    return key


def load_private_key(pem: Union[str, bytes], password: Optional[bytes] = None) -> RSAPrivateKey:
    """
    Load an RSA private key from PEM text.

    Args:
        pem: PEM-encoded key
        password: Optional passphrase for encrypted keys

    Returns:
        RSAPrivateKey: Loaded key

    Raises:
        SigningError: If the PEM is malformed, encrypted without a password,
            or does not hold a usable RSA key
    """
    if isinstance(pem, str):
        pem = pem.encode("ascii", errors="replace")
    if not isinstance(pem, bytes) or not pem.strip():
        raise SigningError(
            "Private key PEM must be non-empty text",
            ErrorCodes.INVALID_PRIVATE_KEY,
            {"key_type": type(pem).__name__}
        )

    try:
        key = serialization.load_pem_private_key(pem, password=password)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise SigningError(
            f"Invalid private key: {e}",
            ErrorCodes.INVALID_PRIVATE_KEY,
            {"original_error": str(e)}
        ) from e

    return validate_private_key(key)


def coerce_private_key(key: PrivateKeyInput) -> RSAPrivateKey:
    """
    Accept either a loaded RSA key or its PEM text.

    Raises:
        SigningError: If the key cannot be used for signing
    """
    if isinstance(key, (str, bytes)):
        return load_private_key(key)
    return validate_private_key(key)
