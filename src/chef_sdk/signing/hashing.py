"""
Content hashing for signed header authentication

Request bodies and canonical paths are both reduced to the base64 encoding of
their SHA-1 digest before they enter the canonical request.
"""

import base64

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes

from ..exceptions import HashingError, ErrorCodes
from .types import RequestBody


# base64(sha1(b""))
EMPTY_CONTENT_HASH = "2jmj7l5rSw0yVb/vlWAYkK/YBwk="


def hash_content(content: RequestBody) -> str:
    """
    Calculate the content hash of a payload.

    Args:
        content: Payload (string, bytes, or None for the empty payload)

    Returns:
        str: Base64-encoded SHA-1 digest

    Raises:
        HashingError: If the SHA-1 primitive is not available
    """
    if content is None:
        content = b""
    elif isinstance(content, str):
        content = content.encode("utf-8")

    try:
        digest = hashes.Hash(hashes.SHA1())
    except UnsupportedAlgorithm as e:
        raise HashingError(
            f"SHA-1 digest is not available: {e}",
            ErrorCodes.DIGEST_UNAVAILABLE,
            {"algorithm": "sha1", "original_error": str(e)}
        ) from e

    digest.update(bytes(content))
    return base64.b64encode(digest.finalize()).decode("ascii")
