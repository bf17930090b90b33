"""
Canonical request construction for signed header authentication

The canonical request is the exact text that gets signed. It is never sent
over the wire; the server rebuilds it from the request and the X-Ops headers.

Layout (five lines joined with "\\n", no trailing newline):

    <lowercase method>
    <base64(sha1(normalized path))>
    <base64(sha1(body))>
    <principal>
    <timestamp>
"""

import re

from ..exceptions import ValidationError, ErrorCodes
from .hashing import hash_content
from .types import Request


_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_WHITESPACE_OR_CONTROL = re.compile(r"[\s\x00-\x1f\x7f]")
_REPEATED_SLASHES = re.compile(r"/+")


def normalize_path(path: str) -> str:
    """
    Normalize a request path for hashing.

    Drops the query string and fragment, collapses repeated slashes, removes
    a trailing slash and guarantees exactly one leading slash.

    Raises:
        ValidationError: If the path is not a string or contains control characters
    """
    if not isinstance(path, str):
        raise ValidationError(
            "Request path must be a string",
            ErrorCodes.INVALID_PATH,
            {"path": repr(path)}
        )
    if _CONTROL_CHARS.search(path):
        raise ValidationError(
            "Request path contains control characters",
            ErrorCodes.INVALID_PATH,
            {"path": path}
        )

    path = path.split("?", 1)[0].split("#", 1)[0]
    path = _REPEATED_SLASHES.sub("/", "/" + path)
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]
    return path


def validate_principal(principal: str) -> None:
    """
    Raises:
        ValidationError: If the principal is empty or would break the canonical layout
    """
    if not isinstance(principal, str) or not principal:
        raise ValidationError(
            "Principal must be a non-empty string",
            ErrorCodes.INVALID_PRINCIPAL,
            {"principal": repr(principal)}
        )
    if _CONTROL_CHARS.search(principal):
        raise ValidationError(
            "Principal contains control characters",
            ErrorCodes.INVALID_PRINCIPAL,
            {"principal": principal}
        )


def validate_timestamp(timestamp: str) -> None:
    """
    The timestamp is opaque to the signer, but it is sent verbatim in a
    header and forms one line of the canonical request.

    Raises:
        ValidationError: If the timestamp is empty or contains whitespace
    """
    if not isinstance(timestamp, str) or not timestamp:
        raise ValidationError(
            "Timestamp must be a non-empty string",
            ErrorCodes.INVALID_TIMESTAMP,
            {"timestamp": repr(timestamp)}
        )
    if _WHITESPACE_OR_CONTROL.search(timestamp):
        raise ValidationError(
            "Timestamp contains whitespace or control characters",
            ErrorCodes.INVALID_TIMESTAMP,
            {"timestamp": timestamp}
        )


class CanonicalRequestBuilder:
    """
    Canonical request builder for one request
    """

    def __init__(self, request: Request, principal: str, timestamp: str):
        """
        Args:
            request: Request to canonicalize
            principal: Identity the request is signed for
            timestamp: Timestamp in wire format

        Raises:
            ValidationError: If principal or timestamp is malformed
        """
        validate_principal(principal)
        validate_timestamp(timestamp)

        self.request = request
        self.principal = principal
        self.timestamp = timestamp

    def hashed_path(self) -> str:
        return hash_content(normalize_path(self.request.path))

    def hashed_body(self) -> str:
        return hash_content(self.request.body)

    def build(self) -> str:
        """
        Build the canonical request.

        Returns:
            str: Canonical request text
        """
        lines = [
            self.request.method.value.lower(),
            self.hashed_path(),
            self.hashed_body(),
            self.principal,
            self.timestamp,
        ]
        return "\n".join(lines)


def build_canonical_request(request: Request, principal: str, timestamp: str) -> str:
    """
    Build the canonical request for signing.

    Args:
        request: Request to canonicalize
        principal: Identity the request is signed for
        timestamp: Timestamp in wire format

    Returns:
        str: Canonical request text

    Raises:
        ValidationError: If principal, timestamp or path is malformed
    """
    return CanonicalRequestBuilder(request, principal, timestamp).build()
