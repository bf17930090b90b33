"""
Type definitions for signed header authentication

This module provides the request, header set and configuration types used by
the X-Ops signing protocol.
"""

from typing import Dict, Iterator, List, Optional, Tuple, Union
from dataclasses import dataclass, field
from enum import Enum

from ..exceptions import ValidationError, ErrorCodes


# Protocol constants shared with the verifying server
SIGNING_PROTOCOL_VERSION = "1.0"
AUTHORIZATION_CHUNK_WIDTH = 60

SIGN_HEADER = "X-Ops-Sign"
USERID_HEADER = "X-Ops-Userid"
TIMESTAMP_HEADER = "X-Ops-Timestamp"
CONTENT_HASH_HEADER = "X-Ops-Content-Hash"
AUTHORIZATION_HEADER_PREFIX = "X-Ops-Authorization-"


class HttpMethod(str, Enum):
    """HTTP methods supported for signing"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @classmethod
    def parse(cls, method: Union[str, "HttpMethod"]) -> "HttpMethod":
        """
        Coerce a method name (any case) into an HttpMethod.

        Raises:
            ValidationError: If the method is not a supported HTTP method
        """
        if isinstance(method, cls):
            return method
        if not isinstance(method, str) or not method.strip():
            raise ValidationError(
                "HTTP method must be a non-empty string",
                ErrorCodes.INVALID_METHOD,
                {"method": repr(method)}
            )
        try:
            return cls(method.strip().upper())
        except ValueError:
            raise ValidationError(
                f"Unsupported HTTP method: {method}",
                ErrorCodes.INVALID_METHOD,
                {"method": method}
            ) from None


RequestBody = Union[str, bytes, None]


@dataclass(frozen=True)
class Request:
    """
    Request to be signed

    Attributes:
        method: HTTP method (GET, POST, etc.)
        path: Request path, optionally with a query string
        body: Request body; str is UTF-8 encoded and None means empty
    """
    method: HttpMethod
    path: str
    body: bytes = b""

    def __post_init__(self):
        """Coerce method and body into their canonical types"""
        object.__setattr__(self, "method", HttpMethod.parse(self.method))

        if not isinstance(self.path, str):
            raise ValidationError(
                "Request path must be a string",
                ErrorCodes.INVALID_PATH,
                {"path": repr(self.path)}
            )

        body = self.body
        if body is None:
            body = b""
        elif isinstance(body, str):
            body = body.encode("utf-8")
        elif isinstance(body, (bytearray, memoryview)):
            body = bytes(body)
        elif not isinstance(body, bytes):
            raise ValidationError(
                f"Request body must be str, bytes or None, got {type(body).__name__}",
                ErrorCodes.INVALID_BODY,
                {"body_type": type(body).__name__}
            )
        object.__setattr__(self, "body", body)


@dataclass(frozen=True)
class SigningConfig:
    """
    Configuration for the header assembler

    Attributes:
        version: Signing protocol version advertised in X-Ops-Sign
    """
    version: str = SIGNING_PROTOCOL_VERSION

    @property
    def sign_header_value(self) -> str:
        return f"version={self.version}"


@dataclass(frozen=True)
class HeaderSet:
    """
    Ordered, immutable set of authentication headers for one request

    Attributes:
        entries: Header (name, value) pairs in wire order
        canonical_request: Canonical text that was signed
        signature: Full base64 signature before chunking
    """
    entries: Tuple[Tuple[str, str], ...]
    canonical_request: str = field(repr=False)
    signature: str = field(repr=False)

    def __getitem__(self, name: str) -> str:
        for header_name, value in self.entries:
            if header_name.lower() == name.lower():
                return value
        raise KeyError(name)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return any(header_name.lower() == name.lower() for header_name, _ in self.entries)

    def __iter__(self) -> Iterator[str]:
        return (header_name for header_name, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        try:
            return self[name]
        except KeyError:
            return default

    def items(self) -> List[Tuple[str, str]]:
        return list(self.entries)

    def as_dict(self) -> Dict[str, str]:
        """Return the headers as an insertion-ordered dict."""
        return dict(self.entries)

    @property
    def authorization_chunks(self) -> List[str]:
        """Signature chunks in X-Ops-Authorization-N order."""
        return [
            value for name, value in self.entries
            if name.startswith(AUTHORIZATION_HEADER_PREFIX)
        ]
