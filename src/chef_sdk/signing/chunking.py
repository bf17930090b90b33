"""
Splitting of base64 signatures into X-Ops-Authorization-N header values
"""

from typing import Iterable, List, Mapping

from .types import AUTHORIZATION_CHUNK_WIDTH, AUTHORIZATION_HEADER_PREFIX


def chunk_signature(signature_b64: str, width: int = AUTHORIZATION_CHUNK_WIDTH) -> List[str]:
    """
    Split a base64 signature into fixed-width chunks.

    The last chunk may be shorter than ``width``; a signature whose length is
    an exact multiple of ``width`` has no empty trailing chunk.

    Args:
        signature_b64: Base64-encoded signature
        width: Chunk width (the protocol uses 60)

    Returns:
        list: Chunks in header order
    """
    if width <= 0:
        raise ValueError("Chunk width must be positive")
    return [signature_b64[i:i + width] for i in range(0, len(signature_b64), width)]


def join_chunks(chunks: Iterable[str]) -> str:
    return "".join(chunks)


def authorization_header_name(index: int) -> str:
    """Header name for the 1-based chunk ``index``."""
    return f"{AUTHORIZATION_HEADER_PREFIX}{index}"


def reassemble_signature(headers: Mapping[str, str]) -> str:
    """
    Rebuild the base64 signature from a mapping of received headers.

    Reads X-Ops-Authorization-1, -2, ... until the first missing index.
    Header names are matched case-insensitively.
    """
    lowered = {name.lower(): value for name, value in headers.items()}
    chunks = []
    index = 1
    while authorization_header_name(index).lower() in lowered:
        chunks.append(lowered[authorization_header_name(index).lower()])
        index += 1
    return join_chunks(chunks)
