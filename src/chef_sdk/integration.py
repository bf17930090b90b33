"""
HTTP client integration for signed header authentication

This module plugs the X-Ops signing pipeline into ``requests`` so that every
outbound request carries a fresh header set.
"""

import logging
from typing import Callable, Optional

import requests
from requests.auth import AuthBase
from requests.models import PreparedRequest

from .config.client_config import ClientConfig
from .exceptions import ValidationError, ErrorCodes
from .signing.assembler import AuthHeaderAssembler
from .signing.keys import PrivateKeyInput, coerce_private_key
from .signing.types import Request, SigningConfig
from .timestamp import TimestampProvider

logger = logging.getLogger(__name__)

CHEF_VERSION_HEADER = "X-Chef-Version"
SIGNED_HEADER_PREFIX = "x-ops-"


class SignedHeaderAuth(AuthBase):
    """
    ``requests`` authentication hook that signs each prepared request.

    Use this with the ``auth`` argument of the requests methods, or assign it
    to a session's ``auth`` attribute.
    """

    def __init__(
        self,
        principal: str,
        private_key: PrivateKeyInput,
        timestamp_source: Optional[Callable[[], str]] = None,
        config: Optional[SigningConfig] = None,
        chef_version: Optional[str] = None
    ):
        """
        Args:
            principal: Client or user name sent in X-Ops-Userid
            private_key: RSA private key or its PEM text
            timestamp_source: Callable returning the wire timestamp
                (a fresh TimestampProvider by default)
            config: Signing configuration
            chef_version: Optional X-Chef-Version header value

        Raises:
            SigningError: If the key cannot be used
            ConfigurationError: If the signing configuration is invalid
        """
        self.principal = principal
        self._private_key = coerce_private_key(private_key)
        self.timestamp_source = timestamp_source or TimestampProvider()
        self.assembler = AuthHeaderAssembler(config)
        self.chef_version = chef_version

    def __call__(self, request: PreparedRequest) -> PreparedRequest:
        body = request.body
        if body is not None and not isinstance(body, (str, bytes)):
            raise ValidationError(
                "Streaming request bodies cannot be signed; pass str or bytes",
                ErrorCodes.INVALID_BODY,
                {"body_type": type(body).__name__}
            )

        signable = Request(method=request.method, path=request.path_url, body=body)
        header_set = self.assembler.sign(
            signable,
            self.principal,
            self.timestamp_source(),
            self._private_key
        )

        request.headers.update(header_set.as_dict())
        if self.chef_version:
            request.headers[CHEF_VERSION_HEADER] = self.chef_version

        # Redirected copies inherit these headers, but the signature only
        # covers the original method, path and body.
        if self._strip_on_redirect not in request.hooks["response"]:
            request.register_hook("response", self._strip_on_redirect)

        logger.debug(f"Signed {signable.method.value} {request.path_url} as {self.principal}")
        return request

    def _strip_on_redirect(self, response: requests.Response, **kwargs) -> requests.Response:
        """
        Response hook: drop the X-Ops headers from a request that was
        redirected so they are not replayed against the redirect target.
        """
        if response.is_redirect:
            headers = response.request.headers
            for name in [n for n in headers if n.lower().startswith(SIGNED_HEADER_PREFIX)]:
                del headers[name]
            logger.debug(f"Dropped signed headers after {response.status_code} redirect from {response.url}")
        return response


class SigningSession(requests.Session):
    """
    requests.Session that re-signs redirected requests.

    Redirects that stay on the same host are signed again for their new
    method, path and body. Redirects to another host go out unsigned.
    """

    def rebuild_auth(self, prepared_request: PreparedRequest, response: requests.Response) -> None:
        super().rebuild_auth(prepared_request, response)

        if not isinstance(self.auth, SignedHeaderAuth):
            return
        if self.should_strip_auth(response.request.url, prepared_request.url):
            logger.warning(f"Not signing redirect to another host: {prepared_request.url}")
            return
        prepared_request.prepare_auth(self.auth)


def create_signing_auth(client_config: ClientConfig) -> SignedHeaderAuth:
    """
    Build a SignedHeaderAuth from a client configuration.

    Raises:
        ConfigurationError: If the key file cannot be read
        SigningError: If the key cannot be used
    """
    return SignedHeaderAuth(
        principal=client_config.client_name,
        private_key=client_config.load_private_key(),
        timestamp_source=TimestampProvider(client_config.timestamp_interval_seconds),
        config=client_config.signing_config,
        chef_version=client_config.chef_version
    )


def create_signing_session(
    client_config: ClientConfig,
    **session_kwargs
) -> SigningSession:
    """
    Create a requests session that signs every request.

    Args:
        client_config: Client configuration
        **session_kwargs: Attributes to set on the session (e.g. verify, trust_env)

    Returns:
        SigningSession: Session with signed header authentication
    """
    session = SigningSession()

    # Apply session configuration
    for key, value in session_kwargs.items():
        if hasattr(session, key):
            setattr(session, key, value)

    session.auth = create_signing_auth(client_config)
    session.headers["Accept"] = "application/json"
    logger.info(f"Configured request signing for client: {client_config.client_name}")
    return session
