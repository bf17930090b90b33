"""
Client configuration for the Chef Python SDK

Loads the JSON client configuration that names the server, the client
identity and the PEM key used to sign requests.

Example file:

    {
        "server_url": "https://chef.example.com/organizations/acme",
        "client_name": "deploy-bot",
        "client_key": "~/.chef/deploy-bot.pem",
        "sign_version": "1.0",
        "timestamp_interval_seconds": 1,
        "chef_version": "0.10.4"
    }
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from ..exceptions import ConfigurationError, ErrorCodes
from ..signing.keys import load_private_key
from ..signing.signing_config import validate_signing_config
from ..signing.types import SigningConfig, SIGNING_PROTOCOL_VERSION

logger = logging.getLogger(__name__)

DEFAULT_TIMESTAMP_INTERVAL_SECONDS = 1.0


@dataclass
class ClientConfig:
    """
    Client configuration

    Attributes:
        server_url: Base URL of the management server
        client_name: Principal used in X-Ops-Userid
        client_key: Path to the client's PEM private key
        sign_version: Signing protocol version
        timestamp_interval_seconds: How long a timestamp may be reused
        chef_version: Value for the X-Chef-Version header, if any
    """
    server_url: str
    client_name: str
    client_key: Path
    sign_version: str = SIGNING_PROTOCOL_VERSION
    timestamp_interval_seconds: float = DEFAULT_TIMESTAMP_INTERVAL_SECONDS
    chef_version: Optional[str] = None

    def __post_init__(self):
        """Validate configuration values"""
        if not self.server_url or not isinstance(self.server_url, str):
            raise ConfigurationError("server_url cannot be empty", ErrorCodes.INVALID_CONFIG)

        if not self.server_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"server_url must be an http(s) URL: {self.server_url}",
                ErrorCodes.INVALID_CONFIG,
                {"server_url": self.server_url}
            )

        if not self.client_name or not isinstance(self.client_name, str):
            raise ConfigurationError("client_name cannot be empty", ErrorCodes.INVALID_CONFIG)

        if not isinstance(self.client_key, (str, Path)) or not str(self.client_key):
            raise ConfigurationError(
                "client_key must be a non-empty path",
                ErrorCodes.INVALID_CONFIG,
                {"client_key": repr(self.client_key)}
            )
        self.client_key = Path(self.client_key).expanduser()

        if isinstance(self.timestamp_interval_seconds, bool) or \
                not isinstance(self.timestamp_interval_seconds, (int, float)) or \
                self.timestamp_interval_seconds < 0:
            raise ConfigurationError(
                "timestamp_interval_seconds must be a non-negative number",
                ErrorCodes.INVALID_CONFIG,
                {"timestamp_interval_seconds": self.timestamp_interval_seconds}
            )

        validate_signing_config(self.signing_config)

    @property
    def signing_config(self) -> SigningConfig:
        return SigningConfig(version=self.sign_version)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_dir: Optional[Path] = None) -> 'ClientConfig':
        """
        Create a configuration from parsed JSON.

        Args:
            data: Parsed configuration mapping
            base_dir: Directory that relative client_key paths are resolved against

        Raises:
            ConfigurationError: If required keys are missing or values are invalid
        """
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Client configuration must be a JSON object",
                ErrorCodes.INVALID_CONFIG
            )

        missing = [k for k in ("server_url", "client_name", "client_key") if k not in data]
        if missing:
            raise ConfigurationError(
                f"Missing required configuration keys: {', '.join(missing)}",
                ErrorCodes.INVALID_CONFIG,
                {"missing": missing}
            )

        known = {
            "server_url", "client_name", "client_key", "sign_version",
            "timestamp_interval_seconds", "chef_version",
        }
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown client configuration keys: {', '.join(unknown)}")

        if not isinstance(data["client_key"], (str, Path)) or not data["client_key"]:
            raise ConfigurationError(
                "client_key must be a non-empty path",
                ErrorCodes.INVALID_CONFIG,
                {"client_key": repr(data["client_key"])}
            )

        client_key = Path(data["client_key"]).expanduser()
        if base_dir is not None and not client_key.is_absolute():
            client_key = base_dir / client_key

        return cls(
            server_url=data["server_url"],
            client_name=data["client_name"],
            client_key=client_key,
            sign_version=data.get("sign_version", SIGNING_PROTOCOL_VERSION),
            timestamp_interval_seconds=data.get(
                "timestamp_interval_seconds", DEFAULT_TIMESTAMP_INTERVAL_SECONDS
            ),
            chef_version=data.get("chef_version"),
        )

    def load_private_key(self) -> RSAPrivateKey:
        """
        Read and parse the PEM key named by client_key.

        Raises:
            ConfigurationError: If the key file cannot be read
            SigningError: If the file does not hold a usable RSA key
        """
        try:
            pem = self.client_key.read_bytes()
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read client key {self.client_key}: {e}",
                ErrorCodes.KEY_FILE_UNREADABLE,
                {"client_key": str(self.client_key)}
            ) from e
        return load_private_key(pem)


def load_client_config(path: Union[str, Path]) -> ClientConfig:
    """
    Load a client configuration file.

    Relative client_key paths are resolved against the file's directory.

    Args:
        path: Path to the JSON configuration file

    Returns:
        ClientConfig: Validated configuration

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    config_path = Path(path).expanduser()
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(
            f"Client configuration not found: {config_path}",
            ErrorCodes.CONFIG_NOT_FOUND,
            {"path": str(config_path)}
        ) from e
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Failed to read client configuration {config_path}: {e}",
            ErrorCodes.INVALID_CONFIG,
            {"path": str(config_path)}
        ) from e

    config = ClientConfig.from_dict(data, base_dir=config_path.parent)
    logger.info(f"Loaded client configuration for {config.client_name} from {config_path}")
    return config
