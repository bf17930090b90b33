"""
Exception classes for Chef Python SDK
"""

from typing import Optional, Dict, Any


class ChefSDKError(Exception):
    """Base exception for all Chef SDK errors"""

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (code: {self.error_code}, details: {self.details})"
        return f"{self.message} (code: {self.error_code})"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message='{self.message}', "
            f"error_code='{self.error_code}', details={self.details})"
        )


class ValidationError(ChefSDKError):
    """Exception raised for malformed principal, timestamp, method or path"""
    pass


class SigningError(ChefSDKError):
    """Exception raised when a private key cannot be used to sign"""
    pass


class HashingError(ChefSDKError):
    """Exception raised when the content digest primitive is unavailable"""
    pass


class ConfigurationError(ChefSDKError):
    """Exception raised for unreadable or invalid client configuration"""
    pass


class ErrorCodes:
    """Standard error codes for signing operations"""

    # Request errors
    INVALID_METHOD = "INVALID_METHOD"
    INVALID_PATH = "INVALID_PATH"
    INVALID_BODY = "INVALID_BODY"
    INVALID_PRINCIPAL = "INVALID_PRINCIPAL"
    INVALID_TIMESTAMP = "INVALID_TIMESTAMP"

    # Key and signing errors
    INVALID_PRIVATE_KEY = "INVALID_PRIVATE_KEY"
    UNSUPPORTED_KEY_TYPE = "UNSUPPORTED_KEY_TYPE"
    KEY_TOO_SMALL = "KEY_TOO_SMALL"
    SIGNING_FAILED = "SIGNING_FAILED"

    # Digest errors
    DIGEST_UNAVAILABLE = "DIGEST_UNAVAILABLE"

    # Configuration errors
    INVALID_CONFIG = "INVALID_CONFIG"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    KEY_FILE_UNREADABLE = "KEY_FILE_UNREADABLE"
