"""
keystone-auth - API key credentials for Keystone v2 identity clients.
"""

from .domain import (
    ApiKeyCredentials,
    ApiKeyCredentialsBuilder,
    CredentialType,
    InvalidArgumentError,
)

__all__ = [
    "ApiKeyCredentials",
    "ApiKeyCredentialsBuilder",
    "CredentialType",
    "InvalidArgumentError",
]
