# Domain Package
from .credential_types import CredentialType
from .exceptions import InvalidArgumentError
from .value_objects import ApiKeyCredentials, ApiKeyCredentialsBuilder

__all__ = [
    "ApiKeyCredentials",
    "ApiKeyCredentialsBuilder",
    "CredentialType",
    "InvalidArgumentError",
]
