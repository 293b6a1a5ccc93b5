"""
ApiKeyCredentials Value Object - Immutable username/API key pair.

Authenticates against a Keystone v2 identity service using the
Rackspace `RAX-KSKEY` API key extension.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from ..credential_types import CredentialType
from ..exceptions import InvalidArgumentError


def _require(value: Optional[str], name: str) -> str:
    if not value:
        raise InvalidArgumentError(f"{name} is required")
    return value


@dataclass(frozen=True)
class ApiKeyCredentials:
    """
    Immutable value object for API key credentials.

    The api_key is held in plain text, including in repr().

    Attributes:
        username: Cloud account username
        api_key: API key issued for the account
    """

    credential_type: ClassVar[CredentialType] = CredentialType.API_KEY_CREDENTIALS

    username: str
    api_key: str

    def __post_init__(self) -> None:
        """Validate credentials."""
        _require(self.username, "username")
        _require(self.api_key, "api_key")

    @classmethod
    def create(cls, username: str, api_key: str) -> "ApiKeyCredentials":
        """Create credentials from a username and API key."""
        return cls(username=username, api_key=api_key)

    @classmethod
    def builder(cls) -> "ApiKeyCredentialsBuilder":
        """Return an empty builder."""
        return ApiKeyCredentialsBuilder()

    def to_builder(self) -> "ApiKeyCredentialsBuilder":
        """Return a new builder staged with these credentials."""
        return ApiKeyCredentialsBuilder().from_credentials(self)

    def to_dict(self) -> dict:
        """Convert to the `apiKeyCredentials` request body."""
        return {
            "username": self.username,
            "apiKey": self.api_key,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ApiKeyCredentials":
        """Create ApiKeyCredentials from a request body dictionary."""
        return cls(
            username=data.get("username"),
            api_key=data.get("apiKey"),
        )


@dataclass
class ApiKeyCredentialsBuilder:
    """
    Mutable builder for ApiKeyCredentials.

    Setters return the builder itself so calls can be chained. Nothing
    is validated until build(), which can be called any number of times.
    """

    username: Optional[str] = None
    api_key: Optional[str] = None

    def with_username(self, username: Optional[str]) -> "ApiKeyCredentialsBuilder":
        self.username = username
        return self

    def with_api_key(self, api_key: Optional[str]) -> "ApiKeyCredentialsBuilder":
        self.api_key = api_key
        return self

    def from_credentials(self, credentials: ApiKeyCredentials) -> "ApiKeyCredentialsBuilder":
        """Stage both fields from existing credentials."""
        return self.with_username(credentials.username).with_api_key(credentials.api_key)

    def build(self) -> ApiKeyCredentials:
        """
        Build credentials from the staged values.

        Raises:
            InvalidArgumentError: If username or api_key is missing or empty.
        """
        return ApiKeyCredentials(username=self.username, api_key=self.api_key)
