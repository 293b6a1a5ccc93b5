# Domain Value Objects
from .api_key_credentials import ApiKeyCredentials, ApiKeyCredentialsBuilder

__all__ = ["ApiKeyCredentials", "ApiKeyCredentialsBuilder"]
