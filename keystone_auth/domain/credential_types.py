"""
Credential Types - Keys identifying credential payloads in Keystone v2 auth requests.
"""

from enum import Enum


class CredentialType(str, Enum):
    """
    Kind of credentials carried by an authentication request.

    The value is the key under which the credential payload is nested
    in the `auth` document sent to the identity service.
    """

    API_KEY_CREDENTIALS = "RAX-KSKEY:apiKeyCredentials"
    PASSWORD_CREDENTIALS = "passwordCredentials"
    API_ACCESS_KEY_CREDENTIALS = "apiAccessKeyCredentials"
