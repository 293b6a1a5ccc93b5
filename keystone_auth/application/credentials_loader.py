"""
Credentials Loader - Builds API key credentials from configuration.
"""

import logging

from keystone_auth.config.settings import Settings
from keystone_auth.domain import ApiKeyCredentials, InvalidArgumentError

logger = logging.getLogger(__name__)


def load_api_key_credentials(settings: Settings) -> ApiKeyCredentials:
    """
    Load API key credentials from settings.

    Args:
        settings: Settings holding KEYSTONE_USERNAME and KEYSTONE_API_KEY.

    Returns:
        Validated ApiKeyCredentials.

    Raises:
        InvalidArgumentError: If the username or API key is not configured.
    """
    builder = ApiKeyCredentials.builder().with_username(settings.username).with_api_key(settings.api_key)
    try:
        credentials = builder.build()
    except InvalidArgumentError:
        missing = [
            env_var
            for env_var, value in (
                ("KEYSTONE_USERNAME", settings.username),
                ("KEYSTONE_API_KEY", settings.api_key),
            )
            if not value
        ]
        logger.warning("Incomplete API key credentials, missing: %s", ", ".join(missing))
        raise

    logger.debug("Loaded %s for user %s", credentials.credential_type.value, credentials.username)
    return credentials
