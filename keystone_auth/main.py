"""
keystone-auth - API key credentials for Keystone v2 identity clients

Entry point for checking that credentials are configured.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from keystone_auth.application import load_api_key_credentials
from keystone_auth.config.settings import get_settings
from keystone_auth.domain import InvalidArgumentError

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="keystone-auth-check",
        description="Validate API key credentials configured via KEYSTONE_* variables.",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="dotenv file to read in addition to the environment (default: .env)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check configured credentials. Returns the process exit code."""
    args = parse_args(argv)
    settings = get_settings(args.env_file)
    setup_logging(settings.log_level)

    try:
        credentials = load_api_key_credentials(settings)
    except InvalidArgumentError as exc:
        logger.error("Credentials check failed: %s", exc)
        return 1

    logger.info(
        "Credentials OK: %s for user %s (%s)",
        credentials.credential_type.value,
        credentials.username,
        settings.auth_url,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
