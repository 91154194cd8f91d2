"""
Prints a sample access token signed with the configured JWT secret.

    python -m identity_vault.token_demo

Handy for poking protected routes by hand. With no `JWT_SECRET` in a
development profile the secret is random, so the token only verifies against
the process that printed it.
"""

import logging

from identity_vault.api.utils import create_access_token
from identity_vault.database.config.config import get_settings

logger = logging.getLogger(__name__)

SAMPLE_CLAIMS = {"id": 123, "email": "example_user@example.com"}


def main() -> str:
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    token = create_access_token(SAMPLE_CLAIMS)
    logger.info("Generated Access Token (expires in %s minutes)", settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    print(token)
    return token


if __name__ == "__main__":
    main()
