import logging
import os
from collections.abc import Mapping

from acme_dashboard.adapters.sqlite_db import parse_database_url
from acme_dashboard.rules.models import Rules

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Startup configuration is unusable."""


def validate_ops_rules(rules: Rules, environ: Mapping[str, str] | None = None) -> None:
    """
    Validate operational requirements before startup.
    """
    env = os.environ if environ is None else environ

    # 1. Check Required Env
    missing = [name for name in rules.ops.required_env if not env.get(name)]
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

    # 2. Check the database URL is one we can open
    database_url = env.get("DATABASE_URL")
    if database_url:
        try:
            parse_database_url(database_url)
        except ValueError as e:
            raise ConfigError(str(e)) from e

    logger.info("Configuration Validated.")
