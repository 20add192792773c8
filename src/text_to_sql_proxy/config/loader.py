"""Environment variable configuration loading.

Every setting is optional. Unset or empty variables fall back to the
defaults in :mod:`text_to_sql_proxy.config.models`, and an invalid port is
replaced by the default port instead of being reported to the caller.
"""

import logging
import os
from collections.abc import Mapping

from text_to_sql_proxy.utils.validation import validate_port

from .models import (
    DEFAULT_ALLOWED_ORIGIN,
    DEFAULT_DATABASE,
    DEFAULT_PORT,
    DEFAULT_PROVIDER,
    ProxyConfig,
)

logger = logging.getLogger(__name__)

ENV_PREFIX = "TEXT_TO_SQL_PROXY_"

# ProxyConfig field -> variable name without prefix
_ENV_SUFFIXES = {
    "port": "PORT",
    "allowed_origin": "ALLOWED_ORIGIN",
    "provider": "PROVIDER",
    "database": "DATABASE",
    "tls_cert": "TLS_CERT",
    "tls_key": "TLS_KEY",
}


def env_var_names() -> dict[str, str]:
    """Map each ProxyConfig field to the environment variable that sets it."""
    return {field: ENV_PREFIX + suffix for field, suffix in _ENV_SUFFIXES.items()}


def port_status(environ: Mapping[str, str] | None = None) -> tuple[str, str | None]:
    """Read the raw port variable and the reason it is rejected, if any.

    Args:
        environ: Environment snapshot to read. Defaults to ``os.environ``.

    Returns:
        ``(raw, error)`` where ``raw`` is "" when the variable is unset and
        ``error`` is None unless a set value fails validation.
    """
    env = os.environ if environ is None else environ
    raw = env.get(env_var_names()["port"], "")
    return raw, (validate_port(raw) if raw else None)


def parse_port(raw: str | None, default: int = DEFAULT_PORT) -> int:
    """Parse a port value, falling back to ``default`` when it is invalid.

    Args:
        raw: Raw environment value, or None if the variable is unset.
        default: Port to use for missing or invalid input.

    Returns:
        The parsed port if it is an integer in 1-65535, otherwise ``default``.
    """
    if not raw:
        return default
    error = validate_port(raw)
    if error:
        logger.warning(f"{error}; using default port {default}")
        return default
    # A valid port is positive, so something non-zero is left after stripping
    return int(raw.lstrip("+0"))


def _get_str(environ: Mapping[str, str], name: str, default: str) -> str:
    value = environ.get(name, "")
    return value if value else default


def load_config(environ: Mapping[str, str] | None = None) -> ProxyConfig:
    """Build the proxy configuration from environment variables.

    Args:
        environ: Environment snapshot to read. Defaults to ``os.environ``
            as it is at call time.

    Returns:
        A fully populated, immutable ProxyConfig. Never raises for bad
        input; invalid values are replaced by their defaults.
    """
    env = os.environ if environ is None else environ
    names = env_var_names()
    raw_port, _ = port_status(env)

    config = ProxyConfig(
        port=parse_port(raw_port),
        allowed_origin=_get_str(env, names["allowed_origin"], DEFAULT_ALLOWED_ORIGIN),
        provider=_get_str(env, names["provider"], DEFAULT_PROVIDER),
        database=_get_str(env, names["database"], DEFAULT_DATABASE),
        tls_cert=_get_str(env, names["tls_cert"], ""),
        tls_key=_get_str(env, names["tls_key"], ""),
    )

    defaulted = [field for field, name in names.items() if not env.get(name)]
    if defaulted:
        logger.debug(f"Using defaults for: {', '.join(defaulted)}")
    return config
