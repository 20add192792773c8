"""Proxy configuration: the immutable record and its environment loader."""

from .loader import ENV_PREFIX, env_var_names, load_config, parse_port, port_status
from .models import ProxyConfig

__all__ = [
    "ENV_PREFIX",
    "ProxyConfig",
    "env_var_names",
    "load_config",
    "parse_port",
    "port_status",
]
