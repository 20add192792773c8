"""Input validation utilities."""

import re
from pathlib import Path

MIN_PORT = 1
MAX_PORT = 65535

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def validate_port(raw: str) -> str | None:
    """Validate a port value read from the environment.

    Only plain base-10 integers are accepted. Whitespace, underscores and
    non-ASCII digits are rejected.

    Returns error message or None if valid.
    """
    if not _INTEGER_RE.fullmatch(raw):
        return f"Port is not an integer: {raw!r}"
    # int() raises ValueError past 4300 digits, leading zeros included
    digits = raw.lstrip("+-").lstrip("0")
    if len(digits) > len(str(MAX_PORT)):
        return (
            f"Port with {len(digits)} digits is out of range "
            f"({MIN_PORT}-{MAX_PORT})"
        )
    sign = -1 if raw.startswith("-") else 1
    port = sign * int(digits or "0")
    if not MIN_PORT <= port <= MAX_PORT:
        return f"Port {port} is out of range ({MIN_PORT}-{MAX_PORT})"
    return None


def validate_tls_pair(cert: str, key: str) -> str | None:
    """Validate that TLS cert and key are either both set or both empty.

    Returns error message or None if valid.
    """
    if cert and not key:
        return "TLS certificate is set but the key is missing; TLS stays disabled"
    if key and not cert:
        return "TLS key is set but the certificate is missing; TLS stays disabled"
    return None


def validate_tls_path(path: str, label: str) -> str | None:
    """Validate that a configured TLS file exists.

    An empty path is not an error; it means the file is not configured.

    Returns error message or None if valid.
    """
    if not path:
        return None
    p = Path(path)
    if not p.exists():
        return f"TLS {label} does not exist: {path}"
    if not p.is_file():
        return f"TLS {label} is not a file: {path}"
    return None
