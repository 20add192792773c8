"""Pydantic model for proxy runtime configuration."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from text_to_sql_proxy.utils.validation import MAX_PORT, MIN_PORT

DEFAULT_PORT = 4000
DEFAULT_ALLOWED_ORIGIN = "https://sql-workbench.com"
DEFAULT_PROVIDER = "claude"
DEFAULT_DATABASE = "DuckDB"


class ProxyConfig(BaseModel):
    """Runtime configuration for the text-to-SQL proxy.

    Attributes:
        port: TCP port the proxy listens on.
        allowed_origin: Origin permitted by the CORS policy.
        provider: Upstream language-model provider selector (e.g. "claude").
        database: Target database dialect selector (e.g. "DuckDB").
        tls_cert: Path to the TLS certificate. Not checked at load time.
        tls_key: Path to the TLS private key. Not checked at load time.
    """

    model_config = ConfigDict(frozen=True)

    port: int = Field(default=DEFAULT_PORT, ge=MIN_PORT, le=MAX_PORT)
    allowed_origin: str = DEFAULT_ALLOWED_ORIGIN
    provider: str = DEFAULT_PROVIDER
    database: str = DEFAULT_DATABASE
    tls_cert: str = ""
    tls_key: str = ""

    def tls_enabled(self) -> bool:
        """Check if both a certificate and a key path are set."""
        return bool(self.tls_cert) and bool(self.tls_key)

    def tls_files_exist(self) -> bool:
        """Check if TLS is enabled and both paths are regular files."""
        if not self.tls_enabled():
            return False
        return Path(self.tls_cert).is_file() and Path(self.tls_key).is_file()
