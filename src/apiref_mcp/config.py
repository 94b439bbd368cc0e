"""Runtime configuration for the API reference MCP server."""

from dataclasses import dataclass
from pathlib import Path
import os

# Bundled sample content (used when no content path is configured)
_RESOURCES_DIR = Path(__file__).parent / "resources"
DEFAULT_CONTENT_PATH = _RESOURCES_DIR / "reference.json"


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_log_level(name: str, default: str) -> str:
    value = _env_str(name, default).upper()
    if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        return default
    return value


@dataclass(frozen=True)
class ReferenceConfig:
    content_path: Path
    library_module: str
    library_alias: str
    library_label: str
    namespace_prefix: str
    namespace_label: str
    log_level: str


def get_reference_config() -> ReferenceConfig:
    """Load reference config from environment variables."""
    return ReferenceConfig(
        content_path=Path(_env_str("APIREF_MCP_CONTENT_PATH", str(DEFAULT_CONTENT_PATH))),
        library_module=_env_str("APIREF_MCP_LIBRARY_MODULE", "streamlit"),
        library_alias=_env_str("APIREF_MCP_LIBRARY_ALIAS", "st"),
        library_label=_env_str("APIREF_MCP_LIBRARY_LABEL", "Streamlit"),
        namespace_prefix=_env_str("APIREF_MCP_NAMESPACE_PREFIX", "SiS"),
        namespace_label=_env_str("APIREF_MCP_NAMESPACE_LABEL", "Streamlit in Snowflake"),
        log_level=_env_log_level("APIREF_MCP_LOG_LEVEL", "WARNING"),
    )
