"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

KNOWN_SERVICES = ("members", "tenants", "relations")
DEFAULT_BASE_URL = "https://api.descope.com"
DEFAULT_MAX_CONTENT_LENGTH = 65536  # 64 KB


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).
    
    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)
    
    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback
    
    Returns:
        Secret value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name
    
    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
            if secret_value:
                logger.info("Loaded %s from /run/secrets", secret_name)
                return secret_value
        except OSError as exc:
            logger.warning("Failed to read /run/secrets/%s: %s", secret_name, exc)
    
    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            return secret_value.strip()
    
    return None


def _parse_services(raw: str) -> list[str]:
    """Parse the comma separated list of services this process serves."""
    services = [item.strip().lower() for item in raw.split(",") if item.strip()]
    if not services:
        return list(KNOWN_SERVICES)
    
    unknown = sorted(set(services) - set(KNOWN_SERVICES))
    if unknown:
        raise ValueError(
            f"Unknown service(s) in IAM_GATEWAY_SERVICES: {', '.join(unknown)}. "
            f"Expected any of: {', '.join(KNOWN_SERVICES)}"
        )
    
    # Preserve declaration order, drop duplicates
    return list(dict.fromkeys(services))


def _int_from_env(var_name: str, default: int) -> int:
    raw = os.environ.get(var_name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"Environment variable {var_name} must be an integer, got {raw!r}")


@dataclass
class AppConfig:
    """Application configuration container."""
    # Descope management API
    descope_project_id: str
    descope_management_key: str = field(repr=False)
    descope_base_url: str = DEFAULT_BASE_URL
    
    # Process
    services: list[str] = field(default_factory=lambda: list(KNOWN_SERVICES))
    log_level: str = "INFO"
    trusted_proxy_count: int = 0
    max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH


def load_settings() -> AppConfig:
    """Load application settings from /run/secrets and the environment.
    
    Raises:
        RuntimeError: If the Descope project id or management key is missing
        ValueError: If IAM_GATEWAY_SERVICES names an unknown service
    """
    project_id = _load_secret_from_file("descope_project_id", "DESCOPE_PROJECT_ID")
    if not project_id:
        raise RuntimeError("DESCOPE_PROJECT_ID not found in /run/secrets or environment")
    
    management_key = _load_secret_from_file("descope_management_key", "DESCOPE_MANAGEMENT_KEY")
    if not management_key:
        raise RuntimeError("DESCOPE_MANAGEMENT_KEY not found in /run/secrets or environment")
    
    base_url = os.environ.get("DESCOPE_BASE_URL", "").strip() or DEFAULT_BASE_URL
    services = _parse_services(os.environ.get("IAM_GATEWAY_SERVICES", ""))
    log_level = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    
    trusted_proxy_count = _int_from_env("TRUSTED_PROXY_COUNT", 0)
    if trusted_proxy_count < 0:
        raise RuntimeError("TRUSTED_PROXY_COUNT must not be negative")
    
    max_content_length = _int_from_env("MAX_CONTENT_LENGTH", DEFAULT_MAX_CONTENT_LENGTH)
    if max_content_length <= 0:
        raise RuntimeError("MAX_CONTENT_LENGTH must be greater than 0")
    
    print(f"[settings] project={project_id}; services={','.join(services)}; base_url={base_url}")
    
    return AppConfig(
        descope_project_id=project_id,
        descope_management_key=management_key,
        descope_base_url=base_url.rstrip("/"),
        services=services,
        log_level=log_level,
        trusted_proxy_count=trusted_proxy_count,
        max_content_length=max_content_length,
    )
