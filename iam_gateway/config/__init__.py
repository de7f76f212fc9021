"""Configuration module for the IAM gateway."""
from .settings import AppConfig, load_settings, KNOWN_SERVICES

__all__ = ["AppConfig", "load_settings", "KNOWN_SERVICES"]
