"""Configuration module for the Jira provider."""
from .settings import ProviderSettings, load_settings, normalize_site_url

__all__ = ["ProviderSettings", "load_settings", "normalize_site_url"]
