"""Provider settings loader with explicit values, stack config, environment and Docker secrets."""
from __future__ import annotations
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional
from urllib.parse import urlparse

from jira_provider.core.jira.exceptions import ConfigurationError

ATLASSIAN_CLOUD_SUFFIX = ".atlassian.net"

# field name -> (environment variable, stack config key, docker secret name)
FIELD_SOURCES: dict[str, tuple[str, str, Optional[str]]] = {
    "domain": ("JIRA_DOMAIN", "jira:domain", None),
    "email": ("JIRA_USER_EMAIL", "jira:email", None),
    "token": ("JIRA_TOKEN", "jira:token", "jira_token"),
    "admin_token": ("ADMIN_TOKEN", "jira:adminToken", "admin_token"),
}


def _load_secret_from_file(secret_name: str) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Args:
        secret_name: Name of the secret file in /run/secrets

    Returns:
        Secret value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name
    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
        except OSError:
            return None
        return secret_value or None
    return None


@dataclass
class ProviderSettings:
    """Provider configuration container.

    Every field is optional at construction time so that a program can set
    only what it wants to pin; the rest is resolved by ``load_settings``.
    Tokens are excluded from ``repr`` output.
    """
    domain: Optional[str] = None
    email: Optional[str] = None
    token: Optional[str] = field(default=None, repr=False)
    admin_token: Optional[str] = field(default=None, repr=False)

    @property
    def site_url(self) -> str:
        """Jira site base URL derived from ``domain``."""
        return normalize_site_url(self.domain or "")

    def missing(self) -> list[str]:
        return [f.name for f in fields(self) if not getattr(self, f.name)]


def normalize_site_url(domain: str) -> str:
    """Turn a bare Jira domain into the site base URL.

    ``acme``, ``acme.atlassian.net`` and ``https://acme.atlassian.net/`` all
    yield ``https://acme.atlassian.net``. Full URLs on other hosts are kept.
    """
    raw = domain.strip().rstrip("/")
    if not raw:
        raise ConfigurationError("Jira domain is empty")

    if "://" in raw:
        parsed = urlparse(raw)
        if not parsed.netloc:
            raise ConfigurationError(f"Invalid Jira domain '{domain}'")
        return f"{parsed.scheme}://{parsed.netloc}{parsed.path.rstrip('/')}"

    if "/" in raw:
        raise ConfigurationError(f"Invalid Jira domain '{domain}'")
    if "." not in raw:
        raw = f"{raw}{ATLASSIAN_CLOUD_SUFFIX}"
    return f"https://{raw}"


def load_settings(
    explicit: Optional[ProviderSettings] = None,
    stack_config: Optional[Mapping[str, Any]] = None,
) -> ProviderSettings:
    """Resolve provider settings.

    Priority per field:
    1. Explicit value from the program
    2. Pulumi stack configuration (``jira:domain`` ...)
    3. Environment variable (``JIRA_DOMAIN`` ...)
    4. /run/secrets (tokens only)

    Args:
        explicit: Values set in the program
        stack_config: Anything with a ``get(key)`` method (dict or pulumi Config)

    Raises:
        ConfigurationError: If any required field is still missing
    """
    resolved = replace(explicit) if explicit else ProviderSettings()

    for name, (env_var, config_key, secret_name) in FIELD_SOURCES.items():
        if getattr(resolved, name):
            continue
        value = stack_config.get(config_key) if stack_config is not None else None
        if not value:
            value = os.environ.get(env_var)
        if not value and secret_name:
            value = _load_secret_from_file(secret_name)
        setattr(resolved, name, value or None)

    missing = resolved.missing()
    if missing:
        hints = ", ".join(f"{name} ({FIELD_SOURCES[name][0]})" for name in missing)
        raise ConfigurationError(f"Missing required provider configuration: {hints}")

    # Fail early on an unusable domain
    normalize_site_url(resolved.domain)
    return resolved
