"""Jira Cloud API client library.

Architecture:
- client.py: HTTP clients (basic auth for Jira, bearer auth for the admin API)
- users.py: User lifecycle operations (create, read, disable)
- groups.py: Group management and membership
- exceptions.py: Typed exceptions for error handling

Usage:
    from jira_provider.core.jira import JiraClient, GroupService

    client = JiraClient("https://acme.atlassian.net", "bot@acme.io", "api-token")
    group = GroupService(client).find_group("developers")
"""
from .client import (
    AtlassianClient,
    JiraClient,
    AdminClient,
    REQUEST_TIMEOUT,
    ADMIN_API_URL,
)
from .exceptions import (
    JiraError,
    JiraAPIError,
    ConfigurationError,
)
from .users import UserService, DISABLE_MESSAGE
from .groups import GroupService

__all__ = [
    # Clients
    "AtlassianClient",
    "JiraClient",
    "AdminClient",
    "REQUEST_TIMEOUT",
    "ADMIN_API_URL",

    # Exceptions
    "JiraError",
    "JiraAPIError",
    "ConfigurationError",

    # Services
    "UserService",
    "GroupService",
    "DISABLE_MESSAGE",
]
