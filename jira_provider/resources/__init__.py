"""Pulumi resources for Jira Cloud identities.

Usage (inside a Pulumi program):
    from jira_provider.resources import Group, GroupArgs, GroupMembership, GroupMembershipArgs

    devs = Group("developers", GroupArgs(name="developers"))
    GroupMembership(
        "alice-developers",
        GroupMembershipArgs(group_name=devs.name, account_id="557058:f58131cb"),
    )

Provider configuration is read from the stack (``jira:domain``, ``jira:email``,
``jira:token``, ``jira:adminToken``) or from ``JIRA_DOMAIN``, ``JIRA_USER_EMAIL``,
``JIRA_TOKEN`` and ``ADMIN_TOKEN``.
"""
from .base import JiraResourceProvider
from .user import User, UserArgs, UserProvider
from .group import Group, GroupArgs, GroupProvider
from .group_membership import GroupMembership, GroupMembershipArgs, GroupMembershipProvider

__all__ = [
    "JiraResourceProvider",
    "User",
    "UserArgs",
    "UserProvider",
    "Group",
    "GroupArgs",
    "GroupProvider",
    "GroupMembership",
    "GroupMembershipArgs",
    "GroupMembershipProvider",
]
