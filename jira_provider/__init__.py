"""Pulumi dynamic provider for Jira Cloud users, groups and group memberships.

To declare resources in a Pulumi program:
    from jira_provider.resources import User, UserArgs, Group, GroupArgs

To use the Jira API services directly:
    from jira_provider.core.jira import JiraClient, UserService, GroupService
"""
# Note: resources are not imported here so that the API client can be used
# without pulling in the Pulumi runtime.

__version__ = "dev"
