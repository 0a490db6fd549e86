"""Core logic, independent of the Pulumi runtime.

Module Structure:
    - jira/          : Jira REST and admin API clients and services
    - membership.py  : group:account composite identity
    - validators.py  : input validation for resource properties
    - audit.py       : signed JSONL audit trail of lifecycle events

Import explicitly when needed:
    from jira_provider.core.membership import parse_membership_id
    from jira_provider.core import audit
"""
