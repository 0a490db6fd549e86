"""Composite identity for group memberships.

Jira exposes no key for a (group, account) relation, so the resource ID is
``"<group_name>:<account_id>"``.
"""
from __future__ import annotations
from dataclasses import dataclass

SEPARATOR = ":"


@dataclass(frozen=True)
class Membership:
    group_name: str = ""
    account_id: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.group_name and self.account_id)

    def to_id(self) -> str:
        return format_membership_id(self.group_name, self.account_id)


def format_membership_id(group_name: str, account_id: str) -> str:
    return f"{group_name}{SEPARATOR}{account_id}"


def parse_membership_id(membership_id: str) -> Membership:
    """Split a composite ID into group name and account ID.

    Only the first separator splits: account IDs such as
    ``557058:f58131cb-b67d-43c7-b30d-6b58d40bd077`` contain one themselves.
    Malformed IDs yield an empty ``Membership`` instead of raising.
    """
    group_name, sep, account_id = (membership_id or "").partition(SEPARATOR)
    if not sep or not group_name or not account_id:
        return Membership()
    return Membership(group_name=group_name, account_id=account_id)
