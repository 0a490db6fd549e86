"""Jira group membership resource.

The resource ID is the composite ``"<group_name>:<account_id>"``; there is no
other identity on the Jira side.
"""
from __future__ import annotations
from typing import Any, Optional

import pulumi
from pulumi.dynamic import CreateResult, ReadResult, Resource

from jira_provider.config.settings import ProviderSettings
from jira_provider.core.jira import GroupService, JiraAPIError, UserService
from jira_provider.core.membership import format_membership_id, parse_membership_id
from jira_provider.core.validators import validate_account_id, validate_membership_group_name
from .base import JiraResourceProvider, absent


class GroupMembershipProvider(JiraResourceProvider):
    resource_label = "group membership"
    immutable_fields = ("group_name", "account_id")
    validators = {
        "group_name": validate_membership_group_name,
        "account_id": validate_account_id,
    }

    def create(self, props: dict[str, Any]) -> CreateResult:
        group_name = props["group_name"]
        account_id = props["account_id"]
        try:
            group = GroupService(self.jira).add_user_to_group(group_name, account_id)
        except JiraAPIError as exc:
            self._audit(
                "membership_add",
                format_membership_id(group_name, account_id),
                success=False,
                status_code=exc.status_code,
            )
            raise JiraAPIError(
                exc.status_code,
                f"creating status code: {exc.status_code} [groupname: {group_name} accountID: {account_id}]",
                exc.endpoint,
            ) from exc

        membership_id = format_membership_id(group.get("name") or group_name, account_id)
        self._audit("membership_add", membership_id)

        outs = self._fetch(membership_id)
        if outs is None:
            raise RuntimeError(f"Group membership {membership_id} was created but cannot be read back")
        return CreateResult(id_=membership_id, outs=outs)

    def _fetch(self, membership_id: str) -> Optional[dict[str, Any]]:
        membership = parse_membership_id(membership_id)
        if membership.is_empty:
            return None

        try:
            group_names = UserService(self.jira).get_user_group_names(membership.account_id)
        except JiraAPIError as exc:
            if exc.is_not_found:
                return None
            raise

        if membership.group_name not in group_names:
            return None
        return {"group_name": membership.group_name, "account_id": membership.account_id}

    def read(self, id_: str, props: dict[str, Any]) -> ReadResult:
        outs = self._fetch(id_)
        if outs is None:
            return absent()
        return ReadResult(id_=id_, outs=outs)

    def delete(self, id_: str, props: dict[str, Any]) -> None:
        membership = parse_membership_id(id_)
        if membership.is_empty:
            pulumi.log.warn(f"Malformed group membership id '{id_}', nothing to remove")
            return

        try:
            GroupService(self.jira).remove_user_from_group(membership.group_name, membership.account_id)
        except JiraAPIError as exc:
            if not self._delete_error_is_tolerated(exc, id_):
                self._audit("membership_remove", id_, success=False, status_code=exc.status_code)
                raise
            return
        self._audit("membership_remove", id_)


class GroupMembershipArgs:
    group_name: pulumi.Input[str]
    account_id: pulumi.Input[str]

    def __init__(self, group_name: pulumi.Input[str], account_id: pulumi.Input[str]):
        """
        :param group_name: Name of the group.
        :param account_id: Account id of the user.
        """
        self.group_name = group_name
        self.account_id = account_id


class GroupMembership(Resource, module="jira", name="GroupMembership"):
    """Membership of one account in one group."""

    group_name: pulumi.Output[str]
    account_id: pulumi.Output[str]

    def __init__(
        self,
        resource_name: str,
        args: GroupMembershipArgs,
        opts: Optional[pulumi.ResourceOptions] = None,
        settings: Optional[ProviderSettings] = None,
    ):
        props = {"group_name": args.group_name, "account_id": args.account_id}
        super().__init__(GroupMembershipProvider(settings), resource_name, props, opts)
